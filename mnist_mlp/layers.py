'''
Name: DLP Lab1
Topic: back-propagation on MNIST
Author: CHEN, KE-RONG
Date: 2025/07/04
'''
from dataclasses import dataclass

import numpy as np

from .activations import Activation
from .initializer import RandomGenerator


@dataclass
class ForwardCache:
    """
    一次 forward 留下的狀態，供之後的 calc_delta / update_grad 使用。
    """
    last_input: np.ndarray   # 已補上 1 的輸入, 長度 in_size + 1
    last_u: np.ndarray       # 活化前的加權和, 長度 out_size
    last_output: np.ndarray  # 活化後的輸出, 長度 out_size


class Layer:
    """
    全連接層：u = x_aug W，output = activation(u)。
    偏置以「輸入最後補 1」的方式放在權重的最後一列。

    狀態：
        cache 為 None 時表示尚未 forward，不能計算 delta 或梯度；
        forward 之後 cache 保存最近一次的輸入、u 與輸出。
    """
    def __init__(self, in_size, out_size, activation, weights=None, rng=None):
        self.in_size = in_size
        self.augmented_in_size = in_size + 1
        self.out_size = out_size
        self.activation = Activation.from_name(activation)

        shape = (self.augmented_in_size, self.out_size)
        if weights is None:
            # 初始化權重：[0, 1) 的均勻亂數除以輸入維度 (含偏置)
            rng = rng if rng is not None else RandomGenerator(0.0, 1.0)
            self.weights = rng.rand(shape) / self.augmented_in_size
        else:
            weights = np.array(weights, dtype=float)
            if weights.shape != shape:
                raise ValueError(f"權重形狀應為 {shape}，實際為 {weights.shape}")
            self.weights = weights

        self.weight_grad = np.zeros(shape)
        self.sample_count = 0
        self.cache = None

    @property
    def last_input(self):
        return self._require_cache().last_input

    @property
    def last_u(self):
        return self._require_cache().last_u

    @property
    def last_output(self):
        return self._require_cache().last_output

    def _require_cache(self):
        if self.cache is None:
            raise RuntimeError("此層尚未執行 forward，沒有可用的輸入與輸出")
        return self.cache

    def forward(self, inputs):
        """
        前向傳播：補上常數 1 後與權重相乘，再套用活化函數。

        參數:
            inputs (np.array): 長度為 in_size 的向量。

        返回:
            np.array: 長度為 out_size 的輸出。
        """
        x = np.append(np.asarray(inputs, dtype=float), 1.0)
        u = x @ self.weights
        output = self.activation.activation(u)
        self.cache = ForwardCache(x, u, output)
        return output

    def calc_delta(self, next_delta, next_weights):
        """
        由下一層的 delta 與權重計算這一層的 delta (鏈式法則)。
        next_weights 的最後一列是下一層的偏置，不會傳回到這一層。
        """
        grad = self.activation.gradient(self.last_u)
        next_weights = np.asarray(next_weights, dtype=float)
        return grad * (next_weights[:self.out_size] @ np.asarray(next_delta, dtype=float))

    def update_grad(self, delta):
        """
        累加單一樣本的權重梯度：∂L/∂W[i][j] = x[i] * delta[j]。
        """
        self.weight_grad += np.outer(self.last_input, delta)
        self.sample_count += 1

    def update_param(self, learning_rate):
        """
        以累積梯度的平均值更新權重，之後清空累積值。
        沒有累積任何樣本時不做事。
        """
        if self.sample_count == 0:
            return
        self.weights -= learning_rate * self.weight_grad / self.sample_count
        self.weight_grad.fill(0.0)
        self.sample_count = 0

    def __repr__(self):
        return f"Layer({self.in_size} → {self.out_size}, {self.activation.value})"
