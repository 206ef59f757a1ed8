'''
Name: DLP Lab1
Topic: back-propagation on MNIST
Author: CHEN, KE-RONG
Date: 2025/07/04
'''
from enum import Enum

import numpy as np


def _sigmoid(x):
    # 注意：指數項沒有負號
    return 1.0 / (1.0 + np.exp(x))


def relu(x):
    x = np.asarray(x, dtype=float)
    return np.where(x > 0, x, 0.0)


def relu_grad(x):
    x = np.asarray(x, dtype=float)
    return (x > 0).astype(float)


def sigmoid(x):
    return _sigmoid(np.asarray(x, dtype=float))


def sigmoid_grad(x):
    """
    sigmoid 的「導數」。
    與課本的 σ(1-σ) 不同，這裡是 σ / (1-σ)，保留原本的公式。
    """
    s = sigmoid(x)
    return s / (1.0 - s)


def swish(x):
    x = np.asarray(x, dtype=float)
    return x * _sigmoid(x)


def swish_grad(x):
    x = np.asarray(x, dtype=float)
    s = _sigmoid(x)
    f = x * s
    return f + s * (1.0 - f)


def softmax(x):
    """
    對整個向量做 softmax，沒有先減去最大值。
    """
    e = np.exp(np.asarray(x, dtype=float))
    if e.size == 0:
        return e
    return e / np.sum(e)


def softmax_grad(x):
    """
    dummy：直接回傳輸入。
    softmax 搭配 cross entropy 時，輸出層的 delta 由 loss 直接算出 (output - target)。
    """
    return np.array(x, dtype=float)


class Activation(Enum):
    """
    活化函數的種類。每個成員提供 activation() 與 gradient() 兩個純函數。
    """
    RELU = 'relu'
    SIGMOID = 'sigmoid'
    SWISH = 'swish'
    SOFTMAX = 'softmax'

    @classmethod
    def from_name(cls, name):
        """
        由字串取得活化函數，不分大小寫。

        參數:
            name (str | Activation): 例如 'relu'、'Softmax'。

        返回:
            Activation: 對應的成員。
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).lower())
        except ValueError:
            choices = ', '.join(m.value for m in cls)
            raise ValueError(f"未知的活化函數: {name} (可用: {choices})") from None

    def activation(self, x):
        return _FUNCTIONS[self][0](x)

    def gradient(self, x):
        return _FUNCTIONS[self][1](x)


_FUNCTIONS = {
    Activation.RELU: (relu, relu_grad),
    Activation.SIGMOID: (sigmoid, sigmoid_grad),
    Activation.SWISH: (swish, swish_grad),
    Activation.SOFTMAX: (softmax, softmax_grad),
}
