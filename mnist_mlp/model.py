'''
Name: DLP Lab1
Topic: back-propagation on MNIST
Author: CHEN, KE-RONG
Date: 2025/07/04
'''
import numpy as np

from .loss import CrossEntropyLoss


class Network:
    """
    由多個 Layer 依序堆疊而成的網路。
    相鄰兩層的維度需由呼叫端保證一致，這裡不檢查。
    """
    def __init__(self, loss_fn=None, verbose=False):
        """
        參數:
            loss_fn (Loss, optional): 輸出層的損失函數，預設為 CrossEntropyLoss (搭配 softmax)。
            verbose (bool): 是否在 backward 時印出每一層的 delta。
        """
        self.layers = []
        self.loss_fn = loss_fn if loss_fn is not None else CrossEntropyLoss()
        self.verbose = verbose

    def add_layer(self, layer):
        """
        向網路的最後面添加一個層。
        """
        self.layers.append(layer)

    def forward(self, inputs):
        """
        執行完整的前向傳播，每一層都會保留自己的狀態給 backward 使用。

        參數:
            inputs (np.array): 輸入向量。

        返回:
            np.array: 最後一層的輸出。
        """
        output = inputs
        for layer in self.layers:
            output = layer.forward(output)
        return output

    def calc_loss(self, target):
        """
        以最近一次 forward 的輸出計算損失。
        """
        return self.loss_fn.loss(self.layers[-1].last_output, target)

    def backward(self, target):
        """
        執行完整的反向傳播，並讓每一層累加一次梯度。

        輸出層的 delta 直接由損失函數給出 (softmax + cross entropy 時為 output - target)，
        之後由後往前，用下一層的 delta 與權重計算前一層的 delta。

        參數:
            target (np.array): one-hot 目標向量。
        """
        last_layer = self.layers[-1]
        delta = self.loss_fn.grad(last_layer.last_output, target)
        self._log_delta(len(self.layers) - 1, delta)
        last_layer.update_grad(delta)

        for l in range(len(self.layers) - 2, -1, -1):
            delta = self.layers[l].calc_delta(delta, self.layers[l + 1].weights)
            self.layers[l].update_grad(delta)
            self._log_delta(l, delta)

    def update_param(self, learning_rate=0.1):
        """
        更新所有層的權重。
        """
        for layer in self.layers:
            layer.update_param(learning_rate)

    def predict(self, inputs):
        """
        回傳機率最大的類別。
        """
        return int(np.argmax(self.forward(inputs)))

    def _log_delta(self, index, delta):
        if self.verbose:
            print(f"delta of layer {index}: " + " ".join(f"{d:.6f}" for d in delta))

    def __len__(self):
        return len(self.layers)

    def __str__(self):
        desc = ["Network:"]
        for layer in self.layers:
            desc.append(f"  {layer!r}")
        return "\n".join(desc)
