'''
Name: DLP Lab1
Topic: back-propagation on MNIST
Author: CHEN, KE-RONG
Date: 2025/07/04
'''

'''
Loss function
CrossEntropyLoss(cross)
'''
import numpy as np

class Loss:
    def loss(self, predicted, actual):
        raise NotImplementedError("loss() 尚未實作")

    def grad(self, predicted, actual):
        raise NotImplementedError("grad() 尚未實作")

class CrossEntropyLoss(Loss):
    """
    多類別交叉熵損失函數 (Cross Entropy Loss)，
    必須搭配最後一層的 softmax 使用。
    """
    def loss(self, predicted, actual):
        """
        計算單一樣本的交叉熵：-Σ actual[i] * log(predicted[i])。
        - predicted: softmax 輸出的機率分佈
        - actual: one-hot 向量
        不做裁切，predicted 為 0 時會得到 inf 或 nan。
        """
        predicted = np.asarray(predicted, dtype=float)
        actual = np.asarray(actual, dtype=float)
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(-np.sum(actual * np.log(predicted)))

    def grad(self, predicted, actual):
        """
        softmax + cross entropy 對輸出層加權和 u 的梯度：
            grad = predicted - actual
        """
        return np.asarray(predicted, dtype=float) - np.asarray(actual, dtype=float)
