'''
Name: DLP Lab1
Topic: back-propagation on MNIST
Author: CHEN, KE-RONG
Date: 2025/07/04
'''
import numpy as np


class RandomGenerator:
    """
    均勻分佈的亂數產生器，用於初始化權重。
    產生 [low, high) 區間內的數值。
    """
    def __init__(self, low=0.0, high=1.0, seed=None):
        self.low = low
        self.high = high
        self.rng = np.random.default_rng(seed)

    def rand(self, size=None):
        """
        產生亂數。

        參數:
            size (int | tuple, optional): 輸出形狀；None 時回傳單一 float。
        """
        return self.rng.uniform(self.low, self.high, size)
