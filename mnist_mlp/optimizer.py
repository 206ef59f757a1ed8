'''
Name: DLP Lab1
Topic: back-propagation on MNIST
Author: CHEN, KE-RONG
Date: 2025/07/04
'''

class Optimizer:
    """優化器的基礎類別"""
    def __init__(self, learning_rate):
        if learning_rate <= 0:
            raise ValueError(f"學習率必須大於 0: {learning_rate}")
        self.lr = learning_rate

    def step(self, model):
        """更新模型的權重"""
        raise NotImplementedError

class SGD(Optimizer):
    """
    隨機梯度下降 (Stochastic Gradient Descent) 優化器。
    梯度已經累積在每一層裡，這裡只負責學習率，
    並在 loss 沒有改善時衰減學習率。
    """
    def __init__(self, learning_rate=0.2, decay=0.5):
        super().__init__(learning_rate)
        self.decay = decay
        self.prev_loss = None

    def step(self, model):
        """
        以目前的學習率更新模型，各層會用累積梯度的平均值。

        參數:
            model: Network 物件。
        """
        model.update_param(self.lr)

    def decay_on_plateau(self, loss):
        """
        若這次的 loss 比上一次差，將學習率乘上 decay。

        參數:
            loss (float): 這個 epoch 的平均 loss。

        返回:
            bool: 是否衰減了學習率。
        """
        decayed = self.prev_loss is not None and self.prev_loss < loss
        if decayed:
            self.lr *= self.decay
        self.prev_loss = loss
        return decayed
