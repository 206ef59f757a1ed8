'''
Name: DLP Lab1
Topic: back-propagation on MNIST
Author: CHEN, KE-RONG
Date: 2025/07/05
'''

# 進度條函式庫
from tqdm import tqdm

class Trainer:
    """
    訓練器類別，負責執行模型的訓練迴圈。
    """
    def __init__(self, model, optimizer, batch_size=100):
        """
        初始化訓練器。

        參數:
            model: 要訓練的 Network 物件。
            optimizer: 使用的優化器物件 (SGD)。
            batch_size (int): 每累積多少個樣本更新一次權重。
        """
        if batch_size <= 0:
            raise ValueError(f"batch_size 必須大於 0: {batch_size}")
        self.model = model
        self.optimizer = optimizer
        self.batch_size = batch_size

    def run_epoch(self, dataset, train=True):
        """
        逐一樣本跑過整個資料集。

        參數:
            dataset: 提供 image_count、image_as_vector、label_scalar、label_one_hot 的資料集。
            train (bool): 是否做反向傳播與權重更新。

        返回:
            tuple: (平均 loss, 錯誤率)
        """
        num_samples = dataset.image_count
        num_wrong = 0
        sum_loss = 0.0
        batch_loss = 0.0

        desc = "Training" if train else "Evaluating"
        pbar = tqdm(range(num_samples), desc=desc, leave=False)
        for sample in pbar:
            # 1. 前向傳播
            output = self.model.forward(dataset.image_as_vector(sample))
            if output.argmax() != dataset.label_scalar(sample):
                num_wrong += 1

            # 2. 計算損失
            target = dataset.label_one_hot(sample)
            sample_loss = self.model.calc_loss(target)
            sum_loss += sample_loss
            batch_loss += sample_loss

            if train:
                # 3. 反向傳播，各層累加梯度
                self.model.backward(target)

                # 4. 每個 batch 更新一次權重
                if sample % self.batch_size == 0 or sample == num_samples - 1:
                    pbar.set_postfix(batch_loss=f"{batch_loss / self.batch_size:.4f}", lr=f"{self.optimizer.lr:.4g}")
                    batch_loss = 0.0
                    self.optimizer.step(self.model)

        if num_samples == 0:
            return 0.0, 0.0
        return sum_loss / num_samples, num_wrong / num_samples

    def fit(self, train_set, test_set=None, epochs=50):
        """
        執行訓練迴圈，train loss 比上一個 epoch 差時衰減學習率。

        參數:
            train_set: 訓練資料集。
            test_set (optional): 測試資料集，每個 epoch 結束後評估。
            epochs (int): 訓練週期數。

        返回:
            dict: 每個 epoch 的 loss、錯誤率與學習率紀錄。
        """
        history = {'train_loss': [], 'train_error': [], 'test_loss': [], 'test_error': [], 'lr': []}
        for epoch in range(epochs):
            print(f"running epoch {epoch}")
            history['lr'].append(self.optimizer.lr)
            train_loss, train_error = self.run_epoch(train_set, train=True)
            history['train_loss'].append(train_loss)
            history['train_error'].append(train_error)
            print(f"train set mean loss: {train_loss:.6f}, error rate: {train_error:.4f}")

            if test_set is not None:
                test_loss, test_error = self.run_epoch(test_set, train=False)
                history['test_loss'].append(test_loss)
                history['test_error'].append(test_error)
                print(f"test set mean loss: {test_loss:.6f}, error rate: {test_error:.4f}")

            prev_loss = self.optimizer.prev_loss
            if self.optimizer.decay_on_plateau(train_loss):
                print(f"mean loss {train_loss:.6f} is worse than prev loss {prev_loss:.6f}: "
                      f"decaying learning rate to {self.optimizer.lr}")

        return history
