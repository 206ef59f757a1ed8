'''
Name: DLP Lab1
Topic: back-propagation on MNIST
Author: CHEN, KE-RONG
Date: 2025/07/05
'''
import matplotlib.pyplot as plt

def _finish(fig, save_path):
    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight')
        plt.close(fig)
    else:
        plt.show()

def plot_loss_curve(history, save_path=None):
    """
    繪製每個 epoch 的平均損失曲線。

    參數:
        history (dict): Trainer.fit 回傳的紀錄。
        save_path (str, optional): 指定時存檔，不開視窗。
    """
    fig = plt.figure()
    plt.plot(history['train_loss'], label='train')
    if history.get('test_loss'):
        plt.plot(history['test_loss'], label='test')
    plt.title("Mean Loss Curve")
    plt.xlabel("Epoch")
    plt.ylabel("Loss")
    plt.legend()
    plt.grid(True)
    _finish(fig, save_path)

def plot_error_rate(history, save_path=None):
    """
    繪製錯誤率曲線，並標出學習率衰減的 epoch。
    """
    fig = plt.figure()
    plt.plot(history['train_error'], label='train')
    if history.get('test_error'):
        plt.plot(history['test_error'], label='test')
    lrs = history.get('lr', [])
    for epoch in range(1, len(lrs)):
        if lrs[epoch] < lrs[epoch - 1]:
            plt.axvline(epoch, color='gray', linestyle='dashed', alpha=0.5)
    plt.title("Error Rate")
    plt.xlabel("Epoch")
    plt.ylabel("Error rate")
    plt.legend()
    plt.grid(True)
    _finish(fig, save_path)
