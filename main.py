'''
Name: DLP Lab1
Topic: back-propagation on MNIST
Author: CHEN, KE-RONG
Date: 2025/07/05
'''
import os
import argparse

from mnist_mlp.activations import Activation
from mnist_mlp.dataset import NUM_CLASSES, load_mnist
from mnist_mlp.initializer import RandomGenerator
from mnist_mlp.layers import Layer
from mnist_mlp.model import Network
from mnist_mlp.optimizer import SGD
from mnist_mlp.trainer import Trainer
from show_result import plot_loss_curve, plot_error_rate


def build_network(input_dim, hidden_dims, activation, seed=None, verbose=False):
    """
    建構 input → hidden... → softmax(10) 的網路。
    """
    rng = RandomGenerator(0.0, 1.0, seed=seed)
    net = Network(verbose=verbose)
    for hidden_dim in hidden_dims:
        net.add_layer(Layer(input_dim, hidden_dim, activation, rng=rng))
        input_dim = hidden_dim
    net.add_layer(Layer(input_dim, NUM_CLASSES, Activation.SOFTMAX, rng=rng))
    return net


def get_args(argv=None):
    parser = argparse.ArgumentParser(description='Lab1: Back-propagation on MNIST')
    parser.add_argument('--data-dir', type=str, default='mnist',
                        help='directory containing the MNIST idx files (default: mnist)')
    parser.add_argument('--epochs', type=int, default=50, metavar='N',
                        help='number of epochs to train (default: 50)')
    parser.add_argument('--lr', type=float, default=0.2, metavar='LR',
                        help='learning rate (default: 0.2)')
    parser.add_argument('--lr-decay', type=float, default=0.5, metavar='D',
                        help='learning rate decay when train loss gets worse (default: 0.5)')
    parser.add_argument('--batch-size', type=int, default=100, metavar='N',
                        help='samples accumulated per update (default: 100)')
    parser.add_argument('--hidden-dims', type=int, nargs='+', default=[300],
                        help='dimensions of hidden layers (default: 300)')
    parser.add_argument('--activation', type=str, default='relu', choices=['relu', 'sigmoid', 'swish'],
                        help='activation function of hidden layers (default: relu)')
    parser.add_argument('--seed', type=int, default=None, metavar='S',
                        help='random seed for weight initialization')
    parser.add_argument('--verbose', action='store_true',
                        help='print the delta of every layer during backward')
    parser.add_argument('--plot', type=str, default=None, metavar='PATH',
                        help='save loss / error rate curves to PATH instead of showing them')
    return parser.parse_args(argv)


def main(argv=None):
    """
    主函式，負責解析命令列參數、建構模型並執行訓練。
    """
    args = get_args(argv)

    # --- 資料準備 ---
    print(f"載入資料集: {args.data_dir}")
    train_set, test_set = load_mnist(args.data_dir)
    print(f"資料集大小 - 訓練集: {len(train_set)}, 測試集: {len(test_set)}")

    # --- 模型建構 ---
    input_dim = train_set.row_count * train_set.column_count
    net = build_network(input_dim, args.hidden_dims, args.activation, seed=args.seed, verbose=args.verbose)
    print(net)

    # --- 訓練設定 ---
    optimizer = SGD(learning_rate=args.lr, decay=args.lr_decay)
    trainer = Trainer(net, optimizer, batch_size=args.batch_size)

    # --- 模型訓練 ---
    print(f"\n開始訓練... (Epochs: {args.epochs}, LR: {args.lr}, Activation: {args.activation}, Batch: {args.batch_size})")
    history = trainer.fit(train_set, test_set, epochs=args.epochs)

    # --- 結果顯示 ---
    print("\n訓練完成！")
    if args.plot:
        root, ext = os.path.splitext(args.plot)
        plot_loss_curve(history, save_path=args.plot)
        plot_error_rate(history, save_path=f"{root}_error{ext or '.png'}")
    return history

if __name__ == '__main__':
    main()
