'''
Name: DLP Lab1
Topic: back-propagation on MNIST
Author: CHEN, KE-RONG
Date: 2025/07/04
'''
from .activations import Activation
from .initializer import RandomGenerator
from .layers import Layer, ForwardCache
from .model import Network
from .loss import Loss, CrossEntropyLoss
from .optimizer import SGD
from .trainer import Trainer
from .dataset import MNISTDataset, load_mnist
