'''
Name: DLP Lab1
Topic: back-propagation on MNIST
Author: CHEN, KE-RONG
Date: 2025/07/05
'''
import os
import gzip
import struct

import numpy as np

LABEL_MAGIC = 2049
IMAGE_MAGIC = 2051
NUM_CLASSES = 10

TRAIN_FILES = ('train-images-idx3-ubyte', 'train-labels-idx1-ubyte')
TEST_FILES = ('t10k-images-idx3-ubyte', 't10k-labels-idx1-ubyte')


def _open(path):
    if path.endswith('.gz'):
        return gzip.open(path, 'rb')
    return open(path, 'rb')


def _read_uint32(f):
    raw = f.read(4)
    if len(raw) != 4:
        raise ValueError("idx 檔案的標頭不完整")
    return struct.unpack('>I', raw)[0]


def _read_array(f, size):
    buf = f.read(size)
    if len(buf) != size:
        raise ValueError(f"idx 檔案長度不足: 需要 {size} bytes，只讀到 {len(buf)}")
    return np.frombuffer(buf, dtype=np.uint8)


def read_labels(path):
    with _open(path) as f:
        magic = _read_uint32(f)
        if magic != LABEL_MAGIC:
            raise ValueError(f"{path} 不是 label 檔 (magic={magic})")
        count = _read_uint32(f)
        return _read_array(f, count)


def read_images(path):
    """
    讀取 idx3 影像檔。

    返回:
        np.array: 形狀為 (張數, rows, columns) 的 uint8 陣列。
    """
    with _open(path) as f:
        magic = _read_uint32(f)
        if magic != IMAGE_MAGIC:
            raise ValueError(f"{path} 不是影像檔 (magic={magic})")
        count = _read_uint32(f)
        rows = _read_uint32(f)
        columns = _read_uint32(f)
        return _read_array(f, count * rows * columns).reshape(count, rows, columns)


class MNISTDataset:
    """
    MNIST 資料集 (idx 格式)，支援 .gz 壓縮檔。
    """
    def __init__(self, image_file, label_file):
        self.labels = read_labels(label_file)
        self.images = read_images(image_file)
        if len(self.labels) != len(self.images):
            raise ValueError(f"影像數量 ({len(self.images)}) 與標籤數量 ({len(self.labels)}) 不一致")

    @property
    def image_count(self):
        return self.images.shape[0]

    @property
    def row_count(self):
        return self.images.shape[1]

    @property
    def column_count(self):
        return self.images.shape[2]

    def __len__(self):
        return self.image_count

    def image(self, i):
        return self.images[i]

    def image_as_vector(self, i):
        """
        將第 i 張影像攤平成向量，像素值除以 256 落在 [0, 1)。
        """
        return self.images[i].reshape(-1).astype(float) / 256.0

    def label_scalar(self, i):
        return int(self.labels[i])

    def label_one_hot(self, i):
        one_hot = np.zeros(NUM_CLASSES)
        one_hot[self.labels[i]] = 1.0
        return one_hot


def _find(data_dir, name):
    path = os.path.join(data_dir, name)
    if not os.path.exists(path) and os.path.exists(path + '.gz'):
        return path + '.gz'
    return path


def load_mnist(data_dir):
    """
    從資料夾載入訓練集與測試集，優先使用未壓縮的檔案。

    參數:
        data_dir (str): 存放 MNIST idx 檔的資料夾。

    返回:
        tuple: (train_set, test_set)
    """
    train_set = MNISTDataset(*(_find(data_dir, name) for name in TRAIN_FILES))
    test_set = MNISTDataset(*(_find(data_dir, name) for name in TEST_FILES))
    return train_set, test_set
