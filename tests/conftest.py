# tests/conftest.py
import os
import sys

# Plots must not open a window during tests
os.environ.setdefault("MPLBACKEND", "Agg")

# Ensure project root is importable (so main / show_result work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import gzip
import struct

import numpy as np
import pytest


def write_idx(directory, images, labels, prefix="train", gz=False):
    """Write images (N, rows, cols) uint8 and labels (N,) as idx files, return the two paths."""
    images = np.asarray(images, dtype=np.uint8)
    labels = np.asarray(labels, dtype=np.uint8)
    suffix = ".gz" if gz else ""
    image_path = os.path.join(directory, f"{prefix}-images-idx3-ubyte{suffix}")
    label_path = os.path.join(directory, f"{prefix}-labels-idx1-ubyte{suffix}")
    opener = gzip.open if gz else open
    with opener(image_path, "wb") as f:
        f.write(struct.pack(">IIII", 2051, *images.shape))
        f.write(images.tobytes())
    with opener(label_path, "wb") as f:
        f.write(struct.pack(">II", 2049, len(labels)))
        f.write(labels.tobytes())
    return image_path, label_path


@pytest.fixture
def idx_writer(tmp_path):
    def make(images, labels, prefix="train", gz=False):
        return write_idx(str(tmp_path), images, labels, prefix=prefix, gz=gz)
    return make


class ToyDataset:
    """In-memory stand-in exposing the same interface as MNISTDataset."""
    def __init__(self, vectors, labels, num_classes=2):
        self.vectors = [np.asarray(v, dtype=float) for v in vectors]
        self.labels = list(labels)
        self.num_classes = num_classes

    @property
    def image_count(self):
        return len(self.vectors)

    def image_as_vector(self, i):
        return self.vectors[i]

    def label_scalar(self, i):
        return self.labels[i]

    def label_one_hot(self, i):
        one_hot = np.zeros(self.num_classes)
        one_hot[self.labels[i]] = 1.0
        return one_hot


@pytest.fixture
def toy_dataset():
    rng = np.random.default_rng(0)
    vectors, labels = [], []
    for i in range(40):
        label = i % 2
        center = np.array([0.8, 0.1]) if label == 0 else np.array([0.1, 0.8])
        vectors.append(center + rng.uniform(-0.05, 0.05, size=2))
        labels.append(label)
    return ToyDataset(vectors, labels)


@pytest.fixture
def small_network():
    from mnist_mlp import Layer, Network, RandomGenerator
    rng = RandomGenerator(0.0, 1.0, seed=3)
    net = Network()
    net.add_layer(Layer(4, 5, "relu", rng=rng))
    net.add_layer(Layer(5, 3, "softmax", rng=rng))
    return net
