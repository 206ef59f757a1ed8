# tests/test_trainer.py
import numpy as np
import pytest

from mnist_mlp import SGD, Layer, Network, RandomGenerator, Trainer


def make_network(seed=0):
    rng = RandomGenerator(seed=seed)
    net = Network()
    net.add_layer(Layer(2, 4, "relu", rng=rng))
    net.add_layer(Layer(4, 2, "softmax", rng=rng))
    return net


class CountingSGD(SGD):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.steps = []

    def step(self, model):
        self.steps.append(model.layers[-1].sample_count)
        super().step(model)


def test_sgd_rejects_non_positive_learning_rate():
    with pytest.raises(ValueError):
        SGD(learning_rate=0.0)


def test_sgd_decays_only_when_loss_gets_worse():
    opt = SGD(learning_rate=0.2, decay=0.5)
    assert opt.decay_on_plateau(1.0) is False
    assert opt.decay_on_plateau(0.8) is False
    assert opt.lr == pytest.approx(0.2)
    assert opt.decay_on_plateau(0.9) is True
    assert opt.lr == pytest.approx(0.1)
    assert opt.prev_loss == 0.9


def test_trainer_rejects_bad_batch_size():
    with pytest.raises(ValueError):
        Trainer(make_network(), SGD(), batch_size=0)


def test_update_schedule_follows_sample_index(toy_dataset):
    opt = CountingSGD(learning_rate=0.1)
    Trainer(make_network(), opt, batch_size=10).run_epoch(toy_dataset, train=True)
    # updates after samples 0, 10, 20, 30 and the last one (39)
    assert opt.steps == [1, 10, 10, 10, 9]


def test_evaluation_does_not_touch_weights(toy_dataset):
    net = make_network()
    before = [layer.weights.copy() for layer in net.layers]
    loss, error = Trainer(net, SGD()).run_epoch(toy_dataset, train=False)
    assert loss > 0.0
    assert 0.0 <= error <= 1.0
    for layer, old in zip(net.layers, before):
        np.testing.assert_array_equal(layer.weights, old)
        assert layer.sample_count == 0


def test_fit_reduces_training_loss(toy_dataset):
    trainer = Trainer(make_network(), SGD(learning_rate=0.5), batch_size=5)
    history = trainer.fit(toy_dataset, toy_dataset, epochs=15)
    assert len(history["train_loss"]) == 15
    assert len(history["test_error"]) == 15
    assert len(history["lr"]) == 15
    assert history["train_loss"][-1] < history["train_loss"][0]


def test_fit_without_test_set(toy_dataset, capsys):
    history = Trainer(make_network(), SGD()).fit(toy_dataset, epochs=2)
    assert history["test_loss"] == []
    assert "running epoch 1" in capsys.readouterr().out
