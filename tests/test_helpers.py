# tests/test_helpers.py
import csv
import json

import numpy as np
import pytest

from mlp.helpers import RunLogger, backend


def test_make_matrix_is_zero_filled():
    m = backend.make_matrix(3, 4)
    assert m.shape == (3, 4)
    assert m.dtype == np.float64
    assert not m.any()


def test_ensure_array_checks_ndim():
    assert backend.ensure_array([1, 2]).dtype == np.float64
    with pytest.raises(ValueError):
        backend.ensure_array([[1.0]], ndim=1)


def test_default_rng_is_seedable():
    a = backend.default_rng(3).random(5)
    b = backend.default_rng(3).random(5)
    np.testing.assert_array_equal(a, b)
    assert np.all((a >= 0) & (a < 1))


def test_run_logger_history(tmp_path):
    logger = RunLogger(root=tmp_path, tag="xor")
    logger.log_step(0, loss=1.0, val_loss=1.5)
    logger.log_step(1, loss=0.5, val_loss=0.9)

    with open(logger.csv_path, newline="") as f:
        rows = list(csv.DictReader(f))
    assert [r["step"] for r in rows] == ["0", "1"]
    assert float(rows[1]["loss"]) == 0.5

    with open(logger.save_json()) as f:
        assert json.load(f)[0] == {"step": 0, "loss": 1.0, "val_loss": 1.5}

    assert logger.history() == {"loss": [1.0, 0.5], "val_loss": [1.5, 0.9]}


def test_run_logger_plot_loss(tmp_path):
    logger = RunLogger(root=tmp_path, tag="xor")
    path = logger.plot_loss({"train_loss": [1.0, 0.5, 0.25]}, tag="xor")
    assert path.endswith("loss_curve_xor_steps_3.png")
    assert (logger.dir / "plots" / "loss_curve_xor_steps_3.png").exists()


def test_run_logger_layer_norms_after_turn(tmp_path, dense_factory, softmax_factory):
    from mlp import TrainingOption

    layer = dense_factory(num_input_units=2, num_hidden_units=1)
    layer.weights[...] = [[3.0], [4.0]]
    layer.bias[...] = [0.0]
    logger = RunLogger(root=tmp_path, tag="dense")

    norms = logger.log_layer(0, layer, loss=2.0)
    assert norms == {"weights_norm": 5.0, "bias_norm": 0.0}

    option = TrainingOption(0.0, l2_regularization=True, regularization_rate=0.5)
    layer.turn([[1.0, 1.0]], [[1.0]], option)
    logger.log_layer(1, layer, loss=1.0)
    assert logger.history() == {
        "weights_norm": [5.0, 2.5],
        "bias_norm": [0.0, 0.0],
        "loss": [2.0, 1.0],
    }

    assert logger.log_layer(2, softmax_factory(num_units=3)) == {}
