# tests/test_loss.py
import numpy as np
import pytest

from mlp.loss import SquaredErrorLoss, CrossEntropyLoss


def test_squared_error_mean_over_batch():
    loss = SquaredErrorLoss()
    assert loss.forward([[1.0, 0.0], [0.0, 0.0]], [[0.0, 0.0], [0.0, 2.0]]) == pytest.approx(1.25)
    np.testing.assert_allclose(loss.backward([[1.0, 2.0]], [[0.5, 2.0]]), [[0.5, 0.0]])


def test_cross_entropy_one_hot():
    loss = CrossEntropyLoss()
    probs = [[0.5, 0.25, 0.25], [0.1, 0.8, 0.1]]
    target = [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]]
    expected = -(np.log(0.5) + np.log(0.8)) / 2
    assert loss.forward(probs, target) == pytest.approx(expected)


def test_cross_entropy_eps_guards_zero_probability():
    assert np.isfinite(CrossEntropyLoss().forward([[0.0, 1.0]], [[1.0, 0.0]]))


@pytest.mark.parametrize("loss", [SquaredErrorLoss(), CrossEntropyLoss()])
def test_shape_mismatch_raises(loss):
    with pytest.raises(ValueError):
        loss.forward([[1.0, 0.0]], [[1.0, 0.0, 0.0]])
    with pytest.raises(ValueError):
        loss.backward([1.0, 0.0], [1.0, 0.0])
