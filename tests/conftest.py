# tests/conftest.py
import os

# Headless matplotlib so plotting tests don't need a display
os.environ.setdefault("MPLBACKEND", "Agg")

import numpy as np
import pytest

from mlp import activations


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def dense_factory(rng):
    from mlp.layers import DenseLayer
    def make(num_input_units=3, num_hidden_units=2, activation="identity", **kwargs):
        f, d = activations.get_activation(activation)
        kwargs.setdefault("rng", rng)
        return DenseLayer(num_input_units, num_hidden_units, f, d, **kwargs)
    return make


@pytest.fixture
def softmax_factory():
    from mlp.layers import SoftmaxLayer
    def make(num_units=4, **kwargs):
        return SoftmaxLayer(num_units, num_units, **kwargs)
    return make
