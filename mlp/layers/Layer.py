import numbers
from collections import namedtuple

from ..helpers.Backend import backend


class Shape(namedtuple("Shape", ["num_input_units", "num_hidden_units"])):
    """Input/output sizing of a layer. Holds no parameters."""
    __slots__ = ()

    def __new__(cls, num_input_units, num_hidden_units):
        for name, value in (("num_input_units", num_input_units),
                            ("num_hidden_units", num_hidden_units)):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value <= 0:
                raise ValueError(f"{name} must be a positive int, got {value!r}")
        return super().__new__(cls, num_input_units, num_hidden_units)


class Layer:
    """
    Shared contract of a feed-forward layer.

    Per-vector operations are implemented by subclasses; the batch variants
    below map them over the rows of a (batch, units) array.
    """
    def __init__(self, num_input_units, num_hidden_units):
        self.shape = Shape(num_input_units, num_hidden_units)

    @property
    def num_input_units(self):
        return self.shape.num_input_units

    @property
    def num_hidden_units(self):
        return self.shape.num_hidden_units

    def __repr__(self):
        return (
            f"<{type(self).__name__} num_input_units={self.num_input_units}, "
            f"num_hidden_units={self.num_hidden_units}>"
        )

    # -------- precondition checks --------
    def _check_vector(self, x, size, name):
        x = backend.ensure_array(x, ndim=1)
        if x.shape[0] != size:
            raise ValueError(
                f"{type(self).__name__}: expected {name} of length {size}, "
                f"got {x.shape[0]}"
            )
        return x

    def _check_batch(self, x, size, name):
        x = backend.ensure_array(x, ndim=2)
        if x.shape[0] == 0:
            raise ValueError(f"{type(self).__name__}: {name} batch is empty")
        if x.shape[1] != size:
            raise ValueError(
                f"{type(self).__name__}: expected {name} rows of length {size}, "
                f"got {x.shape[1]}"
            )
        return x

    def _check_pair(self, a, b, size, names):
        a = self._check_batch(a, size, names[0])
        b = self._check_batch(b, size, names[1])
        if a.shape[0] != b.shape[0]:
            raise ValueError(
                f"{type(self).__name__}: {names[0]} batch has {a.shape[0]} rows "
                f"but {names[1]} batch has {b.shape[0]}"
            )
        return a, b

    # Subclasses override as needed
    def forward(self, x):
        raise NotImplementedError

    def backward_with_target(self, predicted, target):
        raise NotImplementedError

    def backward(self, predicted, accumulated_delta):
        raise NotImplementedError

    def accumulate_delta(self, delta):
        # Return the delta projected onto the previous layer's outputs
        raise NotImplementedError

    def turn(self, batch, deltas, option):
        raise NotImplementedError

    def params(self):
        # Return list of trainable ndarrays (e.g., [W, b])
        return []

    # -------- batch variants --------
    def forward_batch(self, batch):
        batch = self._check_batch(batch, self.num_input_units, "input")
        return backend.stack([self.forward(x) for x in batch])

    def accumulate_delta_batch(self, deltas):
        deltas = self._check_batch(deltas, self.num_hidden_units, "delta")
        return backend.stack([self.accumulate_delta(d) for d in deltas])

    def backward_with_target_batch(self, predicted, target):
        """Returns (deltas, deltas accumulated toward the previous layer)."""
        predicted, target = self._check_pair(
            predicted, target, self.num_hidden_units, ("predicted", "target")
        )
        deltas = backend.stack(
            [self.backward_with_target(p, t) for p, t in zip(predicted, target)]
        )
        return deltas, self.accumulate_delta_batch(deltas)

    def backward_batch(self, predicted, accumulated_delta):
        """Returns (deltas, deltas accumulated toward the previous layer)."""
        predicted, accumulated_delta = self._check_pair(
            predicted, accumulated_delta, self.num_hidden_units,
            ("predicted", "accumulated delta"),
        )
        deltas = backend.stack(
            [self.backward(p, a) for p, a in zip(predicted, accumulated_delta)]
        )
        return deltas, self.accumulate_delta_batch(deltas)
