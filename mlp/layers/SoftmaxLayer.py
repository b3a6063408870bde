from .Layer import Layer
from ..helpers.Backend import backend


class SoftmaxLayer(Layer):
    """
    Parameter-free output layer emitting a probability distribution.

    Meant to be paired with cross-entropy loss: the backward passes use the
    closed-form delta and never call an activation derivative. The layer
    maps n units to n units.
    """
    def __init__(self, num_input_units, num_hidden_units=None, forward_fn=None, derivative_fn=None):
        # forward_fn / derivative_fn are accepted for constructor parity with
        # DenseLayer and ignored.
        if num_hidden_units is None:
            num_hidden_units = num_input_units
        super().__init__(num_input_units, num_hidden_units)
        if num_input_units != num_hidden_units:
            raise ValueError(
                f"SoftmaxLayer maps n units to n units, got "
                f"num_input_units={num_input_units}, num_hidden_units={num_hidden_units}"
            )

    def forward(self, x):
        # No max-subtraction: overflows for large inputs (exp(710) is inf).
        x = self._check_vector(x, self.num_hidden_units, "input")
        exp_x = backend.exp(x)
        return exp_x / backend.sum(exp_x)

    def backward_with_target(self, predicted, target):
        predicted = self._check_vector(predicted, self.num_hidden_units, "predicted")
        target = self._check_vector(target, self.num_hidden_units, "target")
        return predicted - target

    def backward(self, predicted, accumulated_delta):
        # Upstream signal is taken as already resolved; pass it through.
        self._check_vector(predicted, self.num_hidden_units, "predicted")
        accumulated_delta = self._check_vector(
            accumulated_delta, self.num_hidden_units, "accumulated delta"
        )
        return accumulated_delta.copy()

    def accumulate_delta(self, delta):
        delta = self._check_vector(delta, self.num_hidden_units, "delta")
        return delta.copy()

    def turn(self, batch, deltas, option):
        # Do nothing: no trainable parameters
        pass
