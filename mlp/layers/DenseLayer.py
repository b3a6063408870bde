from .Layer import Layer
from ..helpers.Backend import backend
from ..optimizer.SGDOptimizer import SGDOptimizer


class DenseLayer(Layer):
    """
    Fully connected layer with a scalar activation.

    weights: (num_input_units, num_hidden_units), weights[j, i] connects
             input j to output i
    bias:    (num_hidden_units,)

    `derivative_fn` is evaluated on the activation output, e.g. y * (1 - y)
    for the sigmoid.
    """
    def __init__(self, num_input_units, num_hidden_units, forward_fn, derivative_fn, rng=None):
        super().__init__(num_input_units, num_hidden_units)
        for name, fn in (("forward_fn", forward_fn), ("derivative_fn", derivative_fn)):
            if not callable(fn):
                raise ValueError(f"DenseLayer: {name} must be callable, got {fn!r}")
        self.forward_fn = forward_fn
        self.derivative_fn = derivative_fn
        self.rng = backend.default_rng() if rng is None else rng

        self.weights = backend.make_matrix(num_input_units, num_hidden_units)
        self.bias = backend.zeros(num_hidden_units)
        self.init_params()

    def init_params(self):
        """Heuristic init: weights uniform in [-0.5, 0.5), biases 1.0. Safe to call again."""
        self.weights[...] = self.rng.random(self.weights.shape) - 0.5
        self.bias[...] = 1.0

    def params(self):
        return [self.weights, self.bias]

    def forward(self, x):
        # x shape: (num_input_units,)
        # return: (num_hidden_units,)
        x = self._check_vector(x, self.num_input_units, "input")
        sums = x @ self.weights + self.bias
        return backend.array([self.forward_fn(s) for s in sums], dtype=backend.default_float)

    def accumulate_delta(self, delta):
        delta = self._check_vector(delta, self.num_hidden_units, "delta")
        return self.weights @ delta  # (num_input_units,)

    def backward_with_target(self, predicted, target):
        # Final layer under squared-error loss
        predicted = self._check_vector(predicted, self.num_hidden_units, "predicted")
        target = self._check_vector(target, self.num_hidden_units, "target")
        slope = backend.array([self.derivative_fn(y) for y in predicted], dtype=backend.default_float)
        return (predicted - target) * slope

    def backward(self, predicted, accumulated_delta):
        predicted = self._check_vector(predicted, self.num_hidden_units, "predicted")
        accumulated_delta = self._check_vector(
            accumulated_delta, self.num_hidden_units, "accumulated delta"
        )
        slope = backend.array([self.derivative_fn(y) for y in predicted], dtype=backend.default_float)
        return accumulated_delta * slope

    def gradient(self, batch, deltas):
        """
        Descent-direction update terms summed over the batch:
            grad_weights[j, i] = -sum_n deltas[n, i] * batch[n, j]
            grad_bias[i]       = -sum_n deltas[n, i]
        """
        batch = self._check_batch(batch, self.num_input_units, "input")
        deltas = self._check_batch(deltas, self.num_hidden_units, "delta")
        if batch.shape[0] != deltas.shape[0]:
            raise ValueError(
                f"DenseLayer: input batch has {batch.shape[0]} rows "
                f"but delta batch has {deltas.shape[0]}"
            )
        grad_weights = backend.make_matrix(self.num_input_units, self.num_hidden_units)
        grad_bias = backend.zeros(self.num_hidden_units)
        grad_weights -= batch.T @ deltas
        grad_bias -= backend.sum(deltas, axis=0)
        return grad_weights, grad_bias

    def turn(self, batch, deltas, option):
        """Mini-batch SGD step on weights and bias, in place."""
        grad_weights, grad_bias = self.gradient(batch, deltas)
        SGDOptimizer(option).step(
            self.weights, self.bias, grad_weights, grad_bias, len(batch)
        )
