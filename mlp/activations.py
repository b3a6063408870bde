import math

# Derivatives take the activation OUTPUT y = f(x), not the pre-activation sum.


def identity(x):
    return x


def identity_derivative(y):
    return 1.0


def sigmoid(x):
    # exp only ever sees non-positive arguments
    if x >= 0:
        return 1 / (1 + math.exp(-x))
    e = math.exp(x)
    return e / (1 + e)


def sigmoid_derivative(y):
    return y * (1 - y)


def tanh(x):
    return math.tanh(x)


def tanh_derivative(y):
    return 1 - y**2


def relu(x):
    return max(0.0, x)


def relu_derivative(y):
    return 1.0 if y > 0 else 0.0


ACTIVATIONS = {
    "identity": (identity, identity_derivative),
    "sigmoid": (sigmoid, sigmoid_derivative),
    "tanh": (tanh, tanh_derivative),
    "relu": (relu, relu_derivative),
}


def get_activation(name):
    """Return the (forward_fn, derivative_fn) pair registered under `name`."""
    try:
        return ACTIVATIONS[name]
    except KeyError:
        raise ValueError(
            f"Unknown activation {name!r}; expected one of {sorted(ACTIVATIONS)}"
        ) from None
