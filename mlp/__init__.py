from .layers import Layer, Shape, DenseLayer, SoftmaxLayer
from .optimizer import TrainingOption, SGDOptimizer
from .loss import SquaredErrorLoss, CrossEntropyLoss
from .helpers import RunLogger, backend
from . import activations

__all__ = [
    "Layer",
    "Shape",
    "DenseLayer",
    "SoftmaxLayer",
    "TrainingOption",
    "SGDOptimizer",
    "SquaredErrorLoss",
    "CrossEntropyLoss",
    "RunLogger",
    "backend",
    "activations",
]
