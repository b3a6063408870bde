from .Layer import Layer, Shape
from .DenseLayer import DenseLayer
from .SoftmaxLayer import SoftmaxLayer

__all__ = [
    "Layer",
    "Shape",
    "DenseLayer",
    "SoftmaxLayer",
]
