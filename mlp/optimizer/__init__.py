from .TrainingOption import TrainingOption
from .SGDOptimizer import SGDOptimizer

__all__ = [
    "TrainingOption",
    "SGDOptimizer",
]
