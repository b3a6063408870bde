from .SquaredErrorLoss import SquaredErrorLoss
from .CrossEntropyLoss import CrossEntropyLoss

__all__ = [
    "SquaredErrorLoss",
    "CrossEntropyLoss",
]
