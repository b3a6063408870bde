from .Backend import Backend, backend
from .logger import RunLogger

__all__ = [
    "Backend",
    "backend",
    "RunLogger",
]
