# helpers/Backend.py
import numpy as np


class Backend:
    """Array helpers shared by the layers (NumPy, CPU only)."""
    def __init__(self, default_float=np.float64):
        self.default_float = default_float
        self.xp = np

    # -------- conversion --------
    def ensure_array(self, x, ndim=None, dtype=None):
        """
        Ensure 'x' is an ndarray of the default float dtype.
        Accepts list/tuple/np arrays. If `ndim` is given the result must have
        exactly that many dimensions.
        """
        dtype = self.default_float if dtype is None else dtype
        arr = np.asarray(x, dtype=dtype)
        if ndim is not None and arr.ndim != ndim:
            raise ValueError(
                f"Expected a {ndim}-d array, got shape {arr.shape}"
            )
        return arr

    # -------- array creation --------
    def make_matrix(self, rows, cols):
        """Zero-filled (rows, cols) matrix."""
        return np.zeros((rows, cols), dtype=self.default_float)

    def zeros(self, *args, **kwargs):
        kwargs.setdefault("dtype", self.default_float)
        return np.zeros(*args, **kwargs)

    def zeros_like(self, x):
        return np.zeros_like(x)

    # -------- randomness --------
    def default_rng(self, seed=None):
        """Uniform random source; rng.random() draws floats in [0, 1)."""
        return np.random.default_rng(seed)

    # -------- delegate unknown attrs to xp --------
    def __getattr__(self, name):
        return getattr(self.xp, name)


# Global backend instance
backend = Backend()
