# minimal_esn/exceptions.py
import numpy as np


class ConfigurationError(ValueError):
    pass


class DimensionMismatchError(ValueError):
    pass


class SingularMatrixError(np.linalg.LinAlgError):
    """Raised when Gauss-Jordan elimination meets a zero or near-zero pivot."""

    def __init__(self, index: int, pivot: float, tolerance: float):
        self.index = index
        self.pivot = pivot
        self.tolerance = tolerance
        super().__init__(
            f"Matrix not invertible: pivot {pivot!r} at row {index} "
            f"is within tolerance {tolerance:g}"
        )
