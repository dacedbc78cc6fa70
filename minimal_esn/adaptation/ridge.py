# minimal_esn/adaptation/ridge.py
import logging
import warnings
import numpy as np

from minimal_esn.core.reservoir import Reservoir
from minimal_esn.exceptions import ConfigurationError, DimensionMismatchError
from minimal_esn.linalg.gauss_jordan import DEFAULT_PIVOT_TOL, invert

logger = logging.getLogger(__name__)


class RidgeRegression:
    def __init__(self, lambda_: float = 1e-2, pivot_tol: float = DEFAULT_PIVOT_TOL):
        if not np.isfinite(lambda_) or lambda_ < 0:
            raise ConfigurationError("Ridge parameter must be finite and non-negative")
        if not np.isfinite(pivot_tol) or pivot_tol <= 0:
            raise ConfigurationError("Pivot tolerance must be finite and positive")
        self.lambda_ = lambda_
        self.pivot_tol = pivot_tol

    @staticmethod
    def _as_history(values: np.ndarray, label: str) -> np.ndarray:
        history = np.asarray(values, dtype=float)
        if history.ndim != 2:
            raise DimensionMismatchError(f"{label} must be a 2-D (rows, T) matrix, got shape {history.shape}")
        return history

    def normal_matrix(self, X: np.ndarray) -> np.ndarray:
        X = self._as_history(X, "State history")
        return X @ X.T + self.lambda_ * np.eye(X.shape[0])

    def solve(self, X: np.ndarray, D: np.ndarray) -> np.ndarray:
        """W_out = D X^T (X X^T + lambda I)^-1, with no side effects."""
        X = self._as_history(X, "State history")
        D = self._as_history(D, "Target history")
        if D.shape[1] != X.shape[1]:
            raise DimensionMismatchError(
                f"State and target histories must have the same number of columns, got {X.shape[1]} and {D.shape[1]}")
        M_inv = invert(self.normal_matrix(X), pivot_tol=self.pivot_tol)
        return (D @ X.T) @ M_inv

    def train(self, reservoir: Reservoir, X: np.ndarray, D: np.ndarray, T: int) -> np.ndarray:
        X = np.asarray(X, dtype=float)
        D = np.asarray(D, dtype=float)
        self._check_dimensions(reservoir, X, D, T)

        if T < reservoir.n_reservoir:
            warnings.warn(f"Training length {T} is shorter than the reservoir size {reservoir.n_reservoir}; "
                          f"the normal equations rely on the ridge term to stay invertible")

        W_out = self.solve(X, D)
        reservoir.set_readout_weights(W_out)

        logger.debug("Ridge readout trained: T=%d lambda=%g |W_out|_F=%.6g",
                     T, self.lambda_, float(np.linalg.norm(W_out)))
        return reservoir.W_out.copy()

    @staticmethod
    def _check_dimensions(reservoir: Reservoir, X: np.ndarray, D: np.ndarray, T: int):
        if isinstance(T, bool) or not isinstance(T, (int, np.integer)) or T <= 0:
            raise DimensionMismatchError(f"Sequence length must be a positive integer, got {T!r}")
        if X.shape != (reservoir.n_reservoir, T):
            raise DimensionMismatchError(
                f"State history must have shape {(reservoir.n_reservoir, T)}, got {X.shape}")
        if D.shape != (reservoir.n_outputs, T):
            raise DimensionMismatchError(
                f"Target history must have shape {(reservoir.n_outputs, T)}, got {D.shape}")
