# minimal_esn/linalg/gauss_jordan.py
"""
Gauss-Jordan matrix inversion.

Pivots are always taken on the diagonal in row order; no row exchange is
attempted. A pivot whose magnitude does not exceed ``pivot_tol`` (or that is
not finite) aborts the elimination with ``SingularMatrixError`` instead of
letting inf/NaN leak into the result.
"""
import numpy as np

from minimal_esn.exceptions import DimensionMismatchError, SingularMatrixError

DEFAULT_PIVOT_TOL = 1e-12


def invert(matrix: np.ndarray, pivot_tol: float = DEFAULT_PIVOT_TOL) -> np.ndarray:
    """
    Returns the inverse of a square matrix. The argument is left untouched.

    :param matrix: n x n real matrix
    :param pivot_tol: smallest acceptable absolute pivot value
    :return: n x n inverse
    """
    M = np.array(matrix, dtype=float)
    if M.ndim != 2 or M.shape[0] != M.shape[1]:
        raise DimensionMismatchError(f"Only square matrices can be inverted, got shape {M.shape}")

    n = M.shape[0]
    M_inv = np.eye(n)

    for i in range(n):
        pivot = M[i, i]
        if not np.isfinite(pivot) or abs(pivot) <= pivot_tol:
            raise SingularMatrixError(i, float(pivot), pivot_tol)

        inv_pivot = 1.0 / pivot
        M[i] *= inv_pivot
        M_inv[i] *= inv_pivot

        # eliminate column i from every other row
        factors = M[:, i].copy()
        factors[i] = 0.0
        M -= np.outer(factors, M[i])
        M_inv -= np.outer(factors, M_inv[i])

    return M_inv
