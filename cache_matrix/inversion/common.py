import numpy as np

from ..errors import DimensionError, SingularMatrixError

# Pivots smaller than this are treated as zero by the elimination routines.
PIVOT_TOLERANCE = 1e-12


def as_square_matrix(A) -> np.ndarray:
    """
    Convert A to a float64 array and check that it can be inverted.

    Raises:
        DimensionError: A is not 2D, not square, or has no rows.
    """
    A = np.asarray(A, dtype=np.float64)
    if A.ndim != 2:
        raise DimensionError("Matrix must be two-dimensional", shape=A.shape)
    if A.shape[0] != A.shape[1]:
        raise DimensionError("Matrix must be square (n x n)", shape=A.shape)
    if A.shape[0] == 0:
        raise DimensionError("Matrix must not be empty", shape=A.shape)
    return A


def check_invertible(A: np.ndarray) -> None:
    """
    Reject matrices that are singular to working precision.

    The reciprocal 1-norm condition number must be at least machine epsilon.

    Raises:
        SingularMatrixError: A is computationally singular.
    """
    cond = np.linalg.cond(A, 1)
    if not np.isfinite(cond) or 1.0 / cond < np.finfo(np.float64).eps:
        raise SingularMatrixError(f"Matrix is computationally singular: rcond={1.0 / cond:.3g}")
