"""
Matrix inversion backends.

All backends take a square matrix and return its inverse as a new float64
NumPy array. Non-square input raises DimensionError and input that is
singular to working precision raises SingularMatrixError, whichever
backend is used.
"""

import numpy as np

from ..errors import SingularMatrixError
from . import lu_numpy
from .common import PIVOT_TOLERANCE, as_square_matrix, check_invertible

__all__ = [
    "METHODS",
    "PIVOT_TOLERANCE",
    "invert_matrix",
    "invert_numpy",
    "invert_torch",
]

METHODS = ("numpy", "lu", "torch", "torch_lu")


def invert_numpy(A):
    """Invert with numpy.linalg.inv (LAPACK getrf/getri)."""
    try:
        return np.linalg.inv(A)
    except np.linalg.LinAlgError as exc:
        raise SingularMatrixError("Singular matrix") from exc


def invert_torch(A, device="cpu", via_lu=False):
    # PyTorch is an optional extra, only imported when asked for.
    from .lu_torch import LUTorch

    lu = LUTorch(device=device)
    if via_lu:
        return lu.invert_via_lu(A)
    return lu.invert_direct(A)


def invert_matrix(A, method="numpy", device="cpu"):
    """
    Invert a square matrix using the specified method.

    Parameters:
        A (array_like): Square matrix to invert. Never modified.
        method (str): 'numpy', 'lu', 'torch', 'torch_lu'
        device (str): 'cpu' or 'cuda', used by the torch methods only

    Returns:
        A_inv (ndarray): Inverse of matrix A

    Raises:
        DimensionError: A is not a non-empty square matrix.
        SingularMatrixError: A is not invertible to working precision.
        ValueError: method is unknown.
    """
    if method not in METHODS:
        raise ValueError(f"Unknown method: {method}")
    A = as_square_matrix(A)
    check_invertible(A)

    if method == "numpy":
        return invert_numpy(A)
    elif method == "lu":
        return lu_numpy.invert_matrix(A)
    elif method == "torch":
        return invert_torch(A, device=device)
    else:
        return invert_torch(A, device=device, via_lu=True)
