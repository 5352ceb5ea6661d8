"""
Exception hierarchy for cache_matrix.

Both concrete errors also derive from ValueError, which is what the
inversion routines raised before they had their own types.
"""

from typing import Optional


class CacheMatrixError(Exception):
    """Base exception for all cache_matrix errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DimensionError(CacheMatrixError, ValueError):
    """Raised when a matrix is not 2D, not square, or empty."""

    def __init__(self, message: str, shape: Optional[tuple] = None):
        super().__init__(message)
        self.shape = shape

    def __str__(self) -> str:
        if self.shape is not None:
            return f"{self.message} (shape={self.shape})"
        return self.message


class SingularMatrixError(CacheMatrixError, ValueError):
    """Raised when a matrix has no inverse."""
