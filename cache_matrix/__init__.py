"""
cache_matrix: memoized matrix inversion.

Usage::

    cell = CacheCell([[2.0, 0.0], [0.0, 2.0]])
    inverse = MemoizedInverse()
    inverse(cell)                       # computed
    inverse(cell)                       # returned from the cell
    cell.set_input([[1.0, 2.0], [3.0, 4.0]])
    inverse(cell)                       # recomputed for the new input
"""

from .cache_cell import CacheCell
from .errors import CacheMatrixError, DimensionError, SingularMatrixError
from .inversion import METHODS, invert_matrix
from .memoized import MemoizedInverse, cache_solve

__all__ = [
    "CacheCell",
    "CacheMatrixError",
    "DimensionError",
    "METHODS",
    "MemoizedInverse",
    "SingularMatrixError",
    "cache_solve",
    "invert_matrix",
]

__version__ = "0.1.0"
