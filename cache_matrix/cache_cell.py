"""
Single-slot cache cell.

A CacheCell owns one input matrix and at most one cached result derived
from it. Replacing the input always empties the slot, so a stored result
can only ever belong to the input that is current.
"""

from typing import Optional

import numpy as np


def _owned_copy(matrix) -> np.ndarray:
    """Copy matrix into a private read-only array."""
    owned = np.array(matrix, copy=True)
    owned.flags.writeable = False
    return owned


class CacheCell:
    """Holds a matrix and, once computed, its cached inverse."""

    def __init__(self, matrix) -> None:
        """
        Args:
            matrix: Initial input, any array_like. The cached slot starts empty.
        """
        self._input = _owned_copy(matrix)
        self._cached: Optional[np.ndarray] = None

    def set_input(self, matrix) -> None:
        """
        Replace the input and invalidate the cached result.

        The slot is cleared even when matrix equals the current input.
        """
        self._input = _owned_copy(matrix)
        self._cached = None

    def get_input(self) -> np.ndarray:
        return self._input

    def set_cached(self, result) -> None:
        """
        Store result as the cached value for the current input.

        No check is made that result is actually the inverse of the input.
        """
        self._cached = _owned_copy(result)

    def get_cached(self) -> Optional[np.ndarray]:
        """Return the cached result, or None if the slot is empty."""
        return self._cached

    @property
    def is_cached(self) -> bool:
        return self._cached is not None

    def __repr__(self) -> str:
        state = "VALID" if self.is_cached else "EMPTY"
        return f"CacheCell(shape={self._input.shape}, cached={state})"
