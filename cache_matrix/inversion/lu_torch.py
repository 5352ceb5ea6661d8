import logging

import numpy as np
import torch
from typing import Tuple

from ..errors import SingularMatrixError
from .common import PIVOT_TOLERANCE

logger = logging.getLogger(__name__)


class LUTorch:
    """
    Matrix inversion using PyTorch operations, on GPU when available.

    Inputs and outputs are NumPy arrays; tensors only live inside the
    class so the cache never holds device memory.
    """

    def __init__(self, device: str = 'cpu'):
        """
        Args:
            device: 'cuda' for GPU, 'cpu' for CPU
        """
        if device == 'cuda' and not torch.cuda.is_available():
            logger.warning("CUDA not available, falling back to CPU")
            device = 'cpu'
        self.device = torch.device(device)

    def to_tensor(self, A: np.ndarray) -> torch.Tensor:
        # writable copy; CacheCell inputs are read-only
        return torch.from_numpy(np.array(A, dtype=np.float64)).to(self.device)

    def lu_decomposition(self, A: torch.Tensor) -> Tuple[torch.Tensor, torch.Tensor, torch.Tensor]:
        """
        Compute LU decomposition with partial pivoting: A = PLU

        Returns:
            P: Permutation matrix [n, n]
            L: Lower triangular with ones on diagonal [n, n]
            U: Upper triangular [n, n]
        """
        P, L, U = torch.linalg.lu(A)
        if torch.any(torch.abs(torch.diagonal(U)) < PIVOT_TOLERANCE):
            raise SingularMatrixError("Singular matrix")
        return P, L, U

    def invert_triangular(self, T: torch.Tensor, lower: bool = True) -> torch.Tensor:
        # solve_triangular calls cuBLAS trsm on GPU
        n = T.shape[0]
        I = torch.eye(n, dtype=T.dtype, device=self.device)
        return torch.linalg.solve_triangular(T, I, upper=not lower)

    def invert_via_lu(self, A: np.ndarray) -> np.ndarray:
        """Invert matrix using LU decomposition: A^(-1) = U^(-1) @ L^(-1) @ P^T"""
        P, L, U = self.lu_decomposition(self.to_tensor(A))

        L_inv = self.invert_triangular(L, lower=True)
        U_inv = self.invert_triangular(U, lower=False)

        A_inv = U_inv @ L_inv @ P.T
        return A_inv.cpu().numpy()

    def invert_direct(self, A: np.ndarray) -> np.ndarray:
        """Direct inversion using torch.linalg.inv (LU factorization + trsm)."""
        try:
            A_inv = torch.linalg.inv(self.to_tensor(A))
        except torch.linalg.LinAlgError as exc:
            raise SingularMatrixError("Singular matrix") from exc
        return A_inv.cpu().numpy()
