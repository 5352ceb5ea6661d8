import numpy as np
import pytest

from cache_matrix import DimensionError, SingularMatrixError, invert_matrix
from cache_matrix.errors import CacheMatrixError
from cache_matrix.inversion import lu_numpy

NUMPY_METHODS = ["numpy", "lu"]


@pytest.mark.parametrize("method", NUMPY_METHODS)
def test_matches_numpy_inverse(method):
    np.random.seed(0)
    A = np.random.rand(5, 5) + 5*np.eye(5)

    A_inv = invert_matrix(A, method=method)

    assert np.max(np.abs(np.linalg.inv(A) - A_inv)) < 1e-10


@pytest.mark.parametrize("method", NUMPY_METHODS)
def test_needs_pivoting(method):
    A = [[0.0, 2.0], [3.0, 0.0]]
    np.testing.assert_allclose(invert_matrix(A, method=method), [[0.0, 1/3], [0.5, 0.0]])


@pytest.mark.parametrize("method", NUMPY_METHODS)
def test_singular_matrix(method):
    with pytest.raises(SingularMatrixError):
        invert_matrix([[1.0, 2.0], [2.0, 4.0]], method=method)
    with pytest.raises(SingularMatrixError):
        invert_matrix(np.zeros((3, 3)), method=method)


@pytest.mark.parametrize("A", [
    np.ones((2, 3)),
    np.ones(4),
    np.ones((2, 2, 2)),
    np.zeros((0, 0)),
])
def test_bad_dimensions(A):
    with pytest.raises(DimensionError) as excinfo:
        invert_matrix(A)
    assert excinfo.value.shape == A.shape
    assert isinstance(excinfo.value, CacheMatrixError)


def test_dimension_error_message_includes_shape():
    with pytest.raises(DimensionError, match=r"shape=\(2, 3\)"):
        invert_matrix(np.ones((2, 3)))


def test_unknown_method():
    with pytest.raises(ValueError, match="Unknown method"):
        invert_matrix(np.eye(2), method="cholesky")


def test_input_is_not_modified():
    A = np.array([[4.0, 3.0], [6.0, 3.0]])
    before = A.copy()
    for method in NUMPY_METHODS:
        invert_matrix(A, method=method)
    np.testing.assert_array_equal(A, before)


def test_read_only_input():
    A = np.array([[4.0, 7.0], [2.0, 6.0]])
    A.flags.writeable = False
    np.testing.assert_allclose(invert_matrix(A, method="lu"), np.linalg.inv(A))


def test_numpy_lu_factors_reconstruct_input():
    A = np.array([
        [4.0, 3.0, 2.0],
        [3.0, 2.0, 1.0],
        [2.0, 1.0, 3.0]
    ])
    P, L, U = lu_numpy.lu_decomposition(A)
    np.testing.assert_allclose(L @ U, P @ A)
    np.testing.assert_allclose(np.tril(L), L)
    np.testing.assert_allclose(np.triu(U), U)


@pytest.mark.parametrize("method", NUMPY_METHODS)
def test_rank_deficient_matrix(method):
    rng = np.random.RandomState(0)
    A = rng.rand(3, 2) @ rng.rand(2, 3)
    with pytest.raises(SingularMatrixError, match="computationally singular"):
        invert_matrix(A, method=method)


def test_ill_conditioned_but_invertible_matrix():
    A = np.array([[1.0, 1.0], [1.0, 1.0 + 1e-8]])
    A_inv = invert_matrix(A)
    np.testing.assert_allclose(A @ A_inv, np.eye(2), atol=1e-5)


def test_dimension_error_without_shape():
    err = DimensionError("Matrix must be square (n x n)")
    assert err.shape is None
    assert str(err) == "Matrix must be square (n x n)"
