"""
Singular value decomposition and direction sign conventions.

SVD and eigen-decomposition only determine a direction up to its sign.
normalize_signs() fixes one representative per direction so repeated runs
on the same input give identical projections.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray
import scipy.linalg

from pypatterns.core.exceptions import NumericalError
from pypatterns.core.compute.tolerances import EPSILON_64


@dataclass(frozen=True)
class SVDResult:
    """
    Left singular vectors of a D x N matrix.

    Attributes:
        U: Directions as columns (D x D), sign-normalized, ordered by
           descending singular value
        singular_values: Singular values (D,), zero-padded when N < D
        rank: Numerical rank
    """
    U: NDArray[np.floating[Any]]
    singular_values: NDArray[np.floating[Any]]
    rank: int


def normalize_signs(vectors: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    Flip each column so its largest-magnitude entry is positive.

    On exact magnitude ties the first such entry decides. All-zero columns
    are left untouched.

    Args:
        vectors: Directions as columns (D x k)

    Returns:
        New array with normalized column signs
    """
    if vectors.size == 0:
        return vectors.copy()
    pivots = np.argmax(np.abs(vectors), axis=0)
    signs = np.sign(vectors[pivots, np.arange(vectors.shape[1])])
    signs[signs == 0] = 1.0
    return vectors * signs


def numerical_rank(singular_values: NDArray[np.floating[Any]], shape: tuple[int, ...]) -> int:
    """Rank from singular values, LAPACK-style tolerance max(shape) * eps * s_max."""
    if singular_values.size == 0 or singular_values[0] <= 0:
        return 0
    tol = max(shape) * EPSILON_64 * singular_values[0]
    return int(np.sum(singular_values > tol))


def left_singular_vectors(X: NDArray[np.floating[Any]]) -> SVDResult:
    """
    Thin SVD of X (D x N) returning a full set of D left directions.

    When N < D the thin factor only spans N directions; the remaining
    D - N are an orthonormal basis of the orthogonal complement (singular
    value zero), so callers can always take any k <= D directions.

    Raises:
        NumericalError: If LAPACK's SVD fails to converge
    """
    d = X.shape[0]
    try:
        U, s, _ = scipy.linalg.svd(X, full_matrices=False)
    except np.linalg.LinAlgError as e:
        raise NumericalError(f"SVD of {X.shape[0]}x{X.shape[1]} matrix failed: {e}") from e

    if U.shape[1] < d:
        complement = scipy.linalg.null_space(U.T)
        U = np.hstack([U, complement])
        s = np.concatenate([s, np.zeros(d - s.shape[0])])

    return SVDResult(
        U=normalize_signs(U),
        singular_values=s,
        rank=numerical_rank(s, X.shape),
    )
