"""
Checked linear solves.

A plain LAPACK solve only fails on exact singularity; a nearly singular
matrix silently yields garbage. solve_checked() tests rank and conditioning
first and raises SingularMatrixError with diagnostics instead.

Conditioning is judged after scaling A to unit diagonal, so a feature
measured in different units (1e3 vs 1e-3) does not make an invertible
scatter matrix look singular.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray
import scipy.linalg

from pypatterns.core.exceptions import SingularMatrixError
from pypatterns.core.compute.tolerances import SINGULAR_CONDITION_THRESHOLD
from pypatterns.core.compute.linalg.svd import numerical_rank


def condition_number(A: NDArray[np.floating[Any]]) -> tuple[float, int]:
    """
    2-norm condition number and numerical rank of a square matrix.

    Returns:
        (condition_number, rank); the condition number is inf when the
        smallest singular value is zero
    """
    s = scipy.linalg.svdvals(A)
    rank = numerical_rank(s, A.shape)
    if s.size == 0 or s[-1] == 0:
        return float('inf'), rank
    return float(s[0] / s[-1]), rank


def equilibrate(
    A: NDArray[np.floating[Any]],
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Scale a square matrix to unit diagonal.

    Returns:
        (S, scale) with S = diag(scale) A diag(scale) and
        scale = 1 / sqrt(|diag(A)|). A matrix with a zero on its diagonal
        is returned unscaled (scale of ones); it is singular anyway when
        positive semi-definite.
    """
    diag = np.abs(np.diag(A))
    if not np.all(diag > 0):
        return A, np.ones(A.shape[0])
    scale = 1.0 / np.sqrt(diag)
    return A * np.outer(scale, scale), scale


def solve_checked(
    A: NDArray[np.floating[Any]],
    B: NDArray[np.floating[Any]],
    matrix_name: str,
) -> NDArray[np.floating[Any]]:
    """
    Compute A^-1 B, refusing singular or ill-conditioned A.

    Rank and condition number are those of the equilibrated matrix
    (see equilibrate()), and the solve runs on it:
    A^-1 B = diag(scale) S^-1 diag(scale) B.

    Args:
        A: Square coefficient matrix (n x n)
        B: Right-hand side (n x m)
        matrix_name: Name used in the error and its attributes

    Raises:
        SingularMatrixError: If A is rank-deficient or its equilibrated
            condition number exceeds SINGULAR_CONDITION_THRESHOLD
    """
    n = A.shape[0]
    if not np.all(np.isfinite(A)):
        raise SingularMatrixError(
            f"{matrix_name} contains non-finite entries and cannot be inverted",
            matrix_name=matrix_name,
            expected_rank=n,
        )

    S, scale = equilibrate(A)
    cond, rank = condition_number(S)
    if rank < n or cond > SINGULAR_CONDITION_THRESHOLD:
        raise SingularMatrixError(
            f"{matrix_name} is singular: rank={rank}, expected={n}, "
            f"condition number={cond:.3g} (threshold {SINGULAR_CONDITION_THRESHOLD:.0e})",
            matrix_name=matrix_name,
            condition_number=cond,
            rank=rank,
            expected_rank=n,
        )

    try:
        rows = scale if B.ndim == 1 else scale[:, np.newaxis]
        return rows * scipy.linalg.solve(S, rows * B)
    except np.linalg.LinAlgError as e:
        raise SingularMatrixError(
            f"{matrix_name} is singular: {e}",
            matrix_name=matrix_name,
            condition_number=cond,
            rank=rank,
            expected_rank=n,
        ) from e
