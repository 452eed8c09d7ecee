"""
General (non-symmetric) eigen-decomposition with sorted real output.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray
import scipy.linalg

from pypatterns.core.exceptions import NumericalError
from pypatterns.core.compute.linalg.svd import normalize_signs


@dataclass(frozen=True)
class EigenResult:
    """
    Eigenpairs of a real square matrix, real parts only.

    Attributes:
        eigenvalues: Real parts, descending (n,)
        eigenvectors: Matching unit-norm, sign-normalized columns (n x n)
        max_imaginary: Largest discarded imaginary part among the eigenvalues
    """
    eigenvalues: NDArray[np.floating[Any]]
    eigenvectors: NDArray[np.floating[Any]]
    max_imaginary: float


def eig_sorted(A: NDArray[np.floating[Any]]) -> EigenResult:
    """
    Eigen-decompose a general real matrix and order pairs by eigenvalue.

    The sort is stable, so equal eigenvalues keep the solver's order and the
    result is deterministic for a fixed input.

    Raises:
        NumericalError: If the eigensolver fails to converge
    """
    try:
        w, v = scipy.linalg.eig(A)
    except np.linalg.LinAlgError as e:
        raise NumericalError(f"Eigen-decomposition of {A.shape[0]}x{A.shape[1]} matrix failed: {e}") from e

    values = w.real
    vectors = v.real

    order = np.argsort(-values, kind='stable')
    values = values[order]
    vectors = vectors[:, order]

    norms = np.linalg.norm(vectors, axis=0)
    norms[norms == 0] = 1.0
    vectors = normalize_signs(vectors / norms)

    max_imag = float(np.max(np.abs(w.imag))) if w.size else 0.0
    return EigenResult(eigenvalues=values, eigenvectors=vectors, max_imaginary=max_imag)
