"""
Solver dispatch for dimensionality reduction.

This module provides pca() and lda() (one-shot public API) and backend
selection shared with PcaReducer and LdaReducer.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import Literal
from numpy.typing import ArrayLike

from pypatterns.core.exceptions import ValidationError
from pypatterns.core.featureset import FeatureSet
from pypatterns.decomposition.design import PcaDesign, LdaDesign
from pypatterns.decomposition.solution import ProjectionSolution
from pypatterns.decomposition.backends.cpu import CPUSVDBackend, CPUEigenBackend


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu']


def pca(
    X: ArrayLike,
    k: int,
    *,
    backend: BackendChoice = 'auto',
) -> ProjectionSolution:
    """
    Principal component projection of X onto k directions.

    Args:
        X: Data matrix (n x d), one point per row
        k: Target dimensionality. Values <= 0 or >= d are clamped to d - 1.
        backend: 'auto' or 'cpu'

    Returns:
        ProjectionSolution; values holds k * n numbers, point-major

    Raises:
        ValidationError: If X is empty, non-numeric or non-finite

    Example:
        >>> from pypatterns import pca
        >>> result = pca(X, k=2)
        >>> result.as_matrix().shape
        (100, 2)
    """
    design = PcaDesign.build(FeatureSet.from_arrays(X))
    result = _get_pca_backend(backend).solve(design, k)
    return ProjectionSolution(_result=result)


def lda(
    X: ArrayLike,
    labels: Sequence[Hashable],
    k: int,
    *,
    backend: BackendChoice = 'auto',
) -> ProjectionSolution:
    """
    Linear discriminant projection of labeled X onto k directions.

    Args:
        X: Data matrix (n x d), one point per row
        labels: n hashable class labels
        k: Target dimensionality, clamped like pca()
        backend: 'auto' or 'cpu'

    Returns:
        ProjectionSolution; values holds k * n numbers, grouped by class in
        order of first appearance (see projected_labels)

    Raises:
        ValidationError: If inputs are invalid
        DegenerateInputError: Fewer than two classes
        SingularMatrixError: Within-class scatter is singular
    """
    design = LdaDesign.build(FeatureSet.from_arrays(X, labels=labels))
    result = _get_lda_backend(backend).solve(design, k)
    return ProjectionSolution(_result=result)


def _get_pca_backend(choice: BackendChoice) -> CPUSVDBackend:
    """Select the PCA backend."""
    if choice in ('auto', 'cpu'):
        return CPUSVDBackend()
    raise ValidationError(f"Unknown backend: {choice!r}")


def _get_lda_backend(choice: BackendChoice) -> CPUEigenBackend:
    """Select the LDA backend."""
    if choice in ('auto', 'cpu'):
        return CPUEigenBackend()
    raise ValidationError(f"Unknown backend: {choice!r}")
