"""
Solver dispatch for KNN.

This module provides knn_classify() (one-shot public API) and backend
selection shared with KnnClassifier.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import Literal
from numpy.typing import ArrayLike

from pypatterns.core.exceptions import ValidationError
from pypatterns.core.featureset import FeatureSet
from pypatterns.neighbors.design import KnnDesign
from pypatterns.neighbors.solution import KnnSolution
from pypatterns.neighbors.backends.cpu import CPUBruteForceBackend


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu', 'cpu_brute']


def knn_classify(
    X: ArrayLike,
    labels: Sequence[Hashable],
    query: ArrayLike,
    k: int,
    *,
    backend: BackendChoice = 'auto',
) -> KnnSolution:
    """
    Classify one query vector by its k nearest neighbors.

    Args:
        X: Training points (n x p)
        labels: n hashable labels
        query: Vector of length p
        k: Number of neighbors, 1 <= k <= n
        backend: 'auto', 'cpu' or 'cpu_brute' (all the same CPU backend)

    Returns:
        KnnSolution with the predicted label and neighbor diagnostics

    Raises:
        ValidationError: If inputs are invalid
        DimensionError: If query length differs from p
        InvalidKError: If k is outside [1, n]

    Example:
        >>> from pypatterns import knn_classify
        >>> X = [[1, 101], [5, 89], [108, 5], [115, 8]]
        >>> knn_classify(X, ['A', 'A', 'B', 'B'], [110, 6], k=3).label
        'B'
    """
    # === Construct Design ===
    dataset = FeatureSet.from_arrays(X, labels=labels)
    design = KnnDesign.build(dataset, query)

    # === Solve ===
    result = _get_backend(backend).solve(design, k)

    return KnnSolution(_result=result, _design=design)


def _get_backend(choice: BackendChoice) -> CPUBruteForceBackend:
    """
    Select and instantiate the backend.

    Raises:
        ValidationError: If unknown backend specified
    """
    if choice in ('auto', 'cpu', 'cpu_brute'):
        return CPUBruteForceBackend()
    raise ValidationError(f"Unknown backend: {choice!r}")
