"""
KnnDesign: training set plus one query vector.

Built fresh for every resolve from the classifier's stored FeatureSet and
its pending query. Building is cheap: the FeatureSet is already validated
and read-only, so nothing is copied.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
import numbers
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pypatterns.core.exceptions import ValidationError, DimensionError, InvalidKError
from pypatterns.core.featureset import FeatureSet
from pypatterns.core.validation import check_array, check_1d, check_finite


@dataclass(frozen=True)
class KnnDesign:
    """
    Validated KNN problem: labeled training points and a query.

    Construction:
        KnnDesign.build(featureset, query)
    """
    _points: NDArray[np.floating[Any]]
    _labels: tuple[Hashable, ...]
    _query: NDArray[np.floating[Any]]

    @classmethod
    def build(cls, dataset: FeatureSet, query: ArrayLike) -> KnnDesign:
        """
        Pair a labeled FeatureSet with a query vector.

        Raises:
            ValidationError: If the dataset is unlabeled or the query is not finite
            DimensionError: If the query length differs from the dataset dim
        """
        if not dataset.is_labeled:
            raise ValidationError("KNN requires a labeled FeatureSet")
        q = check_query(query)
        if q.shape[0] != dataset.dim:
            raise DimensionError(
                f"query: has {q.shape[0]} values, expected dim={dataset.dim}"
            )
        return cls(_points=dataset.points, _labels=dataset.labels, _query=q)

    @property
    def points(self) -> NDArray[np.floating[Any]]:
        """Training points (n x p)."""
        return self._points

    @property
    def labels(self) -> tuple[Hashable, ...]:
        return self._labels

    @property
    def query(self) -> NDArray[np.floating[Any]]:
        return self._query

    @property
    def n(self) -> int:
        """Number of training points."""
        return self._points.shape[0]

    @property
    def p(self) -> int:
        """Feature dimension."""
        return self._points.shape[1]

    def check_k(self, k: Any) -> int:
        """
        Validate a neighbor count against the training set size.

        Raises:
            ValidationError: If k is not an integer
            InvalidKError: If k is outside [1, n]
        """
        return check_k(k, self.n)

    def __repr__(self) -> str:
        return f"KnnDesign(n={self.n}, p={self.p})"


def check_query(query: ArrayLike) -> NDArray[np.floating[Any]]:
    """Convert a query to a private finite 1D float64 copy."""
    q = check_array(query, 'query')
    check_1d(q, 'query')
    if q.shape[0] == 0:
        raise ValidationError("query: is empty")
    check_finite(q, 'query')
    q = q.copy()
    q.flags.writeable = False
    return q


def check_k(k: Any, n_points: int) -> int:
    """
    Validate a neighbor count against n_points.

    Raises:
        ValidationError: If k is not an integer
        InvalidKError: If k is outside [1, n_points]
    """
    if isinstance(k, bool) or not isinstance(k, numbers.Integral):
        raise ValidationError(f"k: expected an integer, got {type(k).__name__} {k!r}")
    if not 1 <= k <= n_points:
        raise InvalidKError(
            f"k={k} is outside the valid range [1, {n_points}]",
            k=int(k),
            n_points=n_points,
        )
    return int(k)
