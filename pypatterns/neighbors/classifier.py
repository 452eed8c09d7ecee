"""
KnnClassifier: stateful K-nearest-neighbor classifier.

Usage:
    knn = KnnClassifier()
    knn.init([1, 101, 5, 89, 108, 5, 115, 8], dim=2, labels=['A', 'A', 'B', 'B'])

    knn.classify([110, 6])[1]       # 1-NN -> 'B'
    knn.classify([110, 6])[3]       # 3-NN -> 'B'

    knn.classify([10, 202])
    knn.label_for(1)                # resolve the pending query later
    knn.neighbors(3).summary()      # full diagnostics

A classifier owns a private copy of its training set. A failed init()
raises and leaves the previous training set in place. An out-of-range k on
label_for()/[] returns None with an InvalidKWarning; neighbors() raises
InvalidKError instead.

Instances are not thread-safe: serialize init() and its queries when
sharing one instance between threads.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import Any
import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pypatterns.core.exceptions import (
    DimensionError,
    InvalidKError,
    InvalidKWarning,
    NotLoadedError,
    ValidationError,
)
from pypatterns.core.featureset import FeatureSet
from pypatterns.neighbors.design import KnnDesign, check_query
from pypatterns.neighbors.solution import KnnSolution
from pypatterns.neighbors.solvers import BackendChoice, _get_backend


class KnnClassifier:
    """K-nearest-neighbor classifier over one labeled training set."""

    def __init__(self, *, backend: BackendChoice = 'auto'):
        self._backend = _get_backend(backend)
        self._dataset: FeatureSet | None = None
        self._query: NDArray[np.floating[Any]] | None = None

    # === Load ===

    def init(
        self,
        data: ArrayLike,
        dim: int,
        labels: Sequence[Hashable],
        size: int | None = None,
    ) -> KnnClassifier:
        """
        Load a training set from a point-major buffer.

        Args:
            data: dim * size values (or an (N, dim) array)
            dim: Coordinates per point
            labels: One label per point
            size: Number of points, inferred if None

        Raises:
            ValidationError: Empty data, dim < 1, missing labels, non-finite values
            DimensionError: Lengths inconsistent with dim/size/labels
        """
        return self.load(FeatureSet.from_buffer(data, dim, labels=labels, size=size))

    def load(self, dataset: FeatureSet) -> KnnClassifier:
        """Load a prebuilt labeled FeatureSet."""
        if not dataset.is_labeled:
            raise ValidationError("KNN requires a labeled FeatureSet")
        self._dataset = dataset
        return self

    # === Query ===

    def classify(self, query: ArrayLike) -> KnnClassifier:
        """
        Set the pending query vector, replacing any previous one.

        Returns:
            self, so the neighbor count can follow: knn.classify(q)[3]

        Raises:
            DimensionError: If a training set is loaded and the query length differs
        """
        q = check_query(query)
        if self._dataset is not None and q.shape[0] != self._dataset.dim:
            raise DimensionError(
                f"query: has {q.shape[0]} values, expected dim={self._dataset.dim}"
            )
        self._query = q
        return self

    # === Resolve ===

    def label_for(self, k: int) -> Hashable | None:
        """
        Label of the pending query by k-nearest-neighbor vote.

        Returns:
            The predicted label, or None if k is outside [1, n_points]
            (an InvalidKWarning is emitted in that case)

        Raises:
            NotLoadedError: If no training set or no pending query
        """
        return self._label_for(k, stacklevel=3)

    def __getitem__(self, k: int) -> Hashable | None:
        return self._label_for(k, stacklevel=3)

    def neighbors(self, k: int) -> KnnSolution:
        """
        Full k-nearest-neighbor result for the pending query.

        Raises:
            NotLoadedError: If no training set or no pending query
            InvalidKError: If k is outside [1, n_points]
        """
        design = self._design()
        result = self._backend.solve(design, k)
        return KnnSolution(_result=result, _design=design)

    def _label_for(self, k: int, stacklevel: int) -> Hashable | None:
        design = self._design()
        try:
            design.check_k(k)
        except InvalidKError as e:
            warnings.warn(f"{e}; returning None", InvalidKWarning, stacklevel=stacklevel)
            return None
        return self._backend.solve(design, k).params.label

    def _design(self) -> KnnDesign:
        if self._dataset is None:
            raise NotLoadedError("KnnClassifier has no training set; call init() first")
        if self._query is None:
            raise NotLoadedError("KnnClassifier has no pending query; call classify() first")
        return KnnDesign.build(self._dataset, self._query)

    # === Properties ===

    @property
    def is_loaded(self) -> bool:
        return self._dataset is not None

    @property
    def dataset(self) -> FeatureSet | None:
        """The loaded training set."""
        return self._dataset

    @property
    def n_points(self) -> int:
        return 0 if self._dataset is None else self._dataset.n_points

    @property
    def dim(self) -> int | None:
        return None if self._dataset is None else self._dataset.dim

    @property
    def pending_query(self) -> NDArray[np.floating[Any]] | None:
        return self._query

    @property
    def backend_name(self) -> str:
        return self._backend.name

    def __repr__(self) -> str:
        if self._dataset is None:
            return "KnnClassifier(unloaded)"
        return f"KnnClassifier(n={self.n_points}, dim={self.dim})"
