"""
LdaReducer: stateful linear discriminant analysis.

Usage:
    reducer = LdaReducer().reduce(data, dim=2, labels=labels)
    flat = reducer[1]              # 1 * n values, grouped by class
    full = reducer.solve(1)        # ProjectionSolution, see projected_labels

Output points are grouped by class, classes in order of first appearance
of their label, points within a class in input order.

reduce() with invalid arguments is a no-op with a LoadSkippedWarning, like
PcaReducer. Numerical failures surface at resolve time as
DegenerateInputError (fewer than two classes) or SingularMatrixError.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import Any
import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pypatterns.core.exceptions import LoadSkippedWarning, NotLoadedError, ValidationError
from pypatterns.core.featureset import FeatureSet
from pypatterns.decomposition.design import LdaDesign
from pypatterns.decomposition.solution import ProjectionSolution
from pypatterns.decomposition.solvers import BackendChoice, _get_lda_backend


class LdaReducer:
    """Linear discriminant reducer over one labeled dataset."""

    def __init__(self, *, backend: BackendChoice = 'auto'):
        self._backend = _get_lda_backend(backend)
        self._design: LdaDesign | None = None

    def reduce(
        self,
        data: ArrayLike,
        dim: int,
        labels: Sequence[Hashable],
        size: int | None = None,
    ) -> LdaReducer:
        """
        Load a point-major buffer and group it by label.

        Args:
            data: dim * size values (or an (N, dim) array)
            dim: Coordinates per point
            labels: One label per point
            size: Number of points, inferred if None

        Returns:
            self
        """
        try:
            design = LdaDesign.build(
                FeatureSet.from_buffer(data, dim, labels=labels, size=size)
            )
        except ValidationError as e:
            warnings.warn(
                f"LdaReducer.reduce() ignored, previous data kept: {e}",
                LoadSkippedWarning,
                stacklevel=2,
            )
            return self
        self._design = design
        return self

    def load(self, dataset: FeatureSet) -> LdaReducer:
        """
        Load a prebuilt labeled FeatureSet.

        Raises:
            ValidationError: If the FeatureSet is unlabeled
        """
        self._design = LdaDesign.build(dataset)
        return self

    def solve(self, k: int) -> ProjectionSolution:
        """
        Project every class onto the top-k discriminant directions.

        Raises:
            NotLoadedError: If nothing has been loaded
            DegenerateInputError: Fewer than two classes
            SingularMatrixError: Within-class scatter is singular
        """
        if self._design is None:
            raise NotLoadedError("LdaReducer has no data; call reduce() first")
        return ProjectionSolution(_result=self._backend.solve(self._design, k))

    def project(self, k: int) -> NDArray[np.floating[Any]]:
        """Flat point-major projection, k * n values."""
        return self.solve(k).values

    def __getitem__(self, k: int) -> NDArray[np.floating[Any]]:
        return self.project(k)

    # === Properties ===

    @property
    def is_loaded(self) -> bool:
        return self._design is not None

    @property
    def n_observations(self) -> int:
        return 0 if self._design is None else self._design.n

    @property
    def dim(self) -> int | None:
        return None if self._design is None else self._design.d

    @property
    def classes(self) -> tuple[Hashable, ...]:
        return () if self._design is None else self._design.classes

    @property
    def class_sizes(self) -> tuple[int, ...]:
        return () if self._design is None else self._design.class_sizes

    @property
    def backend_name(self) -> str:
        return self._backend.name

    def __repr__(self) -> str:
        if self._design is None:
            return "LdaReducer(unloaded)"
        d = self._design
        return f"LdaReducer(d={d.d}, n={d.n}, classes={d.n_classes})"
