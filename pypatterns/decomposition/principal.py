"""
PcaReducer: stateful principal component analysis.

Usage:
    reducer = PcaReducer().reduce(data, dim=3, size=100)
    flat = reducer[2]              # 2 * 100 values, point-major
    full = reducer.solve(2)        # ProjectionSolution with diagnostics

reduce() with invalid arguments is a no-op: the previous dataset (if any)
stays loaded and a LoadSkippedWarning is emitted. Check is_loaded before
assuming a load happened.
"""

from __future__ import annotations

from typing import Any
import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pypatterns.core.exceptions import LoadSkippedWarning, NotLoadedError, ValidationError
from pypatterns.core.featureset import FeatureSet
from pypatterns.decomposition.design import PcaDesign
from pypatterns.decomposition.solution import ProjectionSolution
from pypatterns.decomposition.solvers import BackendChoice, _get_pca_backend


class PcaReducer:
    """Principal component reducer over one unlabeled dataset."""

    def __init__(self, *, backend: BackendChoice = 'auto'):
        self._backend = _get_pca_backend(backend)
        self._design: PcaDesign | None = None

    def reduce(self, data: ArrayLike, dim: int, size: int | None = None) -> PcaReducer:
        """
        Load and center a point-major buffer.

        Args:
            data: dim * size values (or an (N, dim) array)
            dim: Coordinates per point
            size: Number of points, inferred if None

        Returns:
            self, so a projection can follow: reducer.reduce(...)[2]
        """
        try:
            dataset = FeatureSet.from_buffer(data, dim, size=size)
        except ValidationError as e:
            warnings.warn(
                f"PcaReducer.reduce() ignored, previous data kept: {e}",
                LoadSkippedWarning,
                stacklevel=2,
            )
            return self
        return self.load(dataset)

    def load(self, dataset: FeatureSet) -> PcaReducer:
        """Load and center a prebuilt FeatureSet (labels ignored)."""
        self._design = PcaDesign.build(dataset)
        return self

    def solve(self, k: int) -> ProjectionSolution:
        """
        Project the loaded data onto its top-k principal directions.

        Raises:
            NotLoadedError: If nothing has been loaded
        """
        if self._design is None:
            raise NotLoadedError("PcaReducer has no data; call reduce() first")
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
    def centered(self) -> NDArray[np.floating[Any]] | None:
        """Copy of the stored centered matrix (dim x n)."""
        return None if self._design is None else self._design.centered.copy()

    @property
    def means(self) -> NDArray[np.floating[Any]] | None:
        return None if self._design is None else self._design.means.copy()

    @property
    def backend_name(self) -> str:
        return self._backend.name

    def __repr__(self) -> str:
        if self._design is None:
            return "PcaReducer(unloaded)"
        return f"PcaReducer(d={self._design.d}, n={self._design.n})"
