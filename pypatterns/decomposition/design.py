"""
Designs for dimensionality reduction.

PcaDesign stores the centered D x N matrix; LdaDesign stores one D x n_c
matrix per class. Both are built once per load and reused by every
resolve, which is why re-querying with a different K never reloads.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pypatterns.core.exceptions import ValidationError
from pypatterns.core.featureset import FeatureSet


def _readonly(array: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    array.flags.writeable = False
    return array


@dataclass(frozen=True)
class PcaDesign:
    """
    Column-centered data for PCA.

    Points are columns: centered[:, j] = x_j - means.
    """
    _centered: NDArray[np.floating[Any]]
    _means: NDArray[np.floating[Any]]

    @classmethod
    def build(cls, dataset: FeatureSet) -> PcaDesign:
        """Center a FeatureSet. Labels, if any, are ignored."""
        X = dataset.points.T
        means = X.mean(axis=1)
        centered = X - means[:, np.newaxis]
        return cls(_centered=_readonly(centered), _means=_readonly(means))

    @property
    def centered(self) -> NDArray[np.floating[Any]]:
        """Centered data (d x n)."""
        return self._centered

    @property
    def means(self) -> NDArray[np.floating[Any]]:
        """Per-coordinate means removed during centering (d,)."""
        return self._means

    @property
    def d(self) -> int:
        return self._centered.shape[0]

    @property
    def n(self) -> int:
        return self._centered.shape[1]

    def __repr__(self) -> str:
        return f"PcaDesign(d={self.d}, n={self.n})"


@dataclass(frozen=True)
class LdaDesign:
    """
    Per-class data for LDA.

    Classes are kept in order of first appearance of their label; each
    group holds that class's points as columns (d x n_c), uncentered.
    """
    _classes: tuple[Hashable, ...]
    _groups: tuple[NDArray[np.floating[Any]], ...]

    @classmethod
    def build(cls, dataset: FeatureSet) -> LdaDesign:
        """
        Group a labeled FeatureSet by class.

        Raises:
            ValidationError: If the FeatureSet is unlabeled
        """
        if not dataset.is_labeled:
            raise ValidationError("LDA requires a labeled FeatureSet")
        grouped = dataset.group_by_label()
        return cls(
            _classes=tuple(grouped),
            _groups=tuple(_readonly(np.ascontiguousarray(pts.T)) for pts in grouped.values()),
        )

    @property
    def classes(self) -> tuple[Hashable, ...]:
        return self._classes

    @property
    def groups(self) -> tuple[NDArray[np.floating[Any]], ...]:
        """Class matrices (d x n_c), same order as classes."""
        return self._groups

    @property
    def class_sizes(self) -> tuple[int, ...]:
        return tuple(g.shape[1] for g in self._groups)

    @property
    def n_classes(self) -> int:
        return len(self._classes)

    @property
    def d(self) -> int:
        return self._groups[0].shape[0]

    @property
    def n(self) -> int:
        return sum(self.class_sizes)

    def __repr__(self) -> str:
        return f"LdaDesign(d={self.d}, n={self.n}, classes={self.n_classes})"
