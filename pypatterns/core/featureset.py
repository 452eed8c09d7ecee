"""
FeatureSet: the shared dataset container for PyPatterns.

A FeatureSet is N fixed-dimension feature vectors, optionally tagged with
one hashable label each. It doesn't know which component consumes it;
KNN and LDA require labels, PCA ignores them.

Usage:
    from pypatterns import FeatureSet

    fs = FeatureSet.from_buffer([1, 101, 5, 89], dim=2, labels=['A', 'A'])
    fs = FeatureSet.from_arrays(X, labels=y)
    fs = FeatureSet.from_dataframe(df, label='species')

    fs.points   # (N, D) float64, read-only
    fs.labels   # tuple of N labels, or None

Buffer layout (point-major):

    /-------------- size ---------------\\
    +---------+---------+---------+------
    | point 0 | point 1 | point 2 | ...
    +---------+---------+---------+------
     \\- dim -/
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pypatterns.core.exceptions import ValidationError, DimensionError
from pypatterns.core.validation import (
    check_array,
    check_finite,
    check_positive_int,
    check_consistent_length,
    check_labels,
)

if TYPE_CHECKING:
    import pandas as pd


@dataclass(frozen=True)
class FeatureSet:
    """
    Immutable N x D feature matrix with optional labels.

    Construct via factory classmethods, not directly. Every factory copies
    the caller's data, so later mutation of the caller's buffer never leaks
    into a loaded component.
    """
    _points: NDArray[np.floating[Any]]
    _labels: tuple[Hashable, ...] | None
    _columns: tuple[str, ...] | None = None

    # === Factory Methods ===

    @classmethod
    def from_buffer(
        cls,
        data: ArrayLike,
        dim: int,
        labels: Sequence[Hashable] | None = None,
        size: int | None = None,
    ) -> FeatureSet:
        """
        Construct from a point-major buffer.

        Args:
            data: Flat buffer of dim * size values, or an (N, D) array
            dim: Number of coordinates per point
            labels: Optional sequence of N labels
            size: Number of points. Inferred from the buffer if None.

        Raises:
            ValidationError: Empty or non-numeric data, dim < 1, size < 1
            DimensionError: Buffer length inconsistent with dim/size, or
                labels length differs from the number of points
        """
        dim = check_positive_int(dim, 'dim')
        arr = check_array(data, 'data')

        if arr.ndim == 2:
            if arr.shape[1] != dim:
                raise DimensionError(
                    f"data: 2D input has {arr.shape[1]} columns, expected dim={dim}"
                )
            points = arr
        elif arr.ndim == 1:
            if arr.size % dim != 0:
                raise DimensionError(
                    f"data: length {arr.size} is not a multiple of dim={dim}"
                )
            points = arr.reshape(-1, dim)
        else:
            raise DimensionError(
                f"data: expected flat buffer or 2D array, got {arr.ndim}D with shape {arr.shape}"
            )

        if size is not None:
            size = check_positive_int(size, 'size')
            if points.shape[0] != size:
                raise DimensionError(
                    f"data: holds {points.shape[0]} points of dim={dim}, expected size={size}"
                )

        return cls._build(points, labels)

    @classmethod
    def from_arrays(
        cls,
        X: ArrayLike,
        labels: Sequence[Hashable] | None = None,
    ) -> FeatureSet:
        """Construct from an (N, D) matrix. 1D input is one feature per point."""
        arr = check_array(X, 'X')
        if arr.ndim == 1:
            arr = arr.reshape(-1, 1)
        if arr.ndim != 2:
            raise DimensionError(
                f"X: expected 2D array, got {arr.ndim}D with shape {arr.shape}"
            )
        return cls._build(arr, labels)

    @classmethod
    def from_dataframe(
        cls,
        df: 'pd.DataFrame',
        *,
        label: str | None = None,
        columns: list[str] | None = None,
    ) -> FeatureSet:
        """
        Construct from a pandas DataFrame.

        Args:
            df: Source frame
            label: Column holding class labels (excluded from features)
            columns: Feature columns. Defaults to every column except label.
        """
        if columns is None:
            columns = [c for c in df.columns if c != label]
        if not columns:
            raise ValidationError("DataFrame has no feature columns")

        X = df[columns].to_numpy(dtype=np.float64)
        labels = df[label].to_numpy() if label is not None else None
        fs = cls.from_arrays(X, labels=labels)
        return cls(
            _points=fs._points,
            _labels=fs._labels,
            _columns=tuple(str(c) for c in columns),
        )

    @classmethod
    def _build(
        cls,
        points: NDArray[np.floating[Any]],
        labels: Sequence[Hashable] | None,
    ) -> FeatureSet:
        """Internal builder with validation."""
        n, d = points.shape
        if n < 1:
            raise ValidationError(f"data: need at least 1 point, got {n}")
        if d < 1:
            raise ValidationError(f"data: need at least 1 coordinate, got {d}")
        check_finite(points, 'data')

        label_tuple = None
        if labels is not None:
            label_tuple = check_labels(labels, 'labels')
            check_consistent_length(points, label_tuple, names=('data', 'labels'))

        owned = np.array(points, dtype=np.float64, copy=True)
        owned.flags.writeable = False
        return cls(_points=owned, _labels=label_tuple)

    # === Properties ===

    @property
    def points(self) -> NDArray[np.floating[Any]]:
        """Feature matrix (N x D), read-only."""
        return self._points

    @property
    def labels(self) -> tuple[Hashable, ...] | None:
        """Per-point labels, or None for an unlabeled set."""
        return self._labels

    @property
    def columns(self) -> tuple[str, ...] | None:
        """Feature names, when built from a DataFrame."""
        return self._columns

    @property
    def n_points(self) -> int:
        return self._points.shape[0]

    @property
    def dim(self) -> int:
        return self._points.shape[1]

    @property
    def is_labeled(self) -> bool:
        return self._labels is not None

    def classes(self) -> tuple[Hashable, ...]:
        """
        Distinct labels in order of first appearance.

        Raises:
            ValidationError: If the set is unlabeled
        """
        if self._labels is None:
            raise ValidationError("FeatureSet has no labels")
        return tuple(dict.fromkeys(self._labels))

    def group_by_label(self) -> dict[Hashable, NDArray[np.floating[Any]]]:
        """
        Split points by label.

        Returns:
            Mapping label -> (n_c, D) array, in first-appearance order
        """
        if self._labels is None:
            raise ValidationError("FeatureSet has no labels")
        indices: dict[Hashable, list[int]] = {}
        for i, label in enumerate(self._labels):
            indices.setdefault(label, []).append(i)
        return {label: self._points[idx] for label, idx in indices.items()}

    def __len__(self) -> int:
        return self.n_points

    def __repr__(self) -> str:
        labeled = f", classes={len(self.classes())}" if self.is_labeled else ""
        return f"FeatureSet(n={self.n_points}, dim={self.dim}{labeled})"
