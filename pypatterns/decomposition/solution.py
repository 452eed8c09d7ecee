"""
Dimensionality reduction solution types.

Contains the parameter payload shared by PCA and LDA and the user-facing
solution wrapper.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pypatterns.core.result import Result


@dataclass(frozen=True)
class ProjectionParams:
    """
    Parameter payload for a projection.

    Common fields are always set; method-specific fields are None when the
    method does not produce them.
    """
    # Flat point-major output: k values per point, n points
    values: NDArray[np.floating[Any]]
    # Same data as a (k, n) matrix, points as columns
    projected: NDArray[np.floating[Any]]
    # Projection directions as columns (d, k)
    directions: NDArray[np.floating[Any]]
    # Full ranking spectrum (d,): singular values (PCA) or eigenvalues (LDA)
    spectrum: NDArray[np.floating[Any]]
    # PCA: removed means; LDA: grand mean (d,)
    mean: NDArray[np.floating[Any]]

    # PCA only
    explained_variance: NDArray[np.floating[Any]] | None = None
    explained_variance_ratio: NDArray[np.floating[Any]] | None = None

    # LDA only
    within_scatter: NDArray[np.floating[Any]] | None = None
    between_scatter: NDArray[np.floating[Any]] | None = None
    classes: tuple[Hashable, ...] | None = None
    class_sizes: tuple[int, ...] | None = None
    class_means: NDArray[np.floating[Any]] | None = None
    projected_labels: tuple[Hashable, ...] | None = None


@dataclass
class ProjectionSolution:
    """
    User-facing projection result.

    Wraps Result[ProjectionParams] and provides convenient accessors.
    """
    _result: Result[ProjectionParams]

    # --- Output ---

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        """Flat point-major output, k * n values."""
        return self._result.params.values

    def as_matrix(self) -> NDArray[np.floating[Any]]:
        """Output as an (n, k) matrix, one row per point."""
        return self._result.params.projected.T

    @property
    def k(self) -> int:
        """Effective target dimensionality after clamping."""
        return self._result.info['k']

    @property
    def k_requested(self) -> int:
        return self._result.info['k_requested']

    @property
    def was_clamped(self) -> bool:
        return self.k != self.k_requested

    # --- Model ---

    @property
    def directions(self) -> NDArray[np.floating[Any]]:
        """Projection directions as columns (d, k)."""
        return self._result.params.directions

    @property
    def spectrum(self) -> NDArray[np.floating[Any]]:
        """Singular values (PCA) or eigenvalues (LDA), descending (d,)."""
        return self._result.params.spectrum

    @property
    def mean(self) -> NDArray[np.floating[Any]]:
        return self._result.params.mean

    @property
    def explained_variance(self) -> NDArray[np.floating[Any]] | None:
        """PCA: variance along every direction (d,)."""
        return self._result.params.explained_variance

    @property
    def explained_variance_ratio(self) -> NDArray[np.floating[Any]] | None:
        """PCA: fraction of total variance along every direction (d,)."""
        return self._result.params.explained_variance_ratio

    @property
    def within_scatter(self) -> NDArray[np.floating[Any]] | None:
        """LDA: within-class scatter Sw (d, d)."""
        return self._result.params.within_scatter

    @property
    def between_scatter(self) -> NDArray[np.floating[Any]] | None:
        """LDA: between-class scatter Sb (d, d)."""
        return self._result.params.between_scatter

    @property
    def classes(self) -> tuple[Hashable, ...] | None:
        """LDA: class labels in output order."""
        return self._result.params.classes

    @property
    def class_sizes(self) -> tuple[int, ...] | None:
        return self._result.params.class_sizes

    @property
    def class_means(self) -> NDArray[np.floating[Any]] | None:
        """LDA: class means as columns (d, n_classes)."""
        return self._result.params.class_means

    @property
    def projected_labels(self) -> tuple[Hashable, ...] | None:
        """LDA: label of every output point, in output order."""
        return self._result.params.projected_labels

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Text summary of the projection."""
        info = self.info
        lines = [
            f"{info['method'].upper()} projection: d={info['d']} -> k={self.k} "
            f"({info['n']} points)",
        ]
        if self.was_clamped:
            lines.append(f"  requested k={self.k_requested} (clamped)")
        if self.classes is not None:
            sizes = ", ".join(
                f"{label!r}: {size}" for label, size in zip(self.classes, self.class_sizes)
            )
            lines.append(f"  classes: {sizes}")

        lines.append("")
        header = "Eigenvalue" if self.explained_variance is None else "Singular value"
        lines.append(f"{'Direction':>9}  {header:>16}" + (
            f"  {'Var. ratio':>10}" if self.explained_variance_ratio is not None else ""
        ))
        for i, value in enumerate(self.spectrum[:self.k]):
            row = f"{i + 1:>9}  {value:>16.6g}"
            if self.explained_variance_ratio is not None:
                row += f"  {self.explained_variance_ratio[i]:>10.4f}"
            lines.append(row)

        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"ProjectionSolution(method={self.info['method']!r}, "
            f"k={self.k}, n={self.info['n']})"
        )
