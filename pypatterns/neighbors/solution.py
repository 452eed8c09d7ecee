"""
KNN solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pypatterns.core.result import Result

if TYPE_CHECKING:
    from pypatterns.neighbors.design import KnnDesign


@dataclass(frozen=True)
class NeighborParams:
    """
    Parameter payload for one KNN classification.

    Neighbors are ordered nearest first.
    """
    label: Hashable
    indices: NDArray[np.intp]
    distances: NDArray[np.floating[Any]]
    labels: tuple[Hashable, ...]
    votes: dict[Hashable, int]


@dataclass
class KnnSolution:
    """
    User-facing KNN result.

    Wraps Result[NeighborParams] and provides convenient accessors.
    """
    _result: Result[NeighborParams]
    _design: 'KnnDesign'

    @property
    def label(self) -> Hashable:
        """Predicted label (nearest label for k=1, majority otherwise)."""
        return self._result.params.label

    @property
    def k(self) -> int:
        return self._result.info['k']

    @property
    def neighbor_indices(self) -> NDArray[np.intp]:
        """Training-set indices of the k neighbors, nearest first."""
        return self._result.params.indices

    @property
    def neighbor_distances(self) -> NDArray[np.floating[Any]]:
        """Euclidean distances of the k neighbors, ascending."""
        return self._result.params.distances

    @property
    def neighbor_labels(self) -> tuple[Hashable, ...]:
        return self._result.params.labels

    @property
    def votes(self) -> dict[Hashable, int]:
        """Vote count per label among the neighbors."""
        return dict(self._result.params.votes)

    @property
    def query(self) -> NDArray[np.floating[Any]]:
        return self._design.query

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
        """Human-readable neighbor table."""
        lines = [
            f"{self.k}-nearest-neighbor classification "
            f"({self._design.n} training points, dim={self._design.p})",
            "",
            f"{'rank':>4}  {'index':>6}  {'distance':>12}  label",
        ]
        for rank, (idx, dist, label) in enumerate(
            zip(self.neighbor_indices, self.neighbor_distances, self.neighbor_labels), start=1
        ):
            lines.append(f"{rank:>4}  {int(idx):>6}  {dist:>12.6g}  {label!r}")
        lines.append("")
        tally = ", ".join(f"{label!r}: {count}" for label, count in self.votes.items())
        lines.append(f"Votes: {tally}")
        lines.append(f"Predicted label: {self.label!r}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"KnnSolution(k={self.k}, label={self.label!r})"
