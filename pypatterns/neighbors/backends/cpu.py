"""
CPU brute-force backend for KNN classification.

Computes every query-to-point distance, selects the k nearest with a
partial partition, then votes.
"""

from typing import Any

from pypatterns.core.result import Result
from pypatterns.core.compute.timing import Timer
from pypatterns.neighbors.design import KnnDesign
from pypatterns.neighbors.solution import NeighborParams
from pypatterns.neighbors._selection import (
    euclidean_distances,
    select_nearest,
    majority_vote,
)


class CPUBruteForceBackend:
    """
    CPU backend using exhaustive Euclidean distances.

    Implements the Backend protocol for KnnDesign -> NeighborParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_brute'

    def solve(self, design: KnnDesign, k: int) -> Result[NeighborParams]:
        """
        Classify the design's query by its k nearest training points.

        Algorithm:
            1. Distances from the query to all n points
            2. Partial selection of the k smallest
            3. k == 1: nearest label; otherwise majority vote

        Raises:
            InvalidKError: If k is outside [1, n]
        """
        k = design.check_k(k)

        timer = Timer()
        timer.start()

        with timer.section('distances'):
            distances = euclidean_distances(design.points, design.query)

        with timer.section('selection'):
            indices = select_nearest(distances, k)
            labels = tuple(design.labels[i] for i in indices)

        with timer.section('vote'):
            if k == 1:
                label = labels[0]
                votes = {label: 1}
            else:
                label, votes = majority_vote(labels)

        timer.stop()

        params = NeighborParams(
            label=label,
            indices=indices,
            distances=distances[indices],
            labels=labels,
            votes=votes,
        )

        info: dict[str, Any] = {
            'method': 'brute_force',
            'metric': 'euclidean',
            'k': k,
            'n_points': design.n,
            'voted': k > 1,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )
