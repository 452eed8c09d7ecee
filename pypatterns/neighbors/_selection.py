"""
Distance, neighbor selection and voting kernels.

Selection and voting are separate operations so either can change
independently. Both are deterministic:

    select_nearest: equal distances -> lower training index first
    majority_vote:  equal counts    -> label seen first in neighbor order,
                                       i.e. the one with the nearest member
"""

from collections import Counter
from collections.abc import Hashable, Sequence
from typing import Any
import numpy as np
from numpy.typing import NDArray


def euclidean_distances(
    points: NDArray[np.floating[Any]],
    query: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """Euclidean distance from query (p,) to every row of points (n x p)."""
    diff = points - query
    return np.sqrt(np.einsum('ij,ij->i', diff, diff))


def select_nearest(distances: NDArray[np.floating[Any]], k: int) -> NDArray[np.intp]:
    """
    Indices of the k smallest distances, nearest first.

    Uses a partial partition to find the k-th smallest distance, then orders
    only the candidates at or below it. Candidates tied at the boundary are
    resolved by index, so the returned set never depends on partition order.

    Args:
        distances: Distances (n,)
        k: Number of neighbors, 1 <= k <= n

    Returns:
        Index array (k,)
    """
    n = distances.shape[0]
    if k < n:
        kth = np.partition(distances, k - 1)[k - 1]
        candidates = np.flatnonzero(distances <= kth)
    else:
        candidates = np.arange(n)
    # lexsort: last key is primary
    order = np.lexsort((candidates, distances[candidates]))
    return candidates[order[:k]]


def majority_vote(labels: Sequence[Hashable]) -> tuple[Hashable, dict[Hashable, int]]:
    """
    Most frequent label among neighbors given nearest first.

    Returns:
        (winning label, vote counts in first-seen order)
    """
    if not labels:
        raise ValueError("majority_vote() needs at least one label")
    counts = Counter(labels)
    # Counter keeps insertion order, max() keeps the first maximum
    winner = max(counts, key=counts.__getitem__)
    return winner, dict(counts)
