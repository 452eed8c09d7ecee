"""
Nearest-neighbor classification.

Public API:
    KnnClassifier           - stateful: init() -> classify(q) -> [k]
    knn_classify(X, y, q, k) - one-shot, returns KnnSolution

Selection kernels (select_nearest, majority_vote) live in
pypatterns.neighbors._selection.

Example:
    >>> from pypatterns.neighbors import KnnClassifier
    >>> knn = KnnClassifier().init([1, 101, 5, 89, 108, 5, 115, 8], 2, ['A', 'A', 'B', 'B'])
    >>> knn.classify([110, 6])[3]
    'B'
"""

from pypatterns.neighbors.design import KnnDesign
from pypatterns.neighbors.solution import KnnSolution, NeighborParams
from pypatterns.neighbors.solvers import knn_classify
from pypatterns.neighbors.classifier import KnnClassifier

__all__ = [
    "KnnClassifier",
    "knn_classify",
    "KnnDesign",
    "KnnSolution",
    "NeighborParams",
]
