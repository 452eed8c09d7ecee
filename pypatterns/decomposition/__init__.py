"""
Dimensionality reduction.

Public API:
    PcaReducer         - stateful: reduce(data, dim) -> [k]
    LdaReducer         - stateful: reduce(data, dim, labels) -> [k]
    pca(X, k)          - one-shot, returns ProjectionSolution
    lda(X, labels, k)  - one-shot, returns ProjectionSolution

Target dimensionality is clamped, not validated: k <= 0 or k >= d becomes
d - 1. The clamp is recorded in ProjectionSolution.warnings.
"""

from pypatterns.decomposition.design import PcaDesign, LdaDesign
from pypatterns.decomposition.solution import ProjectionParams, ProjectionSolution
from pypatterns.decomposition.solvers import pca, lda
from pypatterns.decomposition.principal import PcaReducer
from pypatterns.decomposition.discriminant import LdaReducer

__all__ = [
    "PcaReducer",
    "LdaReducer",
    "pca",
    "lda",
    "PcaDesign",
    "LdaDesign",
    "ProjectionParams",
    "ProjectionSolution",
]
