"""
Linear algebra kernels for PyPatterns.

All functions follow these conventions:
    - Functions use NumPy/SciPy (LAPACK under the hood)
    - Decompositions return a structured result dataclass
    - Errors are raised immediately with clear messages

Submodules:
    svd: Left singular vectors and the direction sign convention
    eigen: General eigen-decomposition sorted by eigenvalue
    solve: Rank- and condition-checked linear solves
"""

from pypatterns.core.compute.linalg.svd import (
    SVDResult,
    left_singular_vectors,
    normalize_signs,
    numerical_rank,
)
from pypatterns.core.compute.linalg.eigen import EigenResult, eig_sorted
from pypatterns.core.compute.linalg.solve import (
    condition_number,
    equilibrate,
    solve_checked,
)

__all__ = [
    # SVD
    "SVDResult",
    "left_singular_vectors",
    "normalize_signs",
    "numerical_rank",
    # Eigen
    "EigenResult",
    "eig_sorted",
    # Solve
    "condition_number",
    "equilibrate",
    "solve_checked",
]
