"""
Tolerance tiers and numerical thresholds.

Used by the test suite for comparisons and by the linear algebra kernels
for rank and conditioning decisions.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance tier for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# Direct computations (means, projections, distances)
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, direct computation',
)

# Results that pass through an eigen/singular decomposition
CPU_FP64_DECOMPOSITION = ToleranceTier(
    rtol=1e-7,
    atol=1e-9,
    name='cpu_fp64_decomposition',
    description='CPU double precision, after SVD or eigen-decomposition',
)

# Condition number above which a matrix is treated as singular before a
# solve. At 1e12 roughly four significant digits survive in float64.
SINGULAR_CONDITION_THRESHOLD = 1e12


def select_tolerance(decomposition: bool = False) -> ToleranceTier:
    """Select the tolerance tier for a computation path."""
    return CPU_FP64_DECOMPOSITION if decomposition else CPU_FP64
