"""
Shared compute infrastructure for PyPatterns.

IMPORTANT: This is NOT where component backends live. Those go in
{component}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Comparison tiers and conditioning thresholds
    linalg: Linear algebra kernels (SVD, eigen, checked solve)
"""

from pypatterns.core.compute.timing import Timer, timed

__all__ = [
    # Timing
    "Timer",
    "timed",
]
