"""
Core infrastructure for PyPatterns.

This module provides shared abstractions and utilities used by all
components (neighbors, decomposition).

Key components:
    featureset: FeatureSet dataset container
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception and warning hierarchy
    validation: Input validators
    compute: Timing, tolerances, linear algebra kernels
"""

from pypatterns.core.featureset import FeatureSet
from pypatterns.core.protocols import Backend
from pypatterns.core.result import Result
from pypatterns.core.exceptions import (
    PyPatternsError,
    ValidationError,
    DimensionError,
    InvalidKError,
    NotLoadedError,
    NumericalError,
    SingularMatrixError,
    DegenerateInputError,
    PyPatternsWarning,
    LoadSkippedWarning,
    InvalidKWarning,
)

__all__ = [
    # Data
    "FeatureSet",
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyPatternsError",
    "ValidationError",
    "DimensionError",
    "InvalidKError",
    "NotLoadedError",
    "NumericalError",
    "SingularMatrixError",
    "DegenerateInputError",
    # Warnings
    "PyPatternsWarning",
    "LoadSkippedWarning",
    "InvalidKWarning",
]
