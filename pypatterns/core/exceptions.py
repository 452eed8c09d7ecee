"""
Exception and warning hierarchy for PyPatterns.

All exceptions inherit from PyPatternsError to allow catching any
library-specific error. Component-specific exceptions inherit from the
appropriate base class here.

Errors carry their diagnostics (k, rank, condition number, class
count) as attributes so callers can branch without parsing messages.
Recoverable conditions (skipped loads, out-of-range K on the sentinel
path) are warnings, not exceptions.
"""


class PyPatternsError(Exception):
    """Base exception for all PyPatterns errors."""
    pass


class ValidationError(PyPatternsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks
    (empty data, zero dimension, non-finite values).
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when a buffer length is not a multiple of the dimension, when a
    query vector does not match the loaded dimension, or when data and
    labels have inconsistent lengths.
    """
    pass


class InvalidKError(ValidationError):
    """
    Neighbor count is outside the valid range [1, n_points].

    Attributes:
        k: The requested neighbor count
        n_points: Number of stored training points
    """

    def __init__(self, message: str, k: int, n_points: int):
        super().__init__(message)
        self.k = k
        self.n_points = n_points


class NotLoadedError(PyPatternsError):
    """
    A component was queried before a successful load.

    Raised by resolve operations when no dataset (or, for KNN, no pending
    query) is available.
    """
    pass


class NumericalError(PyPatternsError):
    """A decomposition or solve could not produce a trustworthy answer."""
    pass


class SingularMatrixError(NumericalError):
    """
    A matrix that must be inverted is singular or too ill-conditioned.

    For LDA this is the within-class scatter Sw: a class with one point,
    collinear classes, or fewer points than dimensions.

    Attributes:
        matrix_name: Which matrix failed (e.g. 'Sw')
        condition_number: 2-norm condition number, when computed
        rank: Numerical rank, when computed
        expected_rank: Expected rank (the matrix order for square matrices)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.rank = rank
        self.expected_rank = expected_rank


class DegenerateInputError(NumericalError):
    """
    Input is structurally valid but degenerate for the requested method.

    Raised by LDA when fewer than two classes are loaded, which makes the
    between-class scatter identically zero.

    Attributes:
        n_classes: Number of distinct classes found
    """

    def __init__(self, message: str, n_classes: int | None = None):
        super().__init__(message)
        self.n_classes = n_classes


class PyPatternsWarning(UserWarning):
    """Base warning for all PyPatterns warnings."""
    pass


class LoadSkippedWarning(PyPatternsWarning):
    """
    A load call was ignored because its arguments were invalid.

    The component keeps whatever dataset it held before the call.
    """
    pass


class InvalidKWarning(PyPatternsWarning):
    """
    A neighbor count was out of range; the sentinel label was returned.
    """
    pass
