"""
Input validation for feature buffers, labels and integer parameters.

Every check raises ValidationError (or its DimensionError subclass) naming
the offending parameter; nothing is silently repaired. Callers decide the
policy: KnnClassifier lets the error propagate, PcaReducer and LdaReducer
turn it into a skipped load.
"""

from collections.abc import Hashable, Sequence
from typing import Any
import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pypatterns.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Convert feature data to a float64 array.

    Integer and float input is accepted; strings, objects, ragged nesting
    and complex values are not.

    Args:
        array: Feature data (flat buffer, matrix or nested sequence)
        name: Parameter name for error messages

    Returns:
        float64 array (a view when the input already is float64)

    Raises:
        ValidationError: If array is None or not real numeric data
    """
    if array is None:
        raise ValidationError(f"{name}: is None")

    try:
        converted = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: not array-like ({e})") from e

    kind = converted.dtype
    if kind == object or not np.issubdtype(kind, np.number) or np.issubdtype(kind, np.complexfloating):
        raise ValidationError(
            f"{name}: non-numeric dtype {kind}; feature data must be real numbers"
        )
    return converted.astype(np.float64, copy=False)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Raises:
        ValidationError: If any entry is NaN or infinite
    """
    finite = np.isfinite(array)
    if not finite.all():
        n_nan = int(np.isnan(array).sum())
        n_inf = int((~finite).sum()) - n_nan
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Raises:
        DimensionError: If array.ndim differs from ndim
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D input, got shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    check_ndim(array, 1, name)


def check_positive_int(value: Any, name: str) -> int:
    """
    Validate a count such as dim or size.

    Python ints and NumPy integer scalars pass; bools, floats and
    integer-valued strings do not.

    Returns:
        The value as a Python int

    Raises:
        ValidationError: If value is not an integer or is < 1
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected a positive integer, got {type(value).__name__} {value!r}"
        )
    if value < 1:
        raise ValidationError(f"{name}: must be > 0, got {value}")
    return int(value)


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]] | Sequence[Any],
    names: tuple[str, ...]
) -> None:
    """
    Require equal len() across arrays, e.g. points and their labels.

    Raises:
        ValueError: If names does not name every array (caller bug)
        DimensionError: If lengths differ
    """
    if len(names) != len(arrays):
        raise ValueError(f"got {len(arrays)} arrays but {len(names)} names")

    lengths = {name: len(arr) for name, arr in zip(names, arrays)}
    if len(set(lengths.values())) > 1:
        details = ", ".join(f"{name}={n}" for name, n in lengths.items())
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_labels(labels: Any, name: str) -> tuple[Hashable, ...]:
    """
    Validate a label sequence and return it as a tuple of hashable values.

    NumPy arrays and pandas Series are converted with tolist() so that
    labels become plain Python scalars (np.str_('A') and 'A' then compare
    and hash alike).

    Raises:
        ValidationError: If labels is None, a bare string, or contains unhashable items
        DimensionError: If labels is a multi-dimensional array
    """
    if labels is None:
        raise ValidationError(f"{name}: is None")
    if isinstance(labels, (str, bytes)):
        raise ValidationError(
            f"{name}: expected a sequence of labels, got a single {type(labels).__name__}"
        )

    if hasattr(labels, 'to_numpy'):
        labels = labels.to_numpy()
    if isinstance(labels, np.ndarray):
        if labels.ndim != 1:
            raise DimensionError(f"{name}: expected 1D labels, got shape {labels.shape}")
        labels = labels.tolist()

    try:
        result = tuple(labels)
    except TypeError as e:
        raise ValidationError(f"{name}: not a sequence: {e}") from e

    for i, label in enumerate(result):
        # a tuple holding a list is a Hashable instance yet fails hash()
        try:
            hash(label)
        except TypeError as e:
            raise ValidationError(
                f"{name}: label at position {i} is unhashable ({type(label).__name__})"
            ) from e
    return result
