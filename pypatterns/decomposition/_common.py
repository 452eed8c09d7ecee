"""
Shared helpers for PCA and LDA.
"""

import numbers
from typing import Any

from pypatterns.core.exceptions import ValidationError


def clamp_k(k: Any, d: int) -> tuple[int, str | None]:
    """
    Defensive clamp of a target dimensionality.

    K <= 0 or K >= d is reset to d - 1 (to 1 when d == 1, the only
    direction there is). This is a permissive policy, not an error.

    Args:
        k: Requested dimensionality
        d: Input dimension

    Returns:
        (effective k, message describing the clamp or None)

    Raises:
        ValidationError: If k is not an integer
    """
    if isinstance(k, bool) or not isinstance(k, numbers.Integral):
        raise ValidationError(f"k: expected an integer, got {type(k).__name__} {k!r}")
    k = int(k)
    if 0 < k < d:
        return k, None
    effective = max(d - 1, 1)
    if effective == k:
        return k, None
    return effective, f"k={k} outside [1, {effective}] for d={d}; clamped to {effective}"
