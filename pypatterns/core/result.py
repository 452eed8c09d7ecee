"""
Generic result container for all PyPatterns computations.

The Result class is the envelope every backend returns. Components define
their own parameter payloads (neighbor sets, projections) and wrap the
envelope in a user-facing solution object.

The envelope is frozen, so two queries against the same loaded component
never share mutable state. info carries requested vs effective K and the
method; timing may be None when a caller builds a Result by hand.
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # NeighborParams or ProjectionParams


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for pattern-recognition computations.

    Type Parameters:
        P: The component-specific parameter payload type

    Attributes:
        params: Component-specific payload (neighbors, projection, etc.)
        info: Structured metadata (method, requested/effective K, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=NeighborParams(...),
        ...     info={'method': 'brute_force', 'k': 3},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_brute'
        ... )

        >>> Result(
        ...     params=ProjectionParams(...),
        ...     info={'method': 'svd', 'k_requested': 5, 'k': 2},
        ...     timing=None,
        ...     backend_name='cpu_svd',
        ...     warnings=('k=5 clamped to 2',)
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """True if any warning mentions substring, e.g. 'clamped'."""
        return any(substring in w for w in self.warnings)
