"""
Core protocols for PyPatterns.

These define structural interfaces that component implementations satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so
backends stay plain classes with no shared base.
"""

from typing import Protocol, TypeVar, runtime_checkable

from pypatterns.core.result import Result

# Type variables for generic payloads
P = TypeVar('P', covariant=True)  # Parameter payload type
D = TypeVar('D', contravariant=True)  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a component-specific design (validated, immutable
    data) and a target parameter, and produces a Result envelope.

    Backends are stateless. All state lives in the design, which is why a
    loaded component can be queried repeatedly with different K.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_brute', 'cpu_svd', 'cpu_eig'
        """
        ...

    def solve(self, design: D, k: int) -> Result[P]:
        """
        Execute the computation.

        Args:
            design: Component-specific data container
            k: Neighbor count (KNN) or target dimensionality (PCA/LDA)

        Returns:
            Result envelope containing the payload and metadata

        Raises:
            NumericalError: If numerical issues prevent a solution
            ValidationError: If design or k is invalid for this backend
        """
        ...
