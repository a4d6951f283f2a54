"""
Core protocols for quickfit.

These define structural interfaces that implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so
that any object with the right shape plugs in: a list's append method is
already a valid ProgressSink.
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # DataSource type


@runtime_checkable
class DataSource(Protocol):
    """
    Minimal protocol for any data container used in a computation.

    Sample and TrainingDesign implement it and add their own accessors.
    """

    @property
    def n_observations(self) -> int:
        """Number of statistical units (rows)."""
        ...

    @property
    def metadata(self) -> dict[str, Any]:
        """
        Domain-specific metadata.

        Examples:
            Sample: {'x_column': 'x', 'y_column': 'y', 'n_rows': 10, 'n_dropped': 2}
            TrainingDesign: {'n': 8, 'normalized': True}
        """
        ...

    def supports(self, capability: str) -> bool:
        """
        Check if this data source supports a capability.

        Note:
            Unknown capabilities MUST return False, never raise.
        """
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for training backends.

    A backend takes a design and produces a Result with a payload.
    Backends are stateless; all configuration arrives with the call.
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_adam', 'gpu_adam_fp32'
        """
        ...

    def solve(self, design: D, config: Any, on_epoch: Any = None) -> 'Result[P]':
        """
        Execute the computation.

        Raises:
            ValidationError: If design is invalid for this backend
        """
        ...


@runtime_checkable
class ProgressSink(Protocol):
    """Anything that receives human-readable status text."""

    def __call__(self, message: str) -> None:
        ...
