"""
Generic result container for quickfit computations.

Every training backend returns a Result. The envelope carries the
domain payload together with method metadata, timing and non-fatal
warnings, so tooling can treat CPU and GPU runs the same way.

Design decisions:
    - Generic over parameter payload P
    - info dict for flexible metadata (method, epochs, optimizer settings)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so a finished fit cannot be altered
"""

import platform
from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Versions of the software that produced a result."""
    from quickfit import __version__

    return {
        'quickfit_version': __version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (e.g. FittedLine)
        info: Structured metadata (method, epochs, learning rate)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Package and interpreter versions

    Examples:
        >>> Result(
        ...     params=FittedLine(weight=1.0, bias=0.0, loss=1e-6),
        ...     info={'method': 'adam', 'epochs': 250},
        ...     timing={'total_seconds': 0.02},
        ...     backend_name='cpu_adam'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
