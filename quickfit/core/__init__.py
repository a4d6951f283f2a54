"""
Core infrastructure for quickfit.

Shared abstractions used by the tabular and regression subpackages.

Key components:
    protocols: DataSource, Backend, ProgressSink protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Device detection and timing
"""

from quickfit.core.protocols import DataSource, Backend, ProgressSink
from quickfit.core.result import Result
from quickfit.core.exceptions import (
    QuickfitError,
    ValidationError,
    DimensionError,
    SchemaError,
    EmptySampleError,
    NumericalError,
    DegenerateInputError,
    BackendError,
    InputAcquisitionError,
)

__all__ = [
    # Protocols
    "DataSource",
    "Backend",
    "ProgressSink",
    # Result
    "Result",
    # Exceptions
    "QuickfitError",
    "ValidationError",
    "DimensionError",
    "SchemaError",
    "EmptySampleError",
    "NumericalError",
    "DegenerateInputError",
    "BackendError",
    "InputAcquisitionError",
]
