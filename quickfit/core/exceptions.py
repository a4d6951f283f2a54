"""
Exception hierarchy for quickfit.

All exceptions inherit from QuickfitError so a caller can catch any
library-specific failure in one place. Every terminal failure of a run
maps to one class here, and its message is the status text shown to the
user.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable: they say what was found and what to check
    - Never catch and re-raise with less information
"""


class QuickfitError(Exception):
    """Base exception for all quickfit errors."""
    pass


class ValidationError(QuickfitError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array lengths or shapes are inconsistent.

    Raised when paired sequences (true vs. predicted values, X vs. Y)
    do not have the same length.
    """
    pass


class SchemaError(ValidationError):
    """
    Fewer than two numeric columns were detected.

    Terminal for the run: no sample is built and nothing is trained.

    Attributes:
        numeric_columns: The columns that were classified numeric
    """

    def __init__(self, message: str, numeric_columns: list[str] | None = None):
        super().__init__(message)
        self.numeric_columns = list(numeric_columns or [])


class EmptySampleError(ValidationError):
    """
    No (x, y) pair survived cleaning.

    Attributes:
        n_rows: Number of data rows that were examined
        x_column: Selected input column
        y_column: Selected target column
    """

    def __init__(
        self,
        message: str,
        n_rows: int = 0,
        x_column: str | None = None,
        y_column: str | None = None,
    ):
        super().__init__(message)
        self.n_rows = n_rows
        self.x_column = x_column
        self.y_column = y_column


class NumericalError(QuickfitError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DegenerateInputError(NumericalError):
    """
    An axis has zero range or zero variance.

    Min-max normalization divides by (max - min) and R² divides by the
    total sum of squares; both are undefined for a constant axis.

    Attributes:
        axis: Which quantity was constant ('x', 'y' or 'y_true')
        value: The constant value, if known
    """

    def __init__(self, message: str, axis: str, value: float | None = None):
        super().__init__(message)
        self.axis = axis
        self.value = value


class BackendError(QuickfitError):
    """
    The requested training backend cannot be used.

    Raised for an unknown backend name, or when a GPU backend is
    requested and no usable GPU is present.

    Attributes:
        backend: The backend choice that was requested
    """

    def __init__(self, message: str, backend: str | None = None):
        super().__init__(message)
        self.backend = backend


class InputAcquisitionError(QuickfitError):
    """
    The raw text could not be read.

    Attributes:
        path: The location that was requested
    """

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path
