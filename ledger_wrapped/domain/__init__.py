"""Domain package for year-in-review rules and core models."""

from .constants import DEFAULT_YEAR, MONTHS
from .errors import (
    DatabaseError,
    DataTransformError,
    FileValidationError,
    LedgerWrappedError,
    RecordSourceError,
    get_error_message,
)
from .models import (
    LedgerSnapshot,
    ResolvedTransaction,
    TransformOptions,
    WrappedData,
)

__all__ = [
    "DEFAULT_YEAR",
    "MONTHS",
    "DatabaseError",
    "DataTransformError",
    "FileValidationError",
    "LedgerWrappedError",
    "RecordSourceError",
    "get_error_message",
    "LedgerSnapshot",
    "ResolvedTransaction",
    "TransformOptions",
    "WrappedData",
]
