"""Error taxonomy for the wrapped pipeline."""


class LedgerWrappedError(Exception):
    """Base error carrying an optional underlying cause."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class DataTransformError(LedgerWrappedError):
    """Raised when the record-to-view transform fails."""


class RecordSourceError(LedgerWrappedError):
    """Raised when ledger records cannot be read from their source."""


class DatabaseError(RecordSourceError):
    """Raised when a database query against the ledger fails."""


class FileValidationError(RecordSourceError):
    """Raised when the ledger file is missing or unusable."""


def get_error_message(error: BaseException | str | None) -> str:
    """Return a human-readable message from an error and its cause chain.

    Args:
        error: Exception, plain message or None.

    Returns:
        str: Messages of the error and its causes joined with ": ",
        skipping causes whose text is already part of the message.
    """
    if error is None:
        return "An unknown error occurred"
    if isinstance(error, str):
        return error
    parts: list[str] = []
    seen: set[int] = set()
    current: BaseException | None = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        text = str(current) or type(current).__name__
        if not any(text in part for part in parts):
            parts.append(text)
        cause = getattr(current, "cause", None)
        current = cause if cause is not None else current.__cause__
    return ": ".join(parts)


__all__ = [
    "LedgerWrappedError",
    "DataTransformError",
    "RecordSourceError",
    "DatabaseError",
    "FileValidationError",
    "get_error_message",
]
