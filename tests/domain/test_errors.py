"""Tests for the error taxonomy helpers."""

from ledger_wrapped.domain.errors import (
    DatabaseError,
    DataTransformError,
    LedgerWrappedError,
    RecordSourceError,
    get_error_message,
)


def test_error_hierarchy() -> None:
    """Source errors share a common base."""
    assert issubclass(DatabaseError, RecordSourceError)
    assert issubclass(RecordSourceError, LedgerWrappedError)
    assert issubclass(DataTransformError, LedgerWrappedError)


def test_cause_is_kept() -> None:
    """The underlying exception is available on the error."""
    cause = ValueError("bad row")
    error = DataTransformError("Failed to transform data", cause=cause)

    assert error.cause is cause
    assert str(error) == "Failed to transform data"


def test_get_error_message_walks_causes() -> None:
    """Messages of causes are appended once."""
    cause = ValueError("bad row")
    wrapped = DataTransformError(f"Failed to transform data: {cause}", cause=cause)
    layered = DatabaseError("Ledger unavailable", cause=OSError("disk gone"))

    assert get_error_message(wrapped) == "Failed to transform data: bad row"
    assert get_error_message(layered) == "Ledger unavailable: disk gone"


def test_get_error_message_handles_plain_values() -> None:
    """Strings pass through and None gets a generic message."""
    assert get_error_message("boom") == "boom"
    assert get_error_message(None) == "An unknown error occurred"
    assert get_error_message(KeyError()) == "KeyError"
