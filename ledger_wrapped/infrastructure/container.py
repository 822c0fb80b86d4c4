"""Composition root for wiring infrastructure adapters."""

from ledger_wrapped.application.ports.database import DatabaseEnginePort
from ledger_wrapped.application.ports.ledger_records import LedgerRecordsPort
from ledger_wrapped.infrastructure.actual_repository import (
    SqlAlchemyActualRepository,
)
from ledger_wrapped.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from ledger_wrapped.infrastructure.settings import WrappedSettings


def build_database_adapter(
    settings: WrappedSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter for the configured ledger."""
    resolved = settings or WrappedSettings.from_env()
    return SqlAlchemyDatabaseEngineAdapter(resolved.database_url())


def build_records_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: WrappedSettings | None = None,
) -> LedgerRecordsPort:
    """Return the ledger records repository."""
    resolved_db = db_port or build_database_adapter(settings)
    return SqlAlchemyActualRepository(resolved_db)


__all__ = ["build_database_adapter", "build_records_repository"]
