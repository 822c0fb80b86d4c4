"""Database infrastructure for the ledger record source.

This module creates SQLAlchemy engines connected to an Actual Budget
ledger file. It belongs to the infrastructure layer because it deals
with an external system (SQLite).
"""

from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from ledger_wrapped.application.ports.database import DatabaseEnginePort


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine for the ledger database.

    Args:
        db_url: Fully qualified database URL, e.g. ``sqlite:///db.sqlite``.

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation owning one lazily created engine."""

    def __init__(self, db_url: str) -> None:
        """Initialize the adapter.

        Args:
            db_url: Database URL resolved by ``WrappedSettings``.
        """
        self._db_url = db_url
        self._engine: Optional[Engine] = None

    def get_ledger_engine(self) -> Engine:
        """Get the engine for the ledger database.

        Returns:
            Engine: SQLAlchemy engine connected to the ledger.
        """
        if self._engine is None:
            self._engine = _create_engine(self._db_url)
        return self._engine


__all__ = [
    "SqlAlchemyDatabaseEngineAdapter",
]
