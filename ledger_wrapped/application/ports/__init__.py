"""Application ports package."""

from .database import DatabaseEnginePort
from .ledger_records import LedgerRecordsPort

__all__ = ["DatabaseEnginePort", "LedgerRecordsPort"]
