"""Application use cases package."""

from .build_wrapped import BuildWrappedUseCase
from .load_ledger_snapshot import LoadLedgerSnapshotUseCase

__all__ = ["BuildWrappedUseCase", "LoadLedgerSnapshotUseCase"]
