"""Use case to load an immutable ledger snapshot from a record source."""

from datetime import date
from types import MappingProxyType

from ledger_wrapped.application.ports.ledger_records import LedgerRecordsPort
from ledger_wrapped.domain.constants import DEFAULT_CURRENCY_SYMBOL
from ledger_wrapped.domain.errors import RecordSourceError, get_error_message
from ledger_wrapped.domain.models import LedgerSnapshot
from ledger_wrapped.infrastructure.logging.logger import get_app_logger


class LoadLedgerSnapshotUseCase:
    """Read every record the transform needs for one year."""

    def __init__(self, records_port: LedgerRecordsPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            records_port: Port providing ledger records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._records_port = records_port
        self._logger = logger or get_app_logger()

    def execute(self, year: int) -> LedgerSnapshot:
        """Return a snapshot of the ledger for the year.

        Transactions, categories, payees and accounts are required.
        Budget entries and category group metadata are optional: a
        RecordSourceError while reading them is logged and the snapshot
        carries no budget data.

        Args:
            year: Calendar year to load transactions and budgets for.

        Returns:
            LedgerSnapshot: Immutable snapshot of the records.
        """
        transactions = self._records_port.fetch_transactions(
            date(year, 1, 1), date(year, 12, 31)
        )
        categories = self._records_port.fetch_categories()
        payees = self._records_port.fetch_payees()
        accounts = self._records_port.fetch_accounts()

        try:
            budget_entries = tuple(self._records_port.fetch_budget_entries(year))
            group_sort_orders = dict(
                self._records_port.fetch_category_group_sort_orders()
            )
            group_tombstones = dict(
                self._records_port.fetch_category_group_tombstones()
            )
        except RecordSourceError as exc:
            self._logger.warning(
                f"Budget data unavailable, continuing without it: "
                f"{get_error_message(exc)}"
            )
            budget_entries = ()
            group_sort_orders = {}
            group_tombstones = {}

        currency_symbol = (
            self._records_port.fetch_currency_symbol() or DEFAULT_CURRENCY_SYMBOL
        )

        self._logger.info(
            f"Loaded ledger snapshot for {year}: "
            f"transactions={len(transactions)}, categories={len(categories)}, "
            f"payees={len(payees)}, accounts={len(accounts)}, "
            f"budget_entries={len(budget_entries)}"
        )
        return LedgerSnapshot(
            transactions=tuple(transactions),
            categories=tuple(categories),
            payees=tuple(payees),
            accounts=tuple(accounts),
            budget_entries=budget_entries,
            group_sort_orders=MappingProxyType(group_sort_orders),
            group_tombstones=MappingProxyType(group_tombstones),
            currency_symbol=currency_symbol,
        )


__all__ = ["LoadLedgerSnapshotUseCase"]
