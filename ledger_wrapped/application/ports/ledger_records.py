"""Application port for ledger record access."""

from datetime import date
from typing import Mapping, Protocol

from ledger_wrapped.domain.models import (
    Account,
    BudgetEntry,
    Category,
    Payee,
    Transaction,
)


class LedgerRecordsPort(Protocol):
    """Port exposing read access to the raw records of a ledger."""

    def fetch_transactions(
        self,
        start_date: date | None,
        end_date: date | None,
    ) -> list[Transaction]:
        """Return transactions dated within the optional bounds."""

    def fetch_categories(self) -> list[Category]:
        """Return categories, tombstoned ones included."""

    def fetch_payees(self) -> list[Payee]:
        """Return payees, tombstoned ones included."""

    def fetch_accounts(self) -> list[Account]:
        """Return open accounts."""

    def fetch_budget_entries(self, year: int) -> list[BudgetEntry]:
        """Return budget entries of the year."""

    def fetch_category_group_sort_orders(self) -> Mapping[str, int]:
        """Return category group name to display sort order."""

    def fetch_category_group_tombstones(self) -> Mapping[str, bool]:
        """Return category group name to tombstone flag."""

    def fetch_currency_symbol(self) -> str:
        """Return the currency symbol configured in the ledger."""


__all__ = ["LedgerRecordsPort"]
