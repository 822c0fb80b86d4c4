"""Domain models for raw ledger records."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from ledger_wrapped.domain.constants import DEFAULT_CURRENCY_SYMBOL


@dataclass(frozen=True)
class Transaction:
    """One ledger row as delivered by the record source.

    Attributes:
        id: Opaque transaction identifier.
        account: Owning account identifier.
        date: Calendar day of the transaction.
        amount: Signed amount in minor currency units.
        category: Optional category identifier.
        category_name: Category name embedded by the record source.
        category_tombstone: Tombstone flag embedded by the record source.
        payee: Optional payee identifier.
        payee_name: Payee name embedded by the record source.
        payee_tombstone: Tombstone flag embedded by the record source.
        parent_id: Parent transaction id for split children.
        is_parent: True when the source flags the row as a split parent.
    """

    id: str
    account: str
    date: date
    amount: int
    category: str | None = None
    category_name: str | None = None
    category_tombstone: bool = False
    payee: str | None = None
    payee_name: str | None = None
    payee_tombstone: bool = False
    parent_id: str | None = None
    is_parent: bool = False
    notes: str | None = None
    cleared: bool = False
    reconciled: bool = False


@dataclass(frozen=True)
class Category:
    """Budget category, possibly tombstoned."""

    id: str
    name: str
    group: str | None = None
    is_income: bool = False
    tombstone: bool = False


@dataclass(frozen=True)
class Payee:
    """Payee; a linked transfer account marks it as a transfer payee."""

    id: str
    name: str
    tombstone: bool = False
    transfer_account: str | None = None


@dataclass(frozen=True)
class Account:
    """Ledger account."""

    id: str
    name: str
    type: str = ""
    off_budget: bool = False


@dataclass(frozen=True)
class BudgetEntry:
    """Budgeted amount for one category and month, in major units."""

    category_id: str
    month: str | int
    budgeted_amount: Decimal


@dataclass(frozen=True)
class LedgerSnapshot:
    """Immutable bundle of every raw input of one transform.

    Attributes:
        transactions: Ledger rows, any year.
        categories: Categories including tombstoned ones.
        payees: Payees including tombstoned ones.
        accounts: Accounts.
        budget_entries: Optional budget entries; empty means no budget data.
        group_sort_orders: Category group name to display sort order.
        group_tombstones: Category group name to tombstone flag.
        currency_symbol: Currency symbol configured in the ledger.
    """

    transactions: tuple[Transaction, ...] = ()
    categories: tuple[Category, ...] = ()
    payees: tuple[Payee, ...] = ()
    accounts: tuple[Account, ...] = ()
    budget_entries: tuple[BudgetEntry, ...] = ()
    group_sort_orders: Mapping[str, int] = field(
        default_factory=lambda: MappingProxyType({})
    )
    group_tombstones: Mapping[str, bool] = field(
        default_factory=lambda: MappingProxyType({})
    )
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL

    @classmethod
    def from_rows(cls, **rows) -> "LedgerSnapshot":
        """Build a snapshot from raw row mappings.

        Args:
            **rows: Keyword arguments accepted by
                ``ledger_wrapped.domain.services.normalization.build_snapshot``.

        Returns:
            LedgerSnapshot: Normalized snapshot.
        """
        from ledger_wrapped.domain.services.normalization import build_snapshot

        return build_snapshot(**rows)


__all__ = [
    "Transaction",
    "Category",
    "Payee",
    "Account",
    "BudgetEntry",
    "LedgerSnapshot",
]
