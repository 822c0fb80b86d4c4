"""Shared fixtures for ledger record tests."""

from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from ledger_wrapped.domain.models import (
    Account,
    BudgetEntry,
    Category,
    LedgerSnapshot,
    Payee,
    Transaction,
    TransformOptions,
)
from ledger_wrapped.domain.services import (
    LedgerLookups,
    filter_transactions,
    resolve_transactions,
)


@pytest.fixture
def make_transaction():
    """Return a factory building transactions from ISO dates and cents."""

    def _make(
        transaction_id: str,
        day: str,
        amount: int,
        account: str = "acc1",
        **fields,
    ) -> Transaction:
        return Transaction(
            id=transaction_id,
            account=account,
            date=date.fromisoformat(day),
            amount=amount,
            **fields,
        )

    return _make


@pytest.fixture
def accounts() -> tuple[Account, ...]:
    """Two on-budget and two off-budget accounts."""
    return (
        Account(id="acc1", name="Checking", type="checking"),
        Account(id="acc2", name="Brokerage", type="investment", off_budget=True),
        Account(id="acc3", name="Savings", type="savings"),
        Account(id="acc4", name="Mortgage", type="mortgage", off_budget=True),
    )


@pytest.fixture
def categories() -> tuple[Category, ...]:
    """Categories including a tombstoned one."""
    return (
        Category(id="cat1", name="Groceries", group="Food"),
        Category(id="cat2", name="Salary", group="Income", is_income=True),
        Category(id="cat3", name="Dining", group="Food", tombstone=True),
        Category(id="cat4", name="Rent", group="Housing"),
    )


@pytest.fixture
def payees() -> tuple[Payee, ...]:
    """Regular, tombstoned, starting-balance and transfer payees."""
    return (
        Payee(id="p1", name="Grocer"),
        Payee(id="p2", name="Employer"),
        Payee(id="p3", name="Old Diner", tombstone=True),
        Payee(id="p-start", name="Starting Balance"),
        Payee(id="t-acc1", name="", transfer_account="acc1"),
        Payee(id="t-acc2", name="", transfer_account="acc2"),
        Payee(id="t-acc3", name="", transfer_account="acc3"),
        Payee(id="t-acc4", name="", transfer_account="acc4"),
    )


@pytest.fixture
def make_snapshot(accounts, categories, payees):
    """Return a factory building snapshots over the shared reference data."""

    def _make(
        transactions=(),
        budget_entries=(),
        **fields,
    ) -> LedgerSnapshot:
        return LedgerSnapshot(
            transactions=tuple(transactions),
            categories=fields.pop("categories", categories),
            payees=fields.pop("payees", payees),
            accounts=fields.pop("accounts", accounts),
            budget_entries=tuple(budget_entries),
            **fields,
        )

    return _make


@pytest.fixture
def resolve_snapshot():
    """Return a helper resolving (and optionally filtering) a snapshot."""

    def _resolve(snapshot: LedgerSnapshot, options: TransformOptions | None = None):
        lookups = LedgerLookups.from_snapshot(snapshot)
        resolved = resolve_transactions(snapshot.transactions, lookups)
        if options is None:
            return resolved
        return filter_transactions(resolved, options)

    return _resolve


@pytest.fixture
def budget_entry():
    """Return a factory building budget entries from major-unit strings."""

    def _make(category_id: str, month, amount: str) -> BudgetEntry:
        return BudgetEntry(
            category_id=category_id,
            month=month,
            budgeted_amount=Decimal(amount),
        )

    return _make


@pytest.fixture
def fixed_clock():
    """Clock returning a constant UTC timestamp."""
    moment = datetime(2026, 1, 2, 9, 30, tzinfo=timezone.utc)
    return lambda: moment


@pytest.fixture
def logger() -> MagicMock:
    """Logger double recording calls."""
    return MagicMock()
