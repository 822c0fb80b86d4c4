"""Tests for the SQLAlchemy Actual Budget repository."""

from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import create_engine, text

from ledger_wrapped.domain.errors import DatabaseError
from ledger_wrapped.infrastructure.actual_repository import SqlAlchemyActualRepository

_SCHEMA = [
    """CREATE TABLE accounts (
        id TEXT PRIMARY KEY, name TEXT, type TEXT, offbudget INTEGER,
        tombstone INTEGER DEFAULT 0)""",
    """CREATE TABLE category_groups (
        id TEXT PRIMARY KEY, name TEXT, sort_order INTEGER,
        tombstone INTEGER DEFAULT 0)""",
    """CREATE TABLE categories (
        id TEXT PRIMARY KEY, name TEXT, is_income INTEGER, cat_group TEXT,
        tombstone INTEGER DEFAULT 0)""",
    "CREATE TABLE category_mapping (id TEXT PRIMARY KEY, transferId TEXT)",
    """CREATE TABLE payees (
        id TEXT PRIMARY KEY, name TEXT, transfer_acct TEXT,
        tombstone INTEGER DEFAULT 0)""",
    "CREATE TABLE payee_mapping (id TEXT PRIMARY KEY, targetId TEXT)",
    """CREATE TABLE transactions (
        id TEXT PRIMARY KEY, acct TEXT, date INTEGER, amount INTEGER,
        category TEXT, description TEXT, notes TEXT, cleared INTEGER,
        reconciled INTEGER, parent_id TEXT, isParent INTEGER,
        tombstone INTEGER DEFAULT 0)""",
    """CREATE TABLE zero_budgets (
        id TEXT PRIMARY KEY, month INTEGER, category TEXT, amount INTEGER)""",
    "CREATE TABLE preferences (id TEXT PRIMARY KEY, value TEXT)",
]

_ROWS = [
    """INSERT INTO accounts VALUES
        ('acc1', 'Checking', 'checking', 0, 0),
        ('acc2', 'Brokerage', 'investment', 1, 0),
        ('acc9', 'Closed', 'checking', 0, 1)""",
    """INSERT INTO category_groups VALUES
        ('g1', 'Food', 2, 0),
        ('g2', 'Legacy', 9, 1)""",
    """INSERT INTO categories VALUES
        ('cat1', 'Groceries', 0, 'g1', 0),
        ('cat-old', 'Snacks', 0, 'g2', 1)""",
    """INSERT INTO category_mapping VALUES
        ('cat1', 'cat1'),
        ('cat-merged', 'cat1')""",
    """INSERT INTO payees VALUES
        ('p1', 'Grocer', NULL, 0),
        ('p-old', 'Gone Store', NULL, 1),
        ('t-acc2', '', 'acc2', 0)""",
    """INSERT INTO payee_mapping VALUES
        ('p1', 'p1'),
        ('p1-dup', 'p1')""",
    """INSERT INTO transactions VALUES
        ('t1', 'acc1', 20250115, -4599, 'cat-merged', 'p1-dup', 'weekly shop', 1, 0, NULL, 0, 0),
        ('t2', 'acc1', 20250201, -1000, 'cat-old', 'p-old', NULL, 0, 0, NULL, 0, 0),
        ('t3', 'acc1', 20250301, -50000, NULL, 't-acc2', NULL, 0, 0, NULL, 0, 0),
        ('t4', 'acc1', 20250302, -700, 'cat1', 'p1', NULL, 0, 0, NULL, 0, 1),
        ('t5', 'acc1', 20241231, -800, 'cat1', 'p1', NULL, 0, 0, NULL, 0, 0),
        ('t6', 'acc1', 20250401, -3000, NULL, NULL, NULL, 0, 0, NULL, 1, 0)""",
    """INSERT INTO zero_budgets VALUES
        ('b1', 202501, 'cat1', 25000),
        ('b2', 202502, 'cat-merged', 10050),
        ('b3', 202401, 'cat1', 99900)""",
    "INSERT INTO preferences VALUES ('defaultCurrencyCode', 'eur')",
]


class _EnginePort:
    def __init__(self, engine):
        self._engine = engine

    def get_ledger_engine(self):
        return self._engine


@pytest.fixture
def engine(tmp_path):
    """SQLite ledger seeded with a few Actual Budget tables."""
    ledger_engine = create_engine(f"sqlite:///{tmp_path / 'db.sqlite'}")
    with ledger_engine.begin() as conn:
        for statement in _SCHEMA + _ROWS:
            conn.execute(text(statement))
    yield ledger_engine
    ledger_engine.dispose()


@pytest.fixture
def repository(engine) -> SqlAlchemyActualRepository:
    """Repository over the seeded ledger."""
    return SqlAlchemyActualRepository(_EnginePort(engine))


def test_fetch_transactions_applies_mappings_and_names(repository) -> None:
    """Merged ids are remapped and names embedded from the lookups."""
    transactions = repository.fetch_transactions(date(2025, 1, 1), date(2025, 12, 31))

    by_id = {item.id: item for item in transactions}
    assert sorted(by_id) == ["t1", "t2", "t3", "t6"]
    shop = by_id["t1"]
    assert shop.date == date(2025, 1, 15)
    assert shop.amount == -4599
    assert (shop.category, shop.category_name) == ("cat1", "Groceries")
    assert (shop.payee, shop.payee_name) == ("p1", "Grocer")
    assert shop.notes == "weekly shop"
    assert shop.cleared is True
    assert by_id["t2"].category_tombstone is True
    assert by_id["t2"].payee_tombstone is True
    assert by_id["t3"].payee == "t-acc2"
    assert by_id["t3"].category is None
    assert by_id["t6"].is_parent is True


def test_fetch_transactions_without_bounds(repository) -> None:
    """Without dates every live row is returned in date order."""
    transactions = repository.fetch_transactions(None, None)

    assert [item.id for item in transactions] == ["t5", "t1", "t2", "t3", "t6"]


def test_reference_tables(repository) -> None:
    """Categories, payees and live accounts are normalized."""
    categories = {item.id: item for item in repository.fetch_categories()}
    payees = {item.id: item for item in repository.fetch_payees()}
    accounts = repository.fetch_accounts()

    assert categories["cat1"].group == "Food"
    assert categories["cat-old"].tombstone is True
    assert payees["t-acc2"].transfer_account == "acc2"
    assert [(a.id, a.off_budget) for a in accounts] == [
        ("acc1", False),
        ("acc2", True),
    ]


def test_fetch_budget_entries_converts_cents(repository) -> None:
    """Budget rows of the year are remapped and converted to major units."""
    entries = repository.fetch_budget_entries(2025)

    assert [(e.category_id, e.month, e.budgeted_amount) for e in entries] == [
        ("cat1", 202501, Decimal("250")),
        ("cat1", 202502, Decimal("100.5")),
    ]


def test_category_group_metadata(repository) -> None:
    """Sort orders skip deleted groups; tombstones list every group."""
    assert repository.fetch_category_group_sort_orders() == {"Food": 2}
    assert repository.fetch_category_group_tombstones() == {
        "Food": False,
        "Legacy": True,
    }


def test_currency_symbol_from_preferences(repository, engine) -> None:
    """Known codes map to symbols; unknown codes are returned as-is."""
    assert repository.fetch_currency_symbol() == "€"

    with engine.begin() as conn:
        conn.execute(text("UPDATE preferences SET value = 'XYZ'"))
    assert repository.fetch_currency_symbol() == "XYZ"

    with engine.begin() as conn:
        conn.execute(text("DELETE FROM preferences"))
    assert repository.fetch_currency_symbol() == "$"


def test_missing_table_raises_database_error(repository, engine) -> None:
    """SQLAlchemy failures surface as DatabaseError."""
    with engine.begin() as conn:
        conn.execute(text("DROP TABLE zero_budgets"))

    with pytest.raises(DatabaseError) as excinfo:
        repository.fetch_budget_entries(2025)

    assert "Ledger query failed" in str(excinfo.value)
    assert excinfo.value.cause is not None
