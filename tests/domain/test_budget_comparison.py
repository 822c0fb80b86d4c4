"""Tests for the budget-vs-actual comparison."""

from decimal import Decimal

import pytest

from ledger_wrapped.domain.models import TransformOptions
from ledger_wrapped.domain.services.budget import (
    build_budget_map,
    compute_budget_comparison,
    walk_category_months,
)
from ledger_wrapped.domain.services.resolver import LedgerLookups


@pytest.fixture
def compare(make_snapshot, resolve_snapshot):
    """Return a helper running the comparison over a fresh snapshot."""

    def _compare(transactions, entries, **kwargs):
        snapshot = make_snapshot(transactions, entries)
        filtered = resolve_snapshot(snapshot, TransformOptions())
        return compute_budget_comparison(
            filtered,
            snapshot.budget_entries,
            LedgerLookups.from_snapshot(snapshot),
            **kwargs,
        )

    return _compare


def test_carry_forward_across_months(compare, make_transaction, budget_entry) -> None:
    """Unspent budget rolls into the next month."""
    comparison = compare(
        [
            make_transaction("j", "2025-01-10", -45000, category="cat1"),
            make_transaction("f", "2025-02-10", -3000, category="cat1"),
        ],
        [budget_entry("cat1", 202501, "500")],
    )

    groceries = comparison.category_budgets[0]
    january, february, march = groceries.monthly_budgets[:3]
    assert groceries.category_name == "Groceries"
    assert groceries.category_group == "Food"
    assert (january.effective_budget, january.remaining) == (Decimal("500"), Decimal("50"))
    assert february.carry_forward == Decimal("50")
    assert february.effective_budget == Decimal("50")
    assert february.remaining == Decimal("20")
    assert february.variance == Decimal("-20")
    assert february.variance_percentage == pytest.approx(-40.0)
    assert march.carry_forward == Decimal("20")
    assert groceries.total_budgeted == Decimal("500")
    assert groceries.total_actual == Decimal("480")
    assert groceries.total_effective_budget == Decimal("750")
    assert groceries.total_variance == Decimal("-270")


def test_overspending_does_not_carry_a_debt() -> None:
    """A negative remainder resets the carry to zero."""
    zero = Decimal("0")
    budgeted = [Decimal("100"), Decimal("100")] + [zero] * 10
    actual = [Decimal("150"), Decimal("40")] + [zero] * 10

    months = walk_category_months(budgeted, actual)

    assert months[0].remaining == Decimal("-50")
    assert months[0].variance == Decimal("50")
    assert months[1].carry_forward == zero
    assert months[1].effective_budget == Decimal("100")
    assert months[2].carry_forward == Decimal("60")


def test_zero_effective_budget_has_zero_variance_percentage() -> None:
    """Spending without any budget yields a zero percentage."""
    zero = Decimal("0")
    months = walk_category_months([zero] * 12, [Decimal("30")] + [zero] * 11)

    assert months[0].variance == Decimal("30")
    assert months[0].variance_percentage == 0.0


def test_category_set_and_labels(compare, make_transaction, budget_entry) -> None:
    """Budgeted categories come first, then actual-only ones."""
    comparison = compare(
        [
            make_transaction("r", "2025-03-01", -120000, category="cat4"),
            make_transaction("t", "2025-03-02", -5000, payee="t-acc2"),
            make_transaction("u", "2025-03-03", -700),
            make_transaction("s", "2025-03-04", 500000, category="cat2"),
        ],
        [
            budget_entry("cat3", "March", "80"),
            budget_entry("cat1", "2025-03", "200"),
        ],
        group_sort_orders={"Food": 2, "Housing": 1},
        group_tombstones={"Food": False},
    )

    labels = [(c.category_id, c.category_name) for c in comparison.category_budgets]
    assert labels == [
        ("cat3", "Deleted: Dining"),
        ("cat1", "Groceries"),
        ("cat4", "Rent"),
        ("transfer:acc2", "Transfer: Brokerage"),
        ("uncategorized", "Uncategorized"),
    ]
    assert comparison.group_sort_order == {"Food": 2, "Housing": 1}
    assert comparison.group_tombstones["Food"] is False
    rent = comparison.category_budgets[2]
    assert rent.total_budgeted == Decimal("0")
    assert rent.total_actual == Decimal("1200")


def test_monthly_and_overall_totals(compare, make_transaction, budget_entry) -> None:
    """Monthly totals and overall figures sum the category rows."""
    comparison = compare(
        [
            make_transaction("a", "2025-01-05", -10000, category="cat1"),
            make_transaction("b", "2025-01-06", -20000, category="cat4"),
        ],
        [
            budget_entry("cat1", "Jan", "150"),
            budget_entry("cat4", 1, "150"),
        ],
    )

    january = comparison.monthly_totals[0]
    assert january.month == "January"
    assert january.total_budgeted == Decimal("300")
    assert january.total_actual == Decimal("300")
    assert january.variance == Decimal("0")
    assert comparison.overall_budgeted == Decimal("300")
    assert comparison.overall_actual == Decimal("300")
    assert comparison.overall_variance == (
        comparison.overall_actual - comparison.overall_effective_budget
    )
    assert comparison.overall_effective_budget == sum(
        c.total_effective_budget for c in comparison.category_budgets
    )


def test_no_entries_means_no_comparison(compare, make_transaction) -> None:
    """Without budget entries the comparison is absent."""
    assert compare([make_transaction("a", "2025-01-05", -100, category="cat1")], []) is None


def test_comparison_is_idempotent(compare, make_transaction, budget_entry) -> None:
    """Running the comparison twice gives equal results."""
    transactions = [make_transaction("a", "2025-04-05", -2500, category="cat1")]
    entries = [budget_entry("cat1", 202504, "40")]

    assert compare(transactions, entries) == compare(transactions, entries)


def test_budget_map_skips_bad_months_and_keeps_last(budget_entry, logger) -> None:
    """Unparseable months are skipped; duplicates keep the last amount."""
    budgets = build_budget_map(
        [
            budget_entry("cat1", "Smarch", "10"),
            budget_entry("cat1", "Feb", "20"),
            budget_entry("cat1", "February", "25"),
        ],
        logger,
    )

    assert budgets["cat1"][1] == Decimal("25")
    assert sum(budgets["cat1"]) == Decimal("25")
    logger.debug.assert_called_once()
    assert "Smarch" in logger.debug.call_args.args[0]
