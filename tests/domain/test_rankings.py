"""Tests for category, payee and account rankings."""

from decimal import Decimal

import pytest

from ledger_wrapped.domain.models import Category, TransformOptions
from ledger_wrapped.domain.models.views import CategoryTrend, MonthAmount
from ledger_wrapped.domain.constants import MONTHS
from ledger_wrapped.domain.services.rankings import (
    compute_account_breakdown,
    compute_category_growth,
    compute_category_rankings,
    compute_category_trends,
    compute_payee_rankings,
    contribution,
)


def test_groceries_ranking_and_trend(make_snapshot, make_transaction, resolve_snapshot) -> None:
    """Two grocery months rank first at 100% with a zero-filled trend."""
    options = TransformOptions()
    filtered = resolve_snapshot(
        make_snapshot(
            [
                make_transaction("t1", "2025-01-15", -10000, category="cat1"),
                make_transaction("t2", "2025-02-15", -20000, category="cat1"),
            ]
        ),
        options,
    )

    rankings = compute_category_rankings(filtered, options, Decimal("300"))
    trends = compute_category_trends(filtered, options, rankings.top)

    top = rankings.top[0]
    assert (top.category_name, top.amount, top.percentage) == (
        "Groceries",
        Decimal("300"),
        100.0,
    )
    amounts = [point.amount for point in trends[0].monthly_data]
    assert amounts == [Decimal("100"), Decimal("200")] + [Decimal("0")] * 10
    assert [point.month for point in trends[0].monthly_data] == list(MONTHS)


def test_income_netting_toggle(make_snapshot, make_transaction, resolve_snapshot) -> None:
    """Refunds net against spending only when income inclusion is on."""
    snapshot = make_snapshot(
        [
            make_transaction("t1", "2025-01-15", -10000, category="cat1", payee="p1"),
            make_transaction("t2", "2025-01-20", 2000, category="cat1", payee="p1"),
        ]
    )
    netted = TransformOptions()
    absolute = TransformOptions(include_income_in_category_totals=False)

    net_rank = compute_category_rankings(
        resolve_snapshot(snapshot, netted), netted, Decimal("100")
    )
    abs_rank = compute_category_rankings(
        resolve_snapshot(snapshot, absolute), absolute, Decimal("100")
    )
    net_payees = compute_payee_rankings(
        resolve_snapshot(snapshot, netted), netted, Decimal("100")
    )
    abs_payees = compute_payee_rankings(
        resolve_snapshot(snapshot, absolute), absolute, Decimal("100")
    )

    assert net_rank.top[0].amount == Decimal("80")
    assert net_rank.top[0].percentage == pytest.approx(80.0)
    assert abs_rank.top[0].amount == Decimal("100")
    assert net_payees.top[0].transaction_count == 2
    assert abs_payees.top[0].transaction_count == 1


def test_net_income_category_can_be_negative(
    make_snapshot, make_transaction, resolve_snapshot
) -> None:
    """A category dominated by income has negative net spending."""
    options = TransformOptions()
    filtered = resolve_snapshot(
        make_snapshot(
            [
                make_transaction("s", "2025-01-31", 300000, category="cat2"),
                make_transaction("g", "2025-01-10", -5000, category="cat1"),
            ]
        ),
        options,
    )

    rankings = compute_category_rankings(filtered, options, Decimal("50"))

    assert [(c.category_id, c.amount) for c in rankings.all] == [
        ("cat1", Decimal("50")),
        ("cat2", Decimal("-3000")),
    ]


def test_contribution_ignores_income_without_netting(make_snapshot, make_transaction, resolve_snapshot) -> None:
    """Income rows contribute nothing with netting off."""
    snapshot = make_snapshot([make_transaction("s", "2025-01-31", 1000, category="cat2")])
    income = resolve_snapshot(snapshot)[0]

    assert contribution(income, TransformOptions(include_income_in_category_totals=False)) is None
    assert contribution(income, TransformOptions()) == Decimal("-10")


def test_top_slice_and_full_list_percentages(
    make_snapshot, make_transaction, resolve_snapshot
) -> None:
    """Top ten sum to at most 100%; the full list sums to 100%."""
    categories = tuple(Category(id=f"c{i}", name=f"Cat {i}") for i in range(12))
    options = TransformOptions(include_income_in_category_totals=False)
    transactions = [
        make_transaction(f"t{i}", "2025-05-05", -(i + 1) * 1000, category=f"c{i}")
        for i in range(12)
    ]
    filtered = resolve_snapshot(
        make_snapshot(transactions, categories=categories), options
    )
    total = sum(item.magnitude for item in filtered)

    rankings = compute_category_rankings(filtered, options, total)

    assert len(rankings.top) == 10
    assert len(rankings.all) == 12
    assert rankings.top[0].category_id == "c11"
    assert sum(c.percentage for c in rankings.top) <= 100.0
    assert sum(c.percentage for c in rankings.all) == pytest.approx(100.0)


@pytest.mark.parametrize(
    ("netting", "expected_sum"),
    [(True, -400.0), (False, 100.0)],
)
def test_full_list_percentages_follow_net_spending(
    make_snapshot, make_transaction, resolve_snapshot, netting, expected_sum
) -> None:
    """Netted income pulls the full-list sum to net spending over expenses."""
    options = TransformOptions(include_income_in_category_totals=netting)
    filtered = resolve_snapshot(
        make_snapshot(
            [
                make_transaction("g", "2025-03-01", -10000, category="cat1", payee="p1"),
                make_transaction("s", "2025-03-31", 50000, category="cat2", payee="p2"),
            ]
        ),
        options,
    )
    total_expenses = Decimal("100")

    categories = compute_category_rankings(filtered, options, total_expenses)
    payees = compute_payee_rankings(filtered, options, total_expenses)

    assert sum(c.percentage for c in categories.all) == pytest.approx(expected_sum)
    assert sum(p.percentage for p in payees.all) == pytest.approx(expected_sum)


def test_ties_keep_first_occurrence(make_snapshot, make_transaction, resolve_snapshot) -> None:
    """Equal amounts keep the order categories first appeared in."""
    options = TransformOptions()
    filtered = resolve_snapshot(
        make_snapshot(
            [
                make_transaction("a", "2025-01-01", -100, category="cat4"),
                make_transaction("b", "2025-01-02", -100, category="cat1"),
            ]
        ),
        options,
    )

    rankings = compute_category_rankings(filtered, options, Decimal("2"))

    assert [c.category_id for c in rankings.top] == ["cat4", "cat1"]


def test_transfers_to_one_destination_sum_together(
    make_snapshot, make_transaction, resolve_snapshot
) -> None:
    """Legs to the same destination share one category and payee."""
    options = TransformOptions()
    filtered = resolve_snapshot(
        make_snapshot(
            [
                make_transaction("t1", "2025-01-01", -10000, payee="t-acc2"),
                make_transaction("t2", "2025-02-01", -5000, payee="t-acc2"),
            ]
        ),
        options,
    )

    categories = compute_category_rankings(filtered, options, Decimal("150"))
    payees = compute_payee_rankings(filtered, options, Decimal("150"))

    assert [(c.category_id, c.category_name, c.amount) for c in categories.all] == [
        ("transfer:acc2", "Transfer: Brokerage", Decimal("150"))
    ]
    assert [(p.payee, p.amount, p.transaction_count) for p in payees.all] == [
        ("Transfer: Brokerage", Decimal("150"), 2)
    ]


def test_account_breakdown(make_snapshot, make_transaction, resolve_snapshot) -> None:
    """Accounts are ranked by spending with percentages of total expenses."""
    options = TransformOptions(include_off_budget=True)
    filtered = resolve_snapshot(
        make_snapshot(
            [
                make_transaction("a", "2025-01-01", -2500, category="cat1"),
                make_transaction("b", "2025-01-01", -7500, account="acc3", category="cat1"),
            ]
        ),
        options,
    )

    breakdown = compute_account_breakdown(filtered, options, Decimal("100"))

    assert [(a.account_name, a.total_spending, a.percentage) for a in breakdown] == [
        ("Savings", Decimal("75"), 75.0),
        ("Checking", Decimal("25"), 25.0),
    ]
    assert breakdown[0].transaction_count == 1


def test_percentages_are_zero_without_expenses(make_snapshot, make_transaction, resolve_snapshot) -> None:
    """A zero denominator yields zero percentages."""
    options = TransformOptions()
    filtered = resolve_snapshot(
        make_snapshot([make_transaction("s", "2025-01-01", 1000, category="cat2")]),
        options,
    )

    rankings = compute_category_rankings(filtered, options, Decimal("0"))

    assert rankings.all[0].percentage == 0.0


def test_category_growth() -> None:
    """Growth compares December with January and each month with the last."""
    amounts = ["100", "150", "0"] + ["0"] * 8 + ["50"]
    trend = CategoryTrend(
        category_id="cat1",
        category_name="Groceries",
        monthly_data=tuple(
            MonthAmount(month=name, amount=Decimal(value))
            for name, value in zip(MONTHS, amounts)
        ),
    )

    growth = compute_category_growth([trend])[0]

    assert growth.first_month_amount == Decimal("100")
    assert growth.last_month_amount == Decimal("50")
    assert growth.total_change == Decimal("-50")
    assert growth.percentage_change == pytest.approx(-50.0)
    changes = growth.monthly_changes
    assert (changes[0].change, changes[0].percentage_change) == (Decimal("100"), 0.0)
    assert changes[1].percentage_change == pytest.approx(50.0)
    assert changes[2].percentage_change == pytest.approx(-100.0)
    assert changes[3].percentage_change == 0.0
    assert changes[11].change == Decimal("50")


def test_category_growth_zero_base_has_zero_percentage() -> None:
    """Growth from nothing reports zero percentage change."""
    amounts = ["0"] * 11 + ["80"]
    trend = CategoryTrend(
        category_id="c",
        category_name="C",
        monthly_data=tuple(
            MonthAmount(month=name, amount=Decimal(value))
            for name, value in zip(MONTHS, amounts)
        ),
    )

    growth = compute_category_growth([trend])[0]

    assert growth.total_change == Decimal("80")
    assert growth.percentage_change == 0.0
