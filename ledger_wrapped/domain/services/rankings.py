"""Category, payee and account rankings with their trend views."""

from collections.abc import Callable, Sequence
from decimal import Decimal

from ledger_wrapped.domain.constants import MONTHS, TOP_RANKING_LIMIT
from ledger_wrapped.domain.models import (
    AccountBreakdown,
    CategoryGrowth,
    CategoryRankings,
    CategorySpending,
    CategoryTrend,
    MonthAmount,
    MonthlyChange,
    PayeeRankings,
    PayeeSpending,
    ResolvedTransaction,
    TransformOptions,
)
from ledger_wrapped.utils.decimal_utils import percentage


def contribution(
    transaction: ResolvedTransaction,
    options: TransformOptions,
) -> Decimal | None:
    """Return a transaction's contribution to a spending bucket.

    With income netting enabled expenses count positive and income negative.
    Otherwise only expense magnitudes count and income returns None.

    Args:
        transaction: Filtered transaction.
        options: Active toggles.

    Returns:
        Decimal | None: Contribution, or None when the row is ignored.
    """
    if options.include_income_in_category_totals:
        return -transaction.signed_amount
    if transaction.is_expense:
        return transaction.magnitude
    return None


def _accumulate(
    transactions: Sequence[ResolvedTransaction],
    options: TransformOptions,
    key: Callable[[ResolvedTransaction], str],
) -> dict[str, tuple[Decimal, int, ResolvedTransaction]]:
    buckets: dict[str, tuple[Decimal, int, ResolvedTransaction]] = {}
    for item in transactions:
        amount = contribution(item, options)
        if amount is None:
            continue
        bucket_key = key(item)
        total, count, first = buckets.get(bucket_key, (Decimal("0"), 0, item))
        buckets[bucket_key] = (total + amount, count + 1, first)
    return buckets


def compute_category_rankings(
    transactions: Sequence[ResolvedTransaction],
    options: TransformOptions,
    total_expenses: Decimal,
    limit: int = TOP_RANKING_LIMIT,
) -> CategoryRankings:
    """Rank categories by spending.

    Args:
        transactions: Filtered transactions.
        options: Active toggles.
        total_expenses: Denominator of the percentage field.
        limit: Size of the top slice.

    Returns:
        CategoryRankings: Top slice and full list, sorted descending.
    """
    buckets = _accumulate(transactions, options, lambda item: item.category_id)
    ranked = sorted(
        (
            CategorySpending(
                category_id=category_id,
                category_name=first.category_name,
                amount=amount,
                percentage=percentage(amount, total_expenses),
            )
            for category_id, (amount, _, first) in buckets.items()
        ),
        key=lambda entry: entry.amount,
        reverse=True,
    )
    return CategoryRankings(top=tuple(ranked[:limit]), all=tuple(ranked))


def compute_category_trends(
    transactions: Sequence[ResolvedTransaction],
    options: TransformOptions,
    categories: Sequence[CategorySpending],
) -> tuple[CategoryTrend, ...]:
    """Build a zero-filled twelve-month series for each ranked category."""
    series: dict[str, list[Decimal]] = {
        entry.category_id: [Decimal("0")] * 12 for entry in categories
    }
    for item in transactions:
        months = series.get(item.category_id)
        if months is None:
            continue
        amount = contribution(item, options)
        if amount is not None:
            months[item.month_index] += amount
    return tuple(
        CategoryTrend(
            category_id=entry.category_id,
            category_name=entry.category_name,
            monthly_data=tuple(
                MonthAmount(month=name, amount=amount)
                for name, amount in zip(MONTHS, series[entry.category_id])
            ),
        )
        for entry in categories
    )


def compute_category_growth(
    trends: Sequence[CategoryTrend],
) -> tuple[CategoryGrowth, ...]:
    """Compare January with December and month over month per category."""
    growth: list[CategoryGrowth] = []
    for trend in trends:
        amounts = [point.amount for point in trend.monthly_data]
        first = amounts[0] if amounts else Decimal("0")
        last = amounts[-1] if amounts else Decimal("0")
        changes: list[MonthlyChange] = []
        previous = Decimal("0")
        for point in trend.monthly_data:
            change = point.amount - previous
            changes.append(
                MonthlyChange(
                    month=point.month,
                    amount=point.amount,
                    change=change,
                    percentage_change=(
                        percentage(change, previous) if previous > 0 else 0.0
                    ),
                )
            )
            previous = point.amount
        total_change = last - first
        growth.append(
            CategoryGrowth(
                category_id=trend.category_id,
                category_name=trend.category_name,
                first_month_amount=first,
                last_month_amount=last,
                total_change=total_change,
                percentage_change=(
                    percentage(total_change, first) if first > 0 else 0.0
                ),
                monthly_changes=tuple(changes),
            )
        )
    return tuple(growth)


def compute_payee_rankings(
    transactions: Sequence[ResolvedTransaction],
    options: TransformOptions,
    total_expenses: Decimal,
    limit: int = TOP_RANKING_LIMIT,
) -> PayeeRankings:
    """Rank payee labels by spending, with transaction counts."""
    buckets = _accumulate(transactions, options, lambda item: item.payee_name)
    ranked = sorted(
        (
            PayeeSpending(
                payee=payee,
                amount=amount,
                transaction_count=count,
                percentage=percentage(amount, total_expenses),
            )
            for payee, (amount, count, _) in buckets.items()
        ),
        key=lambda entry: entry.amount,
        reverse=True,
    )
    return PayeeRankings(top=tuple(ranked[:limit]), all=tuple(ranked))


def compute_account_breakdown(
    transactions: Sequence[ResolvedTransaction],
    options: TransformOptions,
    total_expenses: Decimal,
) -> tuple[AccountBreakdown, ...]:
    """Attribute spending to accounts, sorted descending."""
    buckets = _accumulate(transactions, options, lambda item: item.account_id)
    ranked = sorted(
        (
            AccountBreakdown(
                account_id=account_id,
                account_name=first.account_name,
                total_spending=amount,
                transaction_count=count,
                percentage=percentage(amount, total_expenses),
            )
            for account_id, (amount, count, first) in buckets.items()
        ),
        key=lambda entry: entry.total_spending,
        reverse=True,
    )
    return tuple(ranked)


__all__ = [
    "contribution",
    "compute_category_rankings",
    "compute_category_trends",
    "compute_category_growth",
    "compute_payee_rankings",
    "compute_account_breakdown",
]
