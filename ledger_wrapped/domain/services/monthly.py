"""Monthly, quarterly and year totals."""

from collections.abc import Sequence
from decimal import Decimal

from ledger_wrapped.domain.constants import MONTHS, QUARTERS, TOP_MONTHS_LIMIT
from ledger_wrapped.domain.models import (
    MonthlyData,
    QuarterlyData,
    ResolvedTransaction,
    TopMonth,
    YearTotals,
)
from ledger_wrapped.utils.decimal_utils import percentage


def compute_monthly_breakdown(
    transactions: Sequence[ResolvedTransaction],
) -> tuple[MonthlyData, ...]:
    """Sum income and expenses per calendar month.

    Args:
        transactions: Filtered transactions of the target year.

    Returns:
        tuple[MonthlyData, ...]: Twelve entries, January first.
    """
    income = [Decimal("0")] * 12
    expenses = [Decimal("0")] * 12
    for item in transactions:
        bucket = expenses if item.is_expense else income
        bucket[item.month_index] += item.magnitude
    return tuple(
        MonthlyData(
            month=name,
            income=income[index],
            expenses=expenses[index],
            net_savings=income[index] - expenses[index],
        )
        for index, name in enumerate(MONTHS)
    )


def compute_totals(monthly_data: Sequence[MonthlyData]) -> YearTotals:
    """Derive year totals and savings rate from the monthly breakdown."""
    total_income = sum((month.income for month in monthly_data), Decimal("0"))
    total_expenses = sum((month.expenses for month in monthly_data), Decimal("0"))
    net_savings = total_income - total_expenses
    savings_rate = percentage(net_savings, total_income) if total_income > 0 else 0.0
    return YearTotals(
        total_income=total_income,
        total_expenses=total_expenses,
        net_savings=net_savings,
        savings_rate=savings_rate,
    )


def compute_top_months(
    monthly_data: Sequence[MonthlyData],
    limit: int = TOP_MONTHS_LIMIT,
) -> tuple[TopMonth, ...]:
    """Return the highest-spending months; ties keep calendar order."""
    ranked = sorted(monthly_data, key=lambda month: month.expenses, reverse=True)
    return tuple(
        TopMonth(month=month.month, spending=month.expenses)
        for month in ranked[:limit]
    )


def compute_quarterly_data(
    monthly_data: Sequence[MonthlyData],
) -> tuple[QuarterlyData, ...]:
    """Roll the monthly breakdown up into Q1-Q4."""
    by_name = {month.month: month for month in monthly_data}
    quarters: list[QuarterlyData] = []
    for label, names in QUARTERS:
        members = [by_name[name] for name in names if name in by_name]
        quarters.append(
            QuarterlyData(
                quarter=label,
                months=tuple(names),
                income=sum((m.income for m in members), Decimal("0")),
                expenses=sum((m.expenses for m in members), Decimal("0")),
                net_savings=sum((m.net_savings for m in members), Decimal("0")),
            )
        )
    return tuple(quarters)


__all__ = [
    "compute_monthly_breakdown",
    "compute_totals",
    "compute_top_months",
    "compute_quarterly_data",
]
