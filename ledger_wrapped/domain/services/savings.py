"""Savings milestones and forward projection."""

import calendar
from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from ledger_wrapped.domain.constants import (
    DAYS_PER_MONTH,
    MONTHS,
    SAVINGS_MILESTONE_THRESHOLDS,
)
from ledger_wrapped.domain.models import (
    CumulativeSavings,
    FutureProjection,
    MonthlyData,
    MonthlyProjection,
    SavingsMilestone,
    YearTotals,
)
from ledger_wrapped.domain.services.activity import days_in_year
from ledger_wrapped.utils.decimal_utils import ratio
from ledger_wrapped.utils.folds import scan


def milestone_label(threshold: Decimal) -> str:
    """Return the short "$10k" style label of a threshold."""
    return f"${threshold / 1000:.0f}k"


def _month_end(year: int, month_index: int) -> date:
    month = month_index + 1
    return date(year, month, calendar.monthrange(year, month)[1])


def compute_savings_milestones(
    monthly_data: Sequence[MonthlyData],
    year: int,
    thresholds: Sequence[Decimal] = SAVINGS_MILESTONE_THRESHOLDS,
) -> tuple[SavingsMilestone, ...]:
    """Record the first month cumulative savings crosses each threshold.

    A threshold is crossed when the previous cumulative value is below it
    and the new one is at or above it. Each threshold is recorded once,
    even if savings later fall back below it.

    Args:
        monthly_data: Twelve-month breakdown, January first.
        year: Year used to date the milestones.
        thresholds: Ascending milestone amounts.

    Returns:
        tuple[SavingsMilestone, ...]: Milestones in crossing order.
    """

    def step(state, indexed_month):
        cumulative, reached = state
        index, month = indexed_month
        previous = cumulative
        cumulative = previous + month.net_savings
        crossed = tuple(
            SavingsMilestone(
                milestone=milestone_label(threshold),
                amount=threshold,
                date=_month_end(year, index),
                cumulative_savings=cumulative,
            )
            for threshold in thresholds
            if threshold not in reached and previous < threshold <= cumulative
        )
        reached = reached | {item.amount for item in crossed}
        return (cumulative, reached), crossed

    _, per_month = scan(step, (Decimal("0"), frozenset()), enumerate(monthly_data))
    return tuple(milestone for crossed in per_month for milestone in crossed)


def compute_future_projection(
    monthly_data: Sequence[MonthlyData],
    totals: YearTotals,
    year: int,
) -> FutureProjection:
    """Project twelve months ahead assuming the year's daily averages hold.

    The projection starts from the actual cumulative savings at year end.
    The first projected month keeps that value and each later month adds
    the projected net savings.

    Args:
        monthly_data: Twelve-month breakdown of the year.
        totals: Year totals.
        year: Target year, used for its day count.

    Returns:
        FutureProjection: Daily averages, actual and projected series.
    """
    days = days_in_year(year)
    daily_income = ratio(totals.total_income, days)
    daily_expenses = ratio(totals.total_expenses, days)
    daily_net = daily_income - daily_expenses

    def accumulate(cumulative, month):
        cumulative += month.net_savings
        return cumulative, CumulativeSavings(
            month=month.month, cumulative_savings=cumulative
        )

    actual_end, actual_data = scan(accumulate, Decimal("0"), monthly_data)
    seed = actual_end if actual_data else totals.net_savings

    projected_income = daily_income * DAYS_PER_MONTH
    projected_expenses = daily_expenses * DAYS_PER_MONTH
    projected_net = projected_income - projected_expenses

    def project(cumulative, indexed_month):
        index, month = indexed_month
        if index > 0:
            cumulative += projected_net
        return cumulative, MonthlyProjection(
            month=month,
            projected_income=projected_income,
            projected_expenses=projected_expenses,
            projected_net_savings=projected_net,
            cumulative_savings=cumulative,
        )

    year_end, projections = scan(project, seed, enumerate(MONTHS))

    months_until_zero = None
    if daily_net < 0:
        months_until_zero = next(
            (
                index + 1
                for index, projection in enumerate(projections)
                if index > 0 and projection.cumulative_savings <= 0
            ),
            None,
        )

    return FutureProjection(
        daily_average_income=daily_income,
        daily_average_expenses=daily_expenses,
        daily_net_savings=daily_net,
        actual_data=actual_data,
        monthly_projections=projections,
        months_until_zero=months_until_zero,
        projected_year_end_savings=year_end,
    )


__all__ = [
    "milestone_label",
    "compute_savings_milestones",
    "compute_future_projection",
]
