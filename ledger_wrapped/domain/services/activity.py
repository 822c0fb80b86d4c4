"""Day-level activity views: calendar, velocity, weekdays and streaks."""

from collections import defaultdict
from collections.abc import Iterator, Sequence
from datetime import date, timedelta
from decimal import Decimal

from ledger_wrapped.domain.constants import DAY_NAMES
from ledger_wrapped.domain.models import (
    CalendarDay,
    DayOfWeekSpending,
    ResolvedTransaction,
    SpendingPeriod,
    SpendingStreaks,
    SpendingVelocity,
    Streak,
    WeeklySpending,
)
from ledger_wrapped.utils.decimal_utils import ratio

_ONE_DAY = timedelta(days=1)


def days_in_year(year: int) -> int:
    return (date(year + 1, 1, 1) - date(year, 1, 1)).days


def iter_year_days(year: int) -> Iterator[date]:
    """Yield every calendar day of the year in order."""
    current = date(year, 1, 1)
    while current.year == year:
        yield current
        current += _ONE_DAY


def sunday_index(day: date) -> int:
    """Return the weekday with Sunday=0..Saturday=6."""
    return (day.weekday() + 1) % 7


def _expenses_by_day(
    transactions: Sequence[ResolvedTransaction],
) -> dict[date, Decimal]:
    totals: dict[date, Decimal] = defaultdict(lambda: Decimal("0"))
    for item in transactions:
        if item.is_expense:
            totals[item.date] += item.magnitude
    return totals


def compute_calendar_data(
    transactions: Sequence[ResolvedTransaction],
    year: int,
) -> tuple[CalendarDay, ...]:
    """Return one entry per day with transaction count and expense sum.

    Args:
        transactions: Filtered transactions.
        year: Target year.

    Returns:
        tuple[CalendarDay, ...]: Every day of the year, zero-filled.
    """
    counts: dict[date, int] = defaultdict(int)
    for item in transactions:
        counts[item.date] += 1
    expenses = _expenses_by_day(transactions)
    return tuple(
        CalendarDay(
            date=day,
            count=counts.get(day, 0),
            amount=expenses.get(day, Decimal("0")),
        )
        for day in iter_year_days(year)
    )


def _weeks(year: int) -> Iterator[tuple[date, date]]:
    year_start = date(year, 1, 1)
    year_end = date(year, 12, 31)
    week_start = year_start - timedelta(days=sunday_index(year_start))
    while week_start <= year_end:
        week_end = week_start + timedelta(days=6)
        yield max(week_start, year_start), min(week_end, year_end)
        week_start += timedelta(days=7)


def compute_spending_velocity(
    transactions: Sequence[ResolvedTransaction],
    year: int,
    total_expenses: Decimal,
) -> SpendingVelocity:
    """Compute daily average spending and Sunday-started weekly buckets.

    Weeks at the edges of the year are clamped to it, so their per-day
    average uses the number of days actually inside the year.

    Args:
        transactions: Filtered transactions.
        year: Target year.
        total_expenses: Total expense magnitude of the year.

    Returns:
        SpendingVelocity: Daily average, weekly data, fastest and slowest week.
    """
    expenses = _expenses_by_day(transactions)
    weekly: list[WeeklySpending] = []
    for number, (start, end) in enumerate(_weeks(year), start=1):
        span = (end - start).days + 1
        total = Decimal("0")
        for offset in range(span):
            total += expenses.get(start + timedelta(days=offset), Decimal("0"))
        weekly.append(
            WeeklySpending(
                week=f"Week {number}",
                start_date=start,
                end_date=end,
                total_spending=total,
                average_per_day=ratio(total, span),
            )
        )

    fastest = weekly[0] if weekly else None
    slowest = weekly[0] if weekly else None
    for week in weekly[1:]:
        if week.average_per_day > fastest.average_per_day:
            fastest = week
        if week.average_per_day < slowest.average_per_day:
            slowest = week

    return SpendingVelocity(
        daily_average=ratio(total_expenses, days_in_year(year)),
        fastest_period=_as_period(fastest),
        slowest_period=_as_period(slowest),
        weekly_data=tuple(weekly),
    )


def _as_period(week: WeeklySpending | None) -> SpendingPeriod:
    if week is None:
        return SpendingPeriod(period="N/A", amount=Decimal("0"), average_per_day=Decimal("0"))
    return SpendingPeriod(
        period=week.week,
        amount=week.total_spending,
        average_per_day=week.average_per_day,
    )


def compute_day_of_week_spending(
    transactions: Sequence[ResolvedTransaction],
) -> tuple[DayOfWeekSpending, ...]:
    """Aggregate expenses per weekday, Sunday first."""
    totals = [Decimal("0")] * 7
    counts = [0] * 7
    for item in transactions:
        if not item.is_expense:
            continue
        index = sunday_index(item.date)
        totals[index] += item.magnitude
        counts[index] += 1
    return tuple(
        DayOfWeekSpending(
            day_of_week=index,
            day_name=name,
            total_spending=totals[index],
            transaction_count=counts[index],
            average_transaction_size=ratio(totals[index], counts[index]),
        )
        for index, name in enumerate(DAY_NAMES)
    )


def compute_spending_streaks(
    transactions: Sequence[ResolvedTransaction],
    year: int,
) -> SpendingStreaks:
    """Find the longest runs of spending and no-spending days.

    Args:
        transactions: Filtered transactions.
        year: Target year.

    Returns:
        SpendingStreaks: Longest runs and the day count of each class.
    """
    spending_days = {
        item.date for item in transactions if item.is_expense and item.date.year == year
    }
    longest = {True: Streak(), False: Streak()}
    current_kind: bool | None = None
    current_start: date | None = None
    current_days = 0

    for day in iter_year_days(year):
        kind = day in spending_days
        if kind != current_kind:
            current_kind = kind
            current_start = day
            current_days = 0
        current_days += 1
        if current_days > longest[kind].days:
            longest[kind] = Streak(days=current_days, start_date=current_start, end_date=day)

    return SpendingStreaks(
        longest_spending_streak=longest[True],
        longest_no_spending_streak=longest[False],
        total_spending_days=len(spending_days),
        total_no_spending_days=days_in_year(year) - len(spending_days),
    )


__all__ = [
    "days_in_year",
    "iter_year_days",
    "sunday_index",
    "compute_calendar_data",
    "compute_spending_velocity",
    "compute_day_of_week_spending",
    "compute_spending_streaks",
]
