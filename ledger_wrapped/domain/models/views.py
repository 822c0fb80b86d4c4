"""Domain models for the derived year-in-review views."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from ledger_wrapped.domain.constants import DEFAULT_CURRENCY_SYMBOL
from ledger_wrapped.domain.models.resolved import ResolvedTransaction

if TYPE_CHECKING:
    from ledger_wrapped.domain.models.budget import BudgetComparison


@dataclass(frozen=True)
class MonthlyData:
    """Income, expenses and net savings of one calendar month."""

    month: str
    income: Decimal
    expenses: Decimal
    net_savings: Decimal


@dataclass(frozen=True)
class YearTotals:
    """Year-level totals derived from the monthly breakdown."""

    total_income: Decimal
    total_expenses: Decimal
    net_savings: Decimal
    savings_rate: float


@dataclass(frozen=True)
class CategorySpending:
    """Net (or absolute) spending of one category."""

    category_id: str
    category_name: str
    amount: Decimal
    percentage: float


@dataclass(frozen=True)
class CategoryRankings:
    """Top slice and full sorted list of category spending."""

    top: tuple[CategorySpending, ...]
    all: tuple[CategorySpending, ...]


@dataclass(frozen=True)
class MonthAmount:
    """Amount attributed to one month."""

    month: str
    amount: Decimal


@dataclass(frozen=True)
class CategoryTrend:
    """Twelve-point monthly series for one category."""

    category_id: str
    category_name: str
    monthly_data: tuple[MonthAmount, ...]


@dataclass(frozen=True)
class PayeeSpending:
    """Spending and transaction count of one payee label."""

    payee: str
    amount: Decimal
    transaction_count: int
    percentage: float = 0.0


@dataclass(frozen=True)
class PayeeRankings:
    """Top slice and full sorted list of payee spending."""

    top: tuple[PayeeSpending, ...]
    all: tuple[PayeeSpending, ...]


@dataclass(frozen=True)
class TransactionStats:
    """Count, mean magnitude and largest transaction of the filtered set."""

    total_count: int
    average_amount: Decimal
    largest_transaction: ResolvedTransaction | None


@dataclass(frozen=True)
class TopMonth:
    """One of the highest-spending months."""

    month: str
    spending: Decimal


@dataclass(frozen=True)
class CalendarDay:
    """Activity of one calendar day."""

    date: date
    count: int
    amount: Decimal


@dataclass(frozen=True)
class WeeklySpending:
    """Spending of one Sunday-started week clamped to the year."""

    week: str
    start_date: date
    end_date: date
    total_spending: Decimal
    average_per_day: Decimal


@dataclass(frozen=True)
class SpendingPeriod:
    """Week selected as fastest or slowest spending period."""

    period: str
    amount: Decimal
    average_per_day: Decimal


@dataclass(frozen=True)
class SpendingVelocity:
    """Daily average spending and the weekly breakdown behind it."""

    daily_average: Decimal
    fastest_period: SpendingPeriod
    slowest_period: SpendingPeriod
    weekly_data: tuple[WeeklySpending, ...]


@dataclass(frozen=True)
class DayOfWeekSpending:
    """Expense totals for one weekday, Sunday=0..Saturday=6."""

    day_of_week: int
    day_name: str
    total_spending: Decimal
    transaction_count: int
    average_transaction_size: Decimal


@dataclass(frozen=True)
class AccountBreakdown:
    """Spending attributed to one account."""

    account_id: str
    account_name: str
    total_spending: Decimal
    transaction_count: int
    percentage: float


@dataclass(frozen=True)
class Streak:
    """Run of consecutive days; dates are None for an empty run."""

    days: int = 0
    start_date: date | None = None
    end_date: date | None = None


@dataclass(frozen=True)
class SpendingStreaks:
    """Longest spending and no-spending runs plus day-class totals."""

    longest_spending_streak: Streak
    longest_no_spending_streak: Streak
    total_spending_days: int
    total_no_spending_days: int


@dataclass(frozen=True)
class SizeBucket:
    """Histogram bucket of expense magnitudes; max is None when open."""

    range: str
    min: Decimal
    max: Decimal | None
    count: int
    percentage: float


@dataclass(frozen=True)
class TransactionSizeDistribution:
    """Histogram, median and mode of expense magnitudes."""

    buckets: tuple[SizeBucket, ...]
    median: Decimal
    mode: Decimal
    most_common_range: str


@dataclass(frozen=True)
class QuarterlyData:
    """Quarter rollup of the monthly breakdown."""

    quarter: str
    months: tuple[str, ...]
    income: Decimal
    expenses: Decimal
    net_savings: Decimal


@dataclass(frozen=True)
class MonthlyChange:
    """Month-over-month change of a category amount."""

    month: str
    amount: Decimal
    change: Decimal
    percentage_change: float


@dataclass(frozen=True)
class CategoryGrowth:
    """January to December growth of one top category."""

    category_id: str
    category_name: str
    first_month_amount: Decimal
    last_month_amount: Decimal
    total_change: Decimal
    percentage_change: float
    monthly_changes: tuple[MonthlyChange, ...]


@dataclass(frozen=True)
class SavingsMilestone:
    """First month in which cumulative savings crossed a threshold."""

    milestone: str
    amount: Decimal
    date: date
    cumulative_savings: Decimal


@dataclass(frozen=True)
class CumulativeSavings:
    """Actual cumulative savings at the end of one month."""

    month: str
    cumulative_savings: Decimal


@dataclass(frozen=True)
class MonthlyProjection:
    """Projected month assuming the year's daily averages persist."""

    month: str
    projected_income: Decimal
    projected_expenses: Decimal
    projected_net_savings: Decimal
    cumulative_savings: Decimal


@dataclass(frozen=True)
class FutureProjection:
    """Twelve-month forward projection seeded from actual savings."""

    daily_average_income: Decimal
    daily_average_expenses: Decimal
    daily_net_savings: Decimal
    actual_data: tuple[CumulativeSavings, ...]
    monthly_projections: tuple[MonthlyProjection, ...]
    months_until_zero: int | None
    projected_year_end_savings: Decimal


@dataclass(frozen=True)
class WrappedData:
    """Immutable year-in-review snapshot returned by the transform.

    Attributes:
        year: Target calendar year.
        total_income: Sum of income in major units.
        total_expenses: Sum of expense magnitudes in major units.
        net_savings: total_income - total_expenses.
        savings_rate: net_savings / total_income * 100, 0 without income.
        budget_comparison: None when the ledger carries no budget entries.
        transactions: Filtered transactions every view was computed from.
        currency_symbol: Display symbol echoed back to the consumer.
        fetched_at: UTC timestamp of the computation.
    """

    year: int
    total_income: Decimal
    total_expenses: Decimal
    net_savings: Decimal
    savings_rate: float
    monthly_data: tuple[MonthlyData, ...]
    top_categories: tuple[CategorySpending, ...]
    all_categories: tuple[CategorySpending, ...]
    category_trends: tuple[CategoryTrend, ...]
    top_payees: tuple[PayeeSpending, ...]
    all_payees: tuple[PayeeSpending, ...]
    transaction_stats: TransactionStats
    top_months: tuple[TopMonth, ...]
    calendar_data: tuple[CalendarDay, ...]
    spending_velocity: SpendingVelocity
    day_of_week_spending: tuple[DayOfWeekSpending, ...]
    account_breakdown: tuple[AccountBreakdown, ...]
    spending_streaks: SpendingStreaks
    transaction_size_distribution: TransactionSizeDistribution
    quarterly_data: tuple[QuarterlyData, ...]
    category_growth: tuple[CategoryGrowth, ...]
    savings_milestones: tuple[SavingsMilestone, ...]
    future_projection: FutureProjection
    fetched_at: datetime
    budget_comparison: "BudgetComparison | None" = None
    transactions: tuple[ResolvedTransaction, ...] = field(default=(), repr=False)
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL


__all__ = [
    "MonthlyData",
    "YearTotals",
    "CategorySpending",
    "CategoryRankings",
    "MonthAmount",
    "CategoryTrend",
    "PayeeSpending",
    "PayeeRankings",
    "TransactionStats",
    "TopMonth",
    "CalendarDay",
    "WeeklySpending",
    "SpendingPeriod",
    "SpendingVelocity",
    "DayOfWeekSpending",
    "AccountBreakdown",
    "Streak",
    "SpendingStreaks",
    "SizeBucket",
    "TransactionSizeDistribution",
    "QuarterlyData",
    "MonthlyChange",
    "CategoryGrowth",
    "SavingsMilestone",
    "CumulativeSavings",
    "MonthlyProjection",
    "FutureProjection",
    "WrappedData",
]
