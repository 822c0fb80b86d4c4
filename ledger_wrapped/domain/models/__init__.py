"""Domain models package."""

from .budget import (
    BudgetCategoryKey,
    BudgetComparison,
    BudgetMonthlyTotal,
    CategoryBudget,
    MonthlyBudget,
)
from .options import TransformOptions
from .records import (
    Account,
    BudgetEntry,
    Category,
    LedgerSnapshot,
    Payee,
    Transaction,
)
from .resolved import ExclusionReason, ResolvedTransaction, TransferDirection
from .views import (
    AccountBreakdown,
    CalendarDay,
    CategoryGrowth,
    CategoryRankings,
    CategorySpending,
    CategoryTrend,
    CumulativeSavings,
    DayOfWeekSpending,
    FutureProjection,
    MonthAmount,
    MonthlyChange,
    MonthlyData,
    MonthlyProjection,
    PayeeRankings,
    PayeeSpending,
    QuarterlyData,
    SavingsMilestone,
    SizeBucket,
    SpendingPeriod,
    SpendingStreaks,
    SpendingVelocity,
    Streak,
    TopMonth,
    TransactionSizeDistribution,
    TransactionStats,
    WeeklySpending,
    WrappedData,
    YearTotals,
)

__all__ = [
    "Account",
    "AccountBreakdown",
    "BudgetCategoryKey",
    "BudgetComparison",
    "BudgetEntry",
    "BudgetMonthlyTotal",
    "CalendarDay",
    "Category",
    "CategoryBudget",
    "CategoryGrowth",
    "CategoryRankings",
    "CategorySpending",
    "CategoryTrend",
    "CumulativeSavings",
    "DayOfWeekSpending",
    "ExclusionReason",
    "FutureProjection",
    "LedgerSnapshot",
    "MonthAmount",
    "MonthlyBudget",
    "MonthlyChange",
    "MonthlyData",
    "MonthlyProjection",
    "Payee",
    "PayeeRankings",
    "PayeeSpending",
    "QuarterlyData",
    "ResolvedTransaction",
    "SavingsMilestone",
    "SizeBucket",
    "SpendingPeriod",
    "SpendingStreaks",
    "SpendingVelocity",
    "Streak",
    "TopMonth",
    "Transaction",
    "TransactionSizeDistribution",
    "TransactionStats",
    "TransferDirection",
    "TransformOptions",
    "WeeklySpending",
    "WrappedData",
    "YearTotals",
]
