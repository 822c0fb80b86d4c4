"""Domain models for budget-vs-actual comparison."""

from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class BudgetCategoryKey:
    """Member of the budget category set, tagged with its sources."""

    category_id: str
    has_budget: bool
    has_actual: bool


@dataclass(frozen=True)
class MonthlyBudget:
    """One month of a category's carry-forward walk.

    Attributes:
        month: Month name.
        budgeted_amount: Amount budgeted for the month.
        actual_amount: Expense magnitude spent in the month.
        carry_forward: Unspent budget carried in from the previous month.
        effective_budget: budgeted_amount + carry_forward.
        remaining: effective_budget - actual_amount.
        variance: actual_amount - effective_budget.
        variance_percentage: variance / effective_budget * 100.
    """

    month: str
    budgeted_amount: Decimal
    actual_amount: Decimal
    carry_forward: Decimal
    effective_budget: Decimal
    remaining: Decimal
    variance: Decimal
    variance_percentage: float


@dataclass(frozen=True)
class CategoryBudget:
    """Twelve-month budget comparison of one category."""

    category_id: str
    category_name: str
    monthly_budgets: tuple[MonthlyBudget, ...]
    total_budgeted: Decimal
    total_actual: Decimal
    total_effective_budget: Decimal
    total_variance: Decimal
    total_variance_percentage: float
    category_group: str | None = None


@dataclass(frozen=True)
class BudgetMonthlyTotal:
    """All categories summed for one month."""

    month: str
    total_budgeted: Decimal
    total_actual: Decimal
    total_effective_budget: Decimal
    variance: Decimal


@dataclass(frozen=True)
class BudgetComparison:
    """Budget comparison across every budgeted or spent category."""

    category_budgets: tuple[CategoryBudget, ...]
    monthly_totals: tuple[BudgetMonthlyTotal, ...]
    overall_budgeted: Decimal
    overall_actual: Decimal
    overall_effective_budget: Decimal
    overall_variance: Decimal
    overall_variance_percentage: float
    group_sort_order: Mapping[str, int] = field(
        default_factory=lambda: MappingProxyType({})
    )
    group_tombstones: Mapping[str, bool] = field(
        default_factory=lambda: MappingProxyType({})
    )


__all__ = [
    "BudgetCategoryKey",
    "MonthlyBudget",
    "CategoryBudget",
    "BudgetMonthlyTotal",
    "BudgetComparison",
]
