"""Budget-vs-actual comparison with month-to-month carry-forward."""

from collections.abc import Mapping, Sequence
from decimal import Decimal
from logging import Logger
from types import MappingProxyType

from ledger_wrapped.domain.constants import (
    BUDGET_DELETED_PREFIX,
    MONTHS,
    OFF_BUDGET_ID,
    OFF_BUDGET_NAME,
    TRANSFER_ID_PREFIX,
    UNCATEGORIZED_ID,
    UNCATEGORIZED_NAME,
)
from ledger_wrapped.domain.models import (
    BudgetCategoryKey,
    BudgetComparison,
    BudgetEntry,
    BudgetMonthlyTotal,
    CategoryBudget,
    MonthlyBudget,
    ResolvedTransaction,
)
from ledger_wrapped.domain.services.normalization import normalize_month_index
from ledger_wrapped.domain.services.resolver import (
    LedgerLookups,
    category_base_name,
    is_category_tombstoned,
    transfer_label,
)
from ledger_wrapped.utils.decimal_utils import percentage
from ledger_wrapped.utils.folds import scan

_ZERO = Decimal("0")


def build_budget_map(
    entries: Sequence[BudgetEntry],
    logger: Logger | None = None,
) -> dict[str, list[Decimal]]:
    """Index budget entries as category id -> twelve monthly amounts.

    Entries with an unparseable month are skipped; for a repeated
    (category, month) pair the last entry wins.
    """
    budgets: dict[str, list[Decimal]] = {}
    for entry in entries:
        month_index = normalize_month_index(entry.month)
        if month_index is None:
            if logger:
                logger.debug(
                    f"Skipping budget entry with unknown month: "
                    f"category={entry.category_id} month={entry.month!r}"
                )
            continue
        months = budgets.setdefault(entry.category_id, [_ZERO] * 12)
        months[month_index] = entry.budgeted_amount
    return budgets


def build_actual_map(
    transactions: Sequence[ResolvedTransaction],
) -> dict[str, list[Decimal]]:
    """Sum expense magnitudes per resolved category id and month."""
    actuals: dict[str, list[Decimal]] = {}
    for item in transactions:
        if not item.is_expense:
            continue
        months = actuals.setdefault(item.category_id, [_ZERO] * 12)
        months[item.month_index] += item.magnitude
    return actuals


def build_category_keys(
    budgets: Mapping[str, object],
    actuals: Mapping[str, object],
) -> tuple[BudgetCategoryKey, ...]:
    """Return budgeted categories first, then actual-only ones, in order."""
    keys = [
        BudgetCategoryKey(
            category_id=category_id,
            has_budget=True,
            has_actual=category_id in actuals,
        )
        for category_id in budgets
    ]
    keys.extend(
        BudgetCategoryKey(category_id=category_id, has_budget=False, has_actual=True)
        for category_id in actuals
        if category_id not in budgets
    )
    return tuple(keys)


def budget_category_name(
    category_id: str,
    lookups: LedgerLookups,
    embedded: ResolvedTransaction | None = None,
) -> str:
    """Return the budget label of a category.

    Tombstoned categories use the capitalized "Deleted: " prefix, unlike
    the lowercase prefix of the ranking views.
    """
    if category_id == UNCATEGORIZED_ID:
        return UNCATEGORIZED_NAME
    if category_id == OFF_BUDGET_ID:
        return OFF_BUDGET_NAME
    if category_id.startswith(TRANSFER_ID_PREFIX):
        return transfer_label(category_id[len(TRANSFER_ID_PREFIX):], lookups)
    source = embedded.transaction if embedded else None
    name = category_base_name(
        category_id, lookups, source.category_name if source else None
    )
    if is_category_tombstoned(
        category_id, lookups, source.category_tombstone if source else False
    ):
        return f"{BUDGET_DELETED_PREFIX}{name}"
    return name


def walk_category_months(
    budgeted: Sequence[Decimal],
    actual: Sequence[Decimal],
) -> tuple[MonthlyBudget, ...]:
    """Walk January to December carrying unspent budget forward.

    Args:
        budgeted: Twelve budgeted amounts.
        actual: Twelve actual expense amounts.

    Returns:
        tuple[MonthlyBudget, ...]: One entry per month.
    """

    def step(carry: Decimal, month: tuple[str, Decimal, Decimal]):
        name, budget_amount, actual_amount = month
        effective = budget_amount + carry
        remaining = effective - actual_amount
        variance = actual_amount - effective
        entry = MonthlyBudget(
            month=name,
            budgeted_amount=budget_amount,
            actual_amount=actual_amount,
            carry_forward=carry,
            effective_budget=effective,
            remaining=remaining,
            variance=variance,
            variance_percentage=percentage(variance, effective),
        )
        # Overspending never carries a negative balance.
        return max(remaining, _ZERO), entry

    _, months = scan(step, _ZERO, zip(MONTHS, budgeted, actual))
    return months


def _category_budget(
    key: BudgetCategoryKey,
    budgets: Mapping[str, Sequence[Decimal]],
    actuals: Mapping[str, Sequence[Decimal]],
    lookups: LedgerLookups,
    first_seen: Mapping[str, ResolvedTransaction],
) -> CategoryBudget:
    months = walk_category_months(
        budgets.get(key.category_id, [_ZERO] * 12),
        actuals.get(key.category_id, [_ZERO] * 12),
    )
    total_budgeted = sum((m.budgeted_amount for m in months), _ZERO)
    total_actual = sum((m.actual_amount for m in months), _ZERO)
    total_effective = sum((m.effective_budget for m in months), _ZERO)
    total_variance = total_actual - total_effective
    category = lookups.categories.get(key.category_id)
    return CategoryBudget(
        category_id=key.category_id,
        category_name=budget_category_name(
            key.category_id, lookups, first_seen.get(key.category_id)
        ),
        category_group=category.group if category else None,
        monthly_budgets=months,
        total_budgeted=total_budgeted,
        total_actual=total_actual,
        total_effective_budget=total_effective,
        total_variance=total_variance,
        total_variance_percentage=percentage(total_variance, total_effective),
    )


def compute_budget_comparison(
    transactions: Sequence[ResolvedTransaction],
    entries: Sequence[BudgetEntry],
    lookups: LedgerLookups,
    *,
    group_sort_orders: Mapping[str, int] | None = None,
    group_tombstones: Mapping[str, bool] | None = None,
    logger: Logger | None = None,
) -> BudgetComparison | None:
    """Compare budgets with actual spending for every relevant category.

    Args:
        transactions: Filtered transactions.
        entries: Budget entries of the year.
        lookups: Lookup tables used for names and groups.
        group_sort_orders: Category group name to sort order.
        group_tombstones: Category group name to tombstone flag.
        logger: Optional logger for skipped entries.

    Returns:
        BudgetComparison | None: None when there are no budget entries.
    """
    if not entries:
        return None

    budgets = build_budget_map(entries, logger)
    actuals = build_actual_map(transactions)
    first_seen: dict[str, ResolvedTransaction] = {}
    for item in transactions:
        first_seen.setdefault(item.category_id, item)

    categories = tuple(
        _category_budget(key, budgets, actuals, lookups, first_seen)
        for key in build_category_keys(budgets, actuals)
    )

    monthly_totals = []
    for index, name in enumerate(MONTHS):
        rows = [category.monthly_budgets[index] for category in categories]
        total_actual = sum((row.actual_amount for row in rows), _ZERO)
        total_effective = sum((row.effective_budget for row in rows), _ZERO)
        monthly_totals.append(
            BudgetMonthlyTotal(
                month=name,
                total_budgeted=sum((row.budgeted_amount for row in rows), _ZERO),
                total_actual=total_actual,
                total_effective_budget=total_effective,
                variance=total_actual - total_effective,
            )
        )

    overall_actual = sum((c.total_actual for c in categories), _ZERO)
    overall_effective = sum((c.total_effective_budget for c in categories), _ZERO)
    overall_variance = overall_actual - overall_effective
    return BudgetComparison(
        category_budgets=categories,
        monthly_totals=tuple(monthly_totals),
        overall_budgeted=sum((c.total_budgeted for c in categories), _ZERO),
        overall_actual=overall_actual,
        overall_effective_budget=overall_effective,
        overall_variance=overall_variance,
        overall_variance_percentage=percentage(overall_variance, overall_effective),
        group_sort_order=MappingProxyType(dict(group_sort_orders or {})),
        group_tombstones=MappingProxyType(dict(group_tombstones or {})),
    )


__all__ = [
    "build_budget_map",
    "build_actual_map",
    "build_category_keys",
    "budget_category_name",
    "walk_category_months",
    "compute_budget_comparison",
]
