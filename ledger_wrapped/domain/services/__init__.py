"""Domain services package."""

from .activity import (
    compute_calendar_data,
    compute_day_of_week_spending,
    compute_spending_streaks,
    compute_spending_velocity,
)
from .budget import compute_budget_comparison
from .distribution import compute_size_distribution, compute_transaction_stats
from .filtering import exclusion_reason, filter_transactions, partition_transactions
from .monthly import (
    compute_monthly_breakdown,
    compute_quarterly_data,
    compute_top_months,
    compute_totals,
)
from .normalization import build_snapshot, normalize_month_index, parse_ledger_date
from .rankings import (
    compute_account_breakdown,
    compute_category_growth,
    compute_category_rankings,
    compute_category_trends,
    compute_payee_rankings,
)
from .resolver import LedgerLookups, resolve_transactions
from .savings import compute_future_projection, compute_savings_milestones

__all__ = [
    "LedgerLookups",
    "build_snapshot",
    "compute_account_breakdown",
    "compute_budget_comparison",
    "compute_calendar_data",
    "compute_category_growth",
    "compute_category_rankings",
    "compute_category_trends",
    "compute_day_of_week_spending",
    "compute_future_projection",
    "compute_monthly_breakdown",
    "compute_payee_rankings",
    "compute_quarterly_data",
    "compute_savings_milestones",
    "compute_size_distribution",
    "compute_spending_streaks",
    "compute_spending_velocity",
    "compute_top_months",
    "compute_totals",
    "compute_transaction_stats",
    "exclusion_reason",
    "filter_transactions",
    "normalize_month_index",
    "parse_ledger_date",
    "partition_transactions",
    "resolve_transactions",
]
