"""CLI adapter printing a year-in-review summary of an Actual ledger.

This module wires the snapshot loader and the wrapped transform to the
concrete SQLite repository and provides the ``ledger-wrapped`` entry point.
"""

from ledger_wrapped.application.use_cases.build_wrapped import BuildWrappedUseCase
from ledger_wrapped.application.use_cases.load_ledger_snapshot import (
    LoadLedgerSnapshotUseCase,
)
from ledger_wrapped.domain.errors import LedgerWrappedError, get_error_message
from ledger_wrapped.domain.models import WrappedData
from ledger_wrapped.infrastructure.container import build_records_repository
from ledger_wrapped.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from ledger_wrapped.infrastructure.settings import WrappedSettings


def _money(symbol: str, amount) -> str:
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def render_summary(data: WrappedData) -> list[str]:
    """Return the printable lines of a wrapped summary.

    Args:
        data: Result of the wrapped transform.

    Returns:
        list[str]: Summary lines.
    """
    symbol = data.currency_symbol
    lines = [
        f"Year in review {data.year}",
        f"Income: {_money(symbol, data.total_income)}",
        f"Expenses: {_money(symbol, data.total_expenses)}",
        f"Net savings: {_money(symbol, data.net_savings)} "
        f"(savings rate {data.savings_rate:.1f}%)",
        f"Transactions: {data.transaction_stats.total_count}",
    ]
    if data.top_categories:
        lines.append("Top categories:")
        lines.extend(
            f"  {entry.category_name}: {_money(symbol, entry.amount)} "
            f"({entry.percentage:.1f}%)"
            for entry in data.top_categories
        )
    if data.top_payees:
        lines.append("Top payees:")
        lines.extend(
            f"  {entry.payee}: {_money(symbol, entry.amount)} "
            f"({entry.transaction_count} transactions)"
            for entry in data.top_payees
        )
    if data.top_months:
        months = ", ".join(
            f"{entry.month} {_money(symbol, entry.spending)}"
            for entry in data.top_months
        )
        lines.append(f"Top months: {months}")
    streaks = data.spending_streaks
    lines.append(
        f"Longest spending streak: {streaks.longest_spending_streak.days} days, "
        f"longest no-spending streak: {streaks.longest_no_spending_streak.days} days"
    )
    if data.savings_milestones:
        reached = ", ".join(
            f"{item.milestone} on {item.date.isoformat()}"
            for item in data.savings_milestones
        )
        lines.append(f"Milestones: {reached}")
    projection = data.future_projection
    lines.append(
        "Projected savings next year end: "
        f"{_money(symbol, projection.projected_year_end_savings)}"
    )
    budget = data.budget_comparison
    if budget is None:
        lines.append("Budget: no budget data")
    else:
        lines.append(
            f"Budget: actual {_money(symbol, budget.overall_actual)} vs "
            f"budgeted {_money(symbol, budget.overall_budgeted)} "
            f"(variance {budget.overall_variance_percentage:.1f}%)"
        )
    return lines


def main() -> None:
    """Load the configured ledger and print its year-in-review summary."""
    logger = get_app_logger()
    usage_logger = get_usage_logger()
    settings = WrappedSettings.from_env()
    options = settings.to_options()

    try:
        repository = build_records_repository(settings=settings)
        snapshot = LoadLedgerSnapshotUseCase(repository, logger=logger).execute(
            options.year
        )
        data = BuildWrappedUseCase(logger=logger).execute(snapshot, options)
    except LedgerWrappedError as exc:
        logger.error(get_error_message(exc))
        print(f"Unable to build year in review: {get_error_message(exc)}")
        return

    usage_logger.info(
        f"ledger-wrapped run: year={options.year}, "
        f"off_budget={options.include_off_budget}, "
        f"on_budget_transfers={options.include_on_budget_transfers}, "
        f"all_transfers={options.include_all_transfers}, "
        f"income_in_categories={options.include_income_in_category_totals}"
    )
    for line in render_summary(data):
        print(line)


if __name__ == "__main__":  # pragma: no cover
    main()
