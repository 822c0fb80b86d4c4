"""Use case to build the year-in-review snapshot from ledger records."""

from datetime import datetime, timezone
from typing import Callable

from ledger_wrapped.domain.constants import DEFAULT_CURRENCY_SYMBOL
from ledger_wrapped.domain.errors import DataTransformError
from ledger_wrapped.domain.models import (
    LedgerSnapshot,
    TransformOptions,
    WrappedData,
)
from ledger_wrapped.domain.services import (
    LedgerLookups,
    compute_account_breakdown,
    compute_budget_comparison,
    compute_calendar_data,
    compute_category_growth,
    compute_category_rankings,
    compute_category_trends,
    compute_day_of_week_spending,
    compute_future_projection,
    compute_monthly_breakdown,
    compute_payee_rankings,
    compute_quarterly_data,
    compute_savings_milestones,
    compute_size_distribution,
    compute_spending_streaks,
    compute_spending_velocity,
    compute_top_months,
    compute_totals,
    compute_transaction_stats,
    filter_transactions,
    resolve_transactions,
)
from ledger_wrapped.infrastructure.logging.logger import get_app_logger


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BuildWrappedUseCase:
    """Transform a ledger snapshot into the WrappedData views."""

    def __init__(
        self,
        logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning the computation timestamp.
        """
        self._logger = logger or get_app_logger()
        self._clock = clock or _utc_now

    def execute(
        self,
        snapshot: LedgerSnapshot,
        options: TransformOptions | None = None,
    ) -> WrappedData:
        """Return the wrapped views for the configured year.

        Args:
            snapshot: Raw ledger records.
            options: Inclusion toggles and target year.

        Returns:
            WrappedData: Complete, immutable result snapshot.

        Raises:
            DataTransformError: If any stage of the transform fails.
        """
        options = options or TransformOptions()
        try:
            wrapped = self._build(snapshot, options)
        except DataTransformError:
            raise
        except Exception as exc:
            self._logger.error(f"Failed to transform data: {exc}")
            raise DataTransformError(
                f"Failed to transform data: {exc}", cause=exc
            ) from exc

        self._logger.info(
            f"Wrapped data built for {wrapped.year}: "
            f"transactions={wrapped.transaction_stats.total_count}, "
            f"income={wrapped.total_income}, expenses={wrapped.total_expenses}, "
            f"budget={'yes' if wrapped.budget_comparison else 'no'}"
        )
        return wrapped

    def _build(
        self,
        snapshot: LedgerSnapshot,
        options: TransformOptions,
    ) -> WrappedData:
        year = options.year
        lookups = LedgerLookups.from_snapshot(snapshot)
        resolved = resolve_transactions(snapshot.transactions, lookups)
        filtered = filter_transactions(resolved, options)
        self._logger.debug(
            f"Filtered {len(filtered)} of {len(resolved)} transactions"
        )

        monthly = compute_monthly_breakdown(filtered)
        totals = compute_totals(monthly)
        categories = compute_category_rankings(
            filtered, options, totals.total_expenses
        )
        trends = compute_category_trends(filtered, options, categories.top)
        payees = compute_payee_rankings(filtered, options, totals.total_expenses)

        return WrappedData(
            year=year,
            total_income=totals.total_income,
            total_expenses=totals.total_expenses,
            net_savings=totals.net_savings,
            savings_rate=totals.savings_rate,
            monthly_data=monthly,
            top_categories=categories.top,
            all_categories=categories.all,
            category_trends=trends,
            top_payees=payees.top,
            all_payees=payees.all,
            transaction_stats=compute_transaction_stats(filtered),
            top_months=compute_top_months(monthly),
            calendar_data=compute_calendar_data(filtered, year),
            spending_velocity=compute_spending_velocity(
                filtered, year, totals.total_expenses
            ),
            day_of_week_spending=compute_day_of_week_spending(filtered),
            account_breakdown=compute_account_breakdown(
                filtered, options, totals.total_expenses
            ),
            spending_streaks=compute_spending_streaks(filtered, year),
            transaction_size_distribution=compute_size_distribution(filtered),
            quarterly_data=compute_quarterly_data(monthly),
            category_growth=compute_category_growth(trends),
            savings_milestones=compute_savings_milestones(monthly, year),
            future_projection=compute_future_projection(monthly, totals, year),
            budget_comparison=compute_budget_comparison(
                filtered,
                snapshot.budget_entries,
                lookups,
                group_sort_orders=snapshot.group_sort_orders,
                group_tombstones=snapshot.group_tombstones,
                logger=self._logger,
            ),
            transactions=filtered,
            currency_symbol=(
                options.currency_symbol
                or snapshot.currency_symbol
                or DEFAULT_CURRENCY_SYMBOL
            ),
            fetched_at=self._clock(),
        )


__all__ = ["BuildWrappedUseCase"]
