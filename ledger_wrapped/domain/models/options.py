"""Domain model for the transform configuration."""

from dataclasses import dataclass

from ledger_wrapped.domain.constants import DEFAULT_YEAR


@dataclass(frozen=True)
class TransformOptions:
    """Inclusion policy and echo-back settings for one transform.

    Attributes:
        year: Target calendar year.
        include_off_budget: Include transactions of off-budget accounts.
        include_on_budget_transfers: Include transfers crossing the budget
            boundary (on->off and off->on).
        include_all_transfers: Include every transfer direction; implies
            include_on_budget_transfers.
        include_income_in_category_totals: Net income against expenses in
            category, payee and account aggregates.
        currency_symbol: Optional display override; never used numerically.
    """

    year: int = DEFAULT_YEAR
    include_off_budget: bool = False
    include_on_budget_transfers: bool = True
    include_all_transfers: bool = False
    include_income_in_category_totals: bool = True
    currency_symbol: str | None = None

    @property
    def transfers_enabled(self) -> bool:
        """True when at least the budget-crossing transfers are included."""
        return self.include_on_budget_transfers or self.include_all_transfers


__all__ = ["TransformOptions"]
