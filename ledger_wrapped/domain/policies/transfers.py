"""Inclusion policy for transfers and off-budget accounts."""

from ledger_wrapped.domain.models.options import TransformOptions
from ledger_wrapped.domain.models.resolved import (
    ExclusionReason,
    ResolvedTransaction,
)


def transfer_exclusion(
    transaction: ResolvedTransaction,
    options: TransformOptions,
) -> ExclusionReason | None:
    """Return why a transfer leg is filtered out, or None to keep it.

    Args:
        transaction: Resolved transaction with a transfer direction.
        options: Active inclusion toggles.

    Returns:
        ExclusionReason | None: Exclusion reason for the leg.
    """
    direction = transaction.transfer_direction
    if direction is None or not options.transfers_enabled:
        return ExclusionReason.FILTERED_TRANSFER
    if transaction.off_budget and not options.include_off_budget:
        return ExclusionReason.OFF_BUDGET
    if options.include_all_transfers or direction.crosses_budget:
        return None
    return ExclusionReason.FILTERED_TRANSFER


def account_exclusion(
    transaction: ResolvedTransaction,
    options: TransformOptions,
) -> ExclusionReason | None:
    """Return OFF_BUDGET for off-budget rows unless they are opted in."""
    if transaction.off_budget and not options.include_off_budget:
        return ExclusionReason.OFF_BUDGET
    return None


__all__ = ["transfer_exclusion", "account_exclusion"]
