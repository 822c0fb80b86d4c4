"""Filter pipeline producing the working transaction set."""

from collections.abc import Iterable

from ledger_wrapped.domain.models import (
    ExclusionReason,
    ResolvedTransaction,
    TransformOptions,
)
from ledger_wrapped.domain.policies import account_exclusion, transfer_exclusion


def exclusion_reason(
    transaction: ResolvedTransaction,
    options: TransformOptions,
) -> ExclusionReason | None:
    """Return the first rule a transaction fails, or None when it is kept.

    Args:
        transaction: Resolved transaction.
        options: Inclusion toggles and target year.

    Returns:
        ExclusionReason | None: Reason for exclusion.
    """
    if transaction.exclusion is not None:
        return transaction.exclusion
    if transaction.date.year != options.year:
        return ExclusionReason.OUTSIDE_YEAR
    if transaction.is_transfer:
        return transfer_exclusion(transaction, options)
    return account_exclusion(transaction, options)


def filter_transactions(
    transactions: Iterable[ResolvedTransaction],
    options: TransformOptions,
) -> tuple[ResolvedTransaction, ...]:
    """Keep the transactions every view is computed from, in input order."""
    return tuple(
        item for item in transactions if exclusion_reason(item, options) is None
    )


def partition_transactions(
    transactions: Iterable[ResolvedTransaction],
) -> tuple[tuple[ResolvedTransaction, ...], tuple[ResolvedTransaction, ...]]:
    """Split transactions into (income, expense) by amount sign."""
    income: list[ResolvedTransaction] = []
    expenses: list[ResolvedTransaction] = []
    for item in transactions:
        (expenses if item.is_expense else income).append(item)
    return tuple(income), tuple(expenses)


__all__ = ["exclusion_reason", "filter_transactions", "partition_transactions"]
