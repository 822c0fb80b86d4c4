"""Transaction statistics and expense size histogram."""

from collections.abc import Sequence
from decimal import Decimal

from ledger_wrapped.domain.constants import OPEN_BUCKET_MIDPOINT_OFFSET, SIZE_BUCKETS
from ledger_wrapped.domain.models import (
    ResolvedTransaction,
    SizeBucket,
    TransactionSizeDistribution,
    TransactionStats,
)
from ledger_wrapped.utils.decimal_utils import ratio

NO_RANGE = "N/A"


def compute_transaction_stats(
    transactions: Sequence[ResolvedTransaction],
) -> TransactionStats:
    """Count transactions, average their magnitude and pick the largest.

    Args:
        transactions: Filtered transactions, income and expense alike.

    Returns:
        TransactionStats: Stats; the first occurrence wins ties.
    """
    largest: ResolvedTransaction | None = None
    total = Decimal("0")
    for item in transactions:
        total += item.magnitude
        if largest is None or abs(item.amount) > abs(largest.amount):
            largest = item
    return TransactionStats(
        total_count=len(transactions),
        average_amount=ratio(total, len(transactions)),
        largest_transaction=largest,
    )


def _median(values: Sequence[Decimal]) -> Decimal:
    if not values:
        return Decimal("0")
    middle = len(values) // 2
    if len(values) % 2:
        return values[middle]
    return (values[middle - 1] + values[middle]) / 2


def _in_bucket(amount: Decimal, lower: Decimal, upper: Decimal | None) -> bool:
    return amount >= lower and (upper is None or amount < upper)


def _midpoint(bucket: SizeBucket) -> Decimal:
    if bucket.max is None:
        return bucket.min + OPEN_BUCKET_MIDPOINT_OFFSET
    return bucket.min + (bucket.max - bucket.min) / 2


def compute_size_distribution(
    transactions: Sequence[ResolvedTransaction],
) -> TransactionSizeDistribution:
    """Bucket expense magnitudes and derive median and mode.

    The mode is the midpoint of the first bucket with the highest count.
    Without expenses the median and mode are zero.

    Args:
        transactions: Filtered transactions; income is ignored.

    Returns:
        TransactionSizeDistribution: Histogram with summary values.
    """
    amounts = sorted(item.magnitude for item in transactions if item.is_expense)
    buckets = []
    for label, lower, upper in SIZE_BUCKETS:
        count = sum(1 for amount in amounts if _in_bucket(amount, lower, upper))
        buckets.append(
            SizeBucket(
                range=label,
                min=lower,
                max=upper,
                count=count,
                percentage=count / len(amounts) * 100 if amounts else 0.0,
            )
        )

    if not amounts:
        return TransactionSizeDistribution(
            buckets=tuple(buckets),
            median=Decimal("0"),
            mode=Decimal("0"),
            most_common_range=NO_RANGE,
        )

    mode_bucket = buckets[0]
    for bucket in buckets[1:]:
        if bucket.count > mode_bucket.count:
            mode_bucket = bucket
    return TransactionSizeDistribution(
        buckets=tuple(buckets),
        median=_median(amounts),
        mode=_midpoint(mode_bucket),
        most_common_range=mode_bucket.range,
    )


__all__ = ["compute_transaction_stats", "compute_size_distribution"]
