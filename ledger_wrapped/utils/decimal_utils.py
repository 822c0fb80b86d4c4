"""Helpers for Decimal normalization."""

from decimal import Decimal

_MINOR_UNITS_PER_MAJOR = Decimal("100")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL, adapters or callers.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_major_units(minor_amount: int) -> Decimal:
    """Convert an integer amount in minor currency units to major units.

    Args:
        minor_amount: Amount in cents (or the currency's minor unit).

    Returns:
        Decimal: Exact amount in major units.
    """
    return Decimal(minor_amount) / _MINOR_UNITS_PER_MAJOR


def percentage(part: Decimal, whole: Decimal) -> float:
    """Return part / whole * 100 as a float, or 0.0 when whole is zero."""
    if whole == 0:
        return 0.0
    return float(part / whole * 100)


def ratio(numerator: Decimal, denominator) -> Decimal:
    """Return numerator / denominator, or zero when the denominator is zero."""
    if not denominator:
        return Decimal("0")
    return numerator / coerce_decimal(denominator)


__all__ = [
    "coerce_decimal",
    "to_major_units",
    "percentage",
    "ratio",
]
