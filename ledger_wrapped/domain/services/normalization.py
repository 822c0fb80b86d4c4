"""Domain normalization helpers for raw ledger rows."""

from collections.abc import Iterable, Mapping
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from logging import Logger
from types import MappingProxyType
from typing import Any

from ledger_wrapped.domain.constants import DEFAULT_CURRENCY_SYMBOL, MONTHS
from ledger_wrapped.domain.models import (
    Account,
    BudgetEntry,
    Category,
    LedgerSnapshot,
    Payee,
    Transaction,
)
from ledger_wrapped.utils.decimal_utils import coerce_decimal

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_MONTH_LOOKUP = {
    **{name.lower(): index for index, name in enumerate(MONTHS)},
    **{name[:3].lower(): index for index, name in enumerate(MONTHS)},
}


def _first(row: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = row.get(key)
        if value is not None:
            return value
    return None


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def _as_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text if text.strip() else None


def parse_minor_amount(value: Any) -> int:
    """Parse an amount in minor units, defaulting to 0 when malformed.

    Fractional values are rounded to the nearest minor unit.

    Args:
        value: int, numeric string, Decimal or float.

    Returns:
        int: Amount in minor units.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        return 0
    if not amount.is_finite():
        return 0
    return int(amount.to_integral_value())


def parse_ledger_date(value: Any) -> date | None:
    """Parse a ledger date into a calendar day.

    Args:
        value: date, datetime, "YYYY-MM-DD" string, or YYYYMMDD int/str.

    Returns:
        date | None: Parsed day, or None when the value is unusable.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        if len(text) == 8 and text.isdigit():
            return date(int(text[0:4]), int(text[4:6]), int(text[6:8]))
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


def normalize_month_index(value: Any) -> int | None:
    """Return the zero-based month index of a budget month value.

    Accepts month names, three-letter abbreviations, "YYYY-MM" and
    "YYYYMM" strings, and integers 1-12.

    Args:
        value: Raw month value.

    Returns:
        int | None: Month index 0-11, or None when it cannot be parsed.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        if 1 <= value <= 12:
            return value - 1
        if value > 99999:
            return normalize_month_index(str(value))
        return None
    text = str(value).strip().lower()
    if text in _MONTH_LOOKUP:
        return _MONTH_LOOKUP[text]
    digits = text.replace("-", "")
    if digits.isdigit():
        month = int(digits[4:6]) if len(digits) == 6 else int(digits)
        if 1 <= month <= 12:
            return month - 1
    return None


def coerce_transaction(row: Mapping[str, Any]) -> Transaction | None:
    """Build a Transaction from a raw row, or None when it has no date.

    Args:
        row: Mapping with transaction fields.

    Returns:
        Transaction | None: Normalized transaction.
    """
    day = parse_ledger_date(row.get("date"))
    if day is None:
        return None
    return Transaction(
        id=str(row.get("id") or ""),
        account=str(row.get("account") or ""),
        date=day,
        amount=parse_minor_amount(row.get("amount")),
        category=_as_text(row.get("category")),
        category_name=_as_text(row.get("category_name")),
        category_tombstone=_as_bool(row.get("category_tombstone")),
        payee=_as_text(row.get("payee")),
        payee_name=_as_text(row.get("payee_name")),
        payee_tombstone=_as_bool(row.get("payee_tombstone")),
        parent_id=_as_text(row.get("parent_id")),
        is_parent=_as_bool(_first(row, "is_parent", "isParent")),
        notes=_as_text(row.get("notes")),
        cleared=_as_bool(row.get("cleared")),
        reconciled=_as_bool(row.get("reconciled")),
    )


def coerce_category(row: Mapping[str, Any]) -> Category:
    """Build a Category from a raw row."""
    category_id = str(row.get("id") or "")
    return Category(
        id=category_id,
        name=str(row.get("name") or category_id),
        group=_as_text(_first(row, "group", "group_name")),
        is_income=_as_bool(row.get("is_income")),
        tombstone=_as_bool(row.get("tombstone")),
    )


def coerce_payee(row: Mapping[str, Any]) -> Payee:
    """Build a Payee from a raw row."""
    return Payee(
        id=str(row.get("id") or ""),
        name=str(row.get("name") or ""),
        tombstone=_as_bool(row.get("tombstone")),
        transfer_account=_as_text(
            _first(row, "transfer_account", "transfer_acct")
        ),
    )


def coerce_account(row: Mapping[str, Any]) -> Account:
    """Build an Account from a raw row."""
    account_id = str(row.get("id") or "")
    return Account(
        id=account_id,
        name=str(row.get("name") or account_id),
        type=str(row.get("type") or ""),
        off_budget=_as_bool(_first(row, "off_budget", "offbudget")),
    )


def coerce_budget_entry(row: Mapping[str, Any]) -> BudgetEntry:
    """Build a BudgetEntry from a raw row."""
    return BudgetEntry(
        category_id=str(_first(row, "category_id", "category") or ""),
        month=row.get("month") or "",
        budgeted_amount=coerce_decimal(
            _first(row, "budgeted_amount", "budgetedAmount")
        ),
    )


def build_snapshot(
    *,
    transactions: Iterable[Mapping[str, Any]] = (),
    categories: Iterable[Mapping[str, Any]] = (),
    payees: Iterable[Mapping[str, Any]] = (),
    accounts: Iterable[Mapping[str, Any]] = (),
    budget_entries: Iterable[Mapping[str, Any]] = (),
    group_sort_orders: Mapping[str, int] | None = None,
    group_tombstones: Mapping[str, bool] | None = None,
    currency_symbol: str | None = None,
    logger: Logger | None = None,
) -> LedgerSnapshot:
    """Normalize raw row mappings into a LedgerSnapshot.

    Transactions without a usable date are dropped.

    Args:
        transactions: Raw transaction rows.
        categories: Raw category rows.
        payees: Raw payee rows.
        accounts: Raw account rows.
        budget_entries: Raw budget entry rows.
        group_sort_orders: Category group name to sort order.
        group_tombstones: Category group name to tombstone flag.
        currency_symbol: Ledger currency symbol.
        logger: Optional logger for dropped rows.

    Returns:
        LedgerSnapshot: Immutable snapshot of the normalized records.
    """
    normalized: list[Transaction] = []
    for row in transactions:
        transaction = coerce_transaction(row)
        if transaction is None:
            if logger:
                logger.debug(f"Dropping transaction without date: {row.get('id')}")
            continue
        normalized.append(transaction)
    return LedgerSnapshot(
        transactions=tuple(normalized),
        categories=tuple(coerce_category(row) for row in categories),
        payees=tuple(coerce_payee(row) for row in payees),
        accounts=tuple(coerce_account(row) for row in accounts),
        budget_entries=tuple(coerce_budget_entry(row) for row in budget_entries),
        group_sort_orders=MappingProxyType(dict(group_sort_orders or {})),
        group_tombstones=MappingProxyType(
            {name: bool(flag) for name, flag in (group_tombstones or {}).items()}
        ),
        currency_symbol=currency_symbol or DEFAULT_CURRENCY_SYMBOL,
    )


__all__ = [
    "parse_minor_amount",
    "parse_ledger_date",
    "normalize_month_index",
    "coerce_transaction",
    "coerce_category",
    "coerce_payee",
    "coerce_account",
    "coerce_budget_entry",
    "build_snapshot",
]
