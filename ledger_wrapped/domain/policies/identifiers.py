"""Payee and category label predicates."""

from collections.abc import Container

from ledger_wrapped.domain.constants import STARTING_BALANCE_PAYEE


def looks_like_identifier(
    candidate: str,
    own_payee_id: str | None,
    known_payee_ids: Container[str],
) -> bool:
    """Return True when a payee name is really a raw payee identifier.

    A name is treated as an identifier when it equals the transaction's own
    payee id or any known payee id. A payee whose genuine name equals some
    other payee's id is a false positive and gets reported under that id.

    Args:
        candidate: Payee name embedded in a transaction row.
        own_payee_id: Payee id of the same transaction.
        known_payee_ids: Ids present in the payee lookup.

    Returns:
        bool: True when the name must not be shown as-is.
    """
    return candidate == own_payee_id or candidate in known_payee_ids


def is_unknown_label(name: str | None) -> bool:
    """Return True for absent, blank or literally "unknown" names."""
    if name is None:
        return True
    cleaned = name.strip()
    return not cleaned or cleaned.lower() == "unknown"


def is_starting_balance(name: str | None) -> bool:
    """Return True when a payee name marks an opening balance row."""
    if not name:
        return False
    return name.strip().lower() == STARTING_BALANCE_PAYEE


__all__ = ["looks_like_identifier", "is_unknown_label", "is_starting_balance"]
