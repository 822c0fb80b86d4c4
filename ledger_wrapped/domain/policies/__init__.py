"""Domain policies package."""

from .identifiers import is_starting_balance, is_unknown_label, looks_like_identifier
from .transfers import account_exclusion, transfer_exclusion

__all__ = [
    "looks_like_identifier",
    "is_unknown_label",
    "is_starting_balance",
    "transfer_exclusion",
    "account_exclusion",
]
