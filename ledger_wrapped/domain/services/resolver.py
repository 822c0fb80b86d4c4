"""Record resolution: names, tombstones, transfers and noise exclusion."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from ledger_wrapped.domain.constants import (
    DELETED_PREFIX,
    OFF_BUDGET_ID,
    OFF_BUDGET_NAME,
    TRANSFER_ID_PREFIX,
    TRANSFER_LABEL_PREFIX,
    UNCATEGORIZED_ID,
    UNCATEGORIZED_NAME,
    UNKNOWN_PAYEE,
)
from ledger_wrapped.domain.models import (
    Account,
    Category,
    ExclusionReason,
    LedgerSnapshot,
    Payee,
    ResolvedTransaction,
    Transaction,
    TransferDirection,
)
from ledger_wrapped.domain.policies import (
    is_starting_balance,
    is_unknown_label,
    looks_like_identifier,
)


def _frozen(mapping: dict) -> Mapping:
    return MappingProxyType(mapping)


@dataclass(frozen=True)
class LedgerLookups:
    """Id-keyed lookup tables built once per transform.

    Attributes:
        categories: Category id to category.
        payees: Payee id to payee.
        accounts: Account id to account.
        parent_ids: Transaction ids referenced as parent_id by another row.
    """

    categories: Mapping[str, Category] = field(default_factory=lambda: _frozen({}))
    payees: Mapping[str, Payee] = field(default_factory=lambda: _frozen({}))
    accounts: Mapping[str, Account] = field(default_factory=lambda: _frozen({}))
    parent_ids: frozenset[str] = frozenset()

    @classmethod
    def from_snapshot(cls, snapshot: LedgerSnapshot) -> "LedgerLookups":
        """Build lookups from a snapshot; later duplicates win."""
        return cls(
            categories=_frozen({item.id: item for item in snapshot.categories}),
            payees=_frozen({item.id: item for item in snapshot.payees}),
            accounts=_frozen({item.id: item for item in snapshot.accounts}),
            parent_ids=frozenset(
                item.parent_id for item in snapshot.transactions if item.parent_id
            ),
        )

    def account_name(self, account_id: str) -> str:
        account = self.accounts.get(account_id)
        return account.name if account else account_id

    def is_off_budget(self, account_id: str | None) -> bool:
        """Return the off-budget flag; unknown accounts count as on-budget."""
        if not account_id:
            return False
        account = self.accounts.get(account_id)
        return bool(account and account.off_budget)


def transfer_label(destination_account_id: str, lookups: LedgerLookups) -> str:
    """Return the "Transfer: {name}" label of a destination account."""
    return f"{TRANSFER_LABEL_PREFIX}{lookups.account_name(destination_account_id)}"


def category_base_name(
    category_id: str,
    lookups: LedgerLookups,
    embedded_name: str | None = None,
) -> str:
    """Return a category name: lookup table, then embedded name, then id."""
    category = lookups.categories.get(category_id)
    if category and category.name:
        return category.name
    if embedded_name:
        return embedded_name
    return category_id


def is_category_tombstoned(
    category_id: str,
    lookups: LedgerLookups,
    embedded_flag: bool = False,
) -> bool:
    """Return the current tombstone flag of a category.

    Known categories use the lookup flag so merged categories that are no
    longer deleted are never marked. Unknown ids fall back to the flag
    embedded in the transaction.
    """
    category = lookups.categories.get(category_id)
    if category is not None:
        return category.tombstone
    return embedded_flag


def resolve_category(
    transaction: Transaction,
    lookups: LedgerLookups,
) -> tuple[str, str, str | None]:
    """Resolve the grouping key, label and group of a transaction category.

    Args:
        transaction: Source transaction.
        lookups: Lookup tables.

    Returns:
        tuple[str, str, str | None]: Category id, display name and group.
    """
    if not transaction.category:
        payee = lookups.payees.get(transaction.payee or "")
        if payee and payee.transfer_account:
            destination = payee.transfer_account
            return (
                f"{TRANSFER_ID_PREFIX}{destination}",
                transfer_label(destination, lookups),
                None,
            )
        if lookups.is_off_budget(transaction.account):
            return OFF_BUDGET_ID, OFF_BUDGET_NAME, None
        return UNCATEGORIZED_ID, UNCATEGORIZED_NAME, None

    category_id = transaction.category
    name = category_base_name(category_id, lookups, transaction.category_name)
    if is_category_tombstoned(category_id, lookups, transaction.category_tombstone):
        name = f"{DELETED_PREFIX}{name}"
    category = lookups.categories.get(category_id)
    return category_id, name, category.group if category else None


def resolve_payee_name(transaction: Transaction, lookups: LedgerLookups) -> str:
    """Resolve the display label of a transaction payee.

    Order: payee lookup, then the embedded payee name unless it is blank,
    "unknown" or identifier-like, then "Unknown". Transfers are labelled
    after their destination account.

    Args:
        transaction: Source transaction.
        lookups: Lookup tables.

    Returns:
        str: Payee label.
    """
    payee_id = transaction.payee
    payee = lookups.payees.get(payee_id) if payee_id else None
    if payee and payee.transfer_account:
        return transfer_label(payee.transfer_account, lookups)

    embedded = transaction.payee_name
    if payee is not None and payee.name:
        base = payee.name
    elif is_unknown_label(embedded):
        base = UNKNOWN_PAYEE
    elif looks_like_identifier(embedded, payee_id, lookups.payees):
        mapped = lookups.payees.get(embedded)
        base = mapped.name if mapped and mapped.name else UNKNOWN_PAYEE
    else:
        base = embedded

    deleted = bool(payee and payee.tombstone) or transaction.payee_tombstone
    return f"{DELETED_PREFIX}{base}" if deleted else base


def _resolver_exclusion(
    transaction: Transaction,
    lookups: LedgerLookups,
) -> ExclusionReason | None:
    if (
        transaction.is_parent
        or transaction.id in lookups.parent_ids
        or (transaction.parent_id and not transaction.category)
    ):
        return ExclusionReason.SPLIT_PARENT
    payee = lookups.payees.get(transaction.payee or "")
    if is_starting_balance(payee.name if payee else None) or is_starting_balance(
        transaction.payee_name
    ):
        return ExclusionReason.STARTING_BALANCE
    return None


def resolve_transaction(
    transaction: Transaction,
    lookups: LedgerLookups,
) -> ResolvedTransaction:
    """Enrich one transaction with labels, transfer direction and exclusion."""
    category_id, category_name, group = resolve_category(transaction, lookups)
    payee = lookups.payees.get(transaction.payee or "")
    destination = payee.transfer_account if payee else None
    off_budget = lookups.is_off_budget(transaction.account)
    direction = (
        TransferDirection.from_flags(off_budget, lookups.is_off_budget(destination))
        if destination
        else None
    )
    return ResolvedTransaction(
        transaction=transaction,
        category_id=category_id,
        category_name=category_name,
        category_group=group,
        payee_name=resolve_payee_name(transaction, lookups),
        account_name=lookups.account_name(transaction.account),
        off_budget=off_budget,
        transfer_account=destination,
        transfer_direction=direction,
        exclusion=_resolver_exclusion(transaction, lookups),
    )


def resolve_transactions(
    transactions: Iterable[Transaction],
    lookups: LedgerLookups,
) -> tuple[ResolvedTransaction, ...]:
    """Resolve every transaction, keeping input order."""
    return tuple(resolve_transaction(item, lookups) for item in transactions)


__all__ = [
    "LedgerLookups",
    "transfer_label",
    "category_base_name",
    "is_category_tombstoned",
    "resolve_category",
    "resolve_payee_name",
    "resolve_transaction",
    "resolve_transactions",
]
