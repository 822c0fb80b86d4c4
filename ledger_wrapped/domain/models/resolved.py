"""Domain models for resolved, display-ready transactions."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from ledger_wrapped.domain.models.records import Transaction
from ledger_wrapped.utils.decimal_utils import to_major_units


class TransferDirection(Enum):
    """Budget side of the source and destination accounts of a transfer."""

    ON_TO_ON = "on->on"
    ON_TO_OFF = "on->off"
    OFF_TO_ON = "off->on"
    OFF_TO_OFF = "off->off"

    @classmethod
    def from_flags(
        cls,
        source_off_budget: bool,
        destination_off_budget: bool,
    ) -> "TransferDirection":
        """Classify a transfer from the off-budget flags of both accounts."""
        if source_off_budget:
            return cls.OFF_TO_OFF if destination_off_budget else cls.OFF_TO_ON
        return cls.ON_TO_OFF if destination_off_budget else cls.ON_TO_ON

    @property
    def crosses_budget(self) -> bool:
        """True when exactly one side of the transfer is off-budget."""
        return self in (TransferDirection.ON_TO_OFF, TransferDirection.OFF_TO_ON)


class ExclusionReason(Enum):
    """Why a transaction is left out of every aggregate."""

    SPLIT_PARENT = "split-parent"
    STARTING_BALANCE = "starting-balance"
    OUTSIDE_YEAR = "outside-year"
    OFF_BUDGET = "off-budget"
    FILTERED_TRANSFER = "filtered-transfer"


@dataclass(frozen=True)
class ResolvedTransaction:
    """Transaction enriched with display names and classification.

    Attributes:
        transaction: Source record.
        category_id: Grouping key: a category id, "uncategorized",
            "off-budget" or "transfer:{accountId}".
        category_name: Display label for the category.
        category_group: Group name of the category when known.
        payee_name: Display label for the payee.
        account_name: Display name of the owning account.
        off_budget: True when the owning account is off-budget.
        transfer_account: Destination account id for transfers.
        transfer_direction: Direction of the transfer, None otherwise.
        exclusion: Resolver-level exclusion, None when the row is usable.
    """

    transaction: Transaction
    category_id: str
    category_name: str
    payee_name: str
    account_name: str
    category_group: str | None = None
    off_budget: bool = False
    transfer_account: str | None = None
    transfer_direction: TransferDirection | None = None
    exclusion: ExclusionReason | None = None

    @property
    def id(self) -> str:
        return self.transaction.id

    @property
    def account_id(self) -> str:
        return self.transaction.account

    @property
    def date(self) -> date:
        return self.transaction.date

    @property
    def month_index(self) -> int:
        """Zero-based month of the transaction date."""
        return self.transaction.date.month - 1

    @property
    def amount(self) -> int:
        """Signed amount in minor units."""
        return self.transaction.amount

    @property
    def is_expense(self) -> bool:
        return self.transaction.amount < 0

    @property
    def is_income(self) -> bool:
        return self.transaction.amount >= 0

    @property
    def is_transfer(self) -> bool:
        return self.transfer_direction is not None

    @property
    def magnitude(self) -> Decimal:
        """Absolute amount in major units."""
        return to_major_units(abs(self.transaction.amount))

    @property
    def signed_amount(self) -> Decimal:
        """Signed amount in major units."""
        return to_major_units(self.transaction.amount)


__all__ = ["TransferDirection", "ExclusionReason", "ResolvedTransaction"]
