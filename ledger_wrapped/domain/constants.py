"""Domain constants for year-in-review analytics."""

from decimal import Decimal

DEFAULT_YEAR = 2025

MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

DAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

QUARTERS = (
    ("Q1", MONTHS[0:3]),
    ("Q2", MONTHS[3:6]),
    ("Q3", MONTHS[6:9]),
    ("Q4", MONTHS[9:12]),
)

TOP_RANKING_LIMIT = 10
TOP_MONTHS_LIMIT = 3

SAVINGS_MILESTONE_THRESHOLDS = (
    Decimal("10000"),
    Decimal("25000"),
    Decimal("50000"),
    Decimal("100000"),
    Decimal("250000"),
    Decimal("500000"),
)

# (label, lower bound, upper bound); None marks the open-ended top bucket.
SIZE_BUCKETS = (
    ("$0-$10", Decimal("0"), Decimal("10")),
    ("$10-$50", Decimal("10"), Decimal("50")),
    ("$50-$100", Decimal("50"), Decimal("100")),
    ("$100-$500", Decimal("100"), Decimal("500")),
    ("$500+", Decimal("500"), None),
)
OPEN_BUCKET_MIDPOINT_OFFSET = Decimal("500")

DAYS_PER_MONTH = Decimal("30.44")

DEFAULT_CURRENCY_SYMBOL = "$"

UNCATEGORIZED_ID = "uncategorized"
UNCATEGORIZED_NAME = "Uncategorized"
OFF_BUDGET_ID = "off-budget"
OFF_BUDGET_NAME = "Off Budget"
UNKNOWN_PAYEE = "Unknown"
TRANSFER_ID_PREFIX = "transfer:"
TRANSFER_LABEL_PREFIX = "Transfer: "
DELETED_PREFIX = "deleted: "
BUDGET_DELETED_PREFIX = "Deleted: "
STARTING_BALANCE_PAYEE = "starting balance"


__all__ = [
    "DEFAULT_YEAR",
    "MONTHS",
    "DAY_NAMES",
    "QUARTERS",
    "TOP_RANKING_LIMIT",
    "TOP_MONTHS_LIMIT",
    "SAVINGS_MILESTONE_THRESHOLDS",
    "SIZE_BUCKETS",
    "OPEN_BUCKET_MIDPOINT_OFFSET",
    "DAYS_PER_MONTH",
    "DEFAULT_CURRENCY_SYMBOL",
    "UNCATEGORIZED_ID",
    "UNCATEGORIZED_NAME",
    "OFF_BUDGET_ID",
    "OFF_BUDGET_NAME",
    "UNKNOWN_PAYEE",
    "TRANSFER_ID_PREFIX",
    "TRANSFER_LABEL_PREFIX",
    "DELETED_PREFIX",
    "BUDGET_DELETED_PREFIX",
    "STARTING_BALANCE_PAYEE",
]
