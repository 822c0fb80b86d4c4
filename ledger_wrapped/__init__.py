"""Year-in-review analytics for personal ledger exports."""

__version__ = "0.1.0"
