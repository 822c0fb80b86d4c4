"""General-purpose helpers shared across layers."""

from pathlib import Path


def get_project_root() -> Path:
    """Return the repository root directory.

    Returns:
        Path: Directory containing the ``ledger_wrapped`` package.
    """
    return Path(__file__).resolve().parents[2]


__all__ = ["get_project_root"]
