"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

import dotenv

from ledger_wrapped.domain.constants import DEFAULT_YEAR
from ledger_wrapped.domain.errors import FileValidationError
from ledger_wrapped.domain.models import TransformOptions
from ledger_wrapped.infrastructure.logging.logger import get_app_logger
from ledger_wrapped.utils.utils import get_project_root

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class WrappedSettings:
    """Settings for locating the ledger and configuring the transform.

    Attributes:
        db_url: Optional SQLAlchemy URL of the ledger database.
        ledger_file: Optional path or URI to an Actual ``db.sqlite`` file.
        year: Target year.
        include_off_budget: Include off-budget accounts.
        include_on_budget_transfers: Include budget-crossing transfers.
        include_all_transfers: Include every transfer direction.
        include_income_in_categories: Net income in category aggregates.
        currency_symbol: Optional display symbol override.
    """

    db_url: Optional[str] = None
    ledger_file: Optional[Path | str] = None
    year: int = DEFAULT_YEAR
    include_off_budget: bool = False
    include_on_budget_transfers: bool = True
    include_all_transfers: bool = False
    include_income_in_categories: bool = True
    currency_symbol: Optional[str] = None

    @classmethod
    def from_env(cls) -> "WrappedSettings":
        """Build settings from environment variables and a ``.env`` file.

        Returns:
            WrappedSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        raw_file = os.getenv("ACTUAL_DB_FILE")
        if raw_file:
            ledger_file = cls._normalize_path(raw_file, logger=logger)
        else:
            ledger_file = cls._default_ledger_file(logger=logger)

        raw_year = os.getenv("WRAPPED_YEAR", "").strip()
        year = DEFAULT_YEAR
        if raw_year:
            try:
                year = int(raw_year)
            except ValueError:
                logger.warning(
                    f"Ignoring invalid WRAPPED_YEAR={raw_year!r}, "
                    f"using {DEFAULT_YEAR}"
                )

        return cls(
            db_url=os.getenv("LEDGER_DB_URL") or None,
            ledger_file=ledger_file,
            year=year,
            include_off_budget=_env_flag("WRAPPED_INCLUDE_OFF_BUDGET", False),
            include_on_budget_transfers=_env_flag(
                "WRAPPED_INCLUDE_ON_BUDGET_TRANSFERS", True
            ),
            include_all_transfers=_env_flag("WRAPPED_INCLUDE_ALL_TRANSFERS", False),
            include_income_in_categories=_env_flag(
                "WRAPPED_INCLUDE_INCOME_IN_CATEGORIES", True
            ),
            currency_symbol=os.getenv("WRAPPED_CURRENCY_SYMBOL") or None,
        )

    def database_url(self) -> str:
        """Return the SQLAlchemy URL of the ledger.

        Returns:
            str: Explicit URL, or a SQLite URL built from the ledger file.

        Raises:
            FileValidationError: If neither a URL nor a ledger file is set.
        """
        if self.db_url:
            return self.db_url
        if isinstance(self.ledger_file, Path):
            if not self.ledger_file.is_file():
                raise FileValidationError(
                    f"Ledger file does not exist: {self.ledger_file}"
                )
            return f"sqlite:///{self.ledger_file}"
        if self.ledger_file:
            return self.ledger_file
        raise FileValidationError(
            "No ledger configured. Set LEDGER_DB_URL or ACTUAL_DB_FILE."
        )

    def to_options(self) -> TransformOptions:
        """Return the transform options described by these settings."""
        return TransformOptions(
            year=self.year,
            include_off_budget=self.include_off_budget,
            include_on_budget_transfers=self.include_on_budget_transfers,
            include_all_transfers=self.include_all_transfers,
            include_income_in_category_totals=self.include_income_in_categories,
            currency_symbol=self.currency_symbol,
        )

    @staticmethod
    def _normalize_path(
        raw_path: str,
        logger,
    ) -> Path | str:
        """Normalize the ledger file path or URI.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path | str: Normalized filesystem path or URI string.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme and parsed.scheme != "file" and len(parsed.scheme) > 1:
            return raw_path
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Ledger file does not exist at {path}")
        return path

    @staticmethod
    def _default_ledger_file(logger) -> Path | None:
        """Return the ledger file in data/ when exactly one exists.

        Args:
            logger: Logger used for warnings.

        Returns:
            Path | None: Default path if a single ledger is found in data/.
        """
        data_dir = get_project_root() / "data"
        if not data_dir.exists():
            return None
        matches = sorted(data_dir.glob("*.sqlite"))
        if len(matches) == 1:
            return matches[0].resolve()
        if len(matches) > 1:
            logger.warning(
                "Multiple .sqlite files found in data/. "
                "Set ACTUAL_DB_FILE to choose one."
            )
        return None


__all__ = ["WrappedSettings"]
