"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

import dotenv

from ledgerfx.domain.constants import (
    DEFAULT_ASSET_PREFIXES,
    DEFAULT_EXPENSE_PREFIXES,
    DEFAULT_INCOME_PREFIXES,
    DEFAULT_LIABILITY_PREFIXES,
    DEFAULT_MAIN_COMMODITY,
    DEFAULT_MAIN_COMMODITY_DECIMAL_POINTS,
)
from ledgerfx.domain.policies.account_filters import AccountClassification
from ledgerfx.infrastructure.logging.logger import get_app_logger
from ledgerfx.utils.utils import get_project_root


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for loading a ledger and normalizing its currencies.

    Attributes:
        backend: Ledger source identifier (sqlalchemy or piecash).
        gnucash_db_url: SQLAlchemy URL of the GnuCash SQL book.
        piecash_file: Optional path or URI to the piecash book.
        main_commodity: Commodity income and expenses are frozen in.
        main_commodity_decimal_points: Rounding precision of the main
            commodity.
        asset_prefixes: Account path prefixes treated as assets.
        liability_prefixes: Account path prefixes treated as liabilities.
        income_prefixes: Account path prefixes treated as income.
        expense_prefixes: Account path prefixes treated as expenses.
    """

    backend: str = "sqlalchemy"
    gnucash_db_url: Optional[str] = None
    piecash_file: Optional[Path | str] = None
    main_commodity: str = DEFAULT_MAIN_COMMODITY
    main_commodity_decimal_points: int = DEFAULT_MAIN_COMMODITY_DECIMAL_POINTS
    asset_prefixes: tuple[str, ...] = DEFAULT_ASSET_PREFIXES
    liability_prefixes: tuple[str, ...] = DEFAULT_LIABILITY_PREFIXES
    income_prefixes: tuple[str, ...] = DEFAULT_INCOME_PREFIXES
    expense_prefixes: tuple[str, ...] = DEFAULT_EXPENSE_PREFIXES

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Values from a local .env file are loaded first and never override
        variables already set in the environment.

        Returns:
            LedgerSettings: Settings sourced from environment variables.

        Raises:
            ValueError: If the decimal points value is not a non-negative
                integer.
        """
        dotenv.load_dotenv()
        backend = os.getenv("GNUCASH_BACKEND", "sqlalchemy").strip().lower()
        raw_piecash = os.getenv("PIECASH_FILE")
        logger = get_app_logger()
        if raw_piecash:
            piecash_file = cls._normalize_path(raw_piecash, logger=logger)
        else:
            piecash_file = cls._default_piecash_file(logger=logger)
        main_commodity = (
            os.getenv("LEDGER_MAIN_COMMODITY", DEFAULT_MAIN_COMMODITY).strip()
            or DEFAULT_MAIN_COMMODITY
        )
        return cls(
            backend=backend,
            gnucash_db_url=(os.getenv("GNUCASH_DB_URL") or "").strip() or None,
            piecash_file=piecash_file,
            main_commodity=main_commodity,
            main_commodity_decimal_points=cls._parse_decimal_points(
                os.getenv("LEDGER_MAIN_COMMODITY_DECIMAL_POINTS")
            ),
            asset_prefixes=cls._parse_prefixes(
                os.getenv("LEDGER_ASSET_PREFIXES"),
                DEFAULT_ASSET_PREFIXES,
            ),
            liability_prefixes=cls._parse_prefixes(
                os.getenv("LEDGER_LIABILITY_PREFIXES"),
                DEFAULT_LIABILITY_PREFIXES,
            ),
            income_prefixes=cls._parse_prefixes(
                os.getenv("LEDGER_INCOME_PREFIXES"),
                DEFAULT_INCOME_PREFIXES,
            ),
            expense_prefixes=cls._parse_prefixes(
                os.getenv("LEDGER_EXPENSE_PREFIXES"),
                DEFAULT_EXPENSE_PREFIXES,
            ),
        )

    def account_classification(self) -> AccountClassification:
        """Return prefix predicates for the configured account roots."""
        return AccountClassification.from_prefixes(
            asset_prefixes=self.asset_prefixes,
            income_prefixes=self.income_prefixes,
            expense_prefixes=self.expense_prefixes,
        )

    @staticmethod
    def _parse_prefixes(
        raw_value: str | None,
        default: tuple[str, ...],
    ) -> tuple[str, ...]:
        """Split a comma-separated prefix list.

        Whitespace around items is dropped; the trailing separator of each
        prefix is kept as written.
        """
        if raw_value is None:
            return default
        prefixes = tuple(
            item.strip() for item in raw_value.split(",") if item.strip()
        )
        return prefixes or default

    @staticmethod
    def _parse_decimal_points(raw_value: str | None) -> int:
        if raw_value is None or not raw_value.strip():
            return DEFAULT_MAIN_COMMODITY_DECIMAL_POINTS
        try:
            value = int(raw_value.strip())
        except ValueError as exc:
            raise ValueError(
                "LEDGER_MAIN_COMMODITY_DECIMAL_POINTS must be an integer, "
                f"got {raw_value!r}"
            ) from exc
        if value < 0:
            raise ValueError(
                "LEDGER_MAIN_COMMODITY_DECIMAL_POINTS must be non-negative, "
                f"got {value}"
            )
        return value

    @staticmethod
    def _normalize_path(
        raw_path: str,
        logger,
    ) -> Path | str:
        """Normalize the piecash file path or URI.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path | str: Normalized filesystem path or URI string.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme and parsed.scheme != "file":
            return raw_path
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"PieCash file does not exist at {path}")
        return path

    @staticmethod
    def _default_piecash_file(logger) -> Path | None:
        """Return a default piecash book path when available.

        Args:
            logger: Logger used for warnings.

        Returns:
            Path | None: Default path if a single book is found in data/.
        """
        data_dir = get_project_root() / "data"
        if not data_dir.exists():
            return None
        matches = sorted(data_dir.glob("*.gnucash"))
        if len(matches) == 1:
            return matches[0].resolve()
        if len(matches) > 1:
            logger.warning(
                "Multiple .gnucash files found in data/. "
                "Set PIECASH_FILE to choose one."
            )
        return None


__all__ = ["LedgerSettings"]
