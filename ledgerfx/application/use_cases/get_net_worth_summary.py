"""Use case to value assets and liabilities in one commodity."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable

from ledgerfx.domain.constants import (
    DEFAULT_ASSET_PREFIXES,
    DEFAULT_LIABILITY_PREFIXES,
)
from ledgerfx.domain.models.balances import Balance
from ledgerfx.domain.services.fx import Prices
from ledgerfx.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class NetWorthSummary:
    """Summary of net worth figures.

    Attributes:
        asset_total: Value of asset balances.
        liability_total: Value of liability balances as a positive debt.
        net_worth: Assets minus liabilities.
        currency_code: Commodity the figures are expressed in.
    """

    asset_total: Decimal
    liability_total: Decimal
    net_worth: Decimal
    currency_code: str


class GetNetWorthSummaryUseCase:
    """Compute net worth from a balance and a rate store."""

    def __init__(
        self,
        asset_prefixes: Iterable[str] | None = None,
        liability_prefixes: Iterable[str] | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            asset_prefixes: Account path prefixes treated as assets.
            liability_prefixes: Account path prefixes treated as liabilities.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._asset_prefixes = tuple(asset_prefixes or DEFAULT_ASSET_PREFIXES)
        self._liability_prefixes = tuple(
            liability_prefixes or DEFAULT_LIABILITY_PREFIXES
        )
        self._logger = logger or get_app_logger()

    def execute(
        self,
        balance: Balance,
        prices: Prices,
        as_of: date,
        target_commodity: str,
        decimal_points: int,
    ) -> NetWorthSummary:
        """Return the net worth summary.

        Args:
            balance: Balance to value.
            prices: Rate store used for conversions.
            as_of: Date used for rate lookups.
            target_commodity: Commodity the figures are expressed in.
            decimal_points: Rounding precision of the figures.

        Returns:
            NetWorthSummary: Totals rounded half away from zero.

        Raises:
            PricesError: A held commodity cannot be converted.
        """
        asset_value = balance.get_account_balance(
            self._asset_prefixes
        ).value_in_commodity_rounded(
            target_commodity,
            decimal_points,
            as_of,
            prices,
        )
        liability_value = balance.get_account_balance(
            self._liability_prefixes
        ).value_in_commodity_rounded(
            target_commodity,
            decimal_points,
            as_of,
            prices,
        )
        summary = NetWorthSummary(
            asset_total=asset_value,
            liability_total=Decimal("0") - liability_value,
            net_worth=asset_value + liability_value,
            currency_code=target_commodity,
        )
        self._logger.info(
            f"Net worth on {as_of.isoformat()}: {summary.net_worth} "
            f"{target_commodity}"
        )
        return summary


__all__ = ["GetNetWorthSummaryUseCase", "NetWorthSummary"]
