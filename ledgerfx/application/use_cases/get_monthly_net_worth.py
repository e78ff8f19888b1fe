"""Use case to value the running balance at each month end."""

import calendar
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable

from ledgerfx.application.use_cases.get_net_worth_summary import (
    GetNetWorthSummaryUseCase,
)
from ledgerfx.domain.errors import PricesError
from ledgerfx.domain.models.reports import MonthlyReport
from ledgerfx.domain.services.fx import Prices
from ledgerfx.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class MonthlyNetWorthPoint:
    """Net worth valued at the last day of a month."""

    year: int
    month: int
    as_of: date
    net_worth: Decimal
    currency_code: str


def month_end(year: int, month: int) -> date:
    """Return the last calendar day of the month."""
    return date(year, month, calendar.monthrange(year, month)[1])


class GetMonthlyNetWorthUseCase:
    """Compute one net worth point per monthly bucket."""

    def __init__(
        self,
        asset_prefixes: Iterable[str] | None = None,
        liability_prefixes: Iterable[str] | None = None,
        logger=None,
    ) -> None:
        self._logger = logger or get_app_logger()
        self._summary = GetNetWorthSummaryUseCase(
            asset_prefixes=asset_prefixes,
            liability_prefixes=liability_prefixes,
            logger=self._logger,
        )

    def execute(
        self,
        report: MonthlyReport,
        prices: Prices,
        target_commodity: str,
        decimal_points: int,
    ) -> list[MonthlyNetWorthPoint]:
        """Return the net worth points in report order.

        Months whose valuation fails are left out.

        Args:
            report: Monthly report to value.
            prices: Rate store used for conversions.
            target_commodity: Commodity the figures are expressed in.
            decimal_points: Rounding precision of the figures.

        Returns:
            list[MonthlyNetWorthPoint]: One point per valued bucket.
        """
        points: list[MonthlyNetWorthPoint] = []
        for monthly_balance in report:
            as_of = month_end(monthly_balance.year, monthly_balance.month)
            try:
                summary = self._summary.execute(
                    monthly_balance.total,
                    prices,
                    as_of,
                    target_commodity,
                    decimal_points,
                )
            except PricesError as exc:
                self._logger.warning(
                    f"Skipping net worth for {as_of:%Y-%m}: {exc.message}"
                )
                continue
            points.append(
                MonthlyNetWorthPoint(
                    year=monthly_balance.year,
                    month=monthly_balance.month,
                    as_of=as_of,
                    net_worth=summary.net_worth,
                    currency_code=target_commodity,
                )
            )
        return points


__all__ = [
    "GetMonthlyNetWorthUseCase",
    "MonthlyNetWorthPoint",
    "month_end",
]
