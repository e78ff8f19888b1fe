"""Domain errors raised by currency conversion."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ledgerfx.domain.models.prices import CommoditiesPair


class PricesError(Exception):
    """Base error for failed commodity conversions."""

    def __init__(self, message: str) -> None:
        """Initialize with an error message."""
        self.message = message
        super().__init__(message)


class NoSuchCommoditiesPair(PricesError):
    """No rate was ever recorded for the requested conversion direction."""

    def __init__(self, commodities_pair: CommoditiesPair) -> None:
        """Initialize the error.

        Args:
            commodities_pair: Pair that has no rates table.
        """
        self.commodities_pair = commodities_pair
        super().__init__(
            "No rates recorded for "
            f"{commodities_pair.src_commodity_name} -> "
            f"{commodities_pair.dst_commodity_name}"
        )


class DateTooEarly(PricesError):
    """The pair has rates, but none on or before the requested date."""

    def __init__(
        self,
        requested_date: date,
        commodities_pair: CommoditiesPair | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            requested_date: Date of the failed lookup.
            commodities_pair: Pair whose table was searched.
        """
        self.date = requested_date
        self.commodities_pair = commodities_pair
        message = f"No rate on or before {requested_date.isoformat()}"
        if commodities_pair is not None:
            message += (
                f" for {commodities_pair.src_commodity_name} -> "
                f"{commodities_pair.dst_commodity_name}"
            )
        super().__init__(message)


__all__ = ["PricesError", "NoSuchCommoditiesPair", "DateTooEarly"]
