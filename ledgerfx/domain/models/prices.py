"""Domain models for commodity exchange rates."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from ledgerfx.domain.errors import DateTooEarly


@dataclass(frozen=True)
class CommoditiesPair:
    """Directional (source, destination) commodity pair."""

    src_commodity_name: str
    dst_commodity_name: str

    def reversed(self) -> CommoditiesPair:
        return CommoditiesPair(
            src_commodity_name=self.dst_commodity_name,
            dst_commodity_name=self.src_commodity_name,
        )


@dataclass
class RatesTable:
    """Dated rates for one commodity pair, read as a step function.

    A rate holds from its date until a later entry supersedes it. Lookups
    read ``table`` directly, so entries written through the field are seen
    the same way as those recorded with ``set_rate``.
    """

    commodities_pair: CommoditiesPair
    table: dict[date, Decimal] = field(default_factory=dict)

    def set_rate(self, rate_date: date, rate: Decimal) -> None:
        """Record a rate, overwriting any rate already stored for the date."""
        self.table[rate_date] = rate

    def get_rate(self, requested_date: date) -> Decimal:
        """Return the rate of the latest entry on or before requested_date.

        Raises:
            DateTooEarly: If every entry is later than requested_date.
        """
        dates = self.dates()
        index = bisect_right(dates, requested_date)
        if index == 0:
            raise DateTooEarly(requested_date, self.commodities_pair)
        return self.table[dates[index - 1]]

    def dates(self) -> list[date]:
        """Return the recorded dates in ascending order."""
        return sorted(self.table)

    def __len__(self) -> int:
        return len(self.table)


__all__ = ["CommoditiesPair", "RatesTable"]
