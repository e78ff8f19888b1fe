"""Historical exchange rates built from ledger price points."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, datetime, time
from decimal import Decimal

from ledgerfx.domain.errors import NoSuchCommoditiesPair
from ledgerfx.domain.models.ledger import (
    Amount,
    CommodityPrice,
    Ledger,
    Transaction,
)
from ledgerfx.domain.models.prices import CommoditiesPair, RatesTable


_module_logger = logging.getLogger(__name__)


class Prices:
    """Per commodity pair, date-indexed exchange rates.

    Every price point is stored in both directions: the forward rate and
    its reciprocal, each as its own dated entry. Lookups never chain
    through a third commodity.
    """

    def __init__(self) -> None:
        self.rates: dict[CommoditiesPair, RatesTable] = {}

    @classmethod
    def load(cls, ledger: Ledger, logger=None) -> Prices:
        """Build rates from a ledger.

        Explicit price records are ingested first, then the rates implied
        by exchange transactions, so an implied rate wins a same-date
        collision.

        Args:
            ledger: Ledger holding price records and transactions.
            logger: Optional logger compatible with logging.Logger-like API.

        Returns:
            Prices: Populated rate store.
        """
        return cls.from_records(
            ledger.commodity_prices,
            ledger.transactions,
            logger=logger,
        )

    @classmethod
    def from_records(
        cls,
        commodity_prices: Iterable[CommodityPrice],
        transactions: Iterable[Transaction] = (),
        logger=None,
    ) -> Prices:
        resolved_logger = logger or _module_logger
        result = cls()
        result.add_prices(commodity_prices, logger=resolved_logger)
        result.add_prices(
            get_prices_from_transactions(transactions),
            logger=resolved_logger,
        )
        return result

    def add_prices(
        self,
        prices: Iterable[CommodityPrice],
        logger=None,
    ) -> None:
        """Record each price point in both directions."""
        resolved_logger = logger or _module_logger
        for price in prices:
            if price.amount.quantity == 0:
                resolved_logger.warning(
                    "Skipping zero price for "
                    f"{price.commodity_name} in "
                    f"{price.amount.commodity.name} on "
                    f"{price.datetime.date().isoformat()}"
                )
                continue
            price_date = price.datetime.date()
            self.add_price(
                price.commodity_name,
                price.amount.commodity.name,
                price.amount.quantity,
                price_date,
            )
            self.add_price(
                price.amount.commodity.name,
                price.commodity_name,
                Decimal(1) / price.amount.quantity,
                price_date,
            )

    def add_price(
        self,
        src_commodity_name: str,
        dst_commodity_name: str,
        rate: Decimal,
        rate_date: date,
    ) -> None:
        """Record a single directed rate; a same-date entry is overwritten."""
        commodities_pair = CommoditiesPair(
            src_commodity_name,
            dst_commodity_name,
        )
        table = self.rates.get(commodities_pair)
        if table is None:
            table = RatesTable(commodities_pair)
            self.rates[commodities_pair] = table
        table.set_rate(rate_date, rate)

    def get_rate(
        self,
        src_commodity_name: str,
        dst_commodity_name: str,
        rate_date: date,
    ) -> Decimal:
        """Return the rate in effect on rate_date.

        Raises:
            NoSuchCommoditiesPair: No rate was recorded for the direction.
            DateTooEarly: Every recorded rate is later than rate_date.
        """
        commodities_pair = CommoditiesPair(
            src_commodity_name,
            dst_commodity_name,
        )
        table = self.rates.get(commodities_pair)
        if table is None:
            raise NoSuchCommoditiesPair(commodities_pair)
        return table.get_rate(rate_date)

    def convert(
        self,
        quantity: Decimal,
        src_commodity_name: str,
        dst_commodity_name: str,
        rate_date: date,
    ) -> Decimal:
        """Convert a quantity using the rate in effect on rate_date."""
        rate = self.get_rate(
            src_commodity_name,
            dst_commodity_name,
            rate_date,
        )
        return quantity * rate

    def commodities_pairs(self) -> list[CommoditiesPair]:
        return sorted(
            self.rates,
            key=lambda pair: (pair.src_commodity_name, pair.dst_commodity_name),
        )


def get_prices_from_transactions(
    transactions: Iterable[Transaction],
) -> list[CommodityPrice]:
    """Return the price points implied by two-commodity exchanges.

    A transaction implies a price when it has exactly two postings in
    different commodities and neither quantity is zero. One unit of the
    first posting's commodity is worth -qty2/qty1 of the second's, at
    midnight of the transaction date.
    """
    result: list[CommodityPrice] = []
    for transaction in transactions:
        if len(transaction.postings) != 2:
            continue
        first = transaction.postings[0].amount
        second = transaction.postings[1].amount
        if first.commodity.name == second.commodity.name:
            continue
        if first.quantity == 0 or second.quantity == 0:
            continue
        result.append(
            CommodityPrice(
                datetime=datetime.combine(transaction.date, time.min),
                commodity_name=first.commodity.name,
                amount=Amount(
                    quantity=-second.quantity / first.quantity,
                    commodity=second.commodity,
                ),
            )
        )
    return result


__all__ = ["Prices", "get_prices_from_transactions"]
