"""Tests for joining ledgers."""

from datetime import date, datetime
from decimal import Decimal

from ledgerfx.domain.models.ledger import (
    Amount,
    Commodity,
    CommodityPrice,
    Ledger,
    Transaction,
)
from ledgerfx.domain.services.ledgers import join_ledgers


def _price(moment: datetime, quantity: str) -> CommodityPrice:
    return CommodityPrice(moment, "EUR", Amount(Decimal(quantity), Commodity("USD")))


def test_join_orders_prices_and_transactions() -> None:
    """Joined ledgers are ordered by datetime and date."""
    first = Ledger(
        commodity_prices=[_price(datetime(2024, 3, 1), "1.2")],
        transactions=[Transaction(date(2024, 3, 1), "march")],
    )
    second = Ledger(
        commodity_prices=[_price(datetime(2024, 1, 1), "1.1")],
        transactions=[
            Transaction(date(2024, 1, 1), "january"),
            Transaction(date(2024, 3, 1), "march again"),
        ],
    )

    joined = join_ledgers([first, second])

    assert [p.amount.quantity for p in joined.commodity_prices] == [
        Decimal("1.1"),
        Decimal("1.2"),
    ]
    assert [t.description for t in joined.transactions] == [
        "january",
        "march",
        "march again",
    ]
    assert first.transactions[0].description == "march"
