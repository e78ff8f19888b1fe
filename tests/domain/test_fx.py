"""Tests for the exchange rate store."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from ledgerfx.domain.errors import DateTooEarly, NoSuchCommoditiesPair
from ledgerfx.domain.models.ledger import (
    Amount,
    Commodity,
    CommodityPrice,
    Ledger,
    Posting,
    Transaction,
)
from ledgerfx.domain.models.prices import CommoditiesPair, RatesTable
from ledgerfx.domain.services.fx import Prices, get_prices_from_transactions


def _price(day: date, name: str, quantity: str, currency: str) -> CommodityPrice:
    return CommodityPrice(
        datetime=datetime(day.year, day.month, day.day, 15, 30),
        commodity_name=name,
        amount=Amount(Decimal(quantity), Commodity(currency)),
    )


def _exchange(day: date, first: tuple[str, str], second: tuple[str, str]) -> Transaction:
    return Transaction(
        date=day,
        description="Exchange",
        postings=[
            Posting("Assets:A", Amount(Decimal(first[0]), Commodity(first[1]))),
            Posting("Assets:B", Amount(Decimal(second[0]), Commodity(second[1]))),
        ],
    )


def test_add_prices_stores_both_directions() -> None:
    """A price point should be readable forwards and backwards."""
    prices = Prices()
    prices.add_prices([_price(date(2024, 1, 1), "EUR", "1.25", "USD")])

    assert prices.get_rate("EUR", "USD", date(2024, 1, 1)) == Decimal("1.25")
    assert prices.get_rate("USD", "EUR", date(2024, 1, 1)) == Decimal("0.8")
    assert prices.commodities_pairs() == [
        CommoditiesPair("EUR", "USD"),
        CommoditiesPair("USD", "EUR"),
    ]


def test_get_rate_uses_latest_entry_on_or_before_date() -> None:
    """Rates should behave as a step function over dates."""
    prices = Prices()
    prices.add_price("EUR", "USD", Decimal("1.1"), date(2024, 1, 1))
    prices.add_price("EUR", "USD", Decimal("1.2"), date(2024, 3, 1))

    assert prices.get_rate("EUR", "USD", date(2024, 2, 29)) == Decimal("1.1")
    assert prices.get_rate("EUR", "USD", date(2024, 3, 1)) == Decimal("1.2")
    assert prices.get_rate("EUR", "USD", date(2030, 1, 1)) == Decimal("1.2")


def test_get_rate_raises_for_unknown_pair() -> None:
    """Lookups never chain through a third commodity."""
    prices = Prices()
    prices.add_price("EUR", "USD", Decimal("1.1"), date(2024, 1, 1))
    prices.add_price("USD", "GBP", Decimal("0.8"), date(2024, 1, 1))

    with pytest.raises(NoSuchCommoditiesPair) as excinfo:
        prices.get_rate("EUR", "GBP", date(2024, 1, 2))

    assert excinfo.value.commodities_pair == CommoditiesPair("EUR", "GBP")


def test_get_rate_raises_before_first_entry() -> None:
    """A date before every entry should raise DateTooEarly."""
    prices = Prices()
    prices.add_price("EUR", "USD", Decimal("1.1"), date(2024, 1, 10))

    with pytest.raises(DateTooEarly) as excinfo:
        prices.get_rate("EUR", "USD", date(2024, 1, 9))

    assert excinfo.value.date == date(2024, 1, 9)
    assert "2024-01-09" in excinfo.value.message


def test_rates_table_built_from_mapping_answers_lookups() -> None:
    """Entries passed to the constructor should be visible to get_rate."""
    table = RatesTable(
        CommoditiesPair("EUR", "USD"),
        table={
            date(2023, 3, 1): Decimal("1.2"),
            date(2023, 1, 1): Decimal("1.1"),
        },
    )

    assert table.get_rate(date(2023, 6, 1)) == Decimal("1.2")
    assert table.get_rate(date(2023, 2, 1)) == Decimal("1.1")
    assert table.dates() == [date(2023, 1, 1), date(2023, 3, 1)]
    assert len(table) == 2


def test_rates_table_sees_entries_written_to_table() -> None:
    """Writes through the table mapping should behave like set_rate."""
    table = RatesTable(CommoditiesPair("EUR", "USD"))
    table.set_rate(date(2023, 5, 1), Decimal("1.3"))
    table.table[date(2023, 1, 1)] = Decimal("1.1")

    assert table.get_rate(date(2023, 2, 1)) == Decimal("1.1")
    assert table.get_rate(date(2023, 5, 2)) == Decimal("1.3")
    with pytest.raises(DateTooEarly):
        table.get_rate(date(2022, 12, 31))


def test_same_date_price_overwrites_previous_value() -> None:
    """A later price on the same date replaces the earlier one."""
    prices = Prices()
    prices.add_prices(
        [
            _price(date(2024, 1, 1), "EUR", "1.1", "USD"),
            _price(date(2024, 1, 1), "EUR", "1.3", "USD"),
        ]
    )

    assert prices.get_rate("EUR", "USD", date(2024, 1, 1)) == Decimal("1.3")
    assert len(prices.rates[CommoditiesPair("EUR", "USD")]) == 1


def test_zero_price_is_skipped_with_warning() -> None:
    """Zero prices have no reciprocal and are ignored."""
    logger = MagicMock()
    prices = Prices()

    prices.add_prices([_price(date(2024, 1, 1), "EUR", "0", "USD")], logger=logger)

    assert prices.rates == {}
    logger.warning.assert_called_once()


def test_get_prices_from_transactions_derives_implied_rate() -> None:
    """Two-posting exchanges imply -qty2/qty1 of the second commodity."""
    transaction = _exchange(date(2024, 2, 3), ("-100", "EUR"), ("110", "USD"))

    result = get_prices_from_transactions([transaction])

    assert len(result) == 1
    assert result[0].commodity_name == "EUR"
    assert result[0].amount.commodity.name == "USD"
    assert result[0].amount.quantity == Decimal("1.1")
    assert result[0].datetime == datetime(2024, 2, 3)


def test_get_prices_from_transactions_ignores_other_shapes() -> None:
    """Same-commodity, zero and multi-posting transactions imply nothing."""
    same = _exchange(date(2024, 1, 1), ("-1", "EUR"), ("1", "EUR"))
    zero = _exchange(date(2024, 1, 1), ("0", "EUR"), ("5", "USD"))
    three = _exchange(date(2024, 1, 1), ("-1", "EUR"), ("1", "USD"))
    three.postings.append(
        Posting("Assets:C", Amount(Decimal("0"), Commodity("GBP")))
    )

    assert get_prices_from_transactions([same, zero, three]) == []


def test_load_lets_implied_rate_win_same_date_collision() -> None:
    """Implied prices are ingested after explicit ones."""
    day = date(2024, 5, 1)
    ledger = Ledger(
        commodity_prices=[_price(day, "EUR", "1.05", "USD")],
        transactions=[_exchange(day, ("-100", "EUR"), ("108", "USD"))],
    )

    prices = Prices.load(ledger)

    assert prices.get_rate("EUR", "USD", day) == Decimal("1.08")


def test_convert_multiplies_by_rate() -> None:
    """convert should apply the rate in effect on the date."""
    prices = Prices()
    prices.add_price("EUR", "USD", Decimal("1.1"), date(2024, 1, 1))

    assert prices.convert(Decimal("-20"), "EUR", "USD", date(2024, 6, 1)) == (
        Decimal("-22.0")
    )
