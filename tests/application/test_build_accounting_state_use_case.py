"""Tests for the BuildAccountingStateUseCase."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from ledgerfx.application.use_cases.build_accounting_state import (
    BuildAccountingStateUseCase,
)
from ledgerfx.domain.constants import TRADING_ACCOUNT
from ledgerfx.domain.errors import NoSuchCommoditiesPair
from ledgerfx.domain.models.ledger import (
    Amount,
    Commodity,
    CommodityPrice,
    Ledger,
    Posting,
    Transaction,
)
from ledgerfx.domain.policies.account_filters import AccountClassification


def _posting(account: str, quantity: str, commodity: str) -> Posting:
    return Posting(account, Amount(Decimal(quantity), Commodity(commodity)))


def _classification() -> AccountClassification:
    return AccountClassification.from_prefixes(
        asset_prefixes=("Assets:",),
        income_prefixes=("Income:",),
        expense_prefixes=("Expenses:",),
    )


def _ledger() -> Ledger:
    return Ledger(
        commodity_prices=[
            CommodityPrice(
                datetime(2024, 1, 1),
                "EUR",
                Amount(Decimal("1.1"), Commodity("USD")),
            )
        ],
        transactions=[
            Transaction(
                date(2024, 1, 10),
                "salary",
                [
                    _posting("Assets:Bank:EUR", "100", "EUR"),
                    _posting("Income:Salary", "-100", "EUR"),
                ],
            ),
            Transaction(
                date(2024, 2, 5),
                "groceries",
                [
                    _posting("Assets:Bank:USD", "-20", "USD"),
                    _posting("Expenses:Food", "20", "USD"),
                ],
            ),
        ],
    )


def _build(source, logger=None) -> BuildAccountingStateUseCase:
    return BuildAccountingStateUseCase(
        ledger_source=source,
        classification=_classification(),
        main_commodity="USD",
        main_commodity_decimal_points=2,
        logger=logger or MagicMock(),
    )


def test_execute_runs_the_pipeline() -> None:
    """The state holds the rewritten ledger and derived reports."""
    source = MagicMock()
    source.fetch_ledger.return_value = _ledger()
    logger = MagicMock()

    state = _build(source, logger).execute()

    income = state.balance.account_balances["Income:Salary"]
    assert income.amounts["USD"].quantity == Decimal("-110.00")
    trading = state.balance.account_balances[TRADING_ACCOUNT]
    assert trading.amounts["EUR"].quantity == Decimal("-100")
    assert trading.amounts["USD"].quantity == Decimal("110.00")
    assert state.tree.find("Assets:Bank").balance.amounts["USD"].quantity == (
        Decimal("-20")
    )
    assert [(m.year, m.month) for m in state.monthly_report] == [
        (2024, 1),
        (2024, 2),
    ]
    assert state.prices.get_rate("USD", "EUR", date(2024, 1, 1)) == (
        Decimal(1) / Decimal("1.1")
    )
    assert logger.info.call_count >= 3


def test_execute_propagates_conversion_errors() -> None:
    """A missing rate aborts the build and leaves the ledger as read."""
    ledger = _ledger()
    ledger.commodity_prices.clear()
    source = MagicMock()
    source.fetch_ledger.return_value = ledger

    with pytest.raises(NoSuchCommoditiesPair):
        _build(source).execute()

    assert len(ledger.transactions[0].postings) == 2
