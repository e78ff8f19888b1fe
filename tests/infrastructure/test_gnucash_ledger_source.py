"""Tests for the SQLAlchemy ledger source."""

from datetime import date, datetime
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from ledgerfx.domain.models.ledger import TransactionStatus
from ledgerfx.infrastructure.gnucash_ledger_source import SqlAlchemyLedgerSource


class _FakeResult:
    def __init__(self, rows: list[SimpleNamespace]) -> None:
        self._rows = rows

    def all(self):
        return self._rows


def _build_db_port(results: list[list[SimpleNamespace]]) -> MagicMock:
    engine = MagicMock()
    conn = MagicMock()
    context = MagicMock()
    context.__enter__.return_value = conn
    engine.connect.return_value = context
    conn.execute.side_effect = [_FakeResult(rows) for rows in results]

    db_port = MagicMock()
    db_port.get_gnucash_engine.return_value = engine
    return db_port


def _account(guid, name, parent_guid, account_type="ASSET"):
    return SimpleNamespace(
        guid=guid,
        name=name,
        parent_guid=parent_guid,
        account_type=account_type,
    )


def _split(tx_guid, account_guid, quantity, denom, mnemonic, **extra):
    values = {
        "tx_guid": tx_guid,
        "post_date": "2024-01-15 10:59:00",
        "num": "",
        "description": "Salary",
        "account_guid": account_guid,
        "memo": "",
        "reconcile_state": "n",
        "quantity_num": quantity,
        "quantity_denom": denom,
        "mnemonic": mnemonic,
    }
    values.update(extra)
    return SimpleNamespace(**values)


_ACCOUNTS = [
    _account("root", "Root Account", None, "ROOT"),
    _account("assets", "Assets", "root"),
    _account("bank", "Bank", "assets", "BANK"),
    _account("income", "Income", "root", "INCOME"),
    _account("salary", "Salary", "income", "INCOME"),
    _account("troot", "Template Root", None, "ROOT"),
    _account("tmpl", "552dbab9691b4dadb80cc170009f9cce", "troot", "BANK"),
]


def test_fetch_ledger_maps_splits_to_postings() -> None:
    """Splits are grouped into transactions with full account paths."""
    splits = [
        _split(
            "tx1",
            "bank",
            10000,
            100,
            "EUR",
            reconcile_state="y",
            memo="January pay",
            num="42",
        ),
        _split("tx1", "salary", -10000, 100, "EUR", reconcile_state="c"),
        _split(
            "tx2",
            "bank",
            -550,
            100,
            "EUR",
            post_date=datetime(2024, 2, 1, 10, 0),
            description="Fee",
        ),
        _split("tx2", "tmpl", 550, 100, "EUR"),
    ]
    db_port = _build_db_port([_ACCOUNTS, splits, []])

    ledger = SqlAlchemyLedgerSource(db_port, logger=MagicMock()).fetch_ledger()

    first, second = ledger.transactions
    assert first.date == date(2024, 1, 15)
    assert first.description == "Salary"
    assert first.code == "42"
    assert [p.account for p in first.postings] == ["Assets:Bank", "Income:Salary"]
    assert first.postings[0].amount.quantity == Decimal("100")
    assert first.postings[0].amount.commodity.name == "EUR"
    assert first.postings[0].status is TransactionStatus.CLEARED
    assert first.postings[0].comment == "January pay"
    assert first.postings[1].status is TransactionStatus.PENDING
    assert first.postings[1].comment is None
    assert second.date == date(2024, 2, 1)
    assert [p.account for p in second.postings] == ["Assets:Bank"]
    assert second.postings[0].status is None


def test_fetch_ledger_maps_prices_and_skips_zero_denominators() -> None:
    """Price rows become price records; unusable rows are skipped."""
    prices = [
        SimpleNamespace(
            date="2024-01-05 00:00:00",
            commodity="EUR",
            currency="USD",
            value_num=11,
            value_denom=10,
        ),
        SimpleNamespace(
            date="2024-01-06 00:00:00",
            commodity="EUR",
            currency="USD",
            value_num=11,
            value_denom=0,
        ),
    ]
    logger = MagicMock()
    db_port = _build_db_port([_ACCOUNTS, [], prices])

    ledger = SqlAlchemyLedgerSource(db_port, logger=logger).fetch_ledger()

    assert len(ledger.commodity_prices) == 1
    price = ledger.commodity_prices[0]
    assert price.datetime == datetime(2024, 1, 5)
    assert price.commodity_name == "EUR"
    assert price.amount.commodity.name == "USD"
    assert price.amount.quantity == Decimal("1.1")
    logger.warning.assert_called_once()


def test_fetch_ledger_skips_splits_with_zero_denominator() -> None:
    """Broken split quantities are logged and left out."""
    splits = [
        _split("tx1", "bank", 100, 0, "EUR"),
        _split("tx1", "salary", -100, 1, "EUR"),
    ]
    logger = MagicMock()
    db_port = _build_db_port([_ACCOUNTS, splits, []])

    ledger = SqlAlchemyLedgerSource(db_port, logger=logger).fetch_ledger()

    assert [p.account for p in ledger.transactions[0].postings] == [
        "Income:Salary"
    ]
    logger.warning.assert_called_once()


def test_fetch_ledger_logs_masked_book_location() -> None:
    """The load summary names the book as described by the port."""
    db_port = _build_db_port([_ACCOUNTS, [], []])
    db_port.describe_book.return_value = "postgresql://gnucash:***@db/book"
    logger = MagicMock()

    SqlAlchemyLedgerSource(db_port, logger=logger).fetch_ledger()

    message = logger.info.call_args.args[0]
    assert message == (
        "Loaded 0 transactions and 0 prices from "
        "postgresql://gnucash:***@db/book"
    )
