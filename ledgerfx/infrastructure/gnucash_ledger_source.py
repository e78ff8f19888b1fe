"""SQLAlchemy-backed ledger source reading a GnuCash SQL book."""

from sqlalchemy import text

from ledgerfx.application.ports.database import DatabaseEnginePort
from ledgerfx.application.ports.ledger_source import LedgerSourcePort
from ledgerfx.domain.models.ledger import (
    Amount,
    Commodity,
    Ledger,
    Posting,
    Transaction,
)
from ledgerfx.infrastructure.gnucash_records import (
    AccountNode,
    build_account_paths,
    build_commodity_price,
    reconcile_status,
)
from ledgerfx.infrastructure.logging.logger import get_app_logger
from ledgerfx.utils.date_utils import coerce_date
from ledgerfx.utils.decimal_utils import coerce_decimal


_ACCOUNTS_QUERY = """
SELECT guid, name, parent_guid, account_type
FROM accounts
"""

_SPLITS_QUERY = """
SELECT t.guid AS tx_guid,
       t.post_date AS post_date,
       t.num AS num,
       t.description AS description,
       s.account_guid AS account_guid,
       s.memo AS memo,
       s.reconcile_state AS reconcile_state,
       s.quantity_num AS quantity_num,
       s.quantity_denom AS quantity_denom,
       c.mnemonic AS mnemonic
FROM transactions t
JOIN splits s ON s.tx_guid = t.guid
JOIN accounts a ON a.guid = s.account_guid
JOIN commodities c ON c.guid = a.commodity_guid
ORDER BY t.post_date, t.enter_date, t.guid, s.guid
"""

_PRICES_QUERY = """
SELECT p.date AS date,
       c.mnemonic AS commodity,
       cur.mnemonic AS currency,
       p.value_num AS value_num,
       p.value_denom AS value_denom
FROM prices p
JOIN commodities c ON c.guid = p.commodity_guid
JOIN commodities cur ON cur.guid = p.currency_guid
ORDER BY p.date
"""


class SqlAlchemyLedgerSource(LedgerSourcePort):
    """Ledger source backed by SQLAlchemy queries on GnuCash tables."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the source.

        Args:
            db_port: Port providing access to the GnuCash engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def fetch_ledger(self) -> Ledger:
        """Return price records and transactions ordered by date."""
        engine = self._db_port.get_gnucash_engine()
        with engine.connect() as conn:
            account_rows = conn.execute(text(_ACCOUNTS_QUERY)).all()
            split_rows = conn.execute(text(_SPLITS_QUERY)).all()
            price_rows = conn.execute(text(_PRICES_QUERY)).all()

        paths = build_account_paths(
            AccountNode(
                guid=row.guid,
                name=row.name,
                parent_guid=row.parent_guid,
                account_type=(row.account_type or "").upper(),
            )
            for row in account_rows
        )
        ledger = Ledger(
            commodity_prices=self._build_prices(price_rows),
            transactions=self._build_transactions(split_rows, paths),
        )
        self._logger.info(
            f"Loaded {len(ledger.transactions)} transactions and "
            f"{len(ledger.commodity_prices)} prices from "
            f"{self._db_port.describe_book()}"
        )
        return ledger

    def _build_transactions(self, rows, paths: dict[str, str]) -> list[Transaction]:
        transactions: dict[str, Transaction] = {}
        for row in rows:
            account = paths.get(row.account_guid)
            if account is None:
                continue
            denom = coerce_decimal(row.quantity_denom)
            if denom == 0:
                self._logger.warning(
                    f"Skipping split with zero denominator on {account}"
                )
                continue
            transaction = transactions.get(row.tx_guid)
            if transaction is None:
                post_date = coerce_date(row.post_date)
                if post_date is None:
                    self._logger.warning(
                        f"Skipping transaction {row.tx_guid} without post date"
                    )
                    continue
                transaction = Transaction(
                    date=post_date,
                    description=row.description or "",
                    code=row.num or None,
                )
                transactions[row.tx_guid] = transaction
            transaction.postings.append(
                Posting(
                    account=account,
                    amount=Amount(
                        quantity=coerce_decimal(row.quantity_num) / denom,
                        commodity=Commodity(row.mnemonic),
                    ),
                    status=reconcile_status(row.reconcile_state),
                    comment=row.memo or None,
                )
            )
        return list(transactions.values())

    def _build_prices(self, rows) -> list:
        prices = []
        for row in rows:
            price = build_commodity_price(
                row.date,
                row.commodity,
                row.currency,
                row.value_num,
                row.value_denom,
                self._logger,
            )
            if price is not None:
                prices.append(price)
        return prices


__all__ = ["SqlAlchemyLedgerSource"]
