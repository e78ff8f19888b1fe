"""PieCash-backed ledger source for GnuCash books."""

from contextlib import contextmanager
from decimal import Decimal
from pathlib import Path

from ledgerfx.application.ports.ledger_source import LedgerSourcePort
from ledgerfx.domain.models.ledger import (
    Amount,
    Commodity,
    CommodityPrice,
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
from ledgerfx.infrastructure.piecash_compat import load_piecash, open_piecash_book
from ledgerfx.utils.date_utils import coerce_date
from ledgerfx.utils.decimal_utils import coerce_decimal


class PieCashLedgerSource(LedgerSourcePort):
    """Ledger source reading a GnuCash book through piecash."""

    def __init__(self, book_path: Path | str, logger=None) -> None:
        """Initialize the source.

        Args:
            book_path: Path or URI to the GnuCash book supported by piecash.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        try:
            self._piecash = load_piecash()
        except ImportError as exc:
            raise RuntimeError(
                "piecash is not installed; install it to use the piecash backend"
            ) from exc
        self._book_path = book_path
        self._logger = logger or get_app_logger()

    @contextmanager
    def _open_book(self):
        book = open_piecash_book(
            self._piecash,
            self._book_path,
            readonly=True,
            open_if_lock=True,
            check_exists=False,
        )
        try:
            yield book
        finally:
            close_method = getattr(book, "close", None)
            if callable(close_method):
                close_method()

    @staticmethod
    def _account_type(raw_type) -> str:
        if raw_type is None:
            return ""
        return str(getattr(raw_type, "name", raw_type)).upper()

    @staticmethod
    def _numeric_to_decimal(value) -> Decimal:
        if value is None:
            return Decimal("0")
        if hasattr(value, "numerator") and hasattr(value, "denominator"):
            denom = coerce_decimal(value.denominator)
            if denom == 0:
                return Decimal("0")
            return coerce_decimal(value.numerator) / denom
        return coerce_decimal(value)

    def fetch_ledger(self) -> Ledger:
        """Return price records and transactions ordered by date."""
        with self._open_book() as book:
            paths = build_account_paths(
                AccountNode(
                    guid=account.guid,
                    name=account.name,
                    parent_guid=getattr(account.parent, "guid", None),
                    account_type=self._account_type(account.type),
                )
                for account in book.accounts
            )
            transactions = self._build_transactions(book.transactions, paths)
            prices = self._build_prices(book.prices)
        ledger = Ledger(commodity_prices=prices, transactions=transactions)
        self._logger.info(
            f"Loaded {len(transactions)} transactions and "
            f"{len(prices)} prices from piecash book"
        )
        return ledger

    def _build_transactions(self, book_transactions, paths) -> list[Transaction]:
        transactions = []
        for book_transaction in book_transactions:
            post_date = coerce_date(book_transaction.post_date)
            if post_date is None:
                self._logger.warning(
                    "Skipping transaction "
                    f"{book_transaction.description!r} without post date"
                )
                continue
            postings = []
            for split in book_transaction.splits:
                account = paths.get(split.account.guid)
                if account is None:
                    continue
                postings.append(
                    Posting(
                        account=account,
                        amount=Amount(
                            quantity=self._numeric_to_decimal(split.quantity),
                            commodity=Commodity(split.account.commodity.mnemonic),
                        ),
                        status=reconcile_status(split.reconcile_state),
                        comment=split.memo or None,
                    )
                )
            if not postings:
                continue
            transactions.append(
                Transaction(
                    date=post_date,
                    description=book_transaction.description or "",
                    postings=postings,
                    code=book_transaction.num or None,
                )
            )
        return sorted(transactions, key=lambda transaction: transaction.date)

    def _build_prices(self, book_prices) -> list[CommodityPrice]:
        prices = []
        for price in book_prices:
            record = build_commodity_price(
                price.date,
                price.commodity.mnemonic,
                price.currency.mnemonic,
                self._numeric_to_decimal(price.value),
                1,
                self._logger,
            )
            if record is not None:
                prices.append(record)
        return sorted(prices, key=lambda record: record.datetime)


__all__ = ["PieCashLedgerSource"]
