"""Port for reading fully resolved ledgers."""

from typing import Protocol

from ledgerfx.domain.models.ledger import Ledger


class LedgerSourcePort(Protocol):
    """Port exposing price records and transactions of a book.

    Implementations return transactions ordered by date, with every
    posting amount filled in.
    """

    def fetch_ledger(self) -> Ledger:
        """Return the ledger read from the underlying book."""


__all__ = ["LedgerSourcePort"]
