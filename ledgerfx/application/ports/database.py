"""Port giving ledger sources access to a GnuCash SQL book."""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Access to the SQL database holding a GnuCash book."""

    def get_gnucash_engine(self) -> Engine:
        """Return the engine connected to the book."""

    def describe_book(self) -> str:
        """Return a printable book location with credentials masked.

        Ledger sources use it in log messages, so it must never expose a
        password.
        """


__all__ = ["DatabaseEnginePort"]
