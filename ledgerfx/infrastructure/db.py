"""SQLAlchemy engines for GnuCash SQL books.

The book URL comes from ``LedgerSettings`` so the same configuration picks
the ledger backend and opens the connection. Engines are kept per URL and
shared by every ledger source reading that book.
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import ArgumentError
from sqlalchemy.pool import QueuePool

from ledgerfx.application.ports.database import DatabaseEnginePort
from ledgerfx.infrastructure.logging.logger import get_app_logger
from ledgerfx.infrastructure.settings import LedgerSettings


_engines: dict[str, Engine] = {}


def mask_book_url(db_url: str) -> str:
    """Render a book URL with its password hidden.

    Args:
        db_url: SQLAlchemy URL of the GnuCash book.

    Returns:
        str: URL safe to print or log.

    Raises:
        RuntimeError: If db_url is not a valid SQLAlchemy URL.
    """
    try:
        return make_url(db_url).render_as_string(hide_password=True)
    except ArgumentError as exc:
        raise RuntimeError(f"Invalid GnuCash database URL: {exc}") from exc


def resolve_book_url(settings: LedgerSettings) -> str:
    """Return the configured SQL book URL.

    Raises:
        RuntimeError: If no URL is configured.
    """
    if not settings.gnucash_db_url:
        raise RuntimeError("Missing environment variable: GNUCASH_DB_URL")
    return settings.gnucash_db_url


def _create_engine(db_url: str) -> Engine:
    """Create a pooled engine with health checks for one book."""
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


def get_gnucash_engine(db_url: str, logger=None) -> Engine:
    """Return the shared engine for db_url, creating it on first use.

    Args:
        db_url: SQLAlchemy URL of the GnuCash book.
        logger: Optional logger compatible with logging.Logger-like API.

    Returns:
        Engine: Engine connected to the book.
    """
    engine = _engines.get(db_url)
    if engine is None:
        masked = mask_book_url(db_url)
        engine = _create_engine(db_url)
        _engines[db_url] = engine
        (logger or get_app_logger()).info(
            f"Opened GnuCash book {masked} "
            f"with the {engine.dialect.name} dialect"
        )
    return engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort reading the book configured in LedgerSettings.

    Settings are read from the environment on first use when none are
    given.
    """

    def __init__(self, settings: LedgerSettings | None = None, logger=None):
        self._settings = settings
        self._logger = logger or get_app_logger()

    def _book_url(self) -> str:
        if self._settings is None:
            self._settings = LedgerSettings.from_env()
        return resolve_book_url(self._settings)

    def get_gnucash_engine(self) -> Engine:
        return get_gnucash_engine(self._book_url(), logger=self._logger)

    def describe_book(self) -> str:
        return mask_book_url(self._book_url())


__all__ = [
    "mask_book_url",
    "resolve_book_url",
    "get_gnucash_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
