"""Helpers for loading piecash and opening GnuCash books with it."""

from __future__ import annotations

import inspect
import warnings
from pathlib import Path
from urllib.parse import urlparse

from sqlalchemy.exc import SAWarning

_PIECASH = None


def _patch_sqlalchemy_for_piecash() -> None:
    """Drop the ``constructor`` argument piecash passes to newer SQLAlchemy."""
    from sqlalchemy.orm import decl_api

    original = decl_api.registry.generate_base
    if "constructor" in inspect.signature(original).parameters:
        return
    if getattr(original, "_piecash_patched", False):
        return

    def _generate_base(self, *args, **kwargs):
        kwargs.pop("constructor", None)
        return original(self, *args, **kwargs)

    _generate_base._piecash_patched = True  # type: ignore[attr-defined]
    decl_api.registry.generate_base = _generate_base


def load_piecash():
    """Import piecash once, with the SQLAlchemy patch applied.

    Raises:
        ImportError: If piecash is not installed.
    """
    global _PIECASH
    if _PIECASH is None:
        _patch_sqlalchemy_for_piecash()
        warnings.filterwarnings("ignore", category=SAWarning)
        import piecash

        _PIECASH = piecash
    return _PIECASH


def split_book_location(book_path: Path | str) -> tuple[str | None, str | None]:
    """Split a book location into ``(sqlite_file, uri_conn)``.

    Plain paths and ``file:`` URIs become a resolved SQLite file, any other
    scheme is passed through as a database URI.
    """
    if isinstance(book_path, Path):
        return str(book_path), None
    parsed = urlparse(book_path)
    if parsed.scheme and parsed.scheme != "file":
        return None, book_path
    raw_path = parsed.path if parsed.scheme == "file" else book_path
    return str(Path(raw_path).expanduser().resolve()), None


def open_piecash_book(
    piecash,
    book_path: Path | str,
    *,
    readonly: bool = True,
    open_if_lock: bool = True,
    check_exists: bool = False,
):
    """Open a book read-only from a filesystem path or database URI."""
    sqlite_file, uri_conn = split_book_location(book_path)
    return piecash.open_book(
        sqlite_file=sqlite_file,
        uri_conn=uri_conn,
        readonly=readonly,
        open_if_lock=open_if_lock,
        check_exists=check_exists,
    )


__all__ = ["load_piecash", "open_piecash_book", "split_book_location"]
