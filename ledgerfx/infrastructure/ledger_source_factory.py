"""Factory helpers to select the ledger source backend."""

import os
from pathlib import Path

from ledgerfx.application.ports.database import DatabaseEnginePort
from ledgerfx.application.ports.ledger_source import LedgerSourcePort
from ledgerfx.infrastructure.gnucash_ledger_source import SqlAlchemyLedgerSource
from ledgerfx.infrastructure.logging.logger import get_app_logger
from ledgerfx.infrastructure.piecash_ledger_source import PieCashLedgerSource
from ledgerfx.infrastructure.settings import LedgerSettings


def create_ledger_source(
    db_port: DatabaseEnginePort,
    logger=None,
    backend: str | None = None,
    piecash_path: str | Path | None = None,
    settings: LedgerSettings | None = None,
) -> LedgerSourcePort:
    """Return a ledger source implementation based on configuration.

    Explicit arguments win over settings, settings win over environment
    variables.

    Args:
        db_port: Port providing access to the GnuCash engine (SQL backend).
        logger: Optional logger compatible with logging.Logger-like API.
        backend: Optional backend override (sqlalchemy or piecash).
        piecash_path: Optional path override for the piecash backend.
        settings: Optional settings used when overrides are missing.

    Returns:
        LedgerSourcePort: Concrete ledger source.

    Raises:
        RuntimeError: If the piecash backend has no book path.
        ValueError: If the backend is unknown.
    """
    resolved_logger = logger or get_app_logger()
    if backend is None:
        backend = (
            settings.backend
            if settings is not None
            else os.getenv("GNUCASH_BACKEND", "sqlalchemy")
        )
    selected_backend = backend.strip().lower()

    if selected_backend == "sqlalchemy":
        return SqlAlchemyLedgerSource(db_port, logger=resolved_logger)

    if selected_backend == "piecash":
        path = piecash_path
        if path is None and settings is not None:
            path = settings.piecash_file
        if path is None:
            path = os.getenv("PIECASH_FILE") or None
        if not path:
            resolved_logger.warning(
                "Missing piecash file path; set PIECASH_FILE to enable the backend"
            )
            raise RuntimeError("PieCash backend requires a PIECASH_FILE path.")
        return PieCashLedgerSource(path, logger=resolved_logger)

    raise ValueError(
        "Unsupported GnuCash backend: "
        f"{selected_backend}. Expected sqlalchemy or piecash."
    )


__all__ = ["create_ledger_source"]
