"""Composition root for wiring infrastructure adapters."""

from ledgerfx.application.ports.database import DatabaseEnginePort
from ledgerfx.application.ports.ledger_source import LedgerSourcePort
from ledgerfx.application.use_cases.build_accounting_state import (
    BuildAccountingStateUseCase,
)
from ledgerfx.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from ledgerfx.infrastructure.ledger_source_factory import create_ledger_source
from ledgerfx.infrastructure.logging.logger import get_app_logger
from ledgerfx.infrastructure.settings import LedgerSettings


def build_database_adapter(
    settings: LedgerSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter reading the configured SQL book."""
    return SqlAlchemyDatabaseEngineAdapter(
        settings=settings,
        logger=get_app_logger(),
    )


def build_settings() -> LedgerSettings:
    """Return settings read from the environment."""
    return LedgerSettings.from_env()


def build_ledger_source(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> LedgerSourcePort:
    """Return the configured ledger source."""
    resolved_settings = settings or build_settings()
    return create_ledger_source(
        db_port or build_database_adapter(resolved_settings),
        logger=get_app_logger(),
        settings=resolved_settings,
    )


def build_accounting_state_use_case(
    settings: LedgerSettings | None = None,
    ledger_source: LedgerSourcePort | None = None,
) -> BuildAccountingStateUseCase:
    """Return the pipeline use case wired from settings."""
    resolved_settings = settings or build_settings()
    return BuildAccountingStateUseCase(
        ledger_source=ledger_source
        or build_ledger_source(settings=resolved_settings),
        classification=resolved_settings.account_classification(),
        main_commodity=resolved_settings.main_commodity,
        main_commodity_decimal_points=(
            resolved_settings.main_commodity_decimal_points
        ),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_settings",
    "build_ledger_source",
    "build_accounting_state_use_case",
]
