"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_store import LedgerStorePort
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.ledger_store_factory import create_ledger_store
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings


def build_settings() -> LedgerSettings:
    """Return settings sourced from the environment."""
    return LedgerSettings.from_env()


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_store(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> LedgerStorePort:
    """Return the configured ledger store."""
    resolved_settings = settings or build_settings()
    resolved_db = db_port or build_database_adapter()
    return create_ledger_store(
        resolved_db,
        backend=resolved_settings.backend,
        json_file=resolved_settings.json_file,
        logger=get_app_logger(),
    )


__all__ = [
    "build_settings",
    "build_database_adapter",
    "build_ledger_store",
]
