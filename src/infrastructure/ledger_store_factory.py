"""Factory helpers to select the ledger store backend."""

from pathlib import Path

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_store import LedgerStorePort
from src.infrastructure.json_ledger_store import JsonFileLedgerStore
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.sqlalchemy_ledger_store import SqlAlchemyLedgerStore


def create_ledger_store(
    db_port: DatabaseEnginePort,
    backend: str,
    json_file: str | Path | None = None,
    logger=None,
) -> LedgerStorePort:
    """Return a ledger store implementation based on configuration.

    Args:
        db_port: Port providing access to the ledger engine (SQL backend).
        backend: Backend identifier (sqlalchemy or json).
        json_file: Path of the JSON document for the json backend.
        logger: Optional logger compatible with logging.Logger-like API.

    Returns:
        LedgerStorePort: Concrete store implementation.

    Raises:
        RuntimeError: If the json backend has no file configured.
        ValueError: If the backend is not supported.
    """
    resolved_logger = logger or get_app_logger()
    selected_backend = backend.strip().lower()

    if selected_backend == "sqlalchemy":
        return SqlAlchemyLedgerStore(db_port, logger=resolved_logger)

    if selected_backend == "json":
        if not json_file:
            raise RuntimeError(
                "JSON backend requires a LEDGER_JSON_FILE path."
            )
        return JsonFileLedgerStore(json_file, logger=resolved_logger)

    raise ValueError(
        "Unsupported ledger backend: "
        f"{selected_backend}. Expected sqlalchemy or json."
    )


__all__ = ["create_ledger_store"]
