"""CLI to validate the ledger database connection and create its tables.

This adapter is meant for local operations: it instantiates the concrete
database adapter from the infrastructure layer, runs a basic health check
and ensures the ledger tables exist.
"""

from src.infrastructure.container import build_database_adapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.sqlalchemy_ledger_store import SqlAlchemyLedgerStore


def main() -> None:
    """Check connectivity and prepare the ledger schema."""
    logger = get_app_logger()
    adapter = build_database_adapter()

    engine = adapter.get_ledger_engine()
    logger.info(f"Ledger DB: {engine.url}")
    with engine.connect() as conn:
        conn.exec_driver_sql("SELECT 1")

    SqlAlchemyLedgerStore(adapter, logger=logger).prepare()
    logger.info("Ledger tables are ready.")
    print(f"Ledger database ready at {engine.url}")


if __name__ == "__main__":  # pragma: no cover
    main()
