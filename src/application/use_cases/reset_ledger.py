"""Use case to clear every record from the ledger."""

from src.application.ports.ledger_store import LedgerStorePort
from src.domain.services.ledger import empty_snapshot
from src.infrastructure.logging.logger import get_app_logger


class ResetLedgerUseCase:
    """Replace the stored ledger with an empty one."""

    def __init__(self, ledger_store: LedgerStorePort, logger=None) -> None:
        self._ledger_store = ledger_store
        self._logger = logger or get_app_logger()

    def execute(self) -> None:
        """Delete all transactions and loans."""
        self._ledger_store.save(empty_snapshot())
        self._logger.warning("Ledger reset: all records deleted")


__all__ = ["ResetLedgerUseCase"]
