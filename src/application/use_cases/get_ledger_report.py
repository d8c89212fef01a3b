"""Use case to build the monthly, yearly and bank report tables."""

from collections.abc import Sequence

from src.application.ports.ledger_store import LedgerStorePort
from src.domain.constants import DEFAULT_BANKS
from src.domain.models import LedgerReport
from src.domain.services.reports import compose_ledger_report
from src.infrastructure.logging.logger import get_app_logger


class GetLedgerReportUseCase:
    """Compose the report tables from the current ledger."""

    def __init__(
        self,
        ledger_store: LedgerStorePort,
        logger=None,
        banks: Sequence[str] = DEFAULT_BANKS,
    ) -> None:
        self._ledger_store = ledger_store
        self._logger = logger or get_app_logger()
        self._banks = tuple(banks)

    def execute(self) -> LedgerReport:
        """Return the report tables for the current snapshot."""
        snapshot = self._ledger_store.load()
        report = compose_ledger_report(snapshot.transactions, self._banks)
        self._logger.info(
            f"Report composed: {len(report.monthly)} months, "
            f"{len(report.yearly)} years, {len(report.banks)} banks"
        )
        return report


__all__ = ["GetLedgerReportUseCase", "LedgerReport"]
