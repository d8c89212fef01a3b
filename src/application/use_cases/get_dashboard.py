"""Use case to compute the figures shown on the dashboard page."""

from collections.abc import Sequence

from src.application.ports.ledger_store import LedgerStorePort
from src.domain.constants import DEFAULT_BANKS
from src.domain.models import DashboardView
from src.domain.services.reports import compose_dashboard
from src.infrastructure.logging.logger import get_app_logger


class GetDashboardUseCase:
    """Compute totals, bank balances and daily/monthly series."""

    def __init__(
        self,
        ledger_store: LedgerStorePort,
        logger=None,
        banks: Sequence[str] = DEFAULT_BANKS,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_store: Port providing the ledger snapshot.
            logger: Optional logger compatible with logging.Logger-like API.
            banks: Configured banks, in display order.
        """
        self._ledger_store = ledger_store
        self._logger = logger or get_app_logger()
        self._banks = tuple(banks)

    def execute(self) -> DashboardView:
        """Return the dashboard view for the current snapshot."""
        snapshot = self._ledger_store.load()
        view = compose_dashboard(snapshot.transactions, self._banks)
        self._logger.info(
            f"Dashboard computed from {len(snapshot.transactions)} "
            f"transactions: income={view.totals.income}, "
            f"expense={view.totals.expense}, net={view.totals.net}"
        )
        return view


__all__ = ["GetDashboardUseCase", "DashboardView"]
