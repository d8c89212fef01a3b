"""Use case to list one bank's transactions with running balances."""

from dataclasses import dataclass
from decimal import Decimal

from src.application.ports.ledger_store import LedgerStorePort
from src.domain.models import RunningBalanceEntry
from src.domain.services.aggregation import running_balance
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class BankRunningBalanceView:
    """Running balance entries of a bank plus its closing balance."""

    bank: str
    balance: Decimal
    entries: list[RunningBalanceEntry]


class GetBankRunningBalanceUseCase:
    """Compute the running balance of a single bank."""

    def __init__(self, ledger_store: LedgerStorePort, logger=None) -> None:
        self._ledger_store = ledger_store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        bank: str,
        newest_first: bool = True,
    ) -> BankRunningBalanceView:
        """Return the bank's entries and closing balance.

        Args:
            bank: Bank to inspect.
            newest_first: Present the most recent entry first.

        Returns:
            BankRunningBalanceView: Entries and the final running balance.
        """
        snapshot = self._ledger_store.load()
        entries = running_balance(snapshot.transactions, bank)
        balance = entries[-1].running_balance if entries else Decimal("0")
        if newest_first:
            entries = list(reversed(entries))
        self._logger.info(
            f"Running balance for {bank}: {len(entries)} entries, "
            f"balance={balance}"
        )
        return BankRunningBalanceView(
            bank=bank,
            balance=balance,
            entries=entries,
        )


__all__ = ["GetBankRunningBalanceUseCase", "BankRunningBalanceView"]
