"""Use cases to record, delete and list ledger transactions."""

from collections.abc import Sequence
import datetime
from decimal import Decimal

from src.application.ports.ledger_store import LedgerStorePort
from src.domain.constants import DEFAULT_BANKS, DEFAULT_CATEGORIES
from src.domain.models import Transaction
from src.domain.services.factories import build_transaction
from src.domain.services.ledger import add_transaction, delete_transaction
from src.infrastructure.logging.logger import get_app_logger


class AddTransactionUseCase:
    """Validate and append a transaction to the ledger."""

    def __init__(
        self,
        ledger_store: LedgerStorePort,
        logger=None,
        banks: Sequence[str] = DEFAULT_BANKS,
        categories: Sequence[str] = DEFAULT_CATEGORIES,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_store: Port loading and saving ledger snapshots.
            logger: Optional logger compatible with logging.Logger-like API.
            banks: Closed set of banks accepted on new transactions.
            categories: Closed set of categories accepted.
        """
        self._ledger_store = ledger_store
        self._logger = logger or get_app_logger()
        self._banks = tuple(banks)
        self._categories = tuple(categories)

    def execute(
        self,
        *,
        date: datetime.date | str,
        kind: str,
        amount: Decimal | str | int | float,
        bank: str,
        category: str,
        description: str = "",
    ) -> Transaction:
        """Record a new transaction and persist the ledger.

        Returns:
            Transaction: The stored transaction, with its generated id.

        Raises:
            LedgerValidationError: If any field violates a precondition.
        """
        transaction = build_transaction(
            date=date,
            kind=kind,
            amount=amount,
            bank=bank,
            category=category,
            description=description,
            banks=self._banks,
            categories=self._categories,
        )
        snapshot = self._ledger_store.load()
        self._ledger_store.save(add_transaction(snapshot, transaction))
        self._logger.info(
            f"Added {transaction.kind} transaction {transaction.id}: "
            f"amount={transaction.amount}, bank={transaction.bank}, "
            f"date={transaction.date.isoformat()}"
        )
        return transaction


class DeleteTransactionUseCase:
    """Remove a transaction from the ledger by id."""

    def __init__(self, ledger_store: LedgerStorePort, logger=None) -> None:
        self._ledger_store = ledger_store
        self._logger = logger or get_app_logger()

    def execute(self, transaction_id: str) -> None:
        """Delete the transaction and persist the ledger.

        Raises:
            TransactionNotFoundError: If no transaction has that id.
        """
        snapshot = self._ledger_store.load()
        self._ledger_store.save(delete_transaction(snapshot, transaction_id))
        self._logger.info(f"Deleted transaction {transaction_id}")


class ListTransactionsUseCase:
    """Return ledger transactions, newest first by default."""

    def __init__(self, ledger_store: LedgerStorePort) -> None:
        self._ledger_store = ledger_store

    def execute(self, newest_first: bool = True) -> list[Transaction]:
        transactions = list(self._ledger_store.load().transactions)
        if newest_first:
            transactions.reverse()
        return transactions


__all__ = [
    "AddTransactionUseCase",
    "DeleteTransactionUseCase",
    "ListTransactionsUseCase",
]
