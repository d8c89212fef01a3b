"""Use cases to create, delete, list and settle peer-to-peer loans."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.application.ports.ledger_store import LedgerStorePort
from src.domain.models import Loan, LoanProgress
from src.domain.services.factories import build_loan
from src.domain.services.ledger import (
    add_loan,
    delete_loan,
    loan_progress,
    loans_of,
    toggle_installment,
)
from src.domain.services.validation import validate_loan_kind
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class LoanView:
    """Loan paired with its repayment progress."""

    kind: str
    loan: Loan
    progress: LoanProgress


class AddLoanUseCase:
    """Create a loan, generating its installment schedule."""

    def __init__(self, ledger_store: LedgerStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            ledger_store: Port loading and saving ledger snapshots.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_store = ledger_store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        *,
        kind: str,
        counterparty_name: str,
        principal: Decimal | str | int | float,
        start_date: date | str,
        installment_count: int = 0,
        due_date: date | str | None = None,
        notes: str = "",
    ) -> Loan:
        """Record a loan taken or given and persist the ledger.

        Args:
            kind: Loan collection, "taken" or "given".
            counterparty_name: Person or party on the other side.
            principal: Positive loan amount.
            start_date: Loan start date.
            installment_count: Number of monthly installments, 0 for none.
            due_date: Optional final due date.
            notes: Free-text notes.

        Returns:
            Loan: The stored loan with its schedule.

        Raises:
            LedgerValidationError: If any field violates a precondition.
        """
        validate_loan_kind(kind)
        loan = build_loan(
            counterparty_name=counterparty_name,
            principal=principal,
            start_date=start_date,
            installment_count=installment_count,
            due_date=due_date,
            notes=notes,
        )
        snapshot = self._ledger_store.load()
        self._ledger_store.save(add_loan(snapshot, kind, loan))
        self._logger.info(
            f"Added loan {loan.id} ({kind}): principal={loan.principal}, "
            f"installments={len(loan.schedule)}"
        )
        return loan


class DeleteLoanUseCase:
    """Remove a loan, with its schedule, from the ledger."""

    def __init__(self, ledger_store: LedgerStorePort, logger=None) -> None:
        self._ledger_store = ledger_store
        self._logger = logger or get_app_logger()

    def execute(self, kind: str, loan_id: str) -> None:
        """Delete the loan and persist the ledger.

        Raises:
            LoanNotFoundError: If the loan does not exist.
        """
        snapshot = self._ledger_store.load()
        self._ledger_store.save(delete_loan(snapshot, kind, loan_id))
        self._logger.info(f"Deleted loan {loan_id} ({kind})")


class ToggleInstallmentUseCase:
    """Mark an installment paid, or back to unpaid."""

    def __init__(
        self,
        ledger_store: LedgerStorePort,
        logger=None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_store: Port loading and saving ledger snapshots.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Callable returning the current date for paid dates.
        """
        self._ledger_store = ledger_store
        self._logger = logger or get_app_logger()
        self._clock = clock

    def execute(self, kind: str, loan_id: str, installment_id: str) -> Loan:
        """Toggle the installment and persist the ledger.

        Returns:
            Loan: The loan after the toggle.

        Raises:
            LoanNotFoundError: If the loan does not exist.
            InstallmentNotFoundError: If the loan has no such installment.
        """
        snapshot = self._ledger_store.load()
        updated = toggle_installment(
            snapshot,
            kind,
            loan_id,
            installment_id,
            today=self._clock(),
        )
        self._ledger_store.save(updated)
        loan = next(
            item for item in loans_of(updated, kind) if item.id == loan_id
        )
        installment = next(
            item for item in loan.schedule if item.id == installment_id
        )
        state = "paid" if installment.paid else "unpaid"
        self._logger.info(
            f"Installment {installment_id} of loan {loan_id} marked {state}"
        )
        return loan


class ListLoansUseCase:
    """Return the loans of one collection with their progress."""

    def __init__(self, ledger_store: LedgerStorePort) -> None:
        self._ledger_store = ledger_store

    def execute(self, kind: str, newest_first: bool = True) -> list[LoanView]:
        loans = list(loans_of(self._ledger_store.load(), kind))
        if newest_first:
            loans.reverse()
        return [
            LoanView(kind=kind, loan=loan, progress=loan_progress(loan))
            for loan in loans
        ]


__all__ = [
    "LoanView",
    "AddLoanUseCase",
    "DeleteLoanUseCase",
    "ToggleInstallmentUseCase",
    "ListLoansUseCase",
]
