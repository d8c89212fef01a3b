"""Pure ledger mutations returning new snapshots.

None of these functions mutate the snapshot they receive; callers persist
the returned snapshot and re-derive their views from it.
"""

from dataclasses import replace
from datetime import date
from decimal import Decimal

from src.domain.constants import LOANS_GIVEN, LOANS_TAKEN
from src.domain.exceptions import (
    InstallmentNotFoundError,
    LoanNotFoundError,
    TransactionNotFoundError,
)
from src.domain.models import (
    Installment,
    LedgerSnapshot,
    Loan,
    LoanProgress,
    Transaction,
)
from src.domain.services.validation import validate_loan_kind

_LOAN_FIELDS = {
    LOANS_TAKEN: "loans_taken",
    LOANS_GIVEN: "loans_given",
}


def empty_snapshot() -> LedgerSnapshot:
    """Return a ledger without any records."""
    return LedgerSnapshot()


def loans_of(snapshot: LedgerSnapshot, kind: str) -> tuple[Loan, ...]:
    """Return the loan collection selected by kind (taken or given)."""
    return getattr(snapshot, _LOAN_FIELDS[validate_loan_kind(kind)])


def add_transaction(
    snapshot: LedgerSnapshot,
    transaction: Transaction,
) -> LedgerSnapshot:
    """Append a transaction to the ledger."""
    return replace(
        snapshot,
        transactions=(*snapshot.transactions, transaction),
    )


def delete_transaction(
    snapshot: LedgerSnapshot,
    transaction_id: str,
) -> LedgerSnapshot:
    """Remove a transaction by id.

    Raises:
        TransactionNotFoundError: If no transaction has that id.
    """
    remaining = tuple(
        tx for tx in snapshot.transactions if tx.id != transaction_id
    )
    if len(remaining) == len(snapshot.transactions):
        raise TransactionNotFoundError(
            f"Transaction not found: {transaction_id}"
        )
    return replace(snapshot, transactions=remaining)


def add_loan(
    snapshot: LedgerSnapshot,
    kind: str,
    loan: Loan,
) -> LedgerSnapshot:
    """Append a loan to the taken or given collection."""
    loans = loans_of(snapshot, kind)
    return replace(snapshot, **{_LOAN_FIELDS[kind]: (*loans, loan)})


def delete_loan(
    snapshot: LedgerSnapshot,
    kind: str,
    loan_id: str,
) -> LedgerSnapshot:
    """Remove a loan by id from the selected collection.

    Raises:
        LoanNotFoundError: If no loan of that kind has the id.
    """
    loans = loans_of(snapshot, kind)
    remaining = tuple(loan for loan in loans if loan.id != loan_id)
    if len(remaining) == len(loans):
        raise LoanNotFoundError(f"Loan not found in {kind}: {loan_id}")
    return replace(snapshot, **{_LOAN_FIELDS[kind]: remaining})


def toggle_paid(installment: Installment, today: date) -> Installment:
    """Flip the paid flag, stamping or clearing the paid date."""
    if installment.paid:
        return replace(installment, paid=False, paid_date=None)
    return replace(installment, paid=True, paid_date=today)


def toggle_installment(
    snapshot: LedgerSnapshot,
    kind: str,
    loan_id: str,
    installment_id: str,
    today: date,
) -> LedgerSnapshot:
    """Toggle one installment of one loan; nothing else changes.

    Args:
        snapshot: Current ledger snapshot.
        kind: Loan collection, "taken" or "given".
        loan_id: Id of the loan owning the installment.
        installment_id: Id of the installment to toggle.
        today: Date stamped as paid date when marking paid.

    Returns:
        LedgerSnapshot: New snapshot with the toggled installment.

    Raises:
        LoanNotFoundError: If the loan does not exist.
        InstallmentNotFoundError: If the loan has no such installment.
    """
    loans = loans_of(snapshot, kind)
    updated_loans: list[Loan] = []
    found_loan = False
    for loan in loans:
        if loan.id != loan_id:
            updated_loans.append(loan)
            continue
        found_loan = True
        updated_loans.append(_toggle_in_loan(loan, installment_id, today))
    if not found_loan:
        raise LoanNotFoundError(f"Loan not found in {kind}: {loan_id}")
    return replace(snapshot, **{_LOAN_FIELDS[kind]: tuple(updated_loans)})


def loan_progress(loan: Loan) -> LoanProgress:
    """Summarize how much of a loan schedule has been paid."""
    paid_count = 0
    paid_amount = Decimal("0")
    for installment in loan.schedule:
        if installment.paid:
            paid_count += 1
            paid_amount += installment.amount
    scheduled = sum(
        (installment.amount for installment in loan.schedule),
        start=Decimal("0"),
    )
    return LoanProgress(
        paid_count=paid_count,
        installment_count=len(loan.schedule),
        paid_amount=paid_amount,
        outstanding_amount=scheduled - paid_amount,
    )


def _toggle_in_loan(loan: Loan, installment_id: str, today: date) -> Loan:
    schedule = []
    found = False
    for installment in loan.schedule:
        if installment.id == installment_id:
            found = True
            schedule.append(toggle_paid(installment, today))
        else:
            schedule.append(installment)
    if not found:
        raise InstallmentNotFoundError(
            f"Installment {installment_id} not found in loan {loan.id}"
        )
    return replace(loan, schedule=tuple(schedule))


__all__ = [
    "empty_snapshot",
    "loans_of",
    "add_transaction",
    "delete_transaction",
    "add_loan",
    "delete_loan",
    "toggle_paid",
    "toggle_installment",
    "loan_progress",
]
