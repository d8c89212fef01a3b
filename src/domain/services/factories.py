"""Factories building validated ledger records from raw input."""

from collections.abc import Callable, Sequence

from src.domain.exceptions import InvalidLoanError, InvalidScheduleError
from src.domain.models import Loan, Transaction
from src.domain.services.normalization import normalize_label
from src.domain.services.schedule import generate_schedule
from src.domain.services.validation import (
    parse_amount,
    parse_iso_date,
    parse_optional_date,
    validate_choice,
    validate_kind,
)
from src.utils.decimal_utils import quantize_minor_unit
from src.utils.identifiers import new_identifier


def build_transaction(
    *,
    date,
    kind: str,
    amount,
    bank: str,
    category: str,
    description: str = "",
    banks: Sequence[str],
    categories: Sequence[str],
    id_factory: Callable[[], str] = new_identifier,
) -> Transaction:
    """Validate raw input and build a new transaction.

    Args:
        date: Transaction date (``date`` or ISO string).
        kind: "income" or "expense".
        amount: Non-negative amount.
        bank: Bank name from the configured set.
        category: Category name from the configured set.
        description: Optional free-text description.
        banks: Configured banks.
        categories: Configured categories.
        id_factory: Callable producing the transaction id.

    Returns:
        Transaction: Validated transaction with a fresh id.
    """
    return Transaction(
        id=id_factory(),
        date=parse_iso_date(date),
        kind=validate_kind(kind),
        description=normalize_label(description),
        amount=parse_amount(amount),
        bank=validate_choice(bank, banks, "bank"),
        category=validate_choice(category, categories, "category"),
    )


def build_loan(
    *,
    counterparty_name: str,
    principal,
    start_date,
    installment_count: int = 0,
    due_date=None,
    notes: str = "",
    id_factory: Callable[[], str] = new_identifier,
) -> Loan:
    """Validate raw input and build a loan with its schedule.

    The principal is rounded to the minor unit so the generated schedule
    sums to it exactly. Loans without installments get an empty schedule.

    Raises:
        InvalidLoanError: If the counterparty name is empty.
        InvalidScheduleError: If the installment count is negative.
        InvalidAmountError: If the principal is not positive.
        InvalidDateError: If a date is malformed.
    """
    name = normalize_label(counterparty_name)
    if not name:
        raise InvalidLoanError("Counterparty name is required")
    amount = quantize_minor_unit(parse_amount(principal, allow_zero=False))
    if amount <= 0:
        raise InvalidLoanError(f"Principal rounds to zero: {principal!r}")
    if (
        isinstance(installment_count, bool)
        or not isinstance(installment_count, int)
        or installment_count < 0
    ):
        raise InvalidScheduleError(
            "Installment count must be a non-negative integer, "
            f"got {installment_count!r}"
        )
    start = parse_iso_date(start_date)
    schedule = ()
    if installment_count > 0:
        schedule = tuple(
            generate_schedule(
                amount,
                start,
                installment_count,
                id_factory=id_factory,
            )
        )
    return Loan(
        id=id_factory(),
        counterparty_name=name,
        principal=amount,
        start_date=start,
        due_date=parse_optional_date(due_date),
        installment_count=installment_count,
        notes=normalize_label(notes),
        schedule=schedule,
    )


__all__ = ["build_transaction", "build_loan"]
