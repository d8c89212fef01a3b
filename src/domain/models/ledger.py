"""Domain models for ledger records."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from src.domain.constants import INCOME


@dataclass(frozen=True)
class Transaction:
    """Single income or expense record.

    Attributes:
        id: Opaque unique identifier.
        date: Calendar date the transaction applies to.
        kind: Either "income" or "expense".
        description: Free-text description.
        amount: Non-negative amount; the sign comes from kind.
        bank: Bank or wallet the money moved through.
        category: Category label from the configured set.
    """

    id: str
    date: date
    kind: str
    description: str
    amount: Decimal
    bank: str
    category: str

    @property
    def signed_amount(self) -> Decimal:
        """Return amount signed by kind (+income, -expense)."""
        return self.amount if self.kind == INCOME else -self.amount


@dataclass(frozen=True)
class Installment:
    """One scheduled repayment of a loan."""

    id: str
    due_date: date
    amount: Decimal
    paid: bool = False
    paid_date: date | None = None


@dataclass(frozen=True)
class Loan:
    """Peer-to-peer loan, either taken or given.

    Attributes:
        id: Opaque unique identifier.
        counterparty_name: Person or party on the other side.
        principal: Positive loan amount.
        start_date: Date the loan started.
        due_date: Optional final due date entered by the user.
        installment_count: Number of installments (0 for none).
        notes: Free-text notes.
        schedule: Installments generated at creation time.
    """

    id: str
    counterparty_name: str
    principal: Decimal
    start_date: date
    due_date: date | None = None
    installment_count: int = 0
    notes: str = ""
    schedule: tuple[Installment, ...] = ()


@dataclass(frozen=True)
class LedgerSnapshot:
    """Immutable view of the whole ledger, each collection oldest-first."""

    transactions: tuple[Transaction, ...] = field(default_factory=tuple)
    loans_taken: tuple[Loan, ...] = field(default_factory=tuple)
    loans_given: tuple[Loan, ...] = field(default_factory=tuple)


__all__ = ["Transaction", "Installment", "Loan", "LedgerSnapshot"]
