"""Domain models for aggregated ledger figures."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.domain.models.ledger import Transaction


@dataclass(frozen=True)
class DailyTotal:
    """Income and expense totals for a single date."""

    date: date
    income: Decimal
    expense: Decimal

    @property
    def net(self) -> Decimal:
        """Return income minus expense."""
        return self.income - self.expense


@dataclass(frozen=True)
class PeriodTotal:
    """Income and expense totals for a month or year period.

    Attributes:
        period: Period key, "YYYY-MM" for months or "YYYY" for years.
        income: Sum of income amounts in the period.
        expense: Sum of expense amounts in the period.
    """

    period: str
    income: Decimal
    expense: Decimal

    @property
    def saving(self) -> Decimal:
        """Return income minus expense."""
        return self.income - self.expense


@dataclass(frozen=True)
class LedgerTotals:
    """Grand totals over a transaction collection."""

    income: Decimal
    expense: Decimal

    @property
    def net(self) -> Decimal:
        """Return income minus expense."""
        return self.income - self.expense


@dataclass(frozen=True)
class RunningBalanceEntry:
    """Transaction fields plus the bank balance after it."""

    id: str
    date: date
    kind: str
    description: str
    amount: Decimal
    bank: str
    category: str
    running_balance: Decimal

    @classmethod
    def from_transaction(
        cls,
        transaction: Transaction,
        running_balance: Decimal,
    ) -> "RunningBalanceEntry":
        """Build an entry from a transaction and its running balance."""
        return cls(
            id=transaction.id,
            date=transaction.date,
            kind=transaction.kind,
            description=transaction.description,
            amount=transaction.amount,
            bank=transaction.bank,
            category=transaction.category,
            running_balance=running_balance,
        )


@dataclass(frozen=True)
class LoanProgress:
    """Repayment progress of a loan schedule."""

    paid_count: int
    installment_count: int
    paid_amount: Decimal
    outstanding_amount: Decimal


__all__ = [
    "DailyTotal",
    "PeriodTotal",
    "LedgerTotals",
    "RunningBalanceEntry",
    "LoanProgress",
]
