"""Domain models for report views consumed by presentation."""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.models.finance import DailyTotal, LedgerTotals, PeriodTotal


@dataclass(frozen=True)
class MonthlyReportRow:
    """Row of the monthly report table."""

    month: str
    income: Decimal
    expense: Decimal
    saving: Decimal


@dataclass(frozen=True)
class YearlyReportRow:
    """Row of the yearly report table."""

    year: str
    income: Decimal
    expense: Decimal
    saving: Decimal


@dataclass(frozen=True)
class BankSnapshotRow:
    """Row of the bank balances snapshot."""

    bank: str
    balance: Decimal


@dataclass(frozen=True)
class LedgerReport:
    """Monthly, yearly and bank report tables."""

    monthly: list[MonthlyReportRow]
    yearly: list[YearlyReportRow]
    banks: list[BankSnapshotRow]


@dataclass(frozen=True)
class DashboardView:
    """Figures rendered on the dashboard page."""

    totals: LedgerTotals
    bank_balances: list[BankSnapshotRow]
    daily: list[DailyTotal]
    monthly: list[PeriodTotal]


__all__ = [
    "MonthlyReportRow",
    "YearlyReportRow",
    "BankSnapshotRow",
    "LedgerReport",
    "DashboardView",
]
