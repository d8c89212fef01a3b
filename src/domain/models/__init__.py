"""Domain models package."""

from .finance import (
    DailyTotal,
    LedgerTotals,
    LoanProgress,
    PeriodTotal,
    RunningBalanceEntry,
)
from .ledger import Installment, LedgerSnapshot, Loan, Transaction
from .reports import (
    BankSnapshotRow,
    DashboardView,
    LedgerReport,
    MonthlyReportRow,
    YearlyReportRow,
)

__all__ = [
    "Transaction",
    "Installment",
    "Loan",
    "LedgerSnapshot",
    "DailyTotal",
    "PeriodTotal",
    "LedgerTotals",
    "RunningBalanceEntry",
    "LoanProgress",
    "MonthlyReportRow",
    "YearlyReportRow",
    "BankSnapshotRow",
    "LedgerReport",
    "DashboardView",
]
