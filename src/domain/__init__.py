"""Domain package for ledger rules and core models."""

from .constants import (
    DEFAULT_BANKS,
    DEFAULT_CATEGORIES,
    DEFAULT_CURRENCY_LABEL,
    EXPENSE,
    INCOME,
    LOANS_GIVEN,
    LOANS_TAKEN,
)
from .models import (
    BankSnapshotRow,
    DailyTotal,
    DashboardView,
    Installment,
    LedgerReport,
    LedgerSnapshot,
    LedgerTotals,
    Loan,
    LoanProgress,
    MonthlyReportRow,
    PeriodTotal,
    RunningBalanceEntry,
    Transaction,
    YearlyReportRow,
)

__all__ = [
    "DEFAULT_BANKS",
    "DEFAULT_CATEGORIES",
    "DEFAULT_CURRENCY_LABEL",
    "EXPENSE",
    "INCOME",
    "LOANS_GIVEN",
    "LOANS_TAKEN",
    "BankSnapshotRow",
    "DailyTotal",
    "DashboardView",
    "Installment",
    "LedgerReport",
    "LedgerSnapshot",
    "LedgerTotals",
    "Loan",
    "LoanProgress",
    "MonthlyReportRow",
    "PeriodTotal",
    "RunningBalanceEntry",
    "Transaction",
    "YearlyReportRow",
]
