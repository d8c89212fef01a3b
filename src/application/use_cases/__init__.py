"""Application use cases package."""

from .get_bank_running_balance import (
    BankRunningBalanceView,
    GetBankRunningBalanceUseCase,
)
from .get_dashboard import DashboardView, GetDashboardUseCase
from .get_ledger_report import GetLedgerReportUseCase, LedgerReport
from .manage_loans import (
    AddLoanUseCase,
    DeleteLoanUseCase,
    ListLoansUseCase,
    LoanView,
    ToggleInstallmentUseCase,
)
from .manage_transactions import (
    AddTransactionUseCase,
    DeleteTransactionUseCase,
    ListTransactionsUseCase,
)
from .reset_ledger import ResetLedgerUseCase

__all__ = [
    "AddTransactionUseCase",
    "DeleteTransactionUseCase",
    "ListTransactionsUseCase",
    "AddLoanUseCase",
    "DeleteLoanUseCase",
    "ToggleInstallmentUseCase",
    "ListLoansUseCase",
    "LoanView",
    "GetDashboardUseCase",
    "DashboardView",
    "GetLedgerReportUseCase",
    "LedgerReport",
    "GetBankRunningBalanceUseCase",
    "BankRunningBalanceView",
    "ResetLedgerUseCase",
]
