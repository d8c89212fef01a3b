"""Report composer turning aggregates into fixed report shapes."""

from collections.abc import Iterable, Mapping, Sequence
from decimal import Decimal

from src.domain.models import (
    BankSnapshotRow,
    DashboardView,
    LedgerReport,
    MonthlyReportRow,
    PeriodTotal,
    Transaction,
    YearlyReportRow,
)
from src.domain.services.aggregation import (
    bank_balances,
    compute_totals,
    daily_totals,
    monthly_totals,
    yearly_totals,
)


def compose_monthly_table(
    monthly: Iterable[PeriodTotal],
) -> list[MonthlyReportRow]:
    """Map monthly totals to report rows, keeping their order."""
    return [
        MonthlyReportRow(
            month=row.period,
            income=row.income,
            expense=row.expense,
            saving=row.saving,
        )
        for row in monthly
    ]


def compose_yearly_table(
    yearly: Iterable[PeriodTotal],
) -> list[YearlyReportRow]:
    """Map yearly totals to report rows, keeping their order."""
    return [
        YearlyReportRow(
            year=row.period,
            income=row.income,
            expense=row.expense,
            saving=row.saving,
        )
        for row in yearly
    ]


def compose_bank_snapshot(
    balances: Mapping[str, Decimal],
) -> list[BankSnapshotRow]:
    """Map bank balances to snapshot rows in the mapping's order."""
    return [
        BankSnapshotRow(bank=bank, balance=balance)
        for bank, balance in balances.items()
    ]


def compose_ledger_report(
    transactions: Sequence[Transaction],
    banks: Sequence[str],
) -> LedgerReport:
    """Build the monthly, yearly and bank tables of the reports page.

    Args:
        transactions: Transactions from the current snapshot.
        banks: Configured banks, in display order.

    Returns:
        LedgerReport: The three report tables.
    """
    return LedgerReport(
        monthly=compose_monthly_table(monthly_totals(transactions)),
        yearly=compose_yearly_table(yearly_totals(transactions)),
        banks=compose_bank_snapshot(bank_balances(transactions, banks)),
    )


def compose_dashboard(
    transactions: Sequence[Transaction],
    banks: Sequence[str],
) -> DashboardView:
    """Build the totals, balances and series shown on the dashboard."""
    return DashboardView(
        totals=compute_totals(transactions),
        bank_balances=compose_bank_snapshot(
            bank_balances(transactions, banks)
        ),
        daily=daily_totals(transactions),
        monthly=monthly_totals(transactions),
    )


__all__ = [
    "compose_monthly_table",
    "compose_yearly_table",
    "compose_bank_snapshot",
    "compose_ledger_report",
    "compose_dashboard",
]
