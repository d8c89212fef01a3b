"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import altair as alt
import streamlit as st

from src.application.ports.ledger_store import LedgerStorePort
from src.application.use_cases.get_bank_running_balance import (
    BankRunningBalanceView,
    GetBankRunningBalanceUseCase,
)
from src.application.use_cases.get_dashboard import (
    DashboardView,
    GetDashboardUseCase,
)
from src.application.use_cases.get_ledger_report import (
    GetLedgerReportUseCase,
    LedgerReport,
)
from src.application.use_cases.manage_loans import (
    AddLoanUseCase,
    DeleteLoanUseCase,
    ListLoansUseCase,
    LoanView,
    ToggleInstallmentUseCase,
)
from src.application.use_cases.manage_transactions import (
    AddTransactionUseCase,
    DeleteTransactionUseCase,
    ListTransactionsUseCase,
)
from src.application.use_cases.reset_ledger import ResetLedgerUseCase
from src.domain.constants import EXPENSE, INCOME, LOANS_GIVEN, LOANS_TAKEN
from src.domain.exceptions import LedgerNotFoundError, LedgerValidationError
from src.domain.models import (
    BankSnapshotRow,
    DailyTotal,
    Loan,
    PeriodTotal,
    Transaction,
)
from src.infrastructure.container import build_ledger_store, build_settings
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import LedgerSettings

PAGES = ["Dashboard", "Transactions", "Banks", "Loans", "Reports"]
LOAN_KIND_LABELS = {LOANS_TAKEN: "Loan Taken", LOANS_GIVEN: "Loan Given"}


@st.cache_resource(show_spinner=False)
def _load_context() -> tuple[LedgerSettings, LedgerStorePort]:
    """Build settings and the ledger store once per Streamlit server."""
    settings = build_settings()
    return settings, build_ledger_store(settings=settings)


def _format_amount(value: Decimal, label: str) -> str:
    """Format amounts for display."""
    return f"{label} {value:,.2f}"


def _format_signed_amount(transaction: Transaction, label: str) -> str:
    """Format a transaction amount with its income/expense sign."""
    sign = "+" if transaction.kind == INCOME else "-"
    return f"{sign} {_format_amount(transaction.amount, label)}"


def _series_chart_data(
    rows: Sequence[DailyTotal] | Sequence[PeriodTotal],
    key_field: str,
) -> list[dict[str, str | float]]:
    """Flatten daily or period totals into Altair long-format records.

    Args:
        rows: Daily totals or period totals, in chart order.
        key_field: Name of the x-axis field in the output records.

    Returns:
        list[dict[str, str | float]]: One record per row and series.
    """
    data: list[dict[str, str | float]] = []
    for row in rows:
        if isinstance(row, DailyTotal):
            key = row.date.isoformat()
            series = (
                ("income", row.income),
                ("expense", row.expense),
                ("net", row.net),
            )
        else:
            key = row.period
            series = (
                ("income", row.income),
                ("expense", row.expense),
                ("saving", row.saving),
            )
        for name, amount in series:
            data.append(
                {key_field: key, "series": name, "amount": float(amount)}
            )
    return data


def _bank_chart_data(
    rows: Sequence[BankSnapshotRow],
) -> list[dict[str, str | float]]:
    """Convert bank snapshot rows to Altair records."""
    return [{"bank": row.bank, "balance": float(row.balance)} for row in rows]


def _transaction_rows(
    transactions: Sequence[Transaction],
    label: str,
) -> list[dict[str, str]]:
    """Build table rows for the transactions page."""
    return [
        {
            "Date": tx.date.isoformat(),
            "Type": tx.kind,
            "Description": tx.description,
            "Category": tx.category,
            "Bank": tx.bank,
            "Amount": _format_signed_amount(tx, label),
        }
        for tx in transactions
    ]


def _running_balance_rows(
    view: BankRunningBalanceView,
    label: str,
) -> list[dict[str, str]]:
    """Build table rows for the banks page."""
    return [
        {
            "Date": entry.date.isoformat(),
            "Type": entry.kind,
            "Description": entry.description,
            "Amount": _format_amount(entry.amount, label),
            "Running Balance": _format_amount(entry.running_balance, label),
        }
        for entry in view.entries
    ]


def _loan_rows(loans: Sequence[LoanView], label: str) -> list[dict[str, str]]:
    """Build summary rows for the loans page."""
    rows = []
    for view in loans:
        loan = view.loan
        progress = view.progress
        rows.append(
            {
                "Person": loan.counterparty_name,
                "Start": loan.start_date.isoformat(),
                "Due": loan.due_date.isoformat() if loan.due_date else "-",
                "Amount": _format_amount(loan.principal, label),
                "Installments": (
                    f"{progress.paid_count}/{progress.installment_count}"
                    if progress.installment_count
                    else "-"
                ),
                "Outstanding": _format_amount(
                    progress.outstanding_amount,
                    label,
                ),
            }
        )
    return rows


def _schedule_rows(loan: Loan, label: str) -> list[dict[str, str | int]]:
    """Build installment schedule rows for one loan."""
    return [
        {
            "#": index,
            "Due Date": installment.due_date.isoformat(),
            "Amount": _format_amount(installment.amount, label),
            "Status": "PAID" if installment.paid else "DUE",
            "Paid Date": (
                installment.paid_date.isoformat()
                if installment.paid_date
                else "-"
            ),
        }
        for index, installment in enumerate(loan.schedule, start=1)
    ]


def _report_rows(
    report: LedgerReport,
    label: str,
) -> tuple[list[dict[str, str]], list[dict[str, str]], list[dict[str, str]]]:
    """Build the monthly, yearly and bank tables of the reports page."""
    monthly = [
        {
            "Month": row.month,
            "Income": _format_amount(row.income, label),
            "Expense": _format_amount(row.expense, label),
            "Saving": _format_amount(row.saving, label),
        }
        for row in report.monthly
    ]
    yearly = [
        {
            "Year": row.year,
            "Income": _format_amount(row.income, label),
            "Expense": _format_amount(row.expense, label),
            "Saving": _format_amount(row.saving, label),
        }
        for row in report.yearly
    ]
    banks = [
        {
            "Bank/Wallet": row.bank,
            "Balance": _format_amount(row.balance, label),
        }
        for row in report.banks
    ]
    return monthly, yearly, banks


def _line_chart(
    data: list[dict[str, str | float]],
    key_field: str,
    title: str,
) -> None:
    """Render a multi-series line chart."""
    st.subheader(title)
    if not data:
        st.info("No transactions yet.")
        return
    chart = alt.Chart(alt.Data(values=data)).mark_line(point=True).encode(
        x=alt.X(f"{key_field}:O", title=None),
        y=alt.Y("amount:Q", title=None),
        color=alt.Color("series:N", legend=alt.Legend(orient="bottom")),
        tooltip=[
            alt.Tooltip(f"{key_field}:O"),
            alt.Tooltip("series:N"),
            alt.Tooltip("amount:Q", format=",.2f"),
        ],
    )
    st.altair_chart(chart, width="stretch")


def _bank_chart(rows: Sequence[BankSnapshotRow]) -> None:
    """Render the bank-wise balances bar chart."""
    st.subheader("Bank-wise Balances")
    chart = alt.Chart(alt.Data(values=_bank_chart_data(rows))).mark_bar(
        cornerRadiusTopLeft=4,
        cornerRadiusTopRight=4,
    ).encode(
        x=alt.X("bank:N", sort=None, title=None),
        y=alt.Y("balance:Q", title=None),
        tooltip=[
            alt.Tooltip("bank:N"),
            alt.Tooltip("balance:Q", format=",.2f"),
        ],
    )
    st.altair_chart(chart, width="stretch")


def _render_dashboard(
    store: LedgerStorePort,
    settings: LedgerSettings,
) -> None:
    """Render totals, charts and balances."""
    view: DashboardView = GetDashboardUseCase(
        store,
        banks=settings.banks,
    ).execute()
    label = settings.currency_label
    income_col, expense_col, net_col = st.columns(3)
    income_col.metric(
        "Total Income",
        _format_amount(view.totals.income, label),
    )
    expense_col.metric(
        "Total Expenses",
        _format_amount(view.totals.expense, label),
    )
    net_col.metric(
        "Net Savings",
        _format_amount(view.totals.net, label),
        "Positive" if view.totals.net >= 0 else "Negative",
        delta_color="normal" if view.totals.net >= 0 else "inverse",
    )
    left, right = st.columns(2)
    with left:
        _line_chart(
            _series_chart_data(view.daily, "date"),
            "date",
            "Daily Income vs Expense",
        )
    with right:
        _bank_chart(view.bank_balances)
    _line_chart(
        _series_chart_data(view.monthly, "month"),
        "month",
        "Monthly Savings",
    )


def _render_transactions(
    store: LedgerStorePort,
    settings: LedgerSettings,
) -> None:
    """Render the transaction form and list."""
    with st.form("add_transaction", clear_on_submit=True):
        kind = st.selectbox("Type", [EXPENSE, INCOME])
        tx_date = st.date_input("Date", value=date.today())
        description = st.text_input("Description")
        category = st.selectbox(
            "Category",
            settings.categories,
            index=len(settings.categories) - 1,
        )
        bank = st.selectbox("Bank", settings.banks)
        amount = st.text_input("Amount", placeholder="0.00")
        submitted = st.form_submit_button("Add")
    if submitted:
        try:
            transaction = AddTransactionUseCase(
                store,
                banks=settings.banks,
                categories=settings.categories,
            ).execute(
                date=tx_date,
                kind=kind,
                amount=amount,
                bank=bank,
                category=category,
                description=description,
            )
        except LedgerValidationError as exc:
            st.error(str(exc))
        else:
            get_usage_logger().info(f"Transaction added: {transaction.id}")
            st.success("Transaction added.")

    transactions = ListTransactionsUseCase(store).execute()
    if not transactions:
        st.info("No transactions yet")
        return
    st.dataframe(
        _transaction_rows(transactions, settings.currency_label),
        width="stretch",
        hide_index=True,
    )
    options = {
        f"{tx.date.isoformat()} · {tx.kind} · {tx.description or '-'} · "
        f"{tx.amount}": tx.id
        for tx in transactions
    }
    selected = st.selectbox("Delete transaction", list(options))
    if st.button("Delete"):
        try:
            DeleteTransactionUseCase(store).execute(options[selected])
        except LedgerNotFoundError as exc:
            st.error(str(exc))
        else:
            get_usage_logger().info(
                f"Transaction deleted: {options[selected]}"
            )
            st.rerun()


def _render_banks(store: LedgerStorePort, settings: LedgerSettings) -> None:
    """Render the running balance of the selected bank."""
    bank = st.radio("Bank", settings.banks, horizontal=True)
    view = GetBankRunningBalanceUseCase(store).execute(bank)
    label = settings.currency_label
    st.metric(bank, _format_amount(view.balance, label))
    if not view.entries:
        st.info(f"No transactions for {bank}")
        return
    st.dataframe(
        _running_balance_rows(view, label),
        width="stretch",
        hide_index=True,
    )


def _render_loans(store: LedgerStorePort, settings: LedgerSettings) -> None:
    """Render the loan form, loan list and installment schedules."""
    kind = st.radio(
        "Loans",
        list(LOAN_KIND_LABELS),
        format_func=LOAN_KIND_LABELS.get,
        horizontal=True,
    )
    with st.form("add_loan", clear_on_submit=True):
        person = st.text_input("Person/Party")
        amount = st.text_input("Amount", placeholder="0.00")
        start_date = st.date_input("Start date", value=date.today())
        due_date = st.date_input("Due date", value=None)
        installments = st.number_input(
            "# Installments (0 for none)",
            min_value=0,
            step=1,
            value=0,
        )
        notes = st.text_area("Notes")
        submitted = st.form_submit_button("Add Loan")
    if submitted:
        try:
            loan = AddLoanUseCase(store).execute(
                kind=kind,
                counterparty_name=person,
                principal=amount,
                start_date=start_date,
                installment_count=int(installments),
                due_date=due_date,
                notes=notes,
            )
        except LedgerValidationError as exc:
            st.error(str(exc))
        else:
            get_usage_logger().info(f"Loan added: {loan.id} ({kind})")
            st.success("Loan added.")

    label = settings.currency_label
    loans = ListLoansUseCase(store).execute(kind)
    if not loans:
        st.info("No loans")
        return
    st.dataframe(_loan_rows(loans, label), width="stretch")
    for view in loans:
        loan = view.loan
        with st.expander(
            f"{loan.counterparty_name} · "
            f"{_format_amount(loan.principal, label)}"
        ):
            if loan.notes:
                st.caption(loan.notes)
            if loan.schedule:
                st.dataframe(
                    _schedule_rows(loan, label),
                    width="stretch",
                    hide_index=True,
                )
                for index, installment in enumerate(loan.schedule, start=1):
                    if st.button(
                        f"Toggle Paid #{index}",
                        key=f"toggle-{installment.id}",
                    ):
                        ToggleInstallmentUseCase(store).execute(
                            kind,
                            loan.id,
                            installment.id,
                        )
                        get_usage_logger().info(
                            f"Installment toggled: {installment.id}"
                        )
                        st.rerun()
            if st.button("Delete loan", key=f"delete-{loan.id}"):
                DeleteLoanUseCase(store).execute(kind, loan.id)
                get_usage_logger().info(f"Loan deleted: {loan.id}")
                st.rerun()


def _render_reports(store: LedgerStorePort, settings: LedgerSettings) -> None:
    """Render the monthly, yearly and bank report tables."""
    report = GetLedgerReportUseCase(store, banks=settings.banks).execute()
    monthly, yearly, banks = _report_rows(report, settings.currency_label)
    st.subheader("Monthly Report")
    st.dataframe(monthly, width="stretch", hide_index=True)
    st.subheader("Yearly Report")
    st.dataframe(yearly, width="stretch", hide_index=True)
    st.subheader("Bank-wise Balances Snapshot")
    st.dataframe(banks, width="stretch", hide_index=True)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Personal Finance & Loans", layout="wide")
    st.title("Personal Finance & Loans")

    settings, store = _load_context()
    page = st.sidebar.selectbox("Page", PAGES)
    confirm_reset = st.sidebar.checkbox("Confirm deleting all data")
    if st.sidebar.button("Reset", disabled=not confirm_reset):
        ResetLedgerUseCase(store).execute()
        get_usage_logger().info("Ledger reset from dashboard")
        st.sidebar.warning("All data deleted.")

    renderers = {
        "Dashboard": _render_dashboard,
        "Transactions": _render_transactions,
        "Banks": _render_banks,
        "Loans": _render_loans,
        "Reports": _render_reports,
    }
    renderers[page](store, settings)


if __name__ == "__main__":  # pragma: no cover
    main()
