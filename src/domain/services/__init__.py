"""Domain services package."""

from .aggregation import (
    bank_balances,
    compute_totals,
    daily_totals,
    monthly_totals,
    running_balance,
    yearly_totals,
)
from .factories import build_loan, build_transaction
from .ledger import (
    add_loan,
    add_transaction,
    delete_loan,
    delete_transaction,
    empty_snapshot,
    loan_progress,
    loans_of,
    toggle_installment,
    toggle_paid,
)
from .normalization import date_key, month_key, normalize_label, year_key
from .reports import (
    compose_bank_snapshot,
    compose_dashboard,
    compose_ledger_report,
    compose_monthly_table,
    compose_yearly_table,
)
from .schedule import add_months, generate_schedule
from .validation import (
    parse_amount,
    parse_iso_date,
    parse_optional_date,
    validate_choice,
    validate_kind,
    validate_loan_kind,
)

__all__ = [
    "bank_balances",
    "compute_totals",
    "daily_totals",
    "monthly_totals",
    "running_balance",
    "yearly_totals",
    "build_loan",
    "build_transaction",
    "add_loan",
    "add_transaction",
    "delete_loan",
    "delete_transaction",
    "empty_snapshot",
    "loan_progress",
    "loans_of",
    "toggle_installment",
    "toggle_paid",
    "date_key",
    "month_key",
    "normalize_label",
    "year_key",
    "compose_bank_snapshot",
    "compose_dashboard",
    "compose_ledger_report",
    "compose_monthly_table",
    "compose_yearly_table",
    "add_months",
    "generate_schedule",
    "parse_amount",
    "parse_iso_date",
    "parse_optional_date",
    "validate_choice",
    "validate_kind",
    "validate_loan_kind",
]
