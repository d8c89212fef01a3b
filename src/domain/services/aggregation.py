"""Aggregation engine deriving balances and time series from transactions.

Every function here is a pure fold over the transaction sequence it
receives. Inputs are never mutated and repeated calls on the same snapshot
return equal results.
"""

from collections.abc import Callable, Iterable, Sequence
from datetime import date
from decimal import Decimal

from src.domain.constants import INCOME
from src.domain.models import (
    DailyTotal,
    LedgerTotals,
    PeriodTotal,
    RunningBalanceEntry,
    Transaction,
)
from src.domain.services.normalization import date_key, month_key, year_key


def bank_balances(
    transactions: Iterable[Transaction],
    banks: Sequence[str],
) -> dict[str, Decimal]:
    """Compute the signed net balance of each configured bank.

    Args:
        transactions: Transactions to aggregate.
        banks: Closed set of banks, in display order.

    Returns:
        dict[str, Decimal]: Balance per bank, zero for unused banks. Banks
        outside the configured set are ignored.
    """
    sums = {bank: Decimal("0") for bank in banks}
    for transaction in transactions:
        if transaction.bank not in sums:
            continue
        sums[transaction.bank] += transaction.signed_amount
    return sums


def daily_totals(transactions: Iterable[Transaction]) -> list[DailyTotal]:
    """Group income and expense per date, ascending by ISO date."""
    grouped = _group_income_expense(transactions, date_key)
    return [
        DailyTotal(
            date=date.fromisoformat(key),
            income=income,
            expense=expense,
        )
        for key, (income, expense) in sorted(grouped.items())
    ]


def monthly_totals(transactions: Iterable[Transaction]) -> list[PeriodTotal]:
    """Group income and expense per calendar month (YYYY-MM)."""
    return _period_totals(transactions, month_key)


def yearly_totals(transactions: Iterable[Transaction]) -> list[PeriodTotal]:
    """Group income and expense per calendar year (YYYY)."""
    return _period_totals(transactions, year_key)


def compute_totals(transactions: Iterable[Transaction]) -> LedgerTotals:
    """Return grand income and expense sums over all transactions."""
    income = Decimal("0")
    expense = Decimal("0")
    for transaction in transactions:
        if transaction.kind == INCOME:
            income += transaction.amount
        else:
            expense += transaction.amount
    return LedgerTotals(income=income, expense=expense)


def running_balance(
    transactions: Iterable[Transaction],
    bank: str,
) -> list[RunningBalanceEntry]:
    """Compute the running balance of one bank, oldest entry first.

    Transactions are ordered by date; same-day transactions keep their
    ledger (insertion) order because the sort is stable.

    Args:
        transactions: Transactions in ledger order.
        bank: Bank whose transactions are accumulated.

    Returns:
        list[RunningBalanceEntry]: Entries carrying the balance after each
        transaction.
    """
    bank_transactions = sorted(
        (tx for tx in transactions if tx.bank == bank),
        key=lambda tx: date_key(tx.date),
    )
    balance = Decimal("0")
    entries: list[RunningBalanceEntry] = []
    for transaction in bank_transactions:
        balance += transaction.signed_amount
        entries.append(
            RunningBalanceEntry.from_transaction(transaction, balance)
        )
    return entries


def _period_totals(
    transactions: Iterable[Transaction],
    key_func: Callable[[date], str],
) -> list[PeriodTotal]:
    grouped = _group_income_expense(transactions, key_func)
    return [
        PeriodTotal(period=key, income=income, expense=expense)
        for key, (income, expense) in sorted(grouped.items())
    ]


def _group_income_expense(
    transactions: Iterable[Transaction],
    key_func: Callable[[date], str],
) -> dict[str, tuple[Decimal, Decimal]]:
    grouped: dict[str, tuple[Decimal, Decimal]] = {}
    for transaction in transactions:
        key = key_func(transaction.date)
        income, expense = grouped.get(key, (Decimal("0"), Decimal("0")))
        if transaction.kind == INCOME:
            income += transaction.amount
        else:
            expense += transaction.amount
        grouped[key] = (income, expense)
    return grouped


__all__ = [
    "bank_balances",
    "daily_totals",
    "monthly_totals",
    "yearly_totals",
    "compute_totals",
    "running_balance",
]
