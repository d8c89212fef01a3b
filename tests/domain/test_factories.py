"""Tests for transaction and loan factories."""

from datetime import date, datetime
from decimal import Decimal
from itertools import count

import pytest

from src.domain.constants import DEFAULT_BANKS, DEFAULT_CATEGORIES
from src.domain.exceptions import (
    InvalidAmountError,
    InvalidDateError,
    InvalidLoanError,
    InvalidScheduleError,
    UnknownChoiceError,
)
from src.domain.services.aggregation import daily_totals
from src.domain.services.factories import build_loan, build_transaction


def _ids(prefix: str):
    counter = count(1)
    return lambda: f"{prefix}-{next(counter)}"


def _transaction(**overrides):
    params = {
        "date": "2024-01-15",
        "kind": "expense",
        "amount": "250.75",
        "bank": "Meezan Bank",
        "category": "Groceries",
        "description": "  weekly shop ",
        "banks": DEFAULT_BANKS,
        "categories": DEFAULT_CATEGORIES,
        "id_factory": _ids("tx"),
    }
    params.update(overrides)
    return build_transaction(**params)


def test_build_transaction_parses_and_normalizes() -> None:
    """Raw form input becomes a typed transaction."""
    transaction = _transaction()

    assert transaction.id == "tx-1"
    assert transaction.date == date(2024, 1, 15)
    assert transaction.kind == "expense"
    assert transaction.amount == Decimal("250.75")
    assert transaction.description == "weekly shop"
    assert transaction.signed_amount == Decimal("-250.75")


@pytest.mark.parametrize(
    "overrides, error",
    [
        ({"amount": "-1"}, InvalidAmountError),
        ({"amount": ""}, InvalidAmountError),
        ({"date": "15/01/2024"}, InvalidDateError),
        ({"kind": "transfer"}, UnknownChoiceError),
        ({"bank": "Offshore"}, UnknownChoiceError),
        ({"category": "Gambling"}, UnknownChoiceError),
    ],
)
def test_build_transaction_rejects_invalid_input(overrides, error) -> None:
    """Invalid fields fail fast with a typed error."""
    with pytest.raises(error):
        _transaction(**overrides)


def test_build_transaction_allows_zero_amount() -> None:
    """Zero amounts are recorded as entered."""
    assert _transaction(amount="0").amount == Decimal("0")


def test_build_loan_with_schedule() -> None:
    """Loans with installments carry a generated schedule."""
    loan = build_loan(
        counterparty_name=" Sara ",
        principal="1000",
        start_date="2024-01-15",
        installment_count=3,
        due_date="2024-04-15",
        notes="family",
        id_factory=_ids("id"),
    )

    assert loan.counterparty_name == "Sara"
    assert loan.principal == Decimal("1000.00")
    assert loan.due_date == date(2024, 4, 15)
    assert loan.installment_count == 3
    assert [item.amount for item in loan.schedule] == [
        Decimal("333.33"),
        Decimal("333.33"),
        Decimal("333.34"),
    ]
    assert sum(item.amount for item in loan.schedule) == loan.principal
    assert all(not item.paid for item in loan.schedule)
    assert loan.id == "id-4"


def test_build_loan_without_installments() -> None:
    """A zero installment count gives an empty schedule."""
    loan = build_loan(
        counterparty_name="Bilal",
        principal=5000,
        start_date=date(2024, 5, 1),
        id_factory=_ids("loan"),
    )

    assert loan.schedule == ()
    assert loan.installment_count == 0
    assert loan.due_date is None
    assert loan.notes == ""


def test_build_loan_rounds_principal_to_minor_unit() -> None:
    """The stored principal equals the schedule sum."""
    loan = build_loan(
        counterparty_name="Bilal",
        principal="100.005",
        start_date="2024-05-01",
        installment_count=2,
    )

    assert loan.principal == Decimal("100.01")
    assert sum(item.amount for item in loan.schedule) == Decimal("100.01")


@pytest.mark.parametrize(
    "overrides, error",
    [
        ({"counterparty_name": "  "}, InvalidLoanError),
        ({"principal": "0"}, InvalidAmountError),
        ({"principal": "0.001"}, InvalidLoanError),
        ({"principal": "abc"}, InvalidAmountError),
        ({"installment_count": -1}, InvalidScheduleError),
        ({"installment_count": "3"}, InvalidScheduleError),
        ({"start_date": "yesterday"}, InvalidDateError),
        ({"due_date": "2024-13-01"}, InvalidDateError),
    ],
)
def test_build_loan_rejects_invalid_input(overrides, error) -> None:
    """Invalid loan input raises a validation error."""
    params = {
        "counterparty_name": "Ali",
        "principal": "100",
        "start_date": "2024-01-01",
        "installment_count": 2,
    }
    params.update(overrides)

    with pytest.raises(error):
        build_loan(**params)


def test_build_transaction_from_datetime_keeps_daily_totals_working() -> None:
    """A datetime input is stored as a plain date."""
    transaction = _transaction(date=datetime(2024, 1, 1, 9, 30))

    assert transaction.date == date(2024, 1, 1)
    assert [row.date for row in daily_totals([transaction])] == [
        date(2024, 1, 1)
    ]
