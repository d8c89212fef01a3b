"""Shared ledger fixtures for infrastructure tests."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.models import Installment, LedgerSnapshot, Loan, Transaction


@pytest.fixture
def sample_snapshot() -> LedgerSnapshot:
    """Return a snapshot exercising every record type."""
    return LedgerSnapshot(
        transactions=(
            Transaction(
                id="tx-1",
                date=date(2024, 1, 1),
                kind="income",
                description="Salary",
                amount=Decimal("1000.50"),
                bank="UBL",
                category="Salary",
            ),
            Transaction(
                id="tx-2",
                date=date(2024, 1, 3),
                kind="expense",
                description="",
                amount=Decimal("0"),
                bank="JazzCash",
                category="Food",
            ),
        ),
        loans_taken=(
            Loan(
                id="loan-t",
                counterparty_name="Ali",
                principal=Decimal("1000.00"),
                start_date=date(2024, 1, 15),
                due_date=date(2024, 4, 15),
                installment_count=3,
                notes="car repair",
                schedule=(
                    Installment(
                        id="inst-1",
                        due_date=date(2024, 2, 15),
                        amount=Decimal("333.33"),
                        paid=True,
                        paid_date=date(2024, 2, 14),
                    ),
                    Installment(
                        id="inst-2",
                        due_date=date(2024, 3, 15),
                        amount=Decimal("333.33"),
                    ),
                    Installment(
                        id="inst-3",
                        due_date=date(2024, 4, 15),
                        amount=Decimal("333.34"),
                    ),
                ),
            ),
        ),
        loans_given=(
            Loan(
                id="loan-g1",
                counterparty_name="Sara",
                principal=Decimal("250"),
                start_date=date(2023, 12, 1),
            ),
            Loan(
                id="loan-g2",
                counterparty_name="Bilal",
                principal=Decimal("75.25"),
                start_date=date(2024, 2, 1),
            ),
        ),
    )
