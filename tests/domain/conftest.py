"""Shared builders for domain tests."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.models import Transaction


@pytest.fixture
def make_transaction():
    """Return a factory building transactions with sensible defaults."""
    counter = {"value": 0}

    def _make(
        kind: str = "income",
        amount: str = "100",
        day: str = "2024-01-01",
        bank: str = "UBL",
        category: str = "Misc",
        description: str = "",
    ) -> Transaction:
        counter["value"] += 1
        return Transaction(
            id=f"tx-{counter['value']}",
            date=date.fromisoformat(day),
            kind=kind,
            description=description,
            amount=Decimal(amount),
            bank=bank,
            category=category,
        )

    return _make
