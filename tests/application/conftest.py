"""Shared fakes for application use case tests."""

from unittest.mock import MagicMock

import pytest

from src.domain.models import LedgerSnapshot


class InMemoryLedgerStore:
    """Ledger store keeping the snapshot in memory and counting saves."""

    def __init__(self, snapshot: LedgerSnapshot | None = None) -> None:
        self.snapshot = snapshot or LedgerSnapshot()
        self.saves = 0

    def load(self) -> LedgerSnapshot:
        return self.snapshot

    def save(self, snapshot: LedgerSnapshot) -> None:
        self.snapshot = snapshot
        self.saves += 1


@pytest.fixture
def store() -> InMemoryLedgerStore:
    """Return an empty in-memory ledger store."""
    return InMemoryLedgerStore()


@pytest.fixture
def logger() -> MagicMock:
    """Return a logger mock."""
    return MagicMock()
