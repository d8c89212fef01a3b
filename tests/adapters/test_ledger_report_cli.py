"""Tests for the ledger_report_cli adapter."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.adapters import ledger_report_cli
from src.domain.models import LedgerSnapshot, Transaction
from src.infrastructure.settings import LedgerSettings


class _Store:
    def __init__(self, snapshot: LedgerSnapshot) -> None:
        self._snapshot = snapshot

    def load(self) -> LedgerSnapshot:
        return self._snapshot

    def save(self, snapshot: LedgerSnapshot) -> None:
        raise AssertionError("reports must not write")


def _tx(tx_id, kind, amount, day, bank) -> Transaction:
    return Transaction(
        id=tx_id,
        date=date.fromisoformat(day),
        kind=kind,
        description="",
        amount=Decimal(amount),
        bank=bank,
        category="Misc",
    )


@pytest.fixture
def logger(monkeypatch) -> MagicMock:
    logger = MagicMock()
    snapshot = LedgerSnapshot(
        transactions=(
            _tx("t1", "income", "1500", "2024-01-01", "UBL"),
            _tx("t2", "expense", "250.5", "2024-01-02", "UBL"),
            _tx("t3", "income", "40", "2025-02-01", "ABL"),
        )
    )
    settings = LedgerSettings(banks=("UBL", "ABL"), currency_label="PKR")
    monkeypatch.setattr(ledger_report_cli, "get_app_logger", lambda: logger)
    monkeypatch.setattr(ledger_report_cli, "build_settings", lambda: settings)
    monkeypatch.setattr(
        ledger_report_cli,
        "build_ledger_store",
        lambda settings: _Store(snapshot),
    )
    monkeypatch.delenv("LEDGER_REPORT_BANK", raising=False)
    return logger


def test_main_prints_report_tables(logger, capsys):
    """Monthly, yearly and bank tables are printed."""
    ledger_report_cli.main()

    out = capsys.readouterr().out
    assert "Monthly report" in out
    assert (
        "2024-01: income=PKR 1,500.00, expense=PKR 250.50, "
        "saving=PKR 1,249.50"
    ) in out
    assert "2025: income=PKR 40.00" in out
    assert "UBL: PKR 1,249.50" in out
    assert "ABL: PKR 40.00" in out
    assert "Running balance" not in out


def test_main_prints_running_balance_for_bank(logger, monkeypatch, capsys):
    """LEDGER_REPORT_BANK adds the bank's running balance."""
    monkeypatch.setenv("LEDGER_REPORT_BANK", "UBL")

    ledger_report_cli.main()

    out = capsys.readouterr().out
    assert "Running balance for UBL" in out
    assert "2024-01-02 expense PKR 250.50 -> PKR 1,249.50" in out


def test_main_warns_on_unknown_bank(logger, monkeypatch, capsys):
    """Unknown banks are reported through the logger."""
    monkeypatch.setenv("LEDGER_REPORT_BANK", "Offshore")

    ledger_report_cli.main()

    assert "Running balance" not in capsys.readouterr().out
    logger.warning.assert_called_once()
