"""Tests for infrastructure settings."""

from pathlib import Path

import pytest

from src.domain.constants import (
    DEFAULT_BANKS,
    DEFAULT_CATEGORIES,
    DEFAULT_CURRENCY_LABEL,
)
from src.infrastructure import settings as settings_module
from src.infrastructure.settings import LedgerSettings

_ENV_VARS = (
    "LEDGER_BACKEND",
    "LEDGER_JSON_FILE",
    "LEDGER_BANKS",
    "LEDGER_CATEGORIES",
    "LEDGER_CURRENCY_LABEL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path: Path):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_project_root", lambda: tmp_path)
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_from_env_defaults(tmp_path: Path) -> None:
    """Unset variables fall back to the built-in defaults."""
    settings = LedgerSettings.from_env()

    assert settings.backend == "sqlalchemy"
    assert settings.json_file == tmp_path / "data" / "ledger.json"
    assert settings.banks == DEFAULT_BANKS
    assert settings.categories == DEFAULT_CATEGORIES
    assert settings.currency_label == DEFAULT_CURRENCY_LABEL


def test_from_env_uses_file_path(monkeypatch, tmp_path: Path) -> None:
    """File paths should resolve to Path instances."""
    target = tmp_path / "ledger.json"
    monkeypatch.setenv("LEDGER_BACKEND", " JSON ")
    monkeypatch.setenv("LEDGER_JSON_FILE", str(target))

    settings = LedgerSettings.from_env()

    assert settings.backend == "json"
    assert isinstance(settings.json_file, Path)
    assert settings.json_file == target.resolve()


def test_from_env_accepts_file_uri(monkeypatch, tmp_path: Path) -> None:
    """file:// URIs are converted to filesystem paths."""
    target = tmp_path / "my ledger.json"
    monkeypatch.setenv("LEDGER_JSON_FILE", target.as_uri())

    settings = LedgerSettings.from_env()

    assert settings.json_file == target.resolve()


def test_from_env_parses_lists(monkeypatch) -> None:
    """Comma-separated lists are trimmed and deduplicated in order."""
    monkeypatch.setenv("LEDGER_BANKS", "Wallet, UBL ,,Wallet")
    monkeypatch.setenv("LEDGER_CATEGORIES", " , ")
    monkeypatch.setenv("LEDGER_CURRENCY_LABEL", " PKR ")

    settings = LedgerSettings.from_env()

    assert settings.banks == ("Wallet", "UBL")
    assert settings.categories == DEFAULT_CATEGORIES
    assert settings.currency_label == "PKR"


def test_from_env_rejects_unknown_backend(monkeypatch) -> None:
    """Unsupported backends fail fast."""
    monkeypatch.setenv("LEDGER_BACKEND", "mongo")

    with pytest.raises(ValueError, match="mongo"):
        LedgerSettings.from_env()
