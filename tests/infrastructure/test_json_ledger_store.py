"""Tests for the JSON file ledger store."""

import json
from unittest.mock import MagicMock

import pytest

from src.domain.exceptions import LedgerStoreError
from src.domain.models import LedgerSnapshot
from src.infrastructure.json_ledger_store import JsonFileLedgerStore


def test_load_missing_file_returns_empty_snapshot(tmp_path) -> None:
    """A missing document is an empty ledger."""
    logger = MagicMock()
    store = JsonFileLedgerStore(tmp_path / "ledger.json", logger=logger)

    assert store.load() == LedgerSnapshot()
    logger.info.assert_called_once()


def test_save_then_load_round_trip(tmp_path, sample_snapshot) -> None:
    """Saved snapshots load back unchanged."""
    path = tmp_path / "nested" / "ledger.json"
    store = JsonFileLedgerStore(path, logger=MagicMock())

    store.save(sample_snapshot)

    assert path.exists()
    assert not path.with_name("ledger.json.tmp").exists()
    assert store.path == path
    assert JsonFileLedgerStore(str(path), logger=MagicMock()).load() == (
        sample_snapshot
    )


def test_save_writes_readable_document(tmp_path, sample_snapshot) -> None:
    """The stored document is plain JSON with the three collections."""
    path = tmp_path / "ledger.json"
    logger = MagicMock()

    JsonFileLedgerStore(path, logger=logger).save(sample_snapshot)

    document = json.loads(path.read_text(encoding="utf-8"))
    assert set(document) == {"transactions", "loansTaken", "loansGiven"}
    assert "2 transactions" in logger.info.call_args.args[0]


def test_save_overwrites_previous_snapshot(tmp_path, sample_snapshot) -> None:
    """Saving replaces the whole document."""
    store = JsonFileLedgerStore(tmp_path / "ledger.json", logger=MagicMock())
    store.save(sample_snapshot)

    store.save(LedgerSnapshot())

    assert store.load() == LedgerSnapshot()


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        '{"transactions": [{"id": "x"}]}',
        '{"transactions": [{"id": "x", "date": "bad", "type": "income",'
        ' "amount": "1", "bank": "UBL", "category": "Misc"}]}',
        '{"transactions": [{"id": "x", "date": "2024-01-01",'
        ' "type": "transfer", "amount": "1", "bank": "UBL",'
        ' "category": "Misc"}]}',
        '{"loansTaken": [{"id": "l", "person": "Ali", "amount": "100",'
        ' "startDate": "2024-01-01", "installments": "abc"}]}',
        "[1, 2, 3]",
    ],
)
def test_load_corrupt_file_raises_store_error(tmp_path, content) -> None:
    """Unreadable documents surface as LedgerStoreError."""
    path = tmp_path / "ledger.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(LedgerStoreError):
        JsonFileLedgerStore(path, logger=MagicMock()).load()
