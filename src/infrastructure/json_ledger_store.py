"""Ledger store persisting the snapshot as a JSON document."""

import json
from pathlib import Path

from src.application.ports.ledger_store import LedgerStorePort
from src.domain.exceptions import LedgerStoreError, LedgerValidationError
from src.domain.models import LedgerSnapshot
from src.infrastructure.ledger_codec import (
    payload_to_snapshot,
    snapshot_to_payload,
)
from src.infrastructure.logging.logger import get_app_logger


class JsonFileLedgerStore(LedgerStorePort):
    """Ledger store backed by a single JSON file."""

    def __init__(self, path: Path | str, logger=None) -> None:
        """Initialize the store.

        Args:
            path: Location of the JSON document.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._path = Path(path)
        self._logger = logger or get_app_logger()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> LedgerSnapshot:
        """Return the stored snapshot, or an empty one if no file exists.

        Raises:
            LedgerStoreError: If the file cannot be read or decoded.
        """
        if not self._path.exists():
            self._logger.info(
                f"No ledger file at {self._path}; starting empty"
            )
            return LedgerSnapshot()
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
            return payload_to_snapshot(payload)
        except (
            OSError,
            json.JSONDecodeError,
            KeyError,
            TypeError,
            AttributeError,
            ValueError,
            LedgerValidationError,
        ) as exc:
            raise LedgerStoreError(
                f"Could not load ledger from {self._path}: {exc}"
            ) from exc

    def save(self, snapshot: LedgerSnapshot) -> None:
        """Write the snapshot atomically next to the target file.

        Raises:
            LedgerStoreError: If the file cannot be written.
        """
        payload = snapshot_to_payload(snapshot)
        tmp_path = self._path.with_name(f"{self._path.name}.tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(
                json.dumps(payload, indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
            tmp_path.replace(self._path)
        except OSError as exc:
            raise LedgerStoreError(
                f"Could not save ledger to {self._path}: {exc}"
            ) from exc
        self._logger.info(
            f"Saved ledger to {self._path}: "
            f"{len(snapshot.transactions)} transactions, "
            f"{len(snapshot.loans_taken)} loans taken, "
            f"{len(snapshot.loans_given)} loans given"
        )


__all__ = ["JsonFileLedgerStore"]
