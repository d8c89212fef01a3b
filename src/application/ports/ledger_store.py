"""Port for loading and saving ledger snapshots."""

from typing import Protocol

from src.domain.models import LedgerSnapshot


class LedgerStorePort(Protocol):
    """Durable store holding the single ledger snapshot."""

    def load(self) -> LedgerSnapshot:
        """Return the current ledger snapshot."""

    def save(self, snapshot: LedgerSnapshot) -> None:
        """Replace the stored ledger with the given snapshot."""


__all__ = ["LedgerStorePort"]
