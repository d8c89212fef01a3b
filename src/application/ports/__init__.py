"""Application ports package."""

from .database import DatabaseEnginePort
from .ledger_store import LedgerStorePort

__all__ = [
    "DatabaseEnginePort",
    "LedgerStorePort",
]
