"""Port giving ledger stores access to a SQL engine.

Only the SQLAlchemy-backed store needs it; the JSON store ignores it.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Provider of the engine behind the SQL ledger tables."""

    def get_ledger_engine(self) -> Engine:
        """Return the engine connected to the ledger database."""


__all__ = ["DatabaseEnginePort"]
