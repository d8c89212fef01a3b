"""Ledger store persisting snapshots through SQLAlchemy."""

from collections import defaultdict
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_store import LedgerStorePort
from src.domain.constants import LOANS_GIVEN, LOANS_TAKEN
from src.domain.exceptions import LedgerStoreError, LedgerValidationError
from src.domain.models import Installment, LedgerSnapshot, Loan, Transaction
from src.domain.services.validation import (
    parse_amount,
    parse_iso_date,
    parse_optional_date,
    validate_kind,
    validate_loan_kind,
)
from src.infrastructure.logging.logger import get_app_logger


CREATE_TRANSACTIONS_SQL = """
CREATE TABLE IF NOT EXISTS ledger_transactions (
    id TEXT PRIMARY KEY,
    position INTEGER NOT NULL,
    tx_date TEXT NOT NULL,
    kind TEXT NOT NULL,
    description TEXT NOT NULL,
    amount TEXT NOT NULL,
    bank TEXT NOT NULL,
    category TEXT NOT NULL
)
"""

CREATE_LOANS_SQL = """
CREATE TABLE IF NOT EXISTS ledger_loans (
    id TEXT PRIMARY KEY,
    loan_kind TEXT NOT NULL,
    position INTEGER NOT NULL,
    counterparty_name TEXT NOT NULL,
    principal TEXT NOT NULL,
    start_date TEXT NOT NULL,
    due_date TEXT,
    installment_count INTEGER NOT NULL,
    notes TEXT NOT NULL
)
"""

CREATE_INSTALLMENTS_SQL = """
CREATE TABLE IF NOT EXISTS ledger_installments (
    id TEXT PRIMARY KEY,
    loan_id TEXT NOT NULL,
    position INTEGER NOT NULL,
    due_date TEXT NOT NULL,
    amount TEXT NOT NULL,
    paid INTEGER NOT NULL,
    paid_date TEXT
)
"""

CREATE_TABLES_SQL = (
    CREATE_TRANSACTIONS_SQL,
    CREATE_LOANS_SQL,
    CREATE_INSTALLMENTS_SQL,
)

DELETE_TABLES_SQL = (
    "DELETE FROM ledger_installments",
    "DELETE FROM ledger_loans",
    "DELETE FROM ledger_transactions",
)

SELECT_TRANSACTIONS_SQL = text(
    """
    SELECT id, tx_date, kind, description, amount, bank, category
    FROM ledger_transactions
    ORDER BY position
    """
)

SELECT_LOANS_SQL = text(
    """
    SELECT id, loan_kind, counterparty_name, principal, start_date,
           due_date, installment_count, notes
    FROM ledger_loans
    ORDER BY position
    """
)

SELECT_INSTALLMENTS_SQL = text(
    """
    SELECT id, loan_id, due_date, amount, paid, paid_date
    FROM ledger_installments
    ORDER BY loan_id, position
    """
)

INSERT_TRANSACTIONS_SQL = text(
    """
    INSERT INTO ledger_transactions (
        id, position, tx_date, kind, description, amount, bank, category
    )
    VALUES (
        :id, :position, :tx_date, :kind, :description, :amount, :bank,
        :category
    )
    """
)

INSERT_LOANS_SQL = text(
    """
    INSERT INTO ledger_loans (
        id, loan_kind, position, counterparty_name, principal, start_date,
        due_date, installment_count, notes
    )
    VALUES (
        :id, :loan_kind, :position, :counterparty_name, :principal,
        :start_date, :due_date, :installment_count, :notes
    )
    """
)

INSERT_INSTALLMENTS_SQL = text(
    """
    INSERT INTO ledger_installments (
        id, loan_id, position, due_date, amount, paid, paid_date
    )
    VALUES (
        :id, :loan_id, :position, :due_date, :amount, :paid, :paid_date
    )
    """
)


class SqlAlchemyLedgerStore(LedgerStorePort):
    """Ledger store backed by three SQL tables."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the ledger engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def prepare(self) -> None:
        """Create the ledger tables when they do not exist."""
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            for statement in CREATE_TABLES_SQL:
                conn.exec_driver_sql(statement)

    def load(self) -> LedgerSnapshot:
        """Read the whole ledger into a snapshot.

        Raises:
            LedgerStoreError: If the database cannot be read or holds
                malformed rows.
        """
        self._run_prepare()
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.connect() as conn:
                tx_rows = conn.execute(SELECT_TRANSACTIONS_SQL).all()
                loan_rows = conn.execute(SELECT_LOANS_SQL).all()
                installment_rows = conn.execute(SELECT_INSTALLMENTS_SQL).all()
        except SQLAlchemyError as exc:
            raise LedgerStoreError(f"Could not load ledger: {exc}") from exc

        try:
            snapshot = _snapshot_from_rows(
                tx_rows, loan_rows, installment_rows
            )
        except (LedgerValidationError, ValueError) as exc:
            raise LedgerStoreError(f"Corrupt ledger data: {exc}") from exc
        self._logger.info(
            f"Loaded ledger: {len(snapshot.transactions)} transactions, "
            f"{len(loan_rows)} loans"
        )
        return snapshot

    def save(self, snapshot: LedgerSnapshot) -> None:
        """Replace every stored row with the snapshot in one transaction.

        Raises:
            LedgerStoreError: If the database cannot be written.
        """
        self._run_prepare()
        transactions = _transaction_rows(snapshot)
        loans, installments = _loan_rows(snapshot)
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.begin() as conn:
                for statement in DELETE_TABLES_SQL:
                    conn.exec_driver_sql(statement)
                if transactions:
                    conn.execute(INSERT_TRANSACTIONS_SQL, transactions)
                if loans:
                    conn.execute(INSERT_LOANS_SQL, loans)
                if installments:
                    conn.execute(INSERT_INSTALLMENTS_SQL, installments)
        except SQLAlchemyError as exc:
            raise LedgerStoreError(f"Could not save ledger: {exc}") from exc
        self._logger.info(
            f"Saved ledger: {len(transactions)} transactions, "
            f"{len(loans)} loans, {len(installments)} installments"
        )

    def _run_prepare(self) -> None:
        try:
            self.prepare()
        except SQLAlchemyError as exc:
            raise LedgerStoreError(
                f"Could not prepare ledger tables: {exc}"
            ) from exc


def _transaction_rows(snapshot: LedgerSnapshot) -> list[dict[str, Any]]:
    return [
        {
            "id": tx.id,
            "position": position,
            "tx_date": tx.date.isoformat(),
            "kind": tx.kind,
            "description": tx.description,
            "amount": str(tx.amount),
            "bank": tx.bank,
            "category": tx.category,
        }
        for position, tx in enumerate(snapshot.transactions)
    ]


def _loan_rows(
    snapshot: LedgerSnapshot,
) -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
    loans: list[dict[str, Any]] = []
    installments: list[dict[str, Any]] = []
    for kind, collection in (
        (LOANS_TAKEN, snapshot.loans_taken),
        (LOANS_GIVEN, snapshot.loans_given),
    ):
        for position, loan in enumerate(collection):
            loans.append(
                {
                    "id": loan.id,
                    "loan_kind": kind,
                    "position": position,
                    "counterparty_name": loan.counterparty_name,
                    "principal": str(loan.principal),
                    "start_date": loan.start_date.isoformat(),
                    "due_date": (
                        loan.due_date.isoformat() if loan.due_date else None
                    ),
                    "installment_count": loan.installment_count,
                    "notes": loan.notes,
                }
            )
            installments.extend(
                {
                    "id": installment.id,
                    "loan_id": loan.id,
                    "position": index,
                    "due_date": installment.due_date.isoformat(),
                    "amount": str(installment.amount),
                    "paid": 1 if installment.paid else 0,
                    "paid_date": (
                        installment.paid_date.isoformat()
                        if installment.paid_date
                        else None
                    ),
                }
                for index, installment in enumerate(loan.schedule)
            )
    return loans, installments


def _snapshot_from_rows(
    tx_rows, loan_rows, installment_rows
) -> LedgerSnapshot:
    schedules: dict[str, list[Installment]] = defaultdict(list)
    for row in installment_rows:
        schedules[row.loan_id].append(_installment_from_row(row))

    loans: dict[str, list[Loan]] = {LOANS_TAKEN: [], LOANS_GIVEN: []}
    for row in loan_rows:
        loans[validate_loan_kind(row.loan_kind)].append(
            _loan_from_row(row, schedules.get(row.id, []))
        )

    return LedgerSnapshot(
        transactions=tuple(_transaction_from_row(row) for row in tx_rows),
        loans_taken=tuple(loans[LOANS_TAKEN]),
        loans_given=tuple(loans[LOANS_GIVEN]),
    )


def _transaction_from_row(row) -> Transaction:
    return Transaction(
        id=row.id,
        date=parse_iso_date(row.tx_date),
        kind=validate_kind(row.kind),
        description=row.description,
        amount=parse_amount(row.amount),
        bank=row.bank,
        category=row.category,
    )


def _loan_from_row(row, schedule: list[Installment]) -> Loan:
    return Loan(
        id=row.id,
        counterparty_name=row.counterparty_name,
        principal=parse_amount(row.principal),
        start_date=parse_iso_date(row.start_date),
        due_date=parse_optional_date(row.due_date),
        installment_count=int(row.installment_count),
        notes=row.notes,
        schedule=tuple(schedule),
    )


def _installment_from_row(row) -> Installment:
    return Installment(
        id=row.id,
        due_date=parse_iso_date(row.due_date),
        amount=parse_amount(row.amount),
        paid=bool(row.paid),
        paid_date=parse_optional_date(row.paid_date),
    )


__all__ = [
    "SqlAlchemyLedgerStore",
    "CREATE_TABLES_SQL",
    "DELETE_TABLES_SQL",
    "INSERT_TRANSACTIONS_SQL",
    "INSERT_LOANS_SQL",
    "INSERT_INSTALLMENTS_SQL",
]
