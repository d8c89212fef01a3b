"""Conversion between ledger snapshots and JSON-compatible payloads.

The payload keeps one list per collection (``transactions``,
``loansTaken``, ``loansGiven``) with camelCase record keys, and
amounts written as strings so decimals survive a round trip.
"""

from typing import Any

from src.domain.models import Installment, LedgerSnapshot, Loan, Transaction
from src.domain.services.validation import (
    parse_amount,
    parse_iso_date,
    parse_optional_date,
    validate_kind,
)


def snapshot_to_payload(snapshot: LedgerSnapshot) -> dict[str, Any]:
    """Serialize a snapshot, newest record first."""
    return {
        "transactions": [
            _transaction_to_dict(tx) for tx in reversed(snapshot.transactions)
        ],
        "loansTaken": [
            _loan_to_dict(loan) for loan in reversed(snapshot.loans_taken)
        ],
        "loansGiven": [
            _loan_to_dict(loan) for loan in reversed(snapshot.loans_given)
        ],
    }


def payload_to_snapshot(payload: dict[str, Any]) -> LedgerSnapshot:
    """Deserialize a payload written by ``snapshot_to_payload``.

    Raises:
        LedgerValidationError: If a stored amount, date or type is malformed.
        ValueError: If an installment count is not an integer.
        KeyError: If a record misses a required field.
    """
    return LedgerSnapshot(
        transactions=tuple(
            _transaction_from_dict(item)
            for item in reversed(payload.get("transactions") or [])
        ),
        loans_taken=tuple(
            _loan_from_dict(item)
            for item in reversed(payload.get("loansTaken") or [])
        ),
        loans_given=tuple(
            _loan_from_dict(item)
            for item in reversed(payload.get("loansGiven") or [])
        ),
    )


def _transaction_to_dict(transaction: Transaction) -> dict[str, Any]:
    return {
        "id": transaction.id,
        "date": transaction.date.isoformat(),
        "type": transaction.kind,
        "description": transaction.description,
        "amount": str(transaction.amount),
        "bank": transaction.bank,
        "category": transaction.category,
    }


def _transaction_from_dict(item: dict[str, Any]) -> Transaction:
    return Transaction(
        id=str(item["id"]),
        date=parse_iso_date(item["date"]),
        kind=validate_kind(item["type"]),
        description=item.get("description") or "",
        amount=parse_amount(item["amount"]),
        bank=item["bank"],
        category=item["category"],
    )


def _loan_to_dict(loan: Loan) -> dict[str, Any]:
    return {
        "id": loan.id,
        "person": loan.counterparty_name,
        "amount": str(loan.principal),
        "startDate": loan.start_date.isoformat(),
        "dueDate": loan.due_date.isoformat() if loan.due_date else None,
        "installments": loan.installment_count,
        "notes": loan.notes,
        "schedule": [
            {
                "id": installment.id,
                "dueDate": installment.due_date.isoformat(),
                "amount": str(installment.amount),
                "paid": installment.paid,
                "paidDate": (
                    installment.paid_date.isoformat()
                    if installment.paid_date
                    else None
                ),
            }
            for installment in loan.schedule
        ],
    }


def _loan_from_dict(item: dict[str, Any]) -> Loan:
    return Loan(
        id=str(item["id"]),
        counterparty_name=item["person"],
        principal=parse_amount(item["amount"]),
        start_date=parse_iso_date(item["startDate"]),
        due_date=parse_optional_date(item.get("dueDate")),
        installment_count=int(item.get("installments") or 0),
        notes=item.get("notes") or "",
        schedule=tuple(
            Installment(
                id=str(entry["id"]),
                due_date=parse_iso_date(entry["dueDate"]),
                amount=parse_amount(entry["amount"]),
                paid=bool(entry.get("paid")),
                paid_date=parse_optional_date(entry.get("paidDate")),
            )
            for entry in item.get("schedule") or []
        ),
    )


__all__ = ["snapshot_to_payload", "payload_to_snapshot"]
