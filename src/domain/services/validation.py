"""Domain validation helpers.

Every helper fails fast with a descriptive ``LedgerValidationError``
subclass; invalid input is never coerced into a default value.
"""

from collections.abc import Iterable
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
import re

from src.domain.constants import LOAN_KINDS, TRANSACTION_KINDS
from src.domain.exceptions import (
    InvalidAmountError,
    InvalidDateError,
    UnknownChoiceError,
)
from src.utils.decimal_utils import coerce_decimal

ISO_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_amount(value, *, allow_zero: bool = True) -> Decimal:
    """Parse a non-negative decimal amount.

    Args:
        value: Raw amount (Decimal, int, float or numeric string).
        allow_zero: Whether zero is accepted.

    Returns:
        Decimal: Parsed amount.

    Raises:
        InvalidAmountError: If the value is missing, not numeric, negative,
            or zero when ``allow_zero`` is False.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidAmountError("Amount is required")
    if isinstance(value, bool):
        raise InvalidAmountError(f"Amount must be numeric, got {value!r}")
    try:
        amount = coerce_decimal(value)
    except (InvalidOperation, ValueError) as exc:
        raise InvalidAmountError(
            f"Amount must be numeric, got {value!r}"
        ) from exc
    if not amount.is_finite():
        raise InvalidAmountError(f"Amount must be finite, got {value!r}")
    if amount < 0:
        raise InvalidAmountError(f"Amount must not be negative: {amount}")
    if not allow_zero and amount == 0:
        raise InvalidAmountError("Amount must be greater than zero")
    return amount


def parse_iso_date(value) -> date:
    """Parse an ISO calendar date (YYYY-MM-DD).

    Args:
        value: ``date`` instance, ``datetime`` (time part dropped) or
            ISO date string.

    Returns:
        date: Parsed date.

    Raises:
        InvalidDateError: If the value is missing or malformed.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise InvalidDateError(f"Date is required, got {value!r}")
    cleaned = value.strip()
    if not ISO_DATE_PATTERN.fullmatch(cleaned):
        raise InvalidDateError(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
    try:
        return date.fromisoformat(cleaned)
    except ValueError as exc:
        raise InvalidDateError(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        ) from exc


def parse_optional_date(value) -> date | None:
    """Parse an optional ISO date; empty values map to None."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return parse_iso_date(value)


def validate_choice(value: str, allowed: Iterable[str], label: str) -> str:
    """Ensure a value belongs to a closed set.

    Args:
        value: Candidate value.
        allowed: Allowed values.
        label: Field name used in the error message.

    Returns:
        str: The value, unchanged.

    Raises:
        UnknownChoiceError: If the value is not allowed.
    """
    allowed_values = tuple(allowed)
    if value not in allowed_values:
        raise UnknownChoiceError(
            f"Unknown {label} '{value}'. "
            f"Expected one of: {', '.join(allowed_values)}"
        )
    return value


def validate_kind(kind: str) -> str:
    """Ensure a transaction kind is income or expense."""
    return validate_choice(kind, TRANSACTION_KINDS, "transaction kind")


def validate_loan_kind(kind: str) -> str:
    """Ensure a loan collection kind is taken or given."""
    return validate_choice(kind, LOAN_KINDS, "loan kind")


__all__ = [
    "parse_amount",
    "parse_iso_date",
    "parse_optional_date",
    "validate_choice",
    "validate_kind",
    "validate_loan_kind",
]
