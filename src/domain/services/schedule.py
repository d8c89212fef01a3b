"""Installment schedule generation for loans."""

import calendar
from collections.abc import Callable
from datetime import date
from decimal import Decimal

from src.domain.exceptions import InvalidScheduleError
from src.domain.models import Installment
from src.domain.services.validation import parse_amount, parse_iso_date
from src.utils.decimal_utils import quantize_minor_unit
from src.utils.identifiers import new_identifier


def add_months(day: date, months: int) -> date:
    """Advance a date by calendar months, clamping to the month end.

    Args:
        day: Starting date.
        months: Number of months to add (may be negative).

    Returns:
        date: Same day-of-month in the target month, or its last day when
        the target month is shorter (2024-01-31 + 1 -> 2024-02-29).
    """
    month_index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def generate_schedule(
    principal,
    start_date,
    count: int,
    id_factory: Callable[[], str] = new_identifier,
) -> list[Installment]:
    """Generate an equal monthly installment schedule.

    Requirements:
    - ``principal`` is first rounded half away from zero to the minor unit
    - ``count`` installments, the first due one month after ``start_date``
    - each amount is ``principal / count`` rounded half away from zero to
      the minor unit
    - the last installment absorbs the rounding residual so the amounts
      sum to ``principal`` exactly

    Args:
        principal: Positive loan principal.
        start_date: Loan start date (``date`` or ISO string).
        count: Number of installments, at least 1.
        id_factory: Callable producing installment ids.

    Returns:
        list[Installment]: Unpaid installments ordered by due date.

    Raises:
        InvalidScheduleError: If ``count`` is not a positive integer or the
            principal is too small to give every installment a positive
            amount.
        InvalidAmountError: If ``principal`` is not a positive amount.
        InvalidDateError: If ``start_date`` is malformed.

    Example:
        1000 over 3 from 2024-01-15 -> 333.33 (2024-02-15),
        333.33 (2024-03-15), 333.34 (2024-04-15)
    """
    if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
        raise InvalidScheduleError(
            f"Installment count must be a positive integer, got {count!r}"
        )
    amount = quantize_minor_unit(parse_amount(principal, allow_zero=False))
    start = parse_iso_date(start_date)

    per = quantize_minor_unit(amount / Decimal(count))
    installments = [
        Installment(
            id=id_factory(),
            due_date=add_months(start, index + 1),
            amount=per,
        )
        for index in range(count)
    ]

    residual = amount - per * count
    last = installments[-1]
    last_amount = quantize_minor_unit(last.amount + residual)
    if per <= 0 or last_amount <= 0:
        raise InvalidScheduleError(
            f"Principal {amount} is too small to split into {count} "
            "installments"
        )
    installments[-1] = Installment(
        id=last.id,
        due_date=last.due_date,
        amount=last_amount,
    )
    return installments


__all__ = ["add_months", "generate_schedule"]
