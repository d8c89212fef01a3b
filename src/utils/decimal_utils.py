"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal

MINOR_UNIT = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Floats go through ``str`` so 0.1 stays 0.1 instead of its binary
    expansion.

    Args:
        value: Raw numeric value from storage or adapters.

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        decimal.InvalidOperation: If the value is not numeric.
    """
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value).strip())


def quantize_minor_unit(value: Decimal) -> Decimal:
    """Round to two decimal places, half away from zero."""
    return value.quantize(MINOR_UNIT, rounding=ROUND_HALF_UP)


__all__ = ["coerce_decimal", "quantize_minor_unit", "MINOR_UNIT"]
