"""Domain normalization helpers for dates and period keys."""

from datetime import date


def date_key(day: date) -> str:
    """Return the ISO date key (YYYY-MM-DD)."""
    return day.isoformat()


def month_key(day: date) -> str:
    """Return the month period key (YYYY-MM).

    Args:
        day: Transaction date.

    Returns:
        str: Zero-padded year-month key, sortable lexicographically.
    """
    return f"{day.year:04d}-{day.month:02d}"


def year_key(day: date) -> str:
    """Return the year period key (YYYY)."""
    return f"{day.year:04d}"


def normalize_label(value: str | None) -> str:
    """Strip surrounding whitespace from free-text labels."""
    if not value:
        return ""
    return value.strip()


__all__ = ["date_key", "month_key", "year_key", "normalize_label"]
