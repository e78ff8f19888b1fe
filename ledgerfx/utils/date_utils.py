"""Helpers for date normalization."""

from datetime import date, datetime


def coerce_date(raw_value) -> date | None:
    """Normalize dates coming from SQL rows or book objects.

    Args:
        raw_value: date, datetime or ISO formatted string.

    Returns:
        date | None: Calendar date, or None when the value is unusable.
    """
    if raw_value is None:
        return None
    if isinstance(raw_value, datetime):
        return raw_value.date()
    if isinstance(raw_value, date):
        return raw_value
    if isinstance(raw_value, str):
        try:
            return datetime.fromisoformat(raw_value.strip()).date()
        except ValueError:
            return None
    return None


__all__ = ["coerce_date"]
