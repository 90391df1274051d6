"""Timestamp formatting for WXR date fields."""

from __future__ import annotations

from datetime import date, datetime

# WordPress stores post dates as "YYYY-MM-DD HH:MM:SS" on a 24-hour clock.
WXR_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_date(value: object) -> object:
    """Format a date-like value for a WXR date field.

    ``datetime`` and ``date`` values are rendered with :data:`WXR_DATE_FORMAT`
    as-is, without timezone conversion.  Anything else (strings, numbers,
    ``None``) is assumed to be formatted already and is returned unchanged.

    Args:
        value: The date to format.

    Returns:
        The formatted string, or ``value`` itself.

    """
    if isinstance(value, datetime):
        return value.strftime(WXR_DATE_FORMAT)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day).strftime(WXR_DATE_FORMAT)
    return value
