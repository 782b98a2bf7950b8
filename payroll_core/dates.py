"""Lenient date parsing for values arriving from edit forms."""

from datetime import date, datetime, timedelta
from typing import Any

_ISO_DATE_LENGTH = 10


def parse_date(value: Any) -> date | None:
    """Return ``value`` as a ``date``, or None when it cannot be read as one.

    Accepts ``date``/``datetime`` objects and ISO strings, with or without a
    time part (``2024-08-10`` or ``2024-08-10T00:00:00Z``). Empty and
    malformed input yields None rather than an exception.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if len(text) < _ISO_DATE_LENGTH:
        return None
    try:
        return date.fromisoformat(text[:_ISO_DATE_LENGTH])
    except ValueError:
        return None


def iter_days(start: date, end: date):
    """Yield every calendar day from start to end inclusive."""
    day = start
    while day <= end:
        yield day
        day += timedelta(days=1)
