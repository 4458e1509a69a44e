"""
Display helpers registered as Jinja filters
"""
from datetime import date, datetime
from email.utils import parsedate_to_datetime
from typing import Any, Optional

INVALID_DATE = 'Invalid Date'


def _parse_date(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()

    try:
        return date.fromisoformat(text)
    except ValueError:
        pass

    try:
        return datetime.fromisoformat(text.replace('Z', '+00:00')).date()
    except ValueError:
        pass

    # RFC 1123, e.g. "Tue, 05 Mar 2024 00:00:00 GMT"
    try:
        return parsedate_to_datetime(text).date()
    except (TypeError, ValueError, IndexError):
        return None


def format_long_date(value: Any) -> str:
    """
    Format a date as "March 5, 2024"

    Accepts ISO dates, ISO datetimes and RFC 1123 strings. Anything that
    does not parse renders as "Invalid Date".
    """
    parsed = _parse_date(value)
    if parsed is None:
        return INVALID_DATE
    return f"{parsed:%B} {parsed.day}, {parsed.year}"


def format_time_range(start: Any, end: Any) -> str:
    return f"{start} - {end}"
