"""Response Formatting — pure rendering of stored values for API responses.

Invariants:
    - format_date always returns YYYY-MM-DD, whatever the stored representation
    - Aware datetimes are rendered in their own offset (no timezone shifting)
"""

from datetime import date, datetime


def format_date(value: date | datetime | str) -> str:
    """Render a stored date as YYYY-MM-DD."""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return datetime.fromisoformat(value).date().isoformat()


def format_duration(value: float | int) -> int | float:
    """Stored floats that are whole minutes render as integers."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value
