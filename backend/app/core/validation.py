"""Input Validation — pure checks and parsers for request fields.

Invariants:
    - Pure functions, no IO, no DB
    - Parsers raise InputValidationError (400) on bad input, never return sentinels
    - is_valid_calendar_date is strict: exact YYYY-MM-DD and a real calendar day

Design Decisions:
    - Loose date parsing for log filters (from/to) tries a fixed list of formats
      instead of guessing: ambiguous strings fail loudly (ADR: no silent coercion)
    - limit=0 is read as 1, not "no limit" (ADR: client compatibility)
"""

import re
from datetime import date, datetime

from app.core.errors import InputValidationError

MIN_USERNAME_LENGTH = 3
DEFAULT_LOG_LIMIT = 20

_CALENDAR_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")

_LOOSE_DATE_FORMATS = (
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %B %Y",
    "%d %b %Y",
    "%a, %d %b %Y %H:%M:%S %Z",
    "%a, %d %b %Y %H:%M:%S %z",
)


def normalize_username(value: str) -> str:
    """Capitalize first character, lowercase the rest."""
    return value[:1].upper() + value[1:].lower()


def check_username(value: object) -> str:
    """Return the username if it is a string of at least 3 characters."""
    if not isinstance(value, str) or len(value) < MIN_USERNAME_LENGTH:
        raise InputValidationError(
            "Invalid username. It must be a string with at least 3 characters.",
            field="username",
        )
    return value


def is_valid_calendar_date(value: object) -> bool:
    """True only for an exact YYYY-MM-DD string naming a real day."""
    if not isinstance(value, str) or not _CALENDAR_DATE_PATTERN.fullmatch(value):
        return False
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return False
    return True


def parse_loose_date(value: str, field: str) -> date:
    """Parse a from/to filter value in any of the accepted date forms."""
    text = value.strip()
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    for fmt in _LOOSE_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise InputValidationError(
        f"Invalid '{field}' date. Please use the yyyy-mm-dd format.",
        field=field,
    )


def parse_limit(value: str | None) -> int:
    """Resolve the logs limit: absent → 20, 0 → 1, otherwise the integer given."""
    if value is None or value == "":
        return DEFAULT_LOG_LIMIT
    try:
        limit = int(value)
    except ValueError:
        raise InputValidationError(
            "Invalid limit. It must be a non-negative integer.", field="limit",
        )
    if limit < 0:
        raise InputValidationError(
            "Invalid limit. It must be a non-negative integer.", field="limit",
        )
    return limit or 1


def parse_duration(value: object) -> int | float:
    """Coerce a duration field to a number of minutes."""
    if isinstance(value, bool):
        raise InputValidationError(
            "Invalid duration. It must be a number of minutes.", field="duration",
        )
    if isinstance(value, (int, float)):
        number = value
    else:
        try:
            number = float(str(value).strip())
        except ValueError:
            raise InputValidationError(
                "Invalid duration. It must be a number of minutes.",
                field="duration",
            )
    if number != number or number in (float("inf"), float("-inf")):
        raise InputValidationError(
            "Invalid duration. It must be a number of minutes.", field="duration",
        )
    if isinstance(number, float) and number.is_integer():
        return int(number)
    return number
