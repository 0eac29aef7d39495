"""Log Query — pure construction of an exercise log filter from query parameters.

Invariants:
    - user_id is always part of the filter
    - date_from / date_to are inclusive bounds, None when not requested
    - limit is already resolved (absent → 20, 0 → 1)

Design Decisions:
    - Frozen dataclass: built once per request, passed to the repository as-is
    - The empty-result message depends on whether a date range was requested
      (ADR: tells the client which knob to turn)
"""

from dataclasses import dataclass
from datetime import date

from app.core.validation import parse_limit, parse_loose_date

NO_EXERCISES_IN_RANGE = (
    "No exercises found for the specified dates. "
    "Please adjust the date range and try again."
)
NO_EXERCISES_FOR_USER = (
    "Exercises not found for this user. "
    "Please check the exercises of another user."
)


@dataclass(frozen=True)
class LogQuery:
    """Filter and cap for a user's exercise log."""
    user_id: str
    date_from: date | None = None
    date_to: date | None = None
    limit: int = 20

    @property
    def has_date_range(self) -> bool:
        return self.date_from is not None or self.date_to is not None

    def empty_result_message(self) -> str:
        return NO_EXERCISES_IN_RANGE if self.has_date_range else NO_EXERCISES_FOR_USER


def build_log_query(
    user_id: str,
    date_from: str | None = None,
    date_to: str | None = None,
    limit: str | None = None,
) -> LogQuery:
    """Build a LogQuery from raw query-string values. Raises InputValidationError."""
    return LogQuery(
        user_id=user_id,
        date_from=parse_loose_date(date_from, "from") if date_from else None,
        date_to=parse_loose_date(date_to, "to") if date_to else None,
        limit=parse_limit(limit),
    )
