"""Exercise Service — log exercises and read a user's exercise log.

Invariants:
    - add_exercise checks run in order: id shape → user exists → required fields → date
    - Omitted date defaults to today's local date at handling time
    - get_log sends exactly one response: the log, or a 404 when it is empty
    - Store failures surface as DatabaseError with the operation's client message
    - Unexpected failures are logged and reported with that same message (500)

Design Decisions:
    - Pure parsing (core/validation.py, core/log_query.py) around async repository
      calls: the service is the only place both meet (ADR: impureim sandwich)
    - today is injectable so tests can pin the clock
"""

import logging
from datetime import date
from typing import Callable

from app.core.errors import (
    DatabaseError, ExerciseTrackerError, InputValidationError, InternalError,
    ResourceNotFoundError,
)
from app.core.formatting import format_date, format_duration
from app.core.identifiers import is_valid_id
from app.core.log_query import build_log_query
from app.core.repository_protocols import (
    ExerciseRepository, UserLike, UserRepository,
)
from app.core.validation import is_valid_calendar_date, parse_duration
from app.schemas.exercise import ExerciseLogResponse, ExerciseResponse, LogEntry

logger = logging.getLogger(__name__)

INVALID_ID_MESSAGE = (
    "Invalid or missing ID. The ID must be exactly 24 characters long."
)
USER_NOT_FOUND_MESSAGE = "User not found. Please check the ID and try again."
MISSING_FIELDS_MESSAGE = (
    "Description and duration are required. Please provide them and try again."
)
INVALID_DATE_MESSAGE = (
    "Invalid date. Please use the yyyy-mm-dd format "
    "and ensure date is a valid calendar date."
)


class ExerciseService:
    """Exercise logging and log retrieval for existing users."""

    def __init__(
        self,
        users: UserRepository,
        exercises: ExerciseRepository,
        today: Callable[[], date] = date.today,
    ):
        self.users = users
        self.exercises = exercises
        self.today = today

    async def _get_user_or_404(self, user_id: str) -> UserLike:
        if not is_valid_id(user_id):
            raise InputValidationError(INVALID_ID_MESSAGE, field="_id")
        user = await self.users.get_by_id(user_id)
        if user is None:
            raise ResourceNotFoundError(USER_NOT_FOUND_MESSAGE)
        return user

    async def add_exercise(self, user_id: str, payload: dict) -> ExerciseResponse:
        try:
            user = await self._get_user_or_404(user_id)

            description = payload.get("description")
            duration = payload.get("duration")
            if not description or not duration:
                raise InputValidationError(MISSING_FIELDS_MESSAGE)

            raw_date = payload.get("date")
            if raw_date and not is_valid_calendar_date(raw_date):
                raise InputValidationError(INVALID_DATE_MESSAGE, field="date")
            on = date.fromisoformat(raw_date) if raw_date else self.today()

            exercise = await self.exercises.create(
                user_id=user.id,
                description=str(description),
                duration=parse_duration(duration),
                on=on,
            )
        except DatabaseError as e:
            raise DatabaseError("Server error", e.operation) from e
        except ExerciseTrackerError:
            raise
        except Exception as e:
            logger.error(f"Logging exercise failed: {e}", exc_info=e)
            raise InternalError("Server error") from e

        logger.info(
            f"Exercise logged: {exercise.description}",
            extra={"user_id": user.id},
        )
        return ExerciseResponse(
            id=exercise.id,
            user_id=exercise.user_id,
            description=exercise.description,
            duration=format_duration(exercise.duration),
            date=format_date(exercise.date),
        )

    async def get_log(
        self,
        user_id: str,
        date_from: str | None = None,
        date_to: str | None = None,
        limit: str | None = None,
    ) -> ExerciseLogResponse:
        try:
            user = await self._get_user_or_404(user_id)
            query = build_log_query(user_id, date_from, date_to, limit)
            exercises = await self.exercises.find(query)
        except DatabaseError as e:
            raise DatabaseError("Error retrieving exercises", e.operation) from e
        except ExerciseTrackerError:
            raise
        except Exception as e:
            logger.error(f"Reading exercise log failed: {e}", exc_info=e)
            raise InternalError("Error retrieving exercises") from e

        if not exercises:
            raise ResourceNotFoundError(query.empty_result_message())

        log = [
            LogEntry(
                description=item.description,
                duration=format_duration(item.duration),
                date=format_date(item.date),
            )
            for item in exercises
        ]
        return ExerciseLogResponse(
            username=user.username, count=len(log), id=user_id, log=log,
        )
