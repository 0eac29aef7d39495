"""User Service — create and list users.

Invariants:
    - username validated (string, >= 3 chars) before touching the store
    - Store duplicates become DuplicateUsernameError (400), any other store
      failure a DatabaseError with the client-facing message for this operation
    - Unexpected failures are logged and reported with the same message (500)
"""

import logging
from typing import Sequence

from app.core.errors import (
    DatabaseError, DuplicateKeyError, DuplicateUsernameError,
    ExerciseTrackerError, InternalError,
)
from app.core.repository_protocols import UserLike, UserRepository
from app.core.validation import check_username

logger = logging.getLogger(__name__)

LIST_USERS_FAILED_MESSAGE = (
    "Error retrieving users, could not connect to the database."
)


class UserService:
    """User registration and listing."""

    def __init__(self, users: UserRepository):
        self.users = users

    async def list_users(self) -> Sequence[UserLike]:
        try:
            return await self.users.list_all()
        except DatabaseError as e:
            raise DatabaseError(LIST_USERS_FAILED_MESSAGE, e.operation) from e
        except Exception as e:
            logger.error(f"Listing users failed: {e}", exc_info=e)
            raise InternalError(LIST_USERS_FAILED_MESSAGE) from e

    async def create_user(self, payload: dict) -> UserLike:
        username = check_username(payload.get("username"))
        try:
            user = await self.users.create(username)
        except DuplicateKeyError as e:
            raise DuplicateUsernameError(e.value) from e
        except DatabaseError as e:
            raise DatabaseError("Server error", e.operation) from e
        except ExerciseTrackerError:
            raise
        except Exception as e:
            logger.error(f"Creating user failed: {e}", exc_info=e)
            raise InternalError("Server error") from e
        logger.info(f"User created: {user.username}", extra={"user_id": user.id})
        return user
