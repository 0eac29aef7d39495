"""Route Dependencies — request payload parsing and service wiring.

Invariants:
    - Services are built per request around the request's AsyncSession
    - read_payload accepts urlencoded, multipart and JSON bodies; anything else
      (or an empty body) yields an empty dict

Design Decisions:
    - Services injected with Depends: tests override get_db once and every
      route picks up the test database
"""

import json

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import InputValidationError
from app.infrastructure.database import get_db
from app.infrastructure.repositories import SqlExerciseRepository, SqlUserRepository
from app.services.exercise_service import ExerciseService
from app.services.user_service import UserService


async def read_payload(request: Request) -> dict:
    """Read a form-encoded or JSON request body into a plain dict."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        body = await request.body()
        if not body:
            return {}
        try:
            data = json.loads(body)
        except ValueError:
            raise InputValidationError("Malformed JSON body.")
        return data if isinstance(data, dict) else {}
    if content_type.startswith((
        "application/x-www-form-urlencoded", "multipart/form-data",
    )):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}
    return {}


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(SqlUserRepository(db))


def get_exercise_service(db: AsyncSession = Depends(get_db)) -> ExerciseService:
    return ExerciseService(SqlUserRepository(db), SqlExerciseRepository(db))
