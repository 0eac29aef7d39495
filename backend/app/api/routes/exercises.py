"""Exercises — log an exercise and read a user's exercise log.

Invariants:
    - POST /api/users/{user_id}/exercises returns 200 (not 201) for client compatibility
    - GET /api/users/{user_id}/logs accepts from, to and limit query parameters

Design Decisions:
    - Query parameters kept as raw strings: parsing and its error messages live
      in core/validation.py instead of FastAPI's generic 422 handling
"""

import logging

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_exercise_service, read_payload
from app.schemas.exercise import ExerciseLogResponse, ExerciseResponse
from app.services.exercise_service import ExerciseService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/users", tags=["exercises"])


@router.post("/{user_id}/exercises", response_model=ExerciseResponse)
async def add_exercise(
    user_id: str,
    payload: dict = Depends(read_payload),
    service: ExerciseService = Depends(get_exercise_service),
):
    """Log an exercise (description, duration, optional yyyy-mm-dd date)."""
    return await service.add_exercise(user_id, payload)


@router.get("/{user_id}/logs", response_model=ExerciseLogResponse)
async def get_exercise_log(
    user_id: str,
    date_from: str | None = Query(None, alias="from"),
    date_to: str | None = Query(None, alias="to"),
    limit: str | None = Query(None),
    service: ExerciseService = Depends(get_exercise_service),
):
    """Return a user's exercise log, optionally filtered by date range."""
    return await service.get_log(user_id, date_from, date_to, limit)
