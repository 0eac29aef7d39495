"""Users — list and create users.

Invariants:
    - POST returns 201 with the normalized username
    - GET returns every user as {_id, username}
"""

import logging

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_user_service, read_payload
from app.schemas.user import UserResponse
from app.services.user_service import UserService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def list_users(service: UserService = Depends(get_user_service)):
    """List all users."""
    users = await service.list_users()
    return [UserResponse(id=u.id, username=u.username) for u in users]


@router.post(
    "", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    payload: dict = Depends(read_payload),
    service: UserService = Depends(get_user_service),
):
    """Create a user from form field `username`."""
    user = await service.create_user(payload)
    return UserResponse(id=user.id, username=user.username)
