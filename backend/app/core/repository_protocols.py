"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - Store failures surface as DatabaseError; unique violations as DuplicateKeyError

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - No update/delete methods: records are append-only
"""

from datetime import date
from typing import Protocol, Sequence

from app.core.log_query import LogQuery


class UserLike(Protocol):
    """Structural contract for User records handed to services."""
    id: str
    username: str


class ExerciseLike(Protocol):
    """Structural contract for Exercise records handed to services."""
    id: str
    user_id: str
    description: str
    duration: float
    date: date


class UserRepository(Protocol):
    """Contract for user persistence — implemented by shell."""
    async def create(self, username: str) -> UserLike: ...
    async def list_all(self) -> Sequence[UserLike]: ...
    async def get_by_id(self, user_id: str) -> UserLike | None: ...


class ExerciseRepository(Protocol):
    """Contract for exercise persistence — implemented by shell."""
    async def create(
        self, user_id: str, description: str, duration: float, on: date,
    ) -> ExerciseLike: ...
    async def find(self, query: LogQuery) -> Sequence[ExerciseLike]: ...
