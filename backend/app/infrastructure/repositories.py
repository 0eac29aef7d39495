"""SQL Repositories — UserRepository and ExerciseRepository over an AsyncSession.

Invariants:
    - Every store failure leaves the session rolled back and raises DatabaseError
    - A unique violation on users.username raises DuplicateKeyError
    - find() returns exercises in insertion order, capped at query.limit

Design Decisions:
    - Error mapping lives here, not in routes: services only see core errors
      (ADR: routes and services never import sqlalchemy.exc)
    - Ids are lowercased before lookup: hex ids are case-insensitive for clients
"""

import logging
from contextlib import asynccontextmanager
from datetime import date
from typing import AsyncIterator, Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import DatabaseError, DuplicateKeyError
from app.core.log_query import LogQuery
from app.models.exercise import Exercise
from app.models.user import User

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _store_errors(db: AsyncSession, operation: str) -> AsyncIterator[None]:
    """Map driver/ORM failures to DatabaseError after rolling back."""
    try:
        yield
    except (SQLAlchemyError, OSError) as e:
        await db.rollback()
        logger.error(f"DB {operation} failed: {e}")
        raise DatabaseError(f"Database {operation} failed", operation) from e


class SqlUserRepository:
    """Users table access."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, username: str) -> User:
        user = User(username=username)
        normalized = user.username
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.info(f"Duplicate username rejected: {normalized}")
            raise DuplicateKeyError("username", normalized) from e
        except (SQLAlchemyError, OSError) as e:
            await self.db.rollback()
            logger.error(f"DB insert failed: {e}")
            raise DatabaseError("Database insert failed", "insert") from e
        return user

    async def list_all(self) -> Sequence[User]:
        async with _store_errors(self.db, "query"):
            result = await self.db.execute(
                select(User).order_by(User.created_at, User.id),
            )
            return result.scalars().all()

    async def get_by_id(self, user_id: str) -> User | None:
        async with _store_errors(self.db, "query"):
            result = await self.db.execute(
                select(User).where(User.id == user_id.lower()),
            )
            return result.scalar_one_or_none()


class SqlExerciseRepository:
    """Exercises table access."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(
        self, user_id: str, description: str, duration: float, on: date,
    ) -> Exercise:
        exercise = Exercise(
            user_id=user_id.lower(),
            description=description,
            duration=duration,
            date=on,
        )
        self.db.add(exercise)
        async with _store_errors(self.db, "insert"):
            await self.db.commit()
        return exercise

    async def find(self, query: LogQuery) -> Sequence[Exercise]:
        stmt = select(Exercise).where(Exercise.user_id == query.user_id.lower())
        if query.date_from is not None:
            stmt = stmt.where(Exercise.date >= query.date_from)
        if query.date_to is not None:
            stmt = stmt.where(Exercise.date <= query.date_to)
        stmt = stmt.order_by(Exercise.created_at, Exercise.id).limit(query.limit)

        async with _store_errors(self.db, "query"):
            result = await self.db.execute(stmt)
            return result.scalars().all()
