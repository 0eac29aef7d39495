"""User ORM — persists a tracked person, identified by a unique username.

Invariants:
    - id is a 24-hex object id generated on insert
    - username is unique and normalized on every assignment (Amy, not aMY)

Design Decisions:
    - Normalization in an attribute validator: every write path goes through it,
      so the unique constraint compares normalized values (ADR: case-insensitive
      uniqueness without a functional index)
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, validates

from app.core.identifiers import new_object_id
from app.core.validation import normalize_username
from app.db.base import Base


class User(Base):
    """User entity — owner of an exercise log."""
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(24), primary_key=True, default=new_object_id,
    )
    username: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    @validates("username")
    def _normalize_username(self, key: str, value: str) -> str:
        return normalize_username(value)
