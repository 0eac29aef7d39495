"""Exercise ORM — one logged activity for a user.

Invariants:
    - user_id references users.id by value only (checked at request time)
    - date is a calendar date (no time, no timezone)
    - created_at fixes insertion order for log queries

Design Decisions:
    - No ForeignKey on user_id: records are append-only and never cascade
    - Float duration: accepts fractional minutes, rendered as int when whole
"""

import datetime

from sqlalchemy import String, Text, Float, Date, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from app.core.identifiers import new_object_id
from app.db.base import Base


class Exercise(Base):
    """Exercise entity — description, duration in minutes, and day performed."""
    __tablename__ = "exercises"

    id: Mapped[str] = mapped_column(
        String(24), primary_key=True, default=new_object_id,
    )
    user_id: Mapped[str] = mapped_column(
        String(24), nullable=False, index=True,
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    duration: Mapped[float] = mapped_column(Float, nullable=False)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)
    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.datetime.now(datetime.timezone.utc),
    )
