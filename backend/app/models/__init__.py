"""ORM Models — SQLAlchemy declarative models for users and exercises.

Invariants:
    - All models inherit from Base (db/base.py)
    - exercises.user_id is a plain indexed column, not a foreign key

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all()
      or alembic autogenerate runs
"""

from app.models.user import User  # noqa: F401
from app.models.exercise import Exercise  # noqa: F401
