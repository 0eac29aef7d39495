"""Exercise Schemas — created exercise and exercise log shapes.

Invariants:
    - ExerciseResponse mirrors the stored record plus the owning userId
    - ExerciseLogResponse.count always equals len(log)
"""

from pydantic import BaseModel, ConfigDict, Field


class ExerciseResponse(BaseModel):
    """Created exercise — {_id, userId, description, duration, date}."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    user_id: str = Field(alias="userId")
    description: str
    duration: int | float
    date: str


class LogEntry(BaseModel):
    """One line of an exercise log."""
    description: str
    duration: int | float
    date: str


class ExerciseLogResponse(BaseModel):
    """Exercise log — {username, count, _id, log}."""
    model_config = ConfigDict(populate_by_name=True)

    username: str
    count: int
    id: str = Field(alias="_id")
    log: list[LogEntry]
