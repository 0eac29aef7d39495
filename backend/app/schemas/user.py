"""User Schemas — public-facing user shape."""

from pydantic import BaseModel, ConfigDict, Field


class UserResponse(BaseModel):
    """User response — {_id, username}."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    username: str
