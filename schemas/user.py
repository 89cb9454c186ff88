"""User collection schema."""

from pydantic import BaseModel, Field, model_validator
from typing import Any


class UserCreate(BaseModel):
    """Request body for creating a user."""
    username: str = Field(..., description="Display name of the user")

    @model_validator(mode="before")
    @classmethod
    def require_username(cls, data: Any) -> Any:
        username = data.get("username") if isinstance(data, dict) else None
        if username is None or (isinstance(username, str) and not username.strip()):
            raise ValueError("Username is required")
        if isinstance(username, str):
            data = {**data, "username": username.strip()}
        return data


class UserResponse(BaseModel):
    """User as returned by the API."""
    id: str = Field(..., alias="_id", description="Generated user identifier")
    username: str = Field(..., description="Display name of the user")

    class Config:
        populate_by_name = True
