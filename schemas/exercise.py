"""Exercise collection schemas."""

import math
from datetime import date as Date
from typing import Any, List, Optional, Union
from pydantic import BaseModel, Field, field_validator, model_validator
from utils.dates import parse_date


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class ExerciseCreate(BaseModel):
    """Request body for logging an exercise."""
    description: str = Field(..., description="What was done")
    duration: Union[int, float] = Field(..., description="Duration in minutes")
    date: Optional[Date] = Field(None, description="Calendar date, defaults to today")

    @model_validator(mode="before")
    @classmethod
    def require_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            raise ValueError("Description and duration are required")
        if _is_blank(data.get("description")) or _is_blank(data.get("duration")):
            raise ValueError("Description and duration are required")
        return data

    @field_validator("description", mode="before")
    @classmethod
    def strip_description(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("duration", mode="before")
    @classmethod
    def coerce_duration(cls, value: Any) -> Union[int, float]:
        # bool is an int subclass, "true" is not a duration
        if isinstance(value, bool):
            raise ValueError("Duration must be a number")
        try:
            number = float(value.strip() if isinstance(value, str) else value)
        except (TypeError, ValueError):
            raise ValueError("Duration must be a number")
        if not math.isfinite(number):
            raise ValueError("Duration must be a number")
        return int(number) if number.is_integer() else number

    @field_validator("date", mode="before")
    @classmethod
    def parse_calendar_date(cls, value: Any) -> Optional[Date]:
        if _is_blank(value):
            return None
        parsed = parse_date(value)
        if parsed is None:
            raise ValueError("Invalid date")
        return parsed


class ExerciseResponse(BaseModel):
    """Logged exercise together with its owner."""
    id: str = Field(..., alias="_id", description="Owning user identifier")
    username: str = Field(..., description="Owning user's name")
    description: str
    duration: Union[int, float]
    date: str = Field(..., description="Readable date, e.g. 'Sun Jan 15 2023'")

    class Config:
        populate_by_name = True


class LogEntry(BaseModel):
    """One exercise in a user's log."""
    description: str
    duration: Union[int, float]
    date: str


class ExerciseLog(BaseModel):
    """Filtered exercise log of a user."""
    id: str = Field(..., alias="_id", description="User identifier")
    username: str
    from_: Optional[str] = Field(None, alias="from", description="Rendered lower bound, if applied")
    to: Optional[str] = Field(None, description="Rendered upper bound, if applied")
    count: int = Field(..., description="Number of entries in log")
    log: List[LogEntry] = Field(default_factory=list)

    class Config:
        populate_by_name = True
