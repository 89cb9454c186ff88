"""Request and response schemas organized by collection."""

from schemas.user import UserCreate, UserResponse
from schemas.exercise import ExerciseCreate, ExerciseResponse, LogEntry, ExerciseLog

__all__ = [
    "UserCreate",
    "UserResponse",
    "ExerciseCreate",
    "ExerciseResponse",
    "LogEntry",
    "ExerciseLog",
]
