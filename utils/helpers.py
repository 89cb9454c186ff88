"""Helper utility functions."""

from typing import Any, Dict, Optional
from bson import ObjectId
from bson.errors import InvalidId
from fastapi import HTTPException, Request
from pydantic import ValidationError

MAX_LIMIT = 2 ** 63 - 1


async def read_payload(request: Request) -> Dict[str, Any]:
    """Read a request body sent either as JSON or as form data."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        body = await request.body()
        if not body.strip():
            return {}
        try:
            data = await request.json()
        except ValueError:
            # JSONDecodeError and UnicodeDecodeError are both ValueErrors
            raise HTTPException(status_code=400, detail="Invalid request body")
        if not isinstance(data, dict):
            raise HTTPException(status_code=400, detail="Invalid request body")
        return data

    form = await request.form()
    return {key: value for key, value in form.items()}


def validation_message(error: ValidationError) -> str:
    """Turn the first validation error into a plain message."""
    first = error.errors()[0]
    ctx_error = first.get("ctx", {}).get("error")
    if ctx_error is not None:
        return str(ctx_error)
    field = ".".join(str(part) for part in first.get("loc", ()))
    return f"{field}: {first['msg']}" if field else first["msg"]


def to_object_id(value: str) -> Optional[ObjectId]:
    """Convert a path id to an ObjectId, None when it is malformed."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


def parse_limit(value: Optional[str]) -> Optional[int]:
    """Positive integer limit, None for "no limit"."""
    if value is None:
        return None
    try:
        limit = int(value.strip())
    except ValueError:
        return None
    # the driver encodes limit as a signed 64-bit int
    return limit if 0 < limit <= MAX_LIMIT else None


def user_serializer(user: Dict[str, Any]) -> Dict[str, Any]:
    """Serialize a MongoDB user document."""
    return {"_id": str(user["_id"]), "username": user["username"]}
