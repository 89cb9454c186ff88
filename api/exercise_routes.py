"""Exercise routes: logging exercises and reading a user's log."""

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from pydantic import ValidationError
from models.database import get_exercises_collection, get_users_collection
from schemas.exercise import ExerciseCreate, ExerciseLog, ExerciseResponse, LogEntry
from utils.dates import format_date, parse_date, to_storage, today
from utils.helpers import parse_limit, read_payload, to_object_id, validation_message
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/api/users", tags=["exercises"])


async def find_user(users_collection, user_id: str):
    """Look a user up by its path id, None when absent or malformed."""
    object_id = to_object_id(user_id)
    if object_id is None:
        return None
    return await users_collection.find_one({"_id": object_id})


@router.post("/{user_id}/exercises", response_model=ExerciseResponse, status_code=201)
async def create_exercise(
    user_id: str,
    request: Request,
    users_collection=Depends(get_users_collection),
    exercises_collection=Depends(get_exercises_collection),
):
    """
    Log an exercise for a user.
    The user must exist; nothing is written otherwise.
    """
    payload = await read_payload(request)
    try:
        exercise = ExerciseCreate.model_validate(payload)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=validation_message(e))

    try:
        user = await find_user(users_collection, user_id)
        if not user:
            raise HTTPException(status_code=404, detail="User not found")

        owner_id = str(user["_id"])
        day = exercise.date or today()
        await exercises_collection.insert_one({
            "user_id": owner_id,
            "description": exercise.description,
            "duration": exercise.duration,
            "date": to_storage(day),
        })
        logger.info(f"Logged exercise for user {user_id}: {exercise.description} ({exercise.duration} min)")

        return ExerciseResponse(
            id=owner_id,
            username=user["username"],
            description=exercise.description,
            duration=exercise.duration,
            date=format_date(day),
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error creating exercise for user {user_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Error creating exercise: {str(e)}"
        )


@router.get("/{user_id}/logs", response_model=ExerciseLog)
async def get_exercise_log(
    user_id: str,
    from_: Optional[str] = Query(None, alias="from", description="Inclusive lower date bound"),
    to: Optional[str] = Query(None, description="Inclusive upper date bound"),
    limit: Optional[str] = Query(None, description="Maximum number of entries"),
    users_collection=Depends(get_users_collection),
    exercises_collection=Depends(get_exercises_collection),
):
    """
    Return a user's exercises, optionally bounded by date and limited in size.
    Bounds or limits that do not parse are ignored.
    """
    try:
        user = await find_user(users_collection, user_id)
        if not user:
            raise HTTPException(status_code=404, detail="User not found")

        start = parse_date(from_)
        end = parse_date(to)

        owner_id = str(user["_id"])
        query = {"user_id": owner_id}
        date_filter = {}
        if start:
            date_filter["$gte"] = to_storage(start)
        if end:
            date_filter["$lte"] = to_storage(end)
        if date_filter:
            query["date"] = date_filter

        # limit=0 means no limit to the driver
        cursor = exercises_collection.find(
            query,
            {"_id": 0, "description": 1, "duration": 1, "date": 1},
            limit=parse_limit(limit) or 0,
        )
        exercises = await cursor.to_list(length=None)

        log = [
            LogEntry(
                description=exercise["description"],
                duration=exercise["duration"],
                date=format_date(exercise["date"]),
            )
            for exercise in exercises
        ]

        return ExerciseLog(
            id=owner_id,
            username=user["username"],
            from_=format_date(start),
            to=format_date(end),
            count=len(log),
            log=log,
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching exercise log for user {user_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Error fetching exercise log: {str(e)}"
        )
