"""User routes."""

from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import ValidationError
from models.database import get_users_collection
from schemas.user import UserCreate, UserResponse
from utils.helpers import read_payload, user_serializer, validation_message
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=List[UserResponse])
async def list_users(users_collection=Depends(get_users_collection)):
    """Return every user as {_id, username}, in store order."""
    try:
        cursor = users_collection.find({}, {"username": 1})
        users = await cursor.to_list(length=None)
        return [UserResponse(**user_serializer(user)) for user in users]
    except Exception as e:
        logger.error(f"Error fetching users: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal Server Error")


@router.post("", response_model=UserResponse, status_code=201)
async def create_user(request: Request, users_collection=Depends(get_users_collection)):
    """Create a new user."""
    payload = await read_payload(request)
    try:
        user = UserCreate.model_validate(payload)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=validation_message(e))

    try:
        result = await users_collection.insert_one(user.model_dump())
    except Exception as e:
        logger.error(f"Error creating user: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal Server Error")

    logger.info(f"Created user {result.inserted_id}: {user.username}")
    return UserResponse(id=str(result.inserted_id), username=user.username)
