"""Database models and connection setup."""

from fastapi import Depends, Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING
from pymongo.uri_parser import parse_uri
from typing import Optional
from config.settings import settings
from utils.logger import setup_logger

logger = setup_logger(__name__)

DEFAULT_DB_NAME = "exercise_tracker"


class Database:
    """Database connection manager."""

    def __init__(self, uri: str, db_name: str = ""):
        self.uri = uri
        self.db_name = db_name or resolve_db_name(uri)
        self.client: Optional[AsyncIOMotorClient] = None

    async def connect(self):
        """Create database connection."""
        self.client = AsyncIOMotorClient(self.uri)
        logger.info(f"Connected to MongoDB database '{self.db_name}'")

    async def close(self):
        """Close database connection."""
        if self.client:
            self.client.close()
            self.client = None
            logger.info("Disconnected from MongoDB")

    def get_db(self) -> AsyncIOMotorDatabase:
        """Get database instance."""
        if self.client is None:
            raise RuntimeError("Database is not connected")
        return self.client[self.db_name]


def resolve_db_name(uri: str) -> str:
    """Take the database name from the connection string path."""
    try:
        name = parse_uri(uri).get("database")
    except Exception as e:
        logger.warning(f"Could not parse MongoDB URI: {e}")
        name = None
    return name or DEFAULT_DB_NAME


async def create_indexes(database):
    """Create the indexes the log queries rely on."""
    await database.exercises.create_index([("user_id", ASCENDING), ("date", ASCENDING)])
    logger.info("MongoDB initialized: exercises index created")


async def init_mongo() -> Database:
    """Initialize MongoDB connection and collection indexes."""
    database = Database(settings.mongo_uri, settings.mongo_db_name)
    await database.connect()
    await create_indexes(database.get_db())
    return database


# FastAPI dependencies
def get_database(request: Request) -> AsyncIOMotorDatabase:
    """Get the database opened by the application lifespan."""
    return request.app.state.database.get_db()


def get_users_collection(database=Depends(get_database)):
    """Get users collection."""
    return database.users


def get_exercises_collection(database=Depends(get_database)):
    """Get exercises collection."""
    return database.exercises
