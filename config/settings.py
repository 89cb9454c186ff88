"""Application settings using Pydantic Settings."""

from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database Configuration
    mongo_uri: str = "mongodb://localhost:27017/exercise_tracker"
    # Empty means "take it from the URI path"
    mongo_db_name: str = ""

    # Application Configuration
    app_name: str = "Exercise Tracker"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 3000

    # CORS Configuration
    cors_origins: List[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = Settings()
