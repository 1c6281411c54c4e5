"""
Configuration settings for the application.
"""
import logging
from pathlib import Path
from typing import Any, List, Optional, Union

from dotenv import load_dotenv
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator

logger = logging.getLogger(__name__)

# Load environment variables from .env file if it exists
env_path = Path(__file__).resolve().parent.parent.parent / ".env"

if env_path.exists():
    load_dotenv(dotenv_path=env_path)
    logger.debug(f"Loaded .env from: {env_path}")


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """
    # API configuration
    API_PORT: int = Field(default=8000)
    API_HOST: str = Field(default="0.0.0.0")

    # Database configuration
    DB_HOST: str = Field(default="localhost")
    DB_PORT: str = Field(default="5432")
    DB_USER: str = Field(default="postgres")
    DB_PASSWORD: str = Field(default="")
    DB_NAME: str = Field(default="blog")

    # Railway / Heroku style single URL, takes precedence over DB_*
    DATABASE_URL: Optional[str] = None
    DB_URI: Optional[str] = Field(default=None, validate_default=True)

    # CORS configuration
    CORS_ORIGINS: Union[str, List[str]] = Field(default="*")

    # JWT configuration
    JWT_SECRET_KEY: str = Field(...)
    JWT_ALGORITHM: str = Field(default="HS256")
    JWT_EXPIRATION_MINUTES: int = Field(default=60)

    # Pagination
    DEFAULT_PAGE_SIZE: int = Field(default=10, ge=1)
    MAX_PAGE_SIZE: int = Field(default=100, ge=1)

    LOG_LEVEL: str = Field(default="INFO")

    @field_validator("DB_URI", mode="before")
    def assemble_db_uri(cls, v: Optional[str], info: Any) -> str:
        """
        Assemble the async database URI if not provided.
        """
        if v is not None:
            return v

        values = info.data
        database_url = values.get("DATABASE_URL")
        if database_url:
            # Convert postgres:// to postgresql+asyncpg:// if needed
            if database_url.startswith("postgres://"):
                return database_url.replace("postgres://", "postgresql+asyncpg://", 1)
            if database_url.startswith("postgresql://"):
                return database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
            return database_url

        user = values.get("DB_USER")
        password = values.get("DB_PASSWORD")
        host = values.get("DB_HOST")
        port = values.get("DB_PORT")
        name = values.get("DB_NAME")

        return f"postgresql+asyncpg://{user}:{password}@{host}:{port}/{name}"

    @field_validator("CORS_ORIGINS", mode="before")
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        """
        Parse a comma-separated string into a list of CORS origins.
        """
        if isinstance(v, str) and v != "*":
            return v.split(",")
        return v

    @property
    def sync_db_uri(self) -> str:
        """Database URI with the async driver stripped, for Alembic and scripts."""
        return self.DB_URI.replace("+asyncpg", "").replace("+aiosqlite", "")

    class Config:
        """Config for the BaseSettings class."""
        env_file = ".env"
        case_sensitive = True
        extra = 'ignore'  # Ignore extra fields from environment


# Create settings object
settings = Settings()
