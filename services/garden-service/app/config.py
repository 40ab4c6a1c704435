"""
Configuration module for the garden service.

Centralized configuration management using Pydantic settings.
All values can be overridden via environment variables or a .env file.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings for the garden service.

    Attributes:
        APP_NAME: Display name for the application
        DEBUG: Enable debug mode
        HOST: Server bind address
        PORT: Server port number
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        LOG_JSON: Render logs as JSON instead of console output
        DATABASE_URL: SQLAlchemy connection URL for the plant catalog
        DB_POOL_SIZE: Connection pool size (ignored for SQLite)
        DB_MAX_OVERFLOW: Extra connections allowed beyond the pool size
        DB_POOL_RECYCLE: Seconds after which pooled connections are recycled
        DB_POOL_TIMEOUT: Seconds to wait for a pooled connection
        DB_POOL_PRE_PING: Test connections before handing them out
        QUERY_LOG_THRESHOLD_MS: Queries slower than this are logged
    """

    # Application configuration
    APP_NAME: str = Field(default="Garden Console", description="Display name")
    DEBUG: bool = Field(default=False, description="Enable debug mode")
    HOST: str = Field(default="0.0.0.0", description="Server bind address")
    PORT: int = Field(default=8020, ge=1, le=65535, description="Server port number")

    # Logging configuration
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    LOG_JSON: bool = Field(default=True, description="Emit JSON structured logs")

    # Database configuration
    DATABASE_URL: str = Field(
        default="sqlite:///./garden.db",
        description="SQLAlchemy database URL",
    )
    DB_POOL_SIZE: int = Field(default=20, ge=1)
    DB_MAX_OVERFLOW: int = Field(default=10, ge=0)
    DB_POOL_RECYCLE: int = Field(default=3600, ge=-1)
    DB_POOL_TIMEOUT: int = Field(default=30, ge=1)
    DB_POOL_PRE_PING: bool = Field(default=True)
    QUERY_LOG_THRESHOLD_MS: int = Field(default=100, ge=0)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """Accept log levels in any case."""
        if isinstance(value, str):
            return value.upper()
        return value

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, value: str) -> str:
        """
        Validate that the database URL is usable.

        Raises:
            ValueError: If the URL is empty or has no scheme
        """
        value = value.strip()
        if not value:
            raise ValueError("Database URL cannot be empty")
        if "://" not in value:
            raise ValueError("Database URL must include a scheme, e.g. sqlite:///")
        return value


# Global settings instance
settings = Settings()
