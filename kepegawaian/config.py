"""Service configuration with pydantic-settings.

Requires: DATABASE_URL
Optional: logging, request deadline and startup behaviour (see fields below).

Usage:
    from kepegawaian.config import get_settings

    settings = get_settings()
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Kepegawaian API settings.

    Only DATABASE_URL is mandatory; everything else has a sensible default.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Required ===

    database_url: str = Field(
        ...,
        description="SQLAlchemy async connection URL",
        examples=[
            "mysql+aiomysql://root:@127.0.0.1:3306/laravel",
            "postgresql+asyncpg://user:pass@db:5432/kepegawaian",
        ],
    )

    # === Logging ===

    service_name: str = Field(
        default="kepegawaian",
        description="Service name for structured logging",
    )
    log_format: Literal["json", "console"] = Field(
        default="console",
        description="Log output format",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )

    # === Database ===

    database_echo: bool = Field(
        default=False,
        description="Echo SQL statements through the sqlalchemy.engine logger",
    )
    query_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Deadline applied to every datastore call made by a request",
    )
    auto_create_tables: bool = Field(
        default=False,
        description="Create missing tables at startup instead of relying on migrations",
    )
    check_database_on_startup: bool = Field(
        default=True,
        description="Refuse to start when the database cannot be reached",
    )

    # === Server ===

    host: str = Field(default="0.0.0.0", description="Bind address")  # noqa: S104
    port: int = Field(default=1324, ge=1, le=65535, description="Bind port")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return upper_v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Validates required env vars on first call.
    Raises ValidationError if DATABASE_URL is missing.
    """
    return Settings()
