"""
Configuration Settings
======================

Centralized configuration using Pydantic V2 Settings.

The MySQL fields form the connection descriptor consumed by
``cms.database.pool.build_connection_string``.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cms.core.constants import (
    DEFAULT_DB_SCHEME,
    DEFAULT_POOL_SIZE,
    DEFAULT_POOL_TIMEOUT,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_env: str = Field(default="development")
    app_debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # ========================================
    # Connection descriptor
    # ========================================

    mysql_username: str = Field(default="cms")
    mysql_password: str = Field(default="")
    mysql_url: str = Field(default="localhost")
    mysql_port: int = Field(default=3306, ge=1, le=65535)
    mysql_database: str = Field(default="cms")
    db_scheme: str = Field(default=DEFAULT_DB_SCHEME)

    # Full URI override, used as-is when set (e.g. sqlite for local runs)
    database_url: Optional[str] = Field(default=None)

    # ========================================
    # Pool sizing
    # ========================================

    db_pool_size: int = Field(default=DEFAULT_POOL_SIZE, ge=1)
    db_pool_timeout: float = Field(default=DEFAULT_POOL_TIMEOUT, gt=0.0)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process."""
    return Settings()
