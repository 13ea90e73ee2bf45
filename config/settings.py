"""Application settings and configuration management."""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables or defaults."""

    DB_PATH: str = Field(default="data/interviews.db")
    ENVIRONMENT: str = "development"
    FRONTEND_URL: str = "http://localhost:5173"

    SESSION_TIME_LIMIT_S: int = Field(default=3600, ge=60)
    STALE_SESSION_HOURS: int = Field(default=24, ge=1)
    DEFAULT_DIFFICULTY: str = "mixed"

    model_config = SettingsConfigDict(env_file=".env", validate_assignment=True, extra="ignore")


settings = Settings()
