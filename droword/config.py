"""Application configuration management."""
from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global application settings loaded from environment variables."""

    PROJECT_NAME: str = "Droword"
    API_V1_STR: str = "/api/v1"
    DEBUG: bool = False

    DATABASE_URL: str = Field(
        "sqlite:///./droword.db",
        description="SQLAlchemy database URL",
    )

    BACKEND_CORS_ORIGINS: List[str] = Field(
        default_factory=lambda: ["http://localhost", "http://localhost:3000"],
        description="Allowed CORS origins",
    )

    TIMEZONE: str = Field(
        "UTC", description="IANA time zone used for the learner's calendar day boundary"
    )
    RELEARN_DELAY_MINUTES: int = Field(
        10, ge=0, description="Delay before a lapsed word becomes due again"
    )
    REINSERT_OFFSET: int = Field(
        2, ge=1, description="Positions ahead a lapsed word is re-queued within a session"
    )

    model_config = SettingsConfigDict(
        env_file=Path(__file__).resolve().parent.parent / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


settings = get_settings()
