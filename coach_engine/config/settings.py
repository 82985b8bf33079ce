"""Application configuration settings."""
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    # Application
    app_name: str = "Coach Engine"
    debug: bool = False

    # Logging
    log_json: bool = True  # JSON lines for ingestion; console renderer otherwise

    # Planning constants file (progression percentages, nutrition factors, windows)
    planning_config_path: Path | None = None

    class Config:
        env_prefix = "COACH_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
