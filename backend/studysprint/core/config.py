"""Application configuration managed via environment variables."""
from functools import lru_cache
from typing import List
from uuid import UUID

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "StudySprint API"
    debug: bool = False
    log_level: str = "INFO"
    database_url: str = "sqlite:///./studysprint.db"
    cors_origins: List[str] = ["http://localhost:5173", "http://localhost:3000"]
    opik_enabled: bool = False
    opik_api_key: str | None = None
    opik_project: str = "studysprint"
    # Authentication is stubbed: every request acts as this user.
    local_user_id: UUID = UUID("00000000-0000-0000-0000-000000000001")
    default_timezone: str = "America/Sao_Paulo"
    default_reminder_time: str = "09:00"
    default_streak_min_tasks: int = 1
    export_version: str = "1.0.0"


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()


settings = get_settings()
