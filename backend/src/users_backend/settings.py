"""Application-wide configuration loaded from the environment."""

from __future__ import annotations

from functools import cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class BackendSettings(BaseSettings):
    """Centralized settings for the users backend service."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    database_url: str = "sqlite:///./users.db"
    database_create_schema: bool = True
    storage_backend: Literal["sql", "memory"] = "sql"
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    request_timeout_seconds: float = 15.0
    distinct_not_found: bool = False
    log_level: str = "INFO"
    log_json: bool = False


@cache
def get_settings() -> BackendSettings:
    """Return the cached settings instance."""

    return BackendSettings()


settings = get_settings()

__all__ = ["BackendSettings", "get_settings", "settings"]
