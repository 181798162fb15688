"""
Configuration settings for the Atlas CRUD demo.

Uses Pydantic Settings to load the MongoDB connection string and logging
options from environment variables or a local `.env` file. The connection
string is not validated here; a missing or malformed value surfaces as a
connection failure when the client is created.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database
    mongodb_uri: Optional[str] = Field(None, alias="MONGODB_URI")
    mongodb_server_selection_timeout_ms: int = Field(
        10_000, alias="MONGODB_SERVER_SELECTION_TIMEOUT_MS"
    )

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
