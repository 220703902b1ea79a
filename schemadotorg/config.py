"""
Configuration management for the schema.org JSON-LD service.
Uses pydantic-settings for environment-based configuration.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Settings
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "schema.org JSON-LD Service"
    DEBUG: bool = False

    # JSON-LD
    JSONLD_CONTEXT: str = "https://schema.org"

    # Behaviour when a mapping path does not resolve against the model:
    # strict raises, null emits null, omit drops the key
    PATH_POLICY: Literal["strict", "null", "omit"] = "strict"

    # Pretty-print JSON-LD HTTP responses (script tags are always compact)
    JSON_INDENT: int | None = None

    # Logging
    LOG_LEVEL: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.
    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
