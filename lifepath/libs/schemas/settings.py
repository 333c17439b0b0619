"""Application settings management leveraging pydantic v2."""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

if os.getenv("ENV", "development") in {"development", "dev", "local"}:
    try:
        from dotenv import load_dotenv

        load_dotenv(override=False)
    except ImportError:
        # Containers should not rely on .env presence.
        pass


class AppSettings(BaseSettings):
    """Typed configuration sourced from environment variables."""

    app_name: str = Field(
        default="LifePath",
        validation_alias=AliasChoices("APP_NAME", "LIFEPATH_APP_NAME"),
    )
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("ENVIRONMENT", "LIFEPATH_ENVIRONMENT"),
    )
    min_age: int = Field(
        default=8,
        validation_alias=AliasChoices("MIN_AGE", "LIFEPATH_MIN_AGE"),
    )
    max_age: int = Field(
        default=70,
        validation_alias=AliasChoices("MAX_AGE", "LIFEPATH_MAX_AGE"),
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"],
        validation_alias=AliasChoices("CORS_ORIGINS", "LIFEPATH_CORS_ORIGINS"),
    )
    enable_metrics: bool = Field(
        default=True,
        validation_alias=AliasChoices("ENABLE_METRICS", "LIFEPATH_ENABLE_METRICS"),
    )

    model_config = SettingsConfigDict(
        env_file=(".env", "lifepath/.env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def age_bounds(self) -> tuple[int, int]:
        """Inclusive age range accepted by the analyze endpoint."""

        return self.min_age, self.max_age


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Load environment variables and return a cached settings instance."""

    return AppSettings()


__all__ = ["AppSettings", "get_settings"]
