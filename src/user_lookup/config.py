"""Application configuration."""

import os

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str = Field(
        validation_alias=AliasChoices("supabase_url", "next_public_supabase_url")
    )
    supabase_key: str = Field(
        validation_alias=AliasChoices(
            "supabase_key", "next_public_supabase_anon_key"
        )
    )
    test_user_id: str | None = None
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
        populate_by_name=True,
    )


def normalize_user_id(raw: str | None) -> str | None:
    """Return the user id unchanged, or None when it is missing or empty."""
    return raw or None
