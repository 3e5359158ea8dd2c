"""Application settings loaded from environment variables and .env file."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import DEFAULT_PROVIDER, DEFAULT_TIMEOUT


class Settings(BaseSettings):
    """Defaults for the schema-fetch CLI.

    Explicit command-line flags always win over these values.
    """

    model_config = SettingsConfigDict(
        env_prefix="SCHEMA_FETCHER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    provider: str = DEFAULT_PROVIDER
    timeout: str = DEFAULT_TIMEOUT


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
