"""
Application configuration for the request collections service.

Settings are read from environment variables (prefixed with
``REQUEST_COLLECTIONS_``) or from a local ``.env`` file.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="REQUEST_COLLECTIONS_",
        case_sensitive=False,
    )

    # Database
    database_url: str = "sqlite:///./request_collections.db"
    database_echo: bool = False

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
