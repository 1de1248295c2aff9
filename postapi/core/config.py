from typing import Literal

from pydantic import HttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "postapi"
    ENVIRONMENT: Literal["local", "staging", "production"] = "production"
    LOG_LEVEL: str = "INFO"
    SENTRY_DSN: HttpUrl | None = None

    HOST: str = "0.0.0.0"
    PORT: int = 8011

    DATABASE_URL: str

    # Connection pool (SQLAlchemy QueuePool, pre-ping on checkout)
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 0
    DB_POOL_TIMEOUT: float = 30.0
    DB_POOL_RECYCLE: int = 1800


def get_settings() -> Settings:
    """Load settings from env / .env. Raises ValidationError when DATABASE_URL is missing."""
    return Settings()  # type: ignore[call-arg]
