"""Application configuration using pydantic-settings."""

from datetime import timedelta
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

DEV_TOKEN_SYMMETRIC_KEY = "dev-token-key-change-me-32-chars"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Environment
    APP_ENV: str = "dev"

    # Token Configuration
    TOKEN_TYPE: Literal["jwt", "paseto"] = "paseto"
    TOKEN_SYMMETRIC_KEY: str = DEV_TOKEN_SYMMETRIC_KEY
    ACCESS_TOKEN_DURATION: timedelta = timedelta(minutes=15)

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


# Global settings instance
settings = Settings()

# Validate production token key
if settings.APP_ENV == "production" and settings.TOKEN_SYMMETRIC_KEY == DEV_TOKEN_SYMMETRIC_KEY:
    raise ValueError(
        "TOKEN_SYMMETRIC_KEY must be changed from the default dev key in production environment"
    )
