"""
Application configuration loaded from environment variables and .env.

The module-level `settings` instance is built once at import time. Changing
the process environment afterwards (e.g. adding ENCRYPTION_KEY) does not
affect a running process; assign `settings.encryption_key` or restart.
Encryption code reads `settings.encryption_key` on every call.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Literal, Optional


# Shorter master keys leave the field encryption disabled
MIN_ENCRYPTION_KEY_LENGTH = 16


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str = "sqlite:///./expenses.db"

    # Field encryption (names, card numbers, GL descriptions)
    encryption_key: Optional[str] = None

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "text"

    # Environment
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = True


# Global settings instance
settings = Settings()
