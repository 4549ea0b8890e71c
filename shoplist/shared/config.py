"""
Centralized configuration for shoplist.

All settings are loaded from environment variables (prefixed SHOPLIST_)
or a local .env file, with defaults that match the development data store.
"""

from functools import lru_cache
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SHOPLIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Remote data store
    api_base_url: str = "http://localhost:3001"
    request_timeout: float = 10.0  # seconds

    # Durable token storage
    token_storage_path: Path = Path.home() / ".shoplist" / "session.json"
    token_storage_key: str = "authToken"

    # Passwords
    password_hash_rounds: int = 10
    # Off by default: login accepts any password for a known email.
    verify_passwords: bool = False

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
