"""
Configuration loaded from environment variables.

Defaults target a local server and the ``test_db.test_collection``
namespace, so the demonstration runs without any environment set.
"""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings from ``CATALOG_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        extra="ignore",
    )

    # MongoDB
    mongo_uri: str = "mongodb://localhost:27017"
    timeout_ms: int = 5000

    # Demonstration namespace
    database: str = "test_db"
    collection: str = "test_collection"

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
