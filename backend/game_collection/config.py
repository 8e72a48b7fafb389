"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - All connection strings come from environment variables or .env
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - Defaults for every setting so the API starts with docker-compose as-is
    - storage_backend="memory" runs without a database (demos, local tinkering)
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from game_collection.core.domain_types import StorageBackend


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Storage
    storage_backend: StorageBackend = StorageBackend.SQL

    # Database
    database_url: str = (
        "postgresql+asyncpg://games:games@db:5432/game_collection"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting platforms hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # API
    cors_origins: list[str] = ["http://localhost:3001"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
