"""Settings - environment overrides and URL normalisation."""

from game_collection.config import Settings
from game_collection.core.domain_types import StorageBackend


def test_postgres_url_gets_asyncpg_driver(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@host:5432/db")
    assert Settings().database_url == "postgresql+asyncpg://u:p@host:5432/db"


def test_explicit_driver_url_is_kept(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    assert Settings().database_url == "sqlite+aiosqlite:///:memory:"


def test_storage_backend_from_environment(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    assert Settings().storage_backend is StorageBackend.MEMORY
