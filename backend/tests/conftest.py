"""Root conftest - shared test configuration and store fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - The parametrized `store` fixture runs a test once per GameStore adapter
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("STORAGE_BACKEND", "sql")

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

import game_collection.models  # noqa: F401
from game_collection.db.base import Base
from game_collection.infrastructure.memory_game_store import MemoryGameStore
from game_collection.infrastructure.sql_game_store import SqlGameStore


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def sql_store(test_session_factory):
    async with test_session_factory() as session:
        yield SqlGameStore(session)


@pytest.fixture
def memory_store():
    return MemoryGameStore()


@pytest.fixture(params=["memory", "sql"])
async def store(request, test_session_factory):
    """Each adapter in turn; tests using it must hold for both."""
    if request.param == "memory":
        yield MemoryGameStore()
        return
    async with test_session_factory() as session:
        yield SqlGameStore(session)
