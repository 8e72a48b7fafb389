"""API Dependencies - wires the configured GameStore adapter into routes.

Invariants:
    - SQL backend: one SqlGameStore per request over a fresh session
    - Memory backend: the process-wide MemoryGameStore singleton
"""

from typing import AsyncGenerator

from game_collection.config import get_settings
from game_collection.core.domain_types import StorageBackend
from game_collection.core.repository_protocols import GameStore
from game_collection.infrastructure import database
from game_collection.infrastructure.memory_game_store import get_memory_store
from game_collection.infrastructure.sql_game_store import SqlGameStore


async def get_game_store() -> AsyncGenerator[GameStore, None]:
    """FastAPI dependency yielding the store for this request."""
    if get_settings().storage_backend == StorageBackend.MEMORY:
        yield get_memory_store()
        return
    if not database.db_manager:
        raise RuntimeError("Database not initialized")
    async with database.db_manager.session() as session:
        yield SqlGameStore(session)
