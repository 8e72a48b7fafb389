"""API test fixtures - FastAPI app over an in-memory SQLite store.

Invariants:
    - get_game_store overridden to a SqlGameStore on the per-test database
    - Lifespan is not run (httpx ASGITransport does not send lifespan events)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from game_collection.api.dependencies import get_game_store
from game_collection.infrastructure.sql_game_store import SqlGameStore
from game_collection.main import app


@pytest.fixture
async def client(test_session_factory):
    """FastAPI test client with the store dependency overridden."""
    async def override_get_game_store():
        async with test_session_factory() as session:
            yield SqlGameStore(session)

    app.dependency_overrides[get_game_store] = override_get_game_store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def game_payload():
    def _make(**overrides) -> dict:
        data = {
            "title": "Celeste",
            "genres": ["Platformer"],
            "platforms": ["PC", "Switch"],
            "publisher": "Matt Makes Games",
            "developer": "Maddy Makes Games",
            "release_year": 2018,
            "metacritic_score": 92,
            "play_hours": 25,
        }
        data.update(overrides)
        return data
    return _make
