"""Game Collection API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map GameCollectionError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan when the SQL backend is selected
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from game_collection.api.error_handlers import register_error_handlers
from game_collection.api.routes import collection, games, health
from game_collection.config import get_settings
from game_collection.core.domain_types import StorageBackend
from game_collection.infrastructure import database
from game_collection.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if settings.storage_backend == StorageBackend.SQL:
        database.init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
    logger.info(
        f"Game Collection API started ({settings.storage_backend.value} store)",
    )
    yield
    if database.db_manager:
        await database.db_manager.dispose()
    logger.info("Game Collection API shutting down")


app = FastAPI(
    title="Game Collection API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(games.router)
app.include_router(collection.router)

register_error_handlers(app)
