"""Game Routes - CRUD, filtered listing and favorite toggling.

Invariants:
    - GET /games never fails on odd filter values: unknown sort -> created_at,
      unknown order -> desc, unrecognised booleans -> false, blanks ignored
    - Payloads validated by Pydantic before reaching services
    - Unknown ids -> 404 via ResourceNotFoundError and the global handler
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from game_collection.api.dependencies import get_game_store
from game_collection.core.domain_types import GameId
from game_collection.core.filter_spec import build_filter_spec
from game_collection.core.repository_protocols import GameStore
from game_collection.schemas.collection import DeleteGameResponse
from game_collection.schemas.game import GameCreate, GameResponse, GameUpdate
from game_collection.services import game_commands
from game_collection.services.game_queries import select_games

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/games", tags=["games"])


@router.post(
    "", response_model=GameResponse, status_code=status.HTTP_201_CREATED,
)
async def create_game(
    body: GameCreate, store: GameStore = Depends(get_game_store),
):
    """Add a game to the collection."""
    record = await game_commands.create_game(store, body)
    return GameResponse.model_validate(record)


@router.get("", response_model=list[GameResponse])
async def list_games(
    genre: list[str] | None = Query(None),
    platform: list[str] | None = Query(None),
    completed: str | None = Query(None),
    favorite: str | None = Query(None),
    publisher: str | None = Query(None),
    search: str | None = Query(None),
    sort: str | None = Query(None),
    order: str | None = Query(None),
    store: GameStore = Depends(get_game_store),
):
    """List games matching every given criterion."""
    spec = build_filter_spec(
        genres=genre, platforms=platform,
        completed=completed, favorite=favorite,
        publisher=publisher, search=search,
        sort=sort, order=order,
    )
    games = await select_games(store, spec)
    return [GameResponse.model_validate(g) for g in games]


@router.get("/{game_id}", response_model=GameResponse)
async def get_game(
    game_id: UUID, store: GameStore = Depends(get_game_store),
):
    record = await game_commands.get_game(store, GameId(game_id))
    return GameResponse.model_validate(record)


@router.put("/{game_id}", response_model=GameResponse)
async def update_game(
    game_id: UUID,
    body: GameUpdate,
    store: GameStore = Depends(get_game_store),
):
    """Apply a partial update; only fields present in the body change."""
    record = await game_commands.update_game(store, GameId(game_id), body)
    return GameResponse.model_validate(record)


@router.delete("/{game_id}", response_model=DeleteGameResponse)
async def delete_game(
    game_id: UUID, store: GameStore = Depends(get_game_store),
):
    record = await game_commands.delete_game(store, GameId(game_id))
    return DeleteGameResponse(
        message="Game deleted", game=GameResponse.model_validate(record),
    )


@router.post("/{game_id}/favorite", response_model=GameResponse)
async def toggle_favorite(
    game_id: UUID, store: GameStore = Depends(get_game_store),
):
    """Flip the favorite flag."""
    record = await game_commands.toggle_favorite(store, GameId(game_id))
    return GameResponse.model_validate(record)
