"""Game Commands - create, read, update, delete and toggle-favorite.

Invariants:
    - Payloads are validated before the store is touched; a rejected payload
      leaves the store unchanged
    - Every successful mutation refreshes updated_at strictly forward
    - Unknown ids raise ResourceNotFoundError, never a silent no-op
    - Each mutation is a single store write (replace/insert/delete)

Design Decisions:
    - now is injectable so tests can pin timestamps
    - update/toggle read-then-replace without a lock: a concurrent delete between
      the two surfaces as ResourceNotFoundError from replace
"""

import logging
from datetime import datetime
from typing import Callable

from game_collection.core.domain_types import GameId
from game_collection.core.errors import ResourceNotFoundError
from game_collection.core.game_record import GameRecord, utc_now
from game_collection.core.repository_protocols import GameStore
from game_collection.schemas.game import (
    GameCreate, GameUpdate, parse_game_create, parse_game_update,
)

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


async def get_game(store: GameStore, game_id: GameId) -> GameRecord:
    record = await store.get(game_id)
    if record is None:
        raise ResourceNotFoundError("Game", str(game_id))
    return record


async def create_game(
    store: GameStore, payload: GameCreate | dict, now: Clock = utc_now,
) -> GameRecord:
    if not isinstance(payload, GameCreate):
        payload = parse_game_create(payload)
    record = await store.insert(payload.to_draft(now()))
    logger.info("Game created", extra={"game_id": str(record.id)})
    return record


async def update_game(
    store: GameStore,
    game_id: GameId,
    payload: GameUpdate | dict,
    now: Clock = utc_now,
) -> GameRecord:
    if not isinstance(payload, GameUpdate):
        payload = parse_game_update(payload)
    current = await get_game(store, game_id)
    updated = await store.replace(current.with_changes(payload.changes(), now()))
    logger.info("Game updated", extra={"game_id": str(game_id)})
    return updated


async def delete_game(store: GameStore, game_id: GameId) -> GameRecord:
    record = await store.delete(game_id)
    logger.info("Game deleted", extra={"game_id": str(game_id)})
    return record


async def toggle_favorite(
    store: GameStore, game_id: GameId, now: Clock = utc_now,
) -> GameRecord:
    current = await get_game(store, game_id)
    updated = await store.replace(
        current.with_changes({"favorite": not current.favorite}, now()),
    )
    logger.info(
        f"Game favorite set to {updated.favorite}",
        extra={"game_id": str(game_id)},
    )
    return updated
