"""Game Queries - filtered listings, filter options and collection export.

Invariants:
    - select_games is side-effect free and never raises a domain error
    - No caching: every call reads the current store state
    - Filter options are sorted; the store may return them in any order
"""

import logging
from datetime import datetime

from game_collection.core.compile_filter import compile_filter
from game_collection.core.domain_types import RecordField
from game_collection.core.filter_spec import FilterSpec, SortSpec
from game_collection.core.game_record import GameRecord, utc_now
from game_collection.core.predicates import MATCH_ALL
from game_collection.core.repository_protocols import GameStore

logger = logging.getLogger(__name__)


async def select_games(store: GameStore, spec: FilterSpec) -> list[GameRecord]:
    """Return the games matching spec in spec.sort order."""
    games = await store.find(compile_filter(spec), spec.sort)
    logger.debug(
        "Selected games",
        extra={"operation": "select_games", "result_count": len(games)},
    )
    return games


async def list_filter_options(store: GameStore) -> dict[str, list[str]]:
    """Distinct genres, platforms, publishers and developers, each sorted."""
    return {
        "genres": sorted(await store.distinct_values(RecordField.GENRES)),
        "platforms": sorted(await store.distinct_values(RecordField.PLATFORMS)),
        "publishers": sorted(await store.distinct_values(RecordField.PUBLISHER)),
        "developers": sorted(await store.distinct_values(RecordField.DEVELOPER)),
    }


async def export_collection(
    store: GameStore, now: datetime | None = None,
) -> dict:
    """Every game in default listing order, wrapped with export metadata."""
    games = await store.find(MATCH_ALL, SortSpec())
    return {
        "export_date": now or utc_now(),
        "total_games": len(games),
        "games": games,
    }
