"""Collection Stats - computes a fresh StatsSnapshot from store aggregates.

Invariants:
    - Recomputed on every call, nothing cached
    - Sub-queries are issued one after another and are NOT mutually atomic: under
      concurrent writes, total and completed may reflect different store states
    - Empty store -> all zeros and empty group lists, never an error
"""

from game_collection.core.compile_filter import only_flag
from game_collection.core.domain_types import RecordField
from game_collection.core.predicates import MATCH_ALL
from game_collection.core.repository_protocols import GameStore
from game_collection.core.stats_snapshot import (
    StatsSnapshot, rank_by_count, rank_by_key, round_score,
)


async def compute_collection_stats(store: GameStore) -> StatsSnapshot:
    total = await store.count(MATCH_ALL)
    completed = await store.count(only_flag(RecordField.COMPLETED, True))
    favorite = await store.count(only_flag(RecordField.FAVORITE, True))
    total_play_hours = await store.sum(RecordField.PLAY_HOURS)
    average_score = await store.average(RecordField.METACRITIC_SCORE)
    by_genre = await store.group_count(RecordField.GENRES, multi_valued=True)
    by_platform = await store.group_count(RecordField.PLATFORMS, multi_valued=True)
    by_year = await store.group_count(RecordField.RELEASE_YEAR, multi_valued=False)

    return StatsSnapshot(
        total=total,
        completed=completed,
        favorite=favorite,
        total_play_hours=total_play_hours or 0,
        avg_score=round_score(average_score),
        by_genre=rank_by_count(by_genre),
        by_platform=rank_by_count(by_platform),
        by_year=rank_by_key(by_year),
    )
