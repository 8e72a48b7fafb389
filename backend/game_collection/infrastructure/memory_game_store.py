"""In-Memory Game Store - process-local GameStore adapter.

Invariants:
    - Natural iteration order is insertion order; replace keeps a record's position
    - Predicates evaluated with their own matches(); ordering via core/order_records.py
    - group_count on a multi-valued field counts each member of each record once

Design Decisions:
    - Plain dict keyed by GameId: single event loop, no await points inside a
      mutation, so no lock is needed
    - Used by the "memory" storage backend and as the reference adapter in tests
"""

import logging
import uuid
from collections import Counter

from game_collection.core.domain_types import GameId, RecordField
from game_collection.core.errors import ResourceNotFoundError
from game_collection.core.filter_spec import SortSpec
from game_collection.core.game_record import GameDraft, GameRecord
from game_collection.core.order_records import order_records
from game_collection.core.predicates import GamePredicate
from game_collection.core.stats_snapshot import GroupCount

logger = logging.getLogger(__name__)


class MemoryGameStore:
    """GameStore backed by a dict."""

    def __init__(self, records: list[GameRecord] | None = None):
        self._records: dict[GameId, GameRecord] = {}
        for record in records or []:
            self._records[record.id] = record

    def _matching(self, predicate: GamePredicate) -> list[GameRecord]:
        return [r for r in self._records.values() if predicate.matches(r)]

    async def find(
        self, predicate: GamePredicate, sort: SortSpec,
    ) -> list[GameRecord]:
        return order_records(self._matching(predicate), sort)

    async def count(self, predicate: GamePredicate) -> int:
        return len(self._matching(predicate))

    async def distinct_values(self, field: RecordField) -> set[str]:
        values: set[str] = set()
        for record in self._records.values():
            value = record.value_of(field)
            if isinstance(value, tuple):
                values.update(value)
            elif value is not None:
                values.add(value)
        return values

    async def group_count(
        self, field: RecordField, multi_valued: bool,
    ) -> list[GroupCount]:
        counts: Counter = Counter()
        for record in self._records.values():
            value = record.value_of(field)
            if multi_valued:
                for member in value:
                    counts[member] += 1
            else:
                counts[value] += 1
        return [GroupCount(key, n) for key, n in counts.items()]

    async def sum(self, field: RecordField) -> float:
        return sum(
            (r.value_of(field) or 0 for r in self._records.values()), 0,
        )

    async def average(self, field: RecordField) -> float | None:
        present = [
            r.value_of(field) for r in self._records.values()
            if r.value_of(field) is not None
        ]
        if not present:
            return None
        return sum(present) / len(present)

    async def get(self, game_id: GameId) -> GameRecord | None:
        return self._records.get(game_id)

    async def insert(self, draft: GameDraft) -> GameRecord:
        record = GameRecord.from_draft(GameId(uuid.uuid4()), draft)
        self._records[record.id] = record
        return record

    async def replace(self, record: GameRecord) -> GameRecord:
        if record.id not in self._records:
            raise ResourceNotFoundError("Game", str(record.id))
        self._records[record.id] = record
        return record

    async def delete(self, game_id: GameId) -> GameRecord:
        record = self._records.pop(game_id, None)
        if record is None:
            raise ResourceNotFoundError("Game", str(game_id))
        return record


# Singleton for the "memory" storage backend
_memory_store: MemoryGameStore | None = None


def get_memory_store() -> MemoryGameStore:
    global _memory_store
    if _memory_store is None:
        logger.info("Using in-memory game store")
        _memory_store = MemoryGameStore()
    return _memory_store
