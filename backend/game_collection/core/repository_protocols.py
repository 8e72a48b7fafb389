"""Boundary Protocols - the contract between the collection engines and a record store.

Invariants:
    - Core NEVER imports from the shell; stores are injected by services/api
    - find returns records in the total order defined by core/order_records.py
    - group_count increments once per record per member of a multi-valued field
    - sum returns 0 and average returns None over an empty domain
    - replace/delete raise ResourceNotFoundError when the id is absent
    - No cross-call atomicity: two calls may observe different store states

Design Decisions:
    - Protocol over ABC: structural subtyping, one adapter per backend, no hierarchy
    - Async methods: implementations do IO; the core functions that decide what to
      ask (compile_filter, rank_by_count, ...) stay synchronous and pure
"""

from typing import Protocol

from game_collection.core.domain_types import GameId, RecordField
from game_collection.core.filter_spec import SortSpec
from game_collection.core.game_record import GameDraft, GameRecord
from game_collection.core.predicates import GamePredicate
from game_collection.core.stats_snapshot import GroupCount


class GameStore(Protocol):
    """Contract for game persistence and aggregation - implemented by the shell."""

    async def find(
        self, predicate: GamePredicate, sort: SortSpec,
    ) -> list[GameRecord]: ...

    async def count(self, predicate: GamePredicate) -> int: ...

    async def distinct_values(self, field: RecordField) -> set[str]: ...

    async def group_count(
        self, field: RecordField, multi_valued: bool,
    ) -> list[GroupCount]: ...

    async def sum(self, field: RecordField) -> float: ...

    async def average(self, field: RecordField) -> float | None: ...

    async def get(self, game_id: GameId) -> GameRecord | None: ...

    async def insert(self, draft: GameDraft) -> GameRecord: ...

    async def replace(self, record: GameRecord) -> GameRecord: ...

    async def delete(self, game_id: GameId) -> GameRecord: ...
