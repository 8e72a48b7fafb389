"""Domain Types - identity types and enums shared by the filter and stats engines.

Invariants:
    - GameId wraps UUID, never a bare string in domain logic
    - RecordField lists every field a predicate, sort or aggregate may name
    - SortField is the subset of RecordField a listing can be ordered by

Design Decisions:
    - NewType over wrapper classes: zero runtime cost
    - str Enums: serialize to JSON and compare against query strings directly
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

GameId = NewType("GameId", UUID)


# ─── Bounds ──────────────────────────────────────────────────────

MIN_RELEASE_YEAR = 1970
MIN_METACRITIC_SCORE = 0
MAX_METACRITIC_SCORE = 100
MAX_TITLE_LENGTH = 300
MAX_COMPANY_LENGTH = 200
MAX_NAME_LENGTH = 100


# ─── Enums ───────────────────────────────────────────────────────

class RecordField(str, Enum):
    """Fields of a game record addressable by predicates and aggregates."""
    TITLE = "title"
    GENRES = "genres"
    PLATFORMS = "platforms"
    PUBLISHER = "publisher"
    DEVELOPER = "developer"
    RELEASE_YEAR = "release_year"
    METACRITIC_SCORE = "metacritic_score"
    PLAY_HOURS = "play_hours"
    COMPLETED = "completed"
    FAVORITE = "favorite"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"


MULTI_VALUED_FIELDS = frozenset({RecordField.GENRES, RecordField.PLATFORMS})
TEXT_FIELDS = frozenset({
    RecordField.TITLE, RecordField.PUBLISHER, RecordField.DEVELOPER,
})


class SortField(str, Enum):
    """Listing sort keys. Values match the RecordField they order by."""
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    TITLE = "title"
    PUBLISHER = "publisher"
    DEVELOPER = "developer"
    RELEASE_YEAR = "release_year"
    METACRITIC_SCORE = "metacritic_score"
    PLAY_HOURS = "play_hours"
    COMPLETED = "completed"
    FAVORITE = "favorite"

    @property
    def record_field(self) -> RecordField:
        return RecordField(self.value)


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class StorageBackend(str, Enum):
    """Which GameStore adapter the API wires in."""
    SQL = "sql"
    MEMORY = "memory"
