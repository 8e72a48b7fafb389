"""Game Record - the in-core representation of one tracked game.

Invariants:
    - genres and platforms are non-empty tuples of distinct names (enforced upstream
      by the validation schemas, preserved here as tuples so records stay hashable)
    - created_at <= updated_at, and every mutation strictly increases updated_at
    - All timestamps are timezone-aware UTC

Design Decisions:
    - Frozen dataclass: mutations produce a new record via dataclasses.replace,
      the store decides when the new version becomes visible
    - GameDraft carries everything except the store-assigned id
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta, timezone

from game_collection.core.domain_types import GameId, RecordField

_TICK = timedelta(microseconds=1)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes (SQLite drops tzinfo on the way back)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def next_updated_at(previous: datetime, now: datetime) -> datetime:
    """Return a modification timestamp strictly after previous."""
    previous = ensure_utc(previous)
    now = ensure_utc(now)
    if now <= previous:
        return previous + _TICK
    return now


@dataclass(frozen=True)
class GameDraft:
    """A validated game that has not been assigned an id yet."""
    title: str
    genres: tuple[str, ...]
    platforms: tuple[str, ...]
    publisher: str
    developer: str
    release_year: int
    metacritic_score: int | None = None
    play_hours: float = 0.0
    completed: bool = False
    favorite: bool = False
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime | None = None

    def __post_init__(self):
        if self.updated_at is None:
            object.__setattr__(self, "updated_at", self.created_at)


@dataclass(frozen=True)
class GameRecord:
    """A persisted game."""
    id: GameId
    title: str
    genres: tuple[str, ...]
    platforms: tuple[str, ...]
    publisher: str
    developer: str
    release_year: int
    metacritic_score: int | None
    play_hours: float
    completed: bool
    favorite: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_draft(cls, game_id: GameId, draft: GameDraft) -> "GameRecord":
        return cls(
            id=game_id,
            title=draft.title,
            genres=tuple(draft.genres),
            platforms=tuple(draft.platforms),
            publisher=draft.publisher,
            developer=draft.developer,
            release_year=draft.release_year,
            metacritic_score=draft.metacritic_score,
            play_hours=draft.play_hours,
            completed=draft.completed,
            favorite=draft.favorite,
            created_at=draft.created_at,
            updated_at=draft.updated_at,
        )

    def value_of(self, record_field: RecordField):
        return getattr(self, record_field.value)

    def with_changes(self, changes: dict, now: datetime) -> "GameRecord":
        """Apply a partial update and refresh updated_at.

        id and created_at are never touched even if present in changes.
        """
        changes = {
            k: v for k, v in changes.items() if k not in ("id", "created_at", "updated_at")
        }
        for key in ("genres", "platforms"):
            if key in changes:
                changes[key] = tuple(changes[key])
        return replace(
            self, **changes, updated_at=next_updated_at(self.updated_at, now),
        )

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "title": self.title,
            "genres": list(self.genres),
            "platforms": list(self.platforms),
            "publisher": self.publisher,
            "developer": self.developer,
            "release_year": self.release_year,
            "metacritic_score": self.metacritic_score,
            "play_hours": self.play_hours,
            "completed": self.completed,
            "favorite": self.favorite,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
