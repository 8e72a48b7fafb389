"""Game Schemas - Pydantic models that validate game payloads at the system boundary.

Invariants:
    - GameCreate: title/publisher/developer stripped and non-empty; genres/platforms
      non-empty after stripping blanks and duplicates (first occurrence order kept);
      1970 <= release_year <= current year; metacritic_score 0-100; play_hours >= 0
    - Text lengths fit the storage columns (title 300, publisher/developer 200,
      each genre/platform name 100), so overlong input is a 400, not a store error
    - GameUpdate: same per-field rules, every field optional; explicit null is only
      accepted for metacritic_score (clears it)
    - parse_game_create/parse_game_update raise GameValidationError with one
      FieldViolation per failing field, never a bare pydantic ValidationError

Design Decisions:
    - field_validator for transforms (strip, dedupe) so the models stay declarative
    - current year read at validation time, not import time
"""

from datetime import datetime, timezone
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from game_collection.core.domain_types import (
    MAX_COMPANY_LENGTH, MAX_METACRITIC_SCORE, MAX_NAME_LENGTH, MAX_TITLE_LENGTH,
    MIN_METACRITIC_SCORE, MIN_RELEASE_YEAR,
)
from game_collection.core.errors import FieldViolation, GameValidationError
from game_collection.core.game_record import GameDraft

_REQUIRED_FIELDS = (
    "title", "genres", "platforms", "publisher", "developer",
    "release_year", "play_hours", "completed", "favorite",
)


def _strip_required(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("must not be empty or whitespace")
    return v


def _clean_names(v: list[str]) -> list[str]:
    names: list[str] = []
    for name in v:
        name = name.strip()
        if len(name) > MAX_NAME_LENGTH:
            raise ValueError(
                f"each value must be at most {MAX_NAME_LENGTH} characters"
            )
        if name and name not in names:
            names.append(name)
    if not names:
        raise ValueError("at least one non-empty value is required")
    return names


def _check_release_year(v: int) -> int:
    current_year = datetime.now(timezone.utc).year
    if v > current_year:
        raise ValueError(f"must be less than or equal to {current_year}")
    return v


class GameCreate(BaseModel):
    """Game creation payload."""
    title: str = Field(max_length=MAX_TITLE_LENGTH)
    genres: list[str] = Field(min_length=1)
    platforms: list[str] = Field(min_length=1)
    publisher: str = Field(max_length=MAX_COMPANY_LENGTH)
    developer: str = Field(max_length=MAX_COMPANY_LENGTH)
    release_year: int = Field(ge=MIN_RELEASE_YEAR)
    metacritic_score: int | None = Field(
        None, ge=MIN_METACRITIC_SCORE, le=MAX_METACRITIC_SCORE,
    )
    play_hours: float = Field(0, ge=0)
    completed: bool = False
    favorite: bool = False

    @field_validator("title", "publisher", "developer")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return _strip_required(v)

    @field_validator("genres", "platforms")
    @classmethod
    def clean_names(cls, v: list[str]) -> list[str]:
        return _clean_names(v)

    @field_validator("release_year")
    @classmethod
    def release_year_not_in_future(cls, v: int) -> int:
        return _check_release_year(v)

    def to_draft(self, now: datetime) -> GameDraft:
        return GameDraft(
            title=self.title,
            genres=tuple(self.genres),
            platforms=tuple(self.platforms),
            publisher=self.publisher,
            developer=self.developer,
            release_year=self.release_year,
            metacritic_score=self.metacritic_score,
            play_hours=self.play_hours,
            completed=self.completed,
            favorite=self.favorite,
            created_at=now,
            updated_at=now,
        )


class GameUpdate(BaseModel):
    """Partial update payload. Only the fields actually sent are applied."""
    title: str | None = Field(None, max_length=MAX_TITLE_LENGTH)
    genres: list[str] | None = Field(None, min_length=1)
    platforms: list[str] | None = Field(None, min_length=1)
    publisher: str | None = Field(None, max_length=MAX_COMPANY_LENGTH)
    developer: str | None = Field(None, max_length=MAX_COMPANY_LENGTH)
    release_year: int | None = Field(None, ge=MIN_RELEASE_YEAR)
    metacritic_score: int | None = Field(
        None, ge=MIN_METACRITIC_SCORE, le=MAX_METACRITIC_SCORE,
    )
    play_hours: float | None = Field(None, ge=0)
    completed: bool | None = None
    favorite: bool | None = None

    @field_validator(*_REQUIRED_FIELDS, mode="before")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("may not be null")
        return v

    @field_validator("title", "publisher", "developer")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return _strip_required(v)

    @field_validator("genres", "platforms")
    @classmethod
    def clean_names(cls, v: list[str]) -> list[str]:
        return _clean_names(v)

    @field_validator("release_year")
    @classmethod
    def release_year_not_in_future(cls, v: int) -> int:
        return _check_release_year(v)

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class GameResponse(BaseModel):
    """Public representation of a stored game."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    genres: list[str]
    platforms: list[str]
    publisher: str
    developer: str
    release_year: int
    metacritic_score: int | None
    play_hours: float
    completed: bool
    favorite: bool
    created_at: datetime
    updated_at: datetime


def violations_from(exc: ValidationError) -> list[FieldViolation]:
    """Flatten a pydantic ValidationError into field-level violations."""
    return [
        FieldViolation(
            field=".".join(str(loc) for loc in e["loc"]) or "payload",
            message=e["msg"],
            type=e["type"],
        )
        for e in exc.errors()
    ]


def parse_game_create(data: dict) -> GameCreate:
    try:
        return GameCreate.model_validate(data)
    except ValidationError as e:
        raise GameValidationError(violations_from(e)) from e


def parse_game_update(data: dict) -> GameUpdate:
    try:
        return GameUpdate.model_validate(data)
    except ValidationError as e:
        raise GameValidationError(violations_from(e)) from e
