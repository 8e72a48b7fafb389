"""Game ORM - persists one tracked game plus its genre and platform memberships.

Invariants:
    - id is a UUID primary key assigned on insert
    - metacritic_score is the only nullable column
    - genres/platforms live in child tables, one row per member, ordered by position;
      deleting a game cascades to its rows

Design Decisions:
    - Child tables instead of an array/JSON column: membership filters and
      multi-valued group-bys become plain joins/GROUP BYs on every dialect
    - Surrogate integer key on child rows: replacing a game's genres deletes and
      re-inserts rows in one flush without tripping a uniqueness constraint
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Boolean, CheckConstraint, DateTime, Float, ForeignKey, Integer, String,
)
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from game_collection.core.domain_types import (
    MAX_COMPANY_LENGTH, MAX_NAME_LENGTH, MAX_TITLE_LENGTH,
)
from game_collection.db.base import Base


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Game(Base):
    """Game aggregate root."""
    __tablename__ = "games"
    __table_args__ = (
        CheckConstraint(
            "metacritic_score IS NULL OR (metacritic_score >= 0 AND metacritic_score <= 100)",
            name="ck_games_metacritic_score_range",
        ),
        CheckConstraint("play_hours >= 0", name="ck_games_play_hours_non_negative"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(
        String(MAX_TITLE_LENGTH), nullable=False,
    )
    publisher: Mapped[str] = mapped_column(
        String(MAX_COMPANY_LENGTH), nullable=False,
    )
    developer: Mapped[str] = mapped_column(
        String(MAX_COMPANY_LENGTH), nullable=False,
    )
    release_year: Mapped[int] = mapped_column(Integer, nullable=False)
    metacritic_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    play_hours: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    favorite: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utc_now,
    )

    genre_rows: Mapped[list["GameGenre"]] = relationship(
        "GameGenre", back_populates="game",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="GameGenre.position",
    )
    platform_rows: Mapped[list["GamePlatform"]] = relationship(
        "GamePlatform", back_populates="game",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="GamePlatform.position",
    )


class GameGenre(Base):
    """One genre membership of a game."""
    __tablename__ = "game_genres"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    game_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("games.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH), nullable=False, index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    game: Mapped["Game"] = relationship("Game", back_populates="genre_rows")


class GamePlatform(Base):
    """One platform membership of a game."""
    __tablename__ = "game_platforms"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    game_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("games.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH), nullable=False, index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    game: Mapped["Game"] = relationship("Game", back_populates="platform_rows")
