"""Initial schema - games with genre and platform membership tables.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "games",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("publisher", sa.String(200), nullable=False),
        sa.Column("developer", sa.String(200), nullable=False),
        sa.Column("release_year", sa.Integer, nullable=False),
        sa.Column("metacritic_score", sa.Integer, nullable=True),
        sa.Column("play_hours", sa.Float, nullable=False, server_default="0"),
        sa.Column("completed", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("favorite", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint(
            "metacritic_score IS NULL OR (metacritic_score >= 0 AND metacritic_score <= 100)",
            name="ck_games_metacritic_score_range",
        ),
        sa.CheckConstraint("play_hours >= 0", name="ck_games_play_hours_non_negative"),
    )
    op.create_index("ix_games_favorite", "games", ["favorite"])

    for table in ("game_genres", "game_platforms"):
        op.create_table(
            table,
            sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
            sa.Column(
                "game_id", UUID(as_uuid=True),
                sa.ForeignKey("games.id", ondelete="CASCADE"), nullable=False,
            ),
            sa.Column("name", sa.String(100), nullable=False),
            sa.Column("position", sa.Integer, nullable=False, server_default="0"),
        )
        op.create_index(f"ix_{table}_game_id", table, ["game_id"])
        op.create_index(f"ix_{table}_name", table, ["name"])


def downgrade() -> None:
    op.drop_table("game_platforms")
    op.drop_table("game_genres")
    op.drop_index("ix_games_favorite", table_name="games")
    op.drop_table("games")
