"""Collection Schemas - response shapes for stats, filter options and export."""

from datetime import datetime

from pydantic import BaseModel

from game_collection.schemas.game import GameResponse


class GroupCountResponse(BaseModel):
    key: str | int
    count: int


class StatsResponse(BaseModel):
    total: int
    completed: int
    favorite: int
    total_play_hours: float
    avg_score: int
    by_genre: list[GroupCountResponse]
    by_platform: list[GroupCountResponse]
    by_year: list[GroupCountResponse]


class FilterOptionsResponse(BaseModel):
    """Sorted distinct values the filter widgets can offer."""
    genres: list[str]
    platforms: list[str]
    publishers: list[str]
    developers: list[str]


class ExportResponse(BaseModel):
    export_date: datetime
    total_games: int
    games: list[GameResponse]


class DeleteGameResponse(BaseModel):
    message: str
    game: GameResponse
