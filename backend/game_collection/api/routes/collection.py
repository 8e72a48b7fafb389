"""Collection Routes - statistics, filter options and JSON export.

Invariants:
    - All three endpoints read the whole collection and ignore listing filters
    - /stats recomputes on every request
    - /export is served as an attachment named games_export.json
"""

from fastapi import APIRouter, Depends, Response

from game_collection.api.dependencies import get_game_store
from game_collection.core.repository_protocols import GameStore
from game_collection.schemas.collection import (
    ExportResponse, FilterOptionsResponse, GroupCountResponse, StatsResponse,
)
from game_collection.schemas.game import GameResponse
from game_collection.services.collection_stats import compute_collection_stats
from game_collection.services.game_queries import (
    export_collection, list_filter_options,
)

router = APIRouter(prefix="/api/v1", tags=["collection"])


@router.get("/stats", response_model=StatsResponse)
async def get_stats(store: GameStore = Depends(get_game_store)):
    """Collection statistics."""
    snapshot = await compute_collection_stats(store)
    return StatsResponse(
        total=snapshot.total,
        completed=snapshot.completed,
        favorite=snapshot.favorite,
        total_play_hours=snapshot.total_play_hours,
        avg_score=snapshot.avg_score,
        by_genre=[GroupCountResponse(**g.to_dict()) for g in snapshot.by_genre],
        by_platform=[GroupCountResponse(**g.to_dict()) for g in snapshot.by_platform],
        by_year=[GroupCountResponse(**g.to_dict()) for g in snapshot.by_year],
    )


@router.get("/filters", response_model=FilterOptionsResponse)
async def get_filter_options(store: GameStore = Depends(get_game_store)):
    return FilterOptionsResponse(**await list_filter_options(store))


@router.get("/export", response_model=ExportResponse)
async def export_games(
    response: Response, store: GameStore = Depends(get_game_store),
):
    """Download the whole collection as JSON."""
    export = await export_collection(store)
    response.headers["Content-Disposition"] = (
        "attachment; filename=games_export.json"
    )
    return ExportResponse(
        export_date=export["export_date"],
        total_games=export["total_games"],
        games=[GameResponse.model_validate(g) for g in export["games"]],
    )
