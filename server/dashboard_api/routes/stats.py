"""Mood statistics API routes."""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from mood_analytics.engine import compute_stats
from mood_analytics.store import ObservationStore

from ..config import get_settings
from ..database import get_store
from ..models.mood import MoodStatsResponse

router = APIRouter(prefix="/api/moods", tags=["Mood Statistics"])


@router.get("/stats", response_model=MoodStatsResponse, response_model_by_alias=True)
async def get_mood_stats(
    weeks: Optional[int] = Query(
        default=None, ge=1, le=52, description="Trailing weeks in the weekly average"
    ),
    store: ObservationStore = Depends(get_store),
):
    """
    Get aggregated mood statistics over the full history.
    Includes averages by time of day and weekday, weekly trends, stability,
    improvement trend and recommendations.
    """
    snapshot = compute_stats(store.all(), weeks=weeks or get_settings().trend_weeks)
    return MoodStatsResponse.model_validate(snapshot.to_dict())
