"""Mood tracking API routes."""
import logging
from datetime import datetime, timedelta
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from mood_analytics.observation import MoodObservation
from mood_analytics.store import ObservationStore
from mood_analytics.vocabulary import MOOD_KINDS

from ..database import get_store
from ..models.mood import MoodEntry, MoodEntryCreate, MoodKindInfo

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/moods", tags=["Mood Tracking"])


def _to_entry(observation: MoodObservation) -> MoodEntry:
    return MoodEntry.model_validate(observation)


@router.get("/vocabulary", response_model=list[MoodKindInfo], response_model_by_alias=True)
async def get_vocabulary():
    """List the moods that can be logged, with values, labels and emoji."""
    return [MoodKindInfo(**kind.to_dict()) for kind in MOOD_KINDS]


@router.post("", response_model=MoodEntry, status_code=201)
async def log_mood(
    entry: MoodEntryCreate,
    store: ObservationStore = Depends(get_store),
):
    """
    Log a mood. A second mood on the same calendar day replaces the first.
    """
    observation = MoodObservation(
        mood=entry.mood,
        timestamp=entry.timestamp or datetime.now(),
        note=entry.note,
        tags=entry.tags,
    )
    stored = store.add(observation)
    logger.info(f"[API] Logged {stored.mood} ({stored.id})")
    return _to_entry(stored)


@router.get("", response_model=list[MoodEntry])
async def get_mood_entries(
    days: int = Query(default=30, ge=1, le=365, description="Number of days of history"),
    store: ObservationStore = Depends(get_store),
):
    """Get mood entries for the specified number of days, newest first."""
    now = datetime.now()
    start = datetime.combine(now.date() - timedelta(days=days - 1), datetime.min.time())
    end = datetime.combine(now.date(), datetime.max.time())
    return [_to_entry(o) for o in store.between(start, end)]


@router.get("/today", response_model=Optional[MoodEntry])
async def get_todays_mood(store: ObservationStore = Depends(get_store)):
    """Get today's mood entry, or null if none was logged yet."""
    observation = store.today()
    return _to_entry(observation) if observation else None


@router.delete("/{entry_id}", status_code=204)
async def delete_mood_entry(
    entry_id: str,
    store: ObservationStore = Depends(get_store),
):
    """Delete a mood entry."""
    if not store.remove(entry_id):
        raise HTTPException(status_code=404, detail=f"Mood entry '{entry_id}' not found")
    return Response(status_code=204)
