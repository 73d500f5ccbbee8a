"""
Mood Analytics Module.

Mood vocabulary, observation store and the statistics engine behind the
mood dashboards.
"""

from .engine import compute_stats
from .observation import MoodObservation
from .snapshot import MoodStatsSnapshot
from .store import ObservationStore
from .vocabulary import (
    MOOD_KINDS,
    MOOD_VALUES,
    MoodAnalyticsError,
    UnknownMoodKind,
    mood_value,
)

__all__ = [
    "compute_stats",
    "MoodObservation",
    "MoodStatsSnapshot",
    "ObservationStore",
    "MOOD_KINDS",
    "MOOD_VALUES",
    "MoodAnalyticsError",
    "UnknownMoodKind",
    "mood_value",
]
