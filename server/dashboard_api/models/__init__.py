"""Pydantic models for mood API requests and responses."""
from .mood import (
    MoodKindInfo,
    MoodEntryCreate,
    MoodEntry,
    WeekdayAverage,
    WeeklyVariability,
    MoodCorrelationSummary,
    MoodStatsResponse,
)

__all__ = [
    "MoodKindInfo",
    "MoodEntryCreate",
    "MoodEntry",
    "WeekdayAverage",
    "WeeklyVariability",
    "MoodCorrelationSummary",
    "MoodStatsResponse",
]
