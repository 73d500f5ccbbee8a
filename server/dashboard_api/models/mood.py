"""Mood tracking data models."""
from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mood_analytics.observation import device_local_time
from mood_analytics.vocabulary import MOOD_VOCABULARY, is_known_mood

TimePeriod = Literal["morning", "afternoon", "evening", "night"]
Stability = Literal["high", "medium", "low"]
Trend = Literal["improving", "stable", "declining"]


class MoodKindInfo(BaseModel):
    """Mood vocabulary entry."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    value: float
    label: str
    label_id: str = Field(serialization_alias="labelId")
    emoji: str
    group: Literal["primary", "extended"]


class MoodEntryCreate(BaseModel):
    """Request body for logging a mood."""

    mood: str
    timestamp: Optional[datetime] = None
    note: Optional[str] = Field(default=None, max_length=2000)
    tags: list[str] = Field(default_factory=list, max_length=20)

    @field_validator("mood")
    @classmethod
    def mood_must_be_known(cls, value: str) -> str:
        if not is_known_mood(value):
            raise ValueError(
                f"Unknown mood '{value}'. Must be one of: {list(MOOD_VOCABULARY)}"
            )
        return value

    @field_validator("timestamp")
    @classmethod
    def timestamp_as_device_time(cls, value: Optional[datetime]) -> Optional[datetime]:
        return device_local_time(value) if value is not None else None


class MoodEntry(BaseModel):
    """Stored mood observation."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    mood: str
    timestamp: datetime
    note: Optional[str] = None
    tags: list[str] = []


class WeekdayAverage(BaseModel):
    """Average mood for a day of the week."""

    model_config = ConfigDict(populate_by_name=True)

    day: str
    average_mood: float = Field(serialization_alias="averageMood")
    total_entries: int = Field(serialization_alias="totalEntries")


class WeeklyVariability(BaseModel):
    """Mean and variance of one trailing week."""

    model_config = ConfigDict(populate_by_name=True)

    week: int
    average_mood: float = Field(serialization_alias="averageMood")
    variance: float
    variability: float
    total_entries: int = Field(serialization_alias="totalEntries")


class MoodCorrelationSummary(BaseModel):
    """Best and most challenging days and times."""

    model_config = ConfigDict(populate_by_name=True)

    best_days: list[str] = Field(serialization_alias="bestDays")
    challenging_days: list[str] = Field(serialization_alias="challengingDays")
    best_periods: list[TimePeriod] = Field(serialization_alias="bestPeriods")
    challenging_periods: list[TimePeriod] = Field(serialization_alias="challengingPeriods")


class MoodStatsResponse(BaseModel):
    """Aggregated mood statistics."""

    model_config = ConfigDict(populate_by_name=True)

    generated_for: date = Field(serialization_alias="generatedFor")
    average_mood: float = Field(serialization_alias="averageMood")
    total_entries: int = Field(serialization_alias="totalEntries")
    streak_days: int = Field(serialization_alias="streakDays")
    mood_distribution: dict[str, int] = Field(serialization_alias="moodDistribution")
    weekly_average: list[float] = Field(serialization_alias="weeklyAverage")
    time_of_day_averages: dict[TimePeriod, float] = Field(serialization_alias="timeOfDayAverages")
    time_of_day_counts: dict[TimePeriod, int] = Field(serialization_alias="timeOfDayCounts")
    weekday_averages: list[WeekdayAverage] = Field(serialization_alias="weekdayAverages")
    monthly_trend: list[WeeklyVariability] = Field(serialization_alias="monthlyTrend")
    dominant_mood: Optional[str] = Field(serialization_alias="dominantMood")
    mood_stability: Stability = Field(serialization_alias="moodStability")
    improvement_trend: Trend = Field(serialization_alias="improvementTrend")
    correlations: MoodCorrelationSummary
    recommendations: list[str]
