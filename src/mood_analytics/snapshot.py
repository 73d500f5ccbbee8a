"""Derived mood statistics returned by the analytics engine."""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional

# Hour ranges: morning 06-11, afternoon 12-16, evening 17-21, night 22-05
TIME_PERIODS = ("morning", "afternoon", "evening", "night")

# Indexed by date.weekday()
WEEKDAYS = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)


@dataclass
class WeekdayTrend:
    """Average mood for one day of the week."""

    day: str
    average_mood: float
    total_entries: int

    def to_dict(self) -> dict:
        return {
            "day": self.day,
            "average_mood": self.average_mood,
            "total_entries": self.total_entries,
        }


@dataclass
class WeekTrend:
    """Mean and spread of mood values inside one trailing week."""

    week: int  # 1 = oldest of the window
    average_mood: float
    variance: float  # population variance
    variability: float  # sqrt(variance)
    total_entries: int = 0

    def to_dict(self) -> dict:
        return {
            "week": self.week,
            "average_mood": self.average_mood,
            "variance": self.variance,
            "variability": self.variability,
            "total_entries": self.total_entries,
        }


@dataclass
class MoodCorrelations:
    """Best and most challenging weekdays and times of day."""

    best_days: List[str] = field(default_factory=list)
    challenging_days: List[str] = field(default_factory=list)
    best_periods: List[str] = field(default_factory=list)
    challenging_periods: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "best_days": list(self.best_days),
            "challenging_days": list(self.challenging_days),
            "best_periods": list(self.best_periods),
            "challenging_periods": list(self.challenging_periods),
        }


@dataclass
class MoodStatsSnapshot:
    """
    Statistics derived from a mood history.

    Never persisted; recomputed from the full observation list whenever
    requested. Empty time-of-day buckets hold 0.0, which is never a valid
    mood value, so 0.0 reads as "no data" (see time_of_day_counts).
    """

    generated_for: date
    average_mood: float = 0.0
    total_entries: int = 0
    streak_days: int = 0
    mood_distribution: Dict[str, int] = field(default_factory=dict)
    weekly_average: List[float] = field(default_factory=list)  # oldest first
    time_of_day_averages: Dict[str, float] = field(
        default_factory=lambda: {period: 0.0 for period in TIME_PERIODS}
    )
    time_of_day_counts: Dict[str, int] = field(
        default_factory=lambda: {period: 0 for period in TIME_PERIODS}
    )
    weekday_averages: List[WeekdayTrend] = field(default_factory=list)
    monthly_trend: List[WeekTrend] = field(default_factory=list)
    dominant_mood: Optional[str] = None
    mood_stability: str = "medium"  # high, medium, low
    improvement_trend: str = "stable"  # improving, stable, declining
    correlations: MoodCorrelations = field(default_factory=MoodCorrelations)
    recommendations: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "generated_for": self.generated_for.isoformat(),
            "average_mood": self.average_mood,
            "total_entries": self.total_entries,
            "streak_days": self.streak_days,
            "mood_distribution": dict(self.mood_distribution),
            "weekly_average": list(self.weekly_average),
            "time_of_day_averages": dict(self.time_of_day_averages),
            "time_of_day_counts": dict(self.time_of_day_counts),
            "weekday_averages": [w.to_dict() for w in self.weekday_averages],
            "monthly_trend": [w.to_dict() for w in self.monthly_trend],
            "dominant_mood": self.dominant_mood,
            "mood_stability": self.mood_stability,
            "improvement_trend": self.improvement_trend,
            "correlations": self.correlations.to_dict(),
            "recommendations": list(self.recommendations),
        }
