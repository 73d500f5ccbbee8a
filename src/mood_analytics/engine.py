"""
Mood Analytics Engine.

Computes a MoodStatsSnapshot from a list of mood observations. The engine
is a pure function of its arguments: it never mutates the observations,
keeps no state between calls and can be called from any thread.

Unknown moods fail the whole call with UnknownMoodKind; every other edge
case (empty history, one entry, ties) has a defined result.
"""

import logging
import math
import statistics
from collections import Counter
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .observation import MoodObservation
from .recommendations import build_recommendations, rank_periods, rank_weekdays
from .snapshot import (
    TIME_PERIODS,
    WEEKDAYS,
    MoodCorrelations,
    MoodStatsSnapshot,
    WeekdayTrend,
    WeekTrend,
)
from .vocabulary import mood_order, mood_value

logger = logging.getLogger(__name__)

DEFAULT_WEEKS = 7
MONTHLY_TREND_WEEKS = 4

# Population standard deviation thresholds
STABILITY_HIGH_BELOW = 0.8
STABILITY_LOW_ABOVE = 1.5

# Minimum change between halves of the history to count as a trend
TREND_THRESHOLD = 0.3


def time_period_for_hour(hour: int) -> str:
    """Bucket an hour of the day (0-23) into a time period."""
    if 6 <= hour < 12:
        return "morning"
    if 12 <= hour < 17:
        return "afternoon"
    if 17 <= hour < 22:
        return "evening"
    return "night"


def population_variance(values: Sequence[float]) -> float:
    """Population variance, mean((x - mean)^2); 0.0 for no values."""
    if not values:
        return 0.0
    return statistics.pvariance(values)


def classify_stability(std_dev: float) -> str:
    """Stability from the population std dev: high below 0.8, low above 1.5, else medium."""
    if std_dev < STABILITY_HIGH_BELOW:
        return "high"
    if std_dev > STABILITY_LOW_ABOVE:
        return "low"
    return "medium"


def classify_trend(first_half_avg: float, second_half_avg: float) -> str:
    """Trend between two half averages: improving or declining beyond 0.3, else stable."""
    difference = second_half_avg - first_half_avg
    if difference > TREND_THRESHOLD:
        return "improving"
    if difference < -TREND_THRESHOLD:
        return "declining"
    return "stable"


def compute_streak(days: Iterable[date], today: date) -> int:
    """
    Count consecutive days with an observation, walking back from today.

    A day without an observation ends the streak; no observation today
    means a streak of 0.
    """
    logged = set(days)
    streak = 0
    current = today
    while current in logged:
        streak += 1
        current -= timedelta(days=1)
    return streak


def week_windows(today: date, weeks: int) -> List[Tuple[date, date]]:
    """
    Trailing calendar-week windows, oldest first.

    Window k (0 = most recent) spans today-7k-6 through today-7k.
    """
    windows = []
    for week in range(weeks - 1, -1, -1):
        end = today - timedelta(days=week * 7)
        windows.append((end - timedelta(days=6), end))
    return windows


def _mean_or_zero(values: Sequence[float]) -> float:
    return statistics.mean(values) if values else 0.0


def _empty_snapshot(today: date, weeks: int) -> MoodStatsSnapshot:
    return MoodStatsSnapshot(
        generated_for=today,
        weekly_average=[0.0] * weeks,
    )


def compute_stats(
    observations: Iterable[MoodObservation],
    now: Optional[datetime] = None,
    weeks: int = DEFAULT_WEEKS,
    value_map: Optional[Mapping[str, float]] = None,
) -> MoodStatsSnapshot:
    """
    Compute mood statistics for a history of observations.

    Args:
        observations: Mood observations in any order
        now: Reference time for "today" (defaults to the local clock)
        weeks: Number of trailing weeks in weekly_average
        value_map: Mood value map to use instead of the vocabulary's

    Returns:
        A fully populated MoodStatsSnapshot

    Raises:
        UnknownMoodKind: If any observation's mood has no configured value
        ValueError: If weeks is less than 1
    """
    if weeks < 1:
        raise ValueError(f"weeks must be at least 1, got {weeks}")

    today = (now or datetime.now()).date()
    history = sorted(observations, key=lambda o: o.timestamp)

    if not history:
        return _empty_snapshot(today, weeks)

    # Map every mood up front so an unknown mood fails before any aggregation
    scored = [(o, mood_value(o.mood, value_map)) for o in history]
    values = [value for _, value in scored]

    average_mood = statistics.mean(values)

    # Time of day
    period_values: Dict[str, List[float]] = {period: [] for period in TIME_PERIODS}
    for observation, value in scored:
        period_values[time_period_for_hour(observation.timestamp.hour)].append(value)
    time_of_day_averages = {
        period: _mean_or_zero(period_values[period]) for period in TIME_PERIODS
    }
    time_of_day_counts = {period: len(period_values[period]) for period in TIME_PERIODS}

    # Day of week
    weekday_values: Dict[str, List[float]] = {}
    for observation, value in scored:
        weekday_values.setdefault(WEEKDAYS[observation.timestamp.weekday()], []).append(value)
    weekday_averages = [
        WeekdayTrend(day=day, average_mood=statistics.mean(weekday_values[day]),
                     total_entries=len(weekday_values[day]))
        for day in WEEKDAYS
        if day in weekday_values
    ]

    # Trailing weeks
    def values_between(start: date, end: date) -> List[float]:
        return [value for o, value in scored if start <= o.day <= end]

    weekly_average = [
        _mean_or_zero(values_between(start, end))
        for start, end in week_windows(today, weeks)
    ]

    monthly_trend = []
    for index, (start, end) in enumerate(week_windows(today, MONTHLY_TREND_WEEKS), start=1):
        week_values = values_between(start, end)
        if not week_values:
            continue
        variance = population_variance(week_values)
        monthly_trend.append(
            WeekTrend(
                week=index,
                average_mood=statistics.mean(week_values),
                variance=variance,
                variability=math.sqrt(variance),
                total_entries=len(week_values),
            )
        )

    streak_days = compute_streak((o.day for o in history), today)

    # Distribution and dominant mood
    counts = Counter(o.mood for o in history)
    mood_distribution = {mood: counts[mood] for mood in sorted(counts, key=mood_order)}
    dominant_mood = max(mood_distribution, key=lambda mood: mood_distribution[mood])

    mood_stability = classify_stability(statistics.pstdev(values))

    midpoint = len(values) // 2
    first_half, second_half = values[:midpoint], values[midpoint:]
    first_avg = statistics.mean(first_half) if first_half else average_mood
    second_avg = statistics.mean(second_half) if second_half else average_mood
    improvement_trend = classify_trend(first_avg, second_avg)

    correlations = MoodCorrelations(
        best_days=rank_weekdays(weekday_averages, best=True)[:2],
        challenging_days=rank_weekdays(weekday_averages, best=False)[:2],
        best_periods=rank_periods(time_of_day_averages, best=True)[:2],
        challenging_periods=rank_periods(time_of_day_averages, best=False)[:2],
    )

    recommendations = build_recommendations(
        dominant_mood,
        mood_stability,
        improvement_trend,
        weekday_averages,
        time_of_day_averages,
    )

    logger.debug(
        f"[ENGINE] {len(values)} entries: avg={average_mood:.2f}, "
        f"stability={mood_stability}, trend={improvement_trend}, streak={streak_days}"
    )

    return MoodStatsSnapshot(
        generated_for=today,
        average_mood=average_mood,
        total_entries=len(history),
        streak_days=streak_days,
        mood_distribution=mood_distribution,
        weekly_average=weekly_average,
        time_of_day_averages=time_of_day_averages,
        time_of_day_counts=time_of_day_counts,
        weekday_averages=weekday_averages,
        monthly_trend=monthly_trend,
        dominant_mood=dominant_mood,
        mood_stability=mood_stability,
        improvement_trend=improvement_trend,
        correlations=correlations,
        recommendations=recommendations,
    )

