"""
Mood Recommendations.

Turns the headline numbers of a snapshot into short suggestions for the
user. Lookup tables only; no text generation.
"""

from typing import Dict, List, Optional, Sequence

from .snapshot import TIME_PERIODS, WEEKDAYS, WeekdayTrend

PERIOD_LABELS = {
    "morning": "Morning (6-12)",
    "afternoon": "Afternoon (12-17)",
    "evening": "Evening (17-22)",
    "night": "Night (22-6)",
}

TREND_MESSAGES = {
    "declining": "Consider increasing how often you practice meditation",
    "improving": "Your mood is trending upward, keep up your current routine",
}

STABILITY_MESSAGES = {
    "low": "Focus on emotional stabilisation techniques such as breathing exercises",
}

DOMINANT_MOOD_MESSAGES = {
    "very-sad": "Be gentle with yourself and consider reaching out to someone you trust",
    "sad": "Try a short loving-kindness meditation on difficult days",
    "anxious": "Grounding breathwork can help when anxiety builds up",
    "worried": "Grounding breathwork can help when worries build up",
    "angry": "A body-scan practice can help release tension",
    "frustrated": "A body-scan practice can help release tension",
    "tired": "Restorative sessions and a regular sleep routine may lift your energy",
    "lonely": "Community sessions can be a good way to feel connected",
}


def rank_weekdays(weekday_averages: Sequence[WeekdayTrend], best: bool = True) -> List[str]:
    """
    Order weekdays by average mood.

    Ties keep the Monday-first order.
    """
    ordered = sorted(
        weekday_averages,
        key=lambda w: (-w.average_mood if best else w.average_mood, WEEKDAYS.index(w.day)),
    )
    return [w.day for w in ordered]


def rank_periods(time_of_day_averages: Dict[str, float], best: bool = True) -> List[str]:
    """Order the time-of-day buckets that have data by average mood."""
    with_data = [p for p in TIME_PERIODS if time_of_day_averages.get(p, 0.0) > 0]
    return sorted(
        with_data,
        key=lambda p: (
            -time_of_day_averages[p] if best else time_of_day_averages[p],
            TIME_PERIODS.index(p),
        ),
    )


def _join_days(days: List[str]) -> str:
    return " and ".join(day.capitalize() for day in days)


def build_recommendations(
    dominant_mood: Optional[str],
    mood_stability: str,
    improvement_trend: str,
    weekday_averages: Sequence[WeekdayTrend],
    time_of_day_averages: Optional[Dict[str, float]] = None,
) -> List[str]:
    """
    Build recommendation strings.

    Args:
        dominant_mood: Most frequent mood, or None
        mood_stability: high, medium or low
        improvement_trend: improving, stable or declining
        weekday_averages: Per-weekday averages (days with data only)
        time_of_day_averages: Per-period averages (0.0 = no data)

    Returns:
        Recommendations in display order
    """
    recommendations = []

    if improvement_trend in TREND_MESSAGES:
        recommendations.append(TREND_MESSAGES[improvement_trend])

    if mood_stability in STABILITY_MESSAGES:
        recommendations.append(STABILITY_MESSAGES[mood_stability])

    if dominant_mood in DOMINANT_MOOD_MESSAGES:
        recommendations.append(DOMINANT_MOOD_MESSAGES[dominant_mood])

    best_days = rank_weekdays(weekday_averages, best=True)[:2]
    if best_days:
        recommendations.append(
            f"Make the most of your positive momentum on {_join_days(best_days)}"
        )

    challenging_days = rank_weekdays(weekday_averages, best=False)[:2]
    if challenging_days:
        recommendations.append(
            f"Give yourself extra care on {_join_days(challenging_days)}"
        )

    best_periods = rank_periods(time_of_day_averages or {}, best=True)
    if best_periods:
        recommendations.append(f"Best time to meditate: {PERIOD_LABELS[best_periods[0]]}")

    return recommendations
