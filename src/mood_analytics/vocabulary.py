"""
Mood Vocabulary.

The single configuration table of mood kinds. Every numeric value, label
and emoji used for moods anywhere in the project comes from here.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

logger = logging.getLogger(__name__)


class MoodAnalyticsError(Exception):
    """Base error for mood analytics."""


class UnknownMoodKind(MoodAnalyticsError, ValueError):
    """Raised when a mood is missing from the configured value map."""

    def __init__(self, mood: str):
        self.mood = mood
        super().__init__(f"Unknown mood kind: {mood!r}")


@dataclass(frozen=True)
class MoodKind:
    """One entry of the mood vocabulary."""

    id: str
    value: float  # 1 (lowest) .. 5 (highest)
    label: str
    label_id: str  # Indonesian label
    emoji: str
    group: str = "primary"  # primary or extended

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "value": self.value,
            "label": self.label,
            "label_id": self.label_id,
            "emoji": self.emoji,
            "group": self.group,
        }


# Ordered: iteration order is also the dominant-mood tie-break order.
MOOD_KINDS: List[MoodKind] = [
    MoodKind("very-sad", 1.0, "Very sad", "Sangat Sedih", "😢"),
    MoodKind("sad", 2.0, "Sad", "Sedih", "😔"),
    MoodKind("neutral", 3.0, "Neutral", "Biasa", "😐"),
    MoodKind("happy", 4.0, "Happy", "Senang", "😊"),
    MoodKind("very-happy", 5.0, "Very happy", "Sangat Senang", "😄"),
    MoodKind("anxious", 2.0, "Anxious", "Cemas", "😰", "extended"),
    MoodKind("angry", 1.0, "Angry", "Marah", "😠", "extended"),
    MoodKind("calm", 4.0, "Calm", "Tenang", "😌", "extended"),
    MoodKind("excited", 5.0, "Excited", "Bersemangat", "🤩", "extended"),
    MoodKind("tired", 2.0, "Tired", "Lelah", "😴", "extended"),
    MoodKind("worried", 2.0, "Worried", "Khawatir", "😟", "extended"),
    MoodKind("frustrated", 1.5, "Frustrated", "Frustrasi", "😤", "extended"),
    MoodKind("lonely", 1.5, "Lonely", "Kesepian", "🥺", "extended"),
    MoodKind("grateful", 4.5, "Grateful", "Bersyukur", "🙏", "extended"),
    MoodKind("confident", 4.5, "Confident", "Percaya Diri", "😎", "extended"),
]

MOOD_VOCABULARY: Dict[str, MoodKind] = {kind.id: kind for kind in MOOD_KINDS}

MOOD_VALUES: Dict[str, float] = {kind.id: kind.value for kind in MOOD_KINDS}

PRIMARY_MOODS = [kind.id for kind in MOOD_KINDS if kind.group == "primary"]
EXTENDED_MOODS = [kind.id for kind in MOOD_KINDS if kind.group == "extended"]


def is_known_mood(mood: str) -> bool:
    """Check whether a mood belongs to the vocabulary."""
    return mood in MOOD_VOCABULARY


def get_mood_kind(mood: str) -> MoodKind:
    """
    Look up a mood kind.

    Raises:
        UnknownMoodKind: If the mood is not in the vocabulary
    """
    try:
        return MOOD_VOCABULARY[mood]
    except KeyError:
        raise UnknownMoodKind(mood) from None


def mood_value(mood: str, value_map: Optional[Mapping[str, float]] = None) -> float:
    """
    Map a mood to its numeric value.

    Args:
        mood: Mood identifier (e.g. "very-happy")
        value_map: Value map to use instead of the vocabulary's

    Returns:
        The mood's value on the 1-5 scale

    Raises:
        UnknownMoodKind: If the value map has no entry for the mood
    """
    values = MOOD_VALUES if value_map is None else value_map
    try:
        return float(values[mood])
    except KeyError:
        logger.error(f"[VOCABULARY] No value configured for mood {mood!r}")
        raise UnknownMoodKind(mood) from None


def mood_label(mood: str, locale: str = "en") -> str:
    """Human-readable label for a mood ("en" or "id")."""
    kind = get_mood_kind(mood)
    return kind.label_id if locale == "id" else kind.label


def mood_emoji(mood: str) -> str:
    return get_mood_kind(mood).emoji


def mood_order(mood: str) -> int:
    """Position of a mood in the vocabulary (unknown moods sort last)."""
    for index, kind in enumerate(MOOD_KINDS):
        if kind.id == mood:
            return index
    return len(MOOD_KINDS)
