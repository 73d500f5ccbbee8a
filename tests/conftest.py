"""
Pytest fixtures for Mood Insights tests.
"""
import sys
import pytest
from datetime import datetime, timedelta
from pathlib import Path
from dotenv import load_dotenv

# Ensure src/ and the project root are on sys.path so tests can import
# mood_analytics and the dashboard server.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
for path in (SRC, ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

# Load environment variables
load_dotenv()

from mood_analytics.observation import MoodObservation  # noqa: E402
from mood_analytics.store import ObservationStore  # noqa: E402


# A Wednesday evening; every test that needs "today" uses this.
NOW = datetime(2026, 3, 18, 21, 0)


def observation_at(mood: str, days_ago: int = 0, hour: int = 9, now: datetime = NOW, **kwargs) -> MoodObservation:
    """Build an observation `days_ago` days before `now` at the given hour."""
    day = now - timedelta(days=days_ago)
    return MoodObservation(
        mood=mood,
        timestamp=day.replace(hour=hour, minute=0, second=0, microsecond=0),
        **kwargs,
    )


def daily_history(moods: list, now: datetime = NOW, hour: int = 9) -> list:
    """One observation per day, in chronological order, ending today."""
    count = len(moods)
    return [
        observation_at(mood, days_ago=count - 1 - index, hour=hour, now=now)
        for index, mood in enumerate(moods)
    ]


@pytest.fixture
def now():
    """Reference time for engine and store tests."""
    return NOW


@pytest.fixture
def make_observation():
    """Factory fixture for observations relative to NOW."""
    return observation_at


@pytest.fixture
def store():
    """Empty in-memory observation store."""
    return ObservationStore()


@pytest.fixture
def mood_db_path(tmp_path):
    """Path to a fresh SQLite mood database."""
    return str(tmp_path / "moods.db")
