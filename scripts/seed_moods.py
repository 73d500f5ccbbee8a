#!/usr/bin/env python3
"""
Seed the mood database with demo observations.

Writes one mood per day for the requested number of days, ending today,
so the dashboard has history to chart.

Usage:
    python scripts/seed_moods.py --days 60
    python scripts/seed_moods.py --days 14 --reset --seed 7
"""
import argparse
import logging
import os
import random
import sys
from datetime import datetime, timedelta
from pathlib import Path

from dotenv import load_dotenv

# Base directory (project root)
BASE_DIR = Path(__file__).parent.parent
for path in (BASE_DIR, BASE_DIR / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from mood_analytics.engine import compute_stats  # noqa: E402
from mood_analytics.observation import MoodObservation  # noqa: E402
from mood_analytics.store import ObservationStore  # noqa: E402
from server.dashboard_api.config import get_settings  # noqa: E402
from server.dashboard_api.database import DatabaseManager, SQLiteMoodBackend  # noqa: E402

# Weighted toward the middle of the scale, like a typical check-in history
DEMO_MOODS = [
    ("neutral", 5),
    ("happy", 5),
    ("calm", 4),
    ("sad", 2),
    ("tired", 3),
    ("anxious", 2),
    ("very-happy", 2),
    ("grateful", 2),
    ("very-sad", 1),
]

DEMO_NOTES = [
    None,
    None,
    "Morning session helped",
    "Busy day at work",
    "Slept badly",
    "Walked outside after lunch",
]

DEMO_TAGS = ["work", "family", "sleep", "exercise", "meditation"]


def build_observation(day: datetime, rng: random.Random) -> MoodObservation:
    """Random mood at a random waking hour of the given day."""
    moods, weights = zip(*DEMO_MOODS)
    timestamp = day.replace(
        hour=rng.randint(6, 23), minute=rng.randint(0, 59), second=0, microsecond=0
    )
    return MoodObservation(
        mood=rng.choices(moods, weights=weights)[0],
        timestamp=timestamp,
        note=rng.choice(DEMO_NOTES),
        tags=rng.sample(DEMO_TAGS, k=rng.randint(0, 2)),
    )


def seed(db_path: str, days: int, reset: bool, seed_value=None) -> ObservationStore:
    """
    Write demo observations to the database.

    Args:
        db_path: SQLite file to write
        days: Number of days of history, ending today
        reset: Remove the existing database first
        seed_value: Random seed for reproducible data

    Returns:
        The store holding the seeded history
    """
    if reset and os.path.exists(db_path):
        os.remove(db_path)
        print(f"  Removed existing: {db_path}")

    rng = random.Random(seed_value)
    store = ObservationStore(backend=SQLiteMoodBackend(DatabaseManager(db_path=db_path)))

    today = datetime.now()
    for offset in range(days - 1, -1, -1):
        store.add(build_observation(today - timedelta(days=offset), rng))

    return store


def main():
    """Seed the mood database and print a summary."""
    load_dotenv()

    parser = argparse.ArgumentParser(description="Seed the mood database with demo data")
    parser.add_argument("--days", type=int, default=60, help="Days of history to create")
    parser.add_argument("--db", default=None, help="Database path (default: MOOD_DATA_PATH/moods.db)")
    parser.add_argument("--reset", action="store_true", help="Delete the existing database first")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    db_path = args.db or settings.mood_db_path

    print("=" * 60)
    print("Mood Database Seeding Script")
    print("=" * 60)
    print(f"\nDatabase: {db_path}\n")

    store = seed(db_path, args.days, args.reset, args.seed)
    snapshot = compute_stats(store.all(), weeks=settings.trend_weeks)

    print(f"  Entries stored:   {snapshot.total_entries}")
    print(f"  Average mood:     {snapshot.average_mood:.2f}")
    print(f"  Dominant mood:    {snapshot.dominant_mood}")
    print(f"  Stability:        {snapshot.mood_stability}")
    print(f"  Trend:            {snapshot.improvement_trend}")
    print(f"  Current streak:   {snapshot.streak_days} days")
    print()
    print("=" * 60)


if __name__ == "__main__":
    main()
