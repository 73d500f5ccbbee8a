"""
Unit tests for the Observation Store.

These tests verify:
1. One observation per calendar day, replacement keeps the id
2. Newest-first ordering, lookups and date ranges
3. Write-through to a persistence backend
4. Concurrent writers never lose or duplicate a day

Usage:
    pytest tests/test_store.py -v
"""
import sqlite3

import pytest
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta, timezone

from conftest import NOW, observation_at

from mood_analytics.observation import MoodObservation
from mood_analytics.store import ObservationStore


class FakeBackend:
    """In-memory backend recording every call."""

    def __init__(self, initial=None):
        self.rows = {o.id: o for o in (initial or [])}
        self.saved = []
        self.deleted = []

    def load(self):
        return list(self.rows.values())

    def save(self, observation):
        self.saved.append(observation.id)
        self.rows[observation.id] = observation

    def delete(self, observation_id):
        self.deleted.append(observation_id)
        self.rows.pop(observation_id, None)


# ============================================================================
# Observation Model
# ============================================================================


class TestMoodObservation:
    """Observation defaults and serialization."""

    def test_defaults(self):
        observation = MoodObservation(mood="happy")

        assert observation.id.startswith("mood_")
        assert observation.tags == []
        assert observation.note is None
        assert isinstance(observation.timestamp, datetime)

    def test_ids_are_unique(self):
        ids = {MoodObservation(mood="happy").id for _ in range(50)}
        assert len(ids) == 50

    def test_to_dict_and_from_dict(self):
        observation = observation_at("calm", note="Good session", tags=["sleep"])

        data = observation.to_dict()
        restored = MoodObservation.from_dict(data)

        assert data["timestamp"] == "2026-03-18T09:00:00"
        assert restored == observation

    def test_from_dict_generates_missing_id(self):
        restored = MoodObservation.from_dict({"mood": "sad", "timestamp": "2026-03-18T09:00:00"})

        assert restored.id.startswith("mood_")
        assert restored.day == NOW.date()

    def test_offset_timestamp_keeps_device_wall_clock(self):
        observation = MoodObservation(
            mood="calm", timestamp=datetime(2026, 3, 18, 9, 30, tzinfo=timezone(timedelta(hours=7)))
        )

        assert observation.timestamp == datetime(2026, 3, 18, 9, 30)
        assert observation.timestamp.tzinfo is None

    def test_from_dict_with_utc_suffix(self):
        restored = MoodObservation.from_dict({"mood": "sad", "timestamp": "2026-03-18T23:15:00+00:00"})

        assert restored.timestamp == datetime(2026, 3, 18, 23, 15)

    def test_offset_and_naive_observations_sort_together(self, store):
        store.add(observation_at("happy", days_ago=1))
        store.add(MoodObservation.from_dict({"mood": "calm", "timestamp": "2026-03-18T09:00:00+07:00"}))
        store.add(observation_at("sad", days_ago=2))

        assert [o.mood for o in store.all()] == ["calm", "happy", "sad"]
        assert len(store.between(NOW - timedelta(days=7), NOW)) == 3


# ============================================================================
# Upsert Semantics
# ============================================================================


class TestAdd:
    """Same-day replacement."""

    def test_add_new_day(self, store):
        stored = store.add(observation_at("happy", days_ago=1))

        assert len(store) == 1
        assert store.get(stored.id) is stored

    def test_same_day_replaces_and_keeps_id(self, store):
        first = store.add(observation_at("sad", hour=8))
        second = store.add(observation_at("happy", hour=20))

        assert len(store) == 1
        assert second.id == first.id
        assert store.all()[0].mood == "happy"

    def test_different_days_are_kept(self, store):
        for days_ago in range(5):
            store.add(observation_at("neutral", days_ago=days_ago))

        assert len(store) == 5

    def test_at_most_one_observation_per_day(self, store):
        for days_ago in [0, 1, 0, 2, 1, 0]:
            store.add(observation_at("calm", days_ago=days_ago, hour=7 + days_ago))

        days = [o.day for o in store.all()]
        assert len(days) == len(set(days)) == 3


class TestQueries:
    """Ordering and lookups."""

    def test_all_is_newest_first(self, store):
        for days_ago in [3, 0, 5, 1]:
            store.add(observation_at("happy", days_ago=days_ago))

        timestamps = [o.timestamp for o in store.all()]
        assert timestamps == sorted(timestamps, reverse=True)

    def test_all_returns_a_copy(self, store):
        store.add(observation_at("happy"))

        snapshot = store.all()
        snapshot.clear()

        assert len(store) == 1

    def test_today(self, store):
        assert store.today(now=NOW) is None

        store.add(observation_at("sad", days_ago=1))
        assert store.today(now=NOW) is None

        logged = store.add(observation_at("calm"))
        assert store.today(now=NOW) is logged

    def test_between_is_inclusive(self, store):
        for days_ago in range(10):
            store.add(observation_at("neutral", days_ago=days_ago))

        start = (NOW - timedelta(days=3)).replace(hour=9, minute=0)
        end = NOW.replace(hour=9, minute=0)

        results = store.between(start, end)

        assert len(results) == 4
        assert results[0].day == NOW.date()
        assert results[-1].timestamp == start

    def test_get_unknown_id(self, store):
        assert store.get("mood_missing") is None


class TestRemove:
    """Deletion by id."""

    def test_remove_existing(self, store):
        stored = store.add(observation_at("happy"))

        assert store.remove(stored.id) is True
        assert len(store) == 0
        assert store.get(stored.id) is None

    def test_remove_unknown_returns_false(self, store):
        store.add(observation_at("happy"))

        assert store.remove("mood_missing") is False
        assert len(store) == 1


# ============================================================================
# Backend
# ============================================================================


class TestBackend:
    """Loading from and writing through to a backend."""

    def test_loads_existing_observations_newest_first(self):
        older = observation_at("sad", days_ago=4)
        newer = observation_at("happy", days_ago=1)
        backend = FakeBackend([older, newer])

        store = ObservationStore(backend=backend)

        assert [o.id for o in store.all()] == [newer.id, older.id]

    def test_add_writes_through(self):
        backend = FakeBackend()
        store = ObservationStore(backend=backend)

        first = store.add(observation_at("sad"))
        store.add(observation_at("happy"))

        # Replacement is saved under the original id
        assert backend.saved == [first.id, first.id]
        assert backend.rows[first.id].mood == "happy"

    def test_remove_writes_through(self):
        backend = FakeBackend()
        store = ObservationStore(backend=backend)
        stored = store.add(observation_at("sad"))

        store.remove(stored.id)
        store.remove("mood_missing")

        assert backend.deleted == [stored.id]


class BrokenBackend(FakeBackend):
    """Backend whose writes fail, as a locked SQLite file would."""

    def save(self, observation):
        raise sqlite3.OperationalError("database is locked")

    def delete(self, observation_id):
        raise sqlite3.OperationalError("database is locked")


class TestFailedWrites:
    """A failed backend write leaves memory matching the database."""

    def test_failed_replace_keeps_existing_entry(self):
        original = observation_at("happy", hour=8, id="mood_original")
        store = ObservationStore(backend=BrokenBackend([original]))
        replacement = observation_at("sad", hour=20)
        replacement_id = replacement.id

        with pytest.raises(sqlite3.OperationalError):
            store.add(replacement)

        assert [(o.id, o.mood) for o in store.all()] == [("mood_original", "happy")]
        assert replacement.id == replacement_id

    def test_failed_add_stores_nothing(self):
        store = ObservationStore(backend=BrokenBackend())

        with pytest.raises(sqlite3.OperationalError):
            store.add(observation_at("sad"))

        assert len(store) == 0

    def test_failed_remove_keeps_entry(self):
        original = observation_at("happy", id="mood_original")
        store = ObservationStore(backend=BrokenBackend([original]))

        with pytest.raises(sqlite3.OperationalError):
            store.remove("mood_original")

        assert store.get("mood_original") is original


# ============================================================================
# Concurrency
# ============================================================================


class TestConcurrency:
    """Parallel writers and readers."""

    def test_parallel_same_day_writes_keep_one_entry(self, store):
        moods = ["sad", "happy", "calm", "tired"] * 25

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(lambda mood: store.add(observation_at(mood)), moods))

        assert len(store) == 1

    def test_parallel_writes_across_days(self, store):
        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(lambda d: store.add(observation_at("neutral", days_ago=d % 30)), range(120)))

        days = [o.day for o in store.all()]
        assert len(days) == len(set(days)) == 30

    @pytest.mark.parametrize("workers", [2, 8])
    def test_readers_see_consistent_lists(self, store, workers):
        def write(days_ago):
            store.add(observation_at("happy", days_ago=days_ago))
            return store.all()

        with ThreadPoolExecutor(max_workers=workers) as pool:
            snapshots = list(pool.map(write, range(40)))

        for snapshot in snapshots:
            days = [o.day for o in snapshot]
            assert len(days) == len(set(days))
