"""SQLite persistence for the mood history."""
import json
import logging
import sqlite3
from contextlib import contextmanager
from datetime import datetime
from functools import lru_cache
from typing import Generator, Iterable

from mood_analytics.observation import MoodObservation
from mood_analytics.store import ObservationStore

from .config import get_settings

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS mood_entries (
    id TEXT PRIMARY KEY,
    mood TEXT NOT NULL,
    timestamp TEXT NOT NULL,
    note TEXT,
    tags TEXT NOT NULL DEFAULT '[]'
)
"""


class DatabaseManager:
    """
    SQLite connection manager for mood data.
    Opens a short-lived connection per operation.
    """

    def __init__(self, settings=None, db_path: str = None):
        self.settings = settings or get_settings()
        self.db_path = db_path or self.settings.mood_db_path

    @contextmanager
    def get_mood_conn(self) -> Generator[sqlite3.Connection, None, None]:
        """Get a read-write connection to the mood database."""
        yield from self._connect(self.db_path)

    def _connect(self, db_path: str) -> Generator[sqlite3.Connection, None, None]:
        """
        Create a connection, committing on success and rolling back on error.
        """
        conn = sqlite3.connect(db_path, check_same_thread=False)
        conn.row_factory = sqlite3.Row  # Enable dict-like row access
        try:
            yield conn
            conn.commit()
        except sqlite3.Error:
            conn.rollback()
            raise
        finally:
            conn.close()

    def ensure_schema(self) -> None:
        with self.get_mood_conn() as conn:
            conn.execute(SCHEMA)


def _row_to_observation(row) -> MoodObservation:
    """Convert SQLite row to MoodObservation."""
    return MoodObservation(
        id=row["id"],
        mood=row["mood"],
        timestamp=datetime.fromisoformat(row["timestamp"]),
        note=row["note"],
        tags=json.loads(row["tags"] or "[]"),
    )


class SQLiteMoodBackend:
    """ObservationStore backend writing to the mood_entries table."""

    def __init__(self, db_manager: DatabaseManager):
        self.db_manager = db_manager
        self.db_manager.ensure_schema()

    def load(self) -> Iterable[MoodObservation]:
        with self.db_manager.get_mood_conn() as conn:
            rows = conn.execute(
                "SELECT * FROM mood_entries ORDER BY timestamp DESC"
            ).fetchall()
        logger.info(f"[DB] Loaded {len(rows)} mood entries from {self.db_manager.db_path}")
        return [_row_to_observation(row) for row in rows]

    def save(self, observation: MoodObservation) -> None:
        with self.db_manager.get_mood_conn() as conn:
            conn.execute(
                """
                INSERT OR REPLACE INTO mood_entries (id, mood, timestamp, note, tags)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    observation.id,
                    observation.mood,
                    observation.timestamp.isoformat(),
                    observation.note,
                    json.dumps(observation.tags),
                ),
            )

    def delete(self, observation_id: str) -> None:
        with self.db_manager.get_mood_conn() as conn:
            conn.execute("DELETE FROM mood_entries WHERE id = ?", (observation_id,))


@lru_cache
def get_store() -> ObservationStore:
    """Process-wide observation store backed by the configured database."""
    return ObservationStore(backend=SQLiteMoodBackend(DatabaseManager()))
