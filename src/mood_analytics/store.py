"""
Observation Store.

Holds the mood history in memory and keeps at most one observation per
calendar day (last write wins). An optional backend persists every change.
"""

import logging
import threading
from datetime import datetime
from typing import Iterable, List, Optional, Protocol

from .observation import MoodObservation

logger = logging.getLogger(__name__)


class StoreBackend(Protocol):
    """Persistence used by the ObservationStore."""

    def load(self) -> Iterable[MoodObservation]:
        ...

    def save(self, observation: MoodObservation) -> None:
        ...

    def delete(self, observation_id: str) -> None:
        ...


class ObservationStore:
    """
    Thread-safe mood history.

    Writes are serialized on a lock. Readers get copies of the list so the
    analytics engine never sees a list that is being mutated.
    """

    def __init__(self, backend: Optional[StoreBackend] = None):
        """
        Initialize the store.

        Args:
            backend: Optional persistence; existing observations are loaded
                from it and every change is written through.
        """
        self._backend = backend
        self._lock = threading.Lock()
        self._observations: List[MoodObservation] = []

        if backend is not None:
            for observation in backend.load():
                self._observations.append(observation)
            self._sort()

        logger.info(
            f"[STORE] Initialized with {len(self._observations)} observations "
            f"(backend={type(backend).__name__ if backend else 'memory'})"
        )

    def _sort(self) -> None:
        self._observations.sort(key=lambda o: o.timestamp, reverse=True)

    def add(self, observation: MoodObservation) -> MoodObservation:
        """
        Log a mood observation.

        If an observation already exists for the same calendar day it is
        replaced, and the new observation takes over its id.

        Returns:
            The stored observation
        """
        with self._lock:
            existing = next(
                (o for o in self._observations if o.day == observation.day),
                None,
            )

            # Persist first so a failed write leaves memory untouched
            original_id = observation.id
            if existing is not None:
                observation.id = existing.id

            if self._backend is not None:
                try:
                    self._backend.save(observation)
                except Exception:
                    observation.id = original_id
                    logger.error(f"[STORE] Failed to save {observation.mood} for {observation.day}")
                    raise

            if existing is not None:
                self._observations.remove(existing)
                logger.info(
                    f"[STORE] Replaced {existing.mood} with {observation.mood} "
                    f"for {observation.day}"
                )
            else:
                logger.info(f"[STORE] Added {observation.mood} for {observation.day}")

            self._observations.append(observation)
            self._sort()

        return observation

    def remove(self, observation_id: str) -> bool:
        """
        Remove an observation by id.

        Returns:
            True if an observation was removed
        """
        with self._lock:
            for observation in self._observations:
                if observation.id == observation_id:
                    if self._backend is not None:
                        self._backend.delete(observation_id)
                    self._observations.remove(observation)
                    logger.info(f"[STORE] Removed {observation_id}")
                    return True

        logger.debug(f"[STORE] Nothing to remove for {observation_id}")
        return False

    def get(self, observation_id: str) -> Optional[MoodObservation]:
        with self._lock:
            return next(
                (o for o in self._observations if o.id == observation_id),
                None,
            )

    def all(self) -> List[MoodObservation]:
        """All observations, newest first."""
        with self._lock:
            return list(self._observations)

    def today(self, now: Optional[datetime] = None) -> Optional[MoodObservation]:
        """Today's observation, if one was logged."""
        today = (now or datetime.now()).date()
        with self._lock:
            return next((o for o in self._observations if o.day == today), None)

    def between(self, start: datetime, end: datetime) -> List[MoodObservation]:
        """Observations with start <= timestamp <= end, newest first."""
        with self._lock:
            return [o for o in self._observations if start <= o.timestamp <= end]

    def __len__(self) -> int:
        with self._lock:
            return len(self._observations)
