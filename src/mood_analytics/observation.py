"""Mood observation model."""

import uuid
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional


def new_observation_id() -> str:
    return f"mood_{uuid.uuid4().hex}"


def device_local_time(timestamp: datetime) -> datetime:
    """
    Drop the UTC offset from a timestamp, keeping its wall-clock time.

    Timestamps are the local time of the device that logged them, so an
    offset such as +07:00 only says where that device was. Every stored
    timestamp is naive, which keeps them comparable with each other.
    """
    if timestamp.tzinfo is None:
        return timestamp
    return timestamp.replace(tzinfo=None)


@dataclass
class MoodObservation:
    """A single mood check-in."""

    mood: str
    timestamp: datetime = field(default_factory=datetime.now)  # local device time
    note: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    id: str = field(default_factory=new_observation_id)

    def __post_init__(self):
        self.timestamp = device_local_time(self.timestamp)

    @property
    def day(self) -> date:
        """Calendar day of the observation in the time it was recorded."""
        return self.timestamp.date()

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "mood": self.mood,
            "timestamp": self.timestamp.isoformat(),
            "note": self.note,
            "tags": list(self.tags),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "MoodObservation":
        """Build an observation from its serialized form."""
        timestamp = data.get("timestamp")
        if isinstance(timestamp, str):
            timestamp = datetime.fromisoformat(timestamp)

        kwargs = {
            "mood": data["mood"],
            "note": data.get("note"),
            "tags": list(data.get("tags") or []),
        }
        if timestamp is not None:
            kwargs["timestamp"] = timestamp
        if data.get("id"):
            kwargs["id"] = data["id"]
        return cls(**kwargs)
