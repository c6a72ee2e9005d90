"""Data models for practice history.

Defines the HistoryEntry record and the HistoryProvider protocol.
"""

import json
import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, Protocol

from ..errors import HistoryFormatError

logger = logging.getLogger(__name__)

# Accepted keys for each field, snake_case first, then the camelCase keys
# written by the mobile app's progress store.
_ACTIVITY_ID_KEYS = ("activity_id", "activityId", "sessionId", "exerciseId")
_COMPLETED_AT_KEYS = ("completed_at", "completedAt")
_DURATION_KEYS = ("duration_minutes", "durationMinutes", "duration")
_PRE_MOOD_KEYS = ("pre_mood", "preMood")
_MOOD_IMPROVEMENT_KEYS = ("mood_improvement", "moodImprovement")
_ENERGY_IMPROVEMENT_KEYS = ("energy_improvement", "energyImprovement")


@dataclass(frozen=True)
class HistoryEntry:
    """A completed practice activity.

    Attributes:
        activity_id: Catalog id of the completed activity
        completed_at: When it was completed (None if the record was malformed)
        duration_minutes: Practiced duration
        pre_mood: Mood before practice (1-5), if recorded
        mood_improvement: Post-mood minus pre-mood, if recorded
        energy_improvement: Post-energy minus pre-energy, if recorded
    """

    activity_id: str
    completed_at: datetime | None
    duration_minutes: float = 0
    pre_mood: float | None = None
    mood_improvement: float | None = None
    energy_improvement: float | None = None

    @property
    def is_valid(self) -> bool:
        """Whether the entry can take part in aggregate statistics."""
        return bool(self.activity_id) and isinstance(self.completed_at, datetime)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for storage."""
        return {
            "activity_id": self.activity_id,
            "completed_at": self.completed_at,
            "duration_minutes": self.duration_minutes,
            "pre_mood": self.pre_mood,
            "mood_improvement": self.mood_improvement,
            "energy_improvement": self.energy_improvement,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HistoryEntry":
        """Create from a stored or exported record.

        Never raises for bad field values: an unparseable timestamp becomes
        ``None`` and unparseable numbers are dropped, so the entry is simply
        excluded from statistics later.
        """
        activity_id = _first(data, _ACTIVITY_ID_KEYS)
        return cls(
            activity_id=str(activity_id) if activity_id else "",
            completed_at=parse_timestamp(_first(data, _COMPLETED_AT_KEYS)),
            duration_minutes=_to_number(_first(data, _DURATION_KEYS)) or 0,
            pre_mood=_to_number(_first(data, _PRE_MOOD_KEYS)),
            mood_improvement=_to_number(_first(data, _MOOD_IMPROVEMENT_KEYS)),
            energy_improvement=_to_number(_first(data, _ENERGY_IMPROVEMENT_KEYS)),
        )


class HistoryProvider(Protocol):
    """Protocol for fetching a user's practice history snapshot."""

    def get_history(self, user_id: str) -> list[HistoryEntry]:
        """Get all history entries for a user."""
        ...


def _first(data: dict[str, Any], keys: Iterable[str]) -> Any:
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return None


def _to_number(value: Any) -> float | None:
    """Numeric value, or None for missing, unparseable or non-finite input."""
    if value is None or isinstance(value, bool):
        return None
    if not isinstance(value, int | float):
        try:
            value = float(value)
        except (TypeError, ValueError):
            return None
    # json.load and float() both accept NaN and Infinity
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def parse_timestamp(value: Any) -> datetime | None:
    """Parse a datetime, ISO-8601 string or epoch milliseconds.

    Returns:
        Parsed datetime, or None if the value cannot be interpreted
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, int | float) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value / 1000, tz=UTC)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            return None
    return None


def parse_history(records: Iterable[dict[str, Any]]) -> list[HistoryEntry]:
    """Convert raw records into history entries, preserving order."""
    entries = []
    for record in records:
        if not isinstance(record, dict):
            logger.warning(f"Skipping non-mapping history record: {record!r}")
            continue
        entries.append(HistoryEntry.from_dict(record))
    return entries


def load_history(path: str | Path) -> list[HistoryEntry]:
    """Load history from a JSON file containing a list of records.

    A top-level object with a ``history`` (or ``practiceHistory``) list is
    also accepted.

    Raises:
        HistoryFormatError: If the file is missing or is not a JSON list
    """
    path = Path(path)
    if not path.exists():
        raise HistoryFormatError(f"History file not found: {path}")

    try:
        with open(path) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise HistoryFormatError(f"Invalid JSON in history file {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("history", data.get("practiceHistory"))
    if not isinstance(data, list):
        raise HistoryFormatError(f"History file {path} must contain a list of records")

    return parse_history(data)


__all__ = [
    "HistoryEntry",
    "HistoryProvider",
    "load_history",
    "parse_history",
    "parse_timestamp",
]
