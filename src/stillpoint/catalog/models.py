"""Data models for the activity catalog.

Defines ActivityMetadata entity and ActivityKind enum.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ActivityKind(Enum):
    """Kind of practice activity."""

    YOGA = "yoga"
    BREATHING = "breathing"


@dataclass(frozen=True)
class ActivityMetadata:
    """Static metadata for one catalog activity.

    Attributes:
        id: Stable activity identifier (e.g., "morning-energizer")
        name: Display name
        kind: Yoga session or breathing exercise
        duration_minutes: Default duration
        time_tags: Focus tags used for time-of-day matching
        difficulty: beginner, intermediate, ...
    """

    id: str
    name: str
    kind: ActivityKind
    duration_minutes: int
    time_tags: frozenset[str] = field(default_factory=frozenset)
    difficulty: str = "beginner"

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "kind": self.kind.value,
            "duration_minutes": self.duration_minutes,
            "time_tags": sorted(self.time_tags),
            "difficulty": self.difficulty,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ActivityMetadata":
        """Create from a plain dictionary (e.g., a YAML catalog entry).

        Raises:
            KeyError: If ``id`` is missing
            ValueError: If ``kind`` or ``duration_minutes`` is invalid
        """
        tags = data.get("time_tags") or []
        if isinstance(tags, str):
            tags = [tags]
        return cls(
            id=str(data["id"]),
            name=str(data.get("name") or data["id"]),
            kind=ActivityKind(data.get("kind", "yoga")),
            duration_minutes=int(data.get("duration_minutes", 0)),
            time_tags=frozenset(str(t).lower() for t in tags),
            difficulty=str(data.get("difficulty", "beginner")),
        )


__all__ = ["ActivityKind", "ActivityMetadata"]
