"""Data models for the recommendation engine.

Defines PatternProfile, Recommendation and RecommendationCategory.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from ..errors import InvalidArgumentError
from ..timeofday import TimeBucket


class RecommendationCategory(Enum):
    """Why an activity was recommended."""

    HISTORY = "history"  # strong personal favorite
    ROUTINE = "routine"  # user usually practices at this time
    MOOD = "mood"  # best mood improvement
    TIME = "time"  # time-of-day default
    FAVORITE = "favorite"  # frequently practiced
    EXPLORE = "explore"  # catalog filler


@dataclass(frozen=True)
class FavoriteActivity:
    """An activity ranked by how often it was practiced."""

    activity_id: str
    count: int


@dataclass(frozen=True)
class MoodCorrelation:
    """Average mood improvement observed after an activity."""

    average_improvement: float
    sample_count: int


@dataclass(frozen=True)
class PatternProfile:
    """Summary of a user's practice history.

    Attributes:
        favorite_time_bucket: Most common time bucket, None without history
        average_duration_minutes: Mean practiced duration, rounded
        favorite_activities: Top activities by count, most practiced first
        mood_correlations: Mood improvement per activity with mood data
        weekly_frequency: Sessions per week across the history span
        total_entries: Number of entries that entered the statistics
    """

    favorite_time_bucket: TimeBucket | None = None
    average_duration_minutes: int = 0
    favorite_activities: tuple[FavoriteActivity, ...] = ()
    mood_correlations: Mapping[str, MoodCorrelation] = field(
        default_factory=lambda: MappingProxyType({})
    )
    weekly_frequency: float = 0
    total_entries: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "favorite_time_bucket": (
                self.favorite_time_bucket.value if self.favorite_time_bucket else None
            ),
            "average_duration_minutes": self.average_duration_minutes,
            "favorite_activities": [
                {"activity_id": f.activity_id, "count": f.count} for f in self.favorite_activities
            ],
            "mood_correlations": {
                activity_id: {
                    "average_improvement": c.average_improvement,
                    "sample_count": c.sample_count,
                }
                for activity_id, c in self.mood_correlations.items()
            },
            "weekly_frequency": self.weekly_frequency,
            "total_entries": self.total_entries,
        }


@dataclass(frozen=True)
class Recommendation:
    """A suggested activity with its justification."""

    activity_id: str
    reason: str
    confidence: float
    category: RecommendationCategory
    is_primary: bool = False

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence <= 1.0:
            raise InvalidArgumentError(
                f"Confidence must be within [0, 1], got {self.confidence}", "confidence"
            )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "activity_id": self.activity_id,
            "reason": self.reason,
            "confidence": self.confidence,
            "category": self.category.value,
            "is_primary": self.is_primary,
        }


__all__ = [
    "FavoriteActivity",
    "MoodCorrelation",
    "PatternProfile",
    "Recommendation",
    "RecommendationCategory",
]
