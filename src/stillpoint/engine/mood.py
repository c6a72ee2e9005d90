"""Mood analytics over recent practice.

Summarizes how mood and energy changed across practices in a time window.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

from ..errors import InvalidArgumentError
from ..history import HistoryEntry
from .patterns import finite, round_half_up

logger = logging.getLogger(__name__)

TREND_THRESHOLD = 0.5


class MoodTrend(Enum):
    """Direction of mood change across recent practices."""

    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"
    INSUFFICIENT_DATA = "insufficient_data"


@dataclass(frozen=True)
class MoodSummary:
    """Mood and energy changes within a window of days."""

    average_mood_improvement: float
    average_energy_improvement: float
    sessions_with_mood_data: int
    total_sessions: int
    trend: MoodTrend
    improvement_rate: int  # percent of sessions where mood went up


def _in_window(entry: HistoryEntry, cutoff: datetime) -> bool:
    return entry.is_valid and entry.completed_at.timestamp() >= cutoff.timestamp()


def summarize_mood(
    history: Sequence[HistoryEntry],
    now: datetime,
    days: int = 30,
) -> MoodSummary:
    """Summarize mood changes over the last ``days`` days.

    Args:
        history: Practice history snapshot
        now: End of the window
        days: Window length in days

    Returns:
        MoodSummary; trend is INSUFFICIENT_DATA without mood samples

    Raises:
        InvalidArgumentError: If days is not positive
    """
    if days < 1:
        raise InvalidArgumentError(f"Days must be positive, got {days}", "days")

    cutoff = now - timedelta(days=days)
    recent = [e for e in history if isinstance(e, HistoryEntry) and _in_window(e, cutoff)]
    with_mood = [e for e in recent if finite(e.mood_improvement) is not None]

    if not with_mood:
        return MoodSummary(
            average_mood_improvement=0,
            average_energy_improvement=0,
            sessions_with_mood_data=0,
            total_sessions=len(recent),
            trend=MoodTrend.INSUFFICIENT_DATA,
            improvement_rate=0,
        )

    average_mood = sum(e.mood_improvement for e in with_mood) / len(with_mood)
    average_energy = sum(finite(e.energy_improvement) or 0 for e in with_mood) / len(with_mood)

    if average_mood > TREND_THRESHOLD:
        trend = MoodTrend.IMPROVING
    elif average_mood < -TREND_THRESHOLD:
        trend = MoodTrend.DECLINING
    else:
        trend = MoodTrend.STABLE

    improved = sum(1 for e in with_mood if e.mood_improvement > 0)

    return MoodSummary(
        average_mood_improvement=round_half_up(average_mood, 2),
        average_energy_improvement=round_half_up(average_energy, 2),
        sessions_with_mood_data=len(with_mood),
        total_sessions=len(recent),
        trend=trend,
        improvement_rate=int(round_half_up(improved / len(with_mood) * 100)),
    )


__all__ = ["MoodSummary", "MoodTrend", "summarize_mood"]
