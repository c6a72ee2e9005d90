"""Practice pattern analysis.

Reduces a history snapshot into a PatternProfile: favorite time of day,
average duration, most practiced activities, mood correlations and weekly
frequency.
"""

import logging
import math
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal
from types import MappingProxyType

from ..history import HistoryEntry
from ..timeofday import TimeBucket, get_time_bucket
from .models import FavoriteActivity, MoodCorrelation, PatternProfile

logger = logging.getLogger(__name__)

FAVORITES_LIMIT = 5
SECONDS_PER_DAY = 24 * 60 * 60


def finite(value: float | None) -> float | None:
    """The value if it is a finite number, else None."""
    if value is None or isinstance(value, bool) or not isinstance(value, int | float):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves away from zero (2.5 -> 3), unlike built-in round().

    Non-finite values round to 0.
    """
    if finite(value) is None:
        return 0.0
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def chronological(history: Sequence[HistoryEntry]) -> list[HistoryEntry]:
    """Return the valid entries of ``history`` oldest first.

    Works on a copy. Entries sharing a timestamp keep their input order.
    Malformed entries are dropped with a warning.
    """
    valid: list[HistoryEntry] = []
    for entry in history:
        if isinstance(entry, HistoryEntry) and entry.is_valid:
            valid.append(entry)
        else:
            logger.warning(f"Skipping malformed history entry: {entry!r}")
    # sorted() is stable, so equal timestamps keep input order
    return sorted(valid, key=lambda e: e.completed_at.timestamp())


def latest_entry(history: Sequence[HistoryEntry]) -> HistoryEntry | None:
    """Most recent valid entry; on equal timestamps the later one in input order."""
    latest: HistoryEntry | None = None
    for entry in history:
        if not isinstance(entry, HistoryEntry) or not entry.is_valid:
            continue
        if latest is None or entry.completed_at.timestamp() >= latest.completed_at.timestamp():
            latest = entry
    return latest


def analyze_patterns(
    history: Sequence[HistoryEntry],
    favorites_limit: int = FAVORITES_LIMIT,
) -> PatternProfile:
    """Analyze a user's practice history.

    Args:
        history: History snapshot in any order (not modified)
        favorites_limit: Maximum number of favorite activities to report

    Returns:
        PatternProfile; the empty profile when there is no usable history
    """
    entries = chronological(history)
    if not entries:
        return PatternProfile()

    total = len(entries)

    # Time-of-day histogram; dict order gives the enumeration tie-break
    bucket_counts = {bucket: 0 for bucket in TimeBucket}
    for entry in entries:
        bucket_counts[get_time_bucket(entry.completed_at.hour)] += 1
    favorite_time_bucket = max(bucket_counts, key=lambda b: bucket_counts[b])

    total_duration = sum(finite(entry.duration_minutes) or 0 for entry in entries)
    average_duration = int(round_half_up(total_duration / total))

    # Counts with first-seen index for an explicit tie-break
    counts: dict[str, int] = {}
    first_seen: dict[str, int] = {}
    for index, entry in enumerate(entries):
        if entry.activity_id not in counts:
            counts[entry.activity_id] = 0
            first_seen[entry.activity_id] = index
        counts[entry.activity_id] += 1

    ranked = sorted(counts, key=lambda a: (-counts[a], first_seen[a]))
    favorites = tuple(FavoriteActivity(a, counts[a]) for a in ranked[:favorites_limit])

    mood_totals: dict[str, float] = {}
    mood_samples: dict[str, int] = {}
    for entry in entries:
        improvement = finite(entry.mood_improvement)
        if improvement is None:
            continue
        mood_totals[entry.activity_id] = mood_totals.get(entry.activity_id, 0) + improvement
        mood_samples[entry.activity_id] = mood_samples.get(entry.activity_id, 0) + 1

    mood_correlations = {
        activity_id: MoodCorrelation(
            average_improvement=mood_totals[activity_id] / mood_samples[activity_id],
            sample_count=mood_samples[activity_id],
        )
        for activity_id in mood_totals
    }

    span_seconds = entries[-1].completed_at.timestamp() - entries[0].completed_at.timestamp()
    day_span = math.ceil(span_seconds / SECONDS_PER_DAY)
    weekly_frequency = round_half_up(total / day_span * 7, 1) if day_span > 0 else 0

    profile = PatternProfile(
        favorite_time_bucket=favorite_time_bucket,
        average_duration_minutes=average_duration,
        favorite_activities=favorites,
        mood_correlations=MappingProxyType(mood_correlations),
        weekly_frequency=weekly_frequency,
        total_entries=total,
    )
    logger.debug(
        "Analyzed %d entries: bucket=%s favorites=%s",
        total,
        favorite_time_bucket.value,
        [f.activity_id for f in favorites],
    )
    return profile


__all__ = [
    "FAVORITES_LIMIT",
    "analyze_patterns",
    "chronological",
    "finite",
    "latest_entry",
    "round_half_up",
]
