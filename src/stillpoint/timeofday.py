"""Time-of-day buckets and time-appropriateness checks.

Maps an hour of the day onto one of five fixed buckets and decides whether
a catalog activity is tagged for the bucket an hour falls in.
"""

from enum import Enum
from typing import TYPE_CHECKING

from .errors import InvalidArgumentError

if TYPE_CHECKING:
    from .catalog import CatalogAccessor


class TimeBucket(Enum):
    """Part of the day, in fixed enumeration order."""

    MORNING = "morning"  # 05:00-10:59
    MIDDAY = "midday"  # 11:00-14:59
    AFTERNOON = "afternoon"  # 15:00-17:59
    EVENING = "evening"  # 18:00-21:59
    NIGHT = "night"  # 22:00-04:59


# Half-open [start, end) hour ranges; NIGHT is everything else.
_BUCKET_RANGES: tuple[tuple[TimeBucket, int, int], ...] = (
    (TimeBucket.MORNING, 5, 11),
    (TimeBucket.MIDDAY, 11, 15),
    (TimeBucket.AFTERNOON, 15, 18),
    (TimeBucket.EVENING, 18, 22),
)

# Activity tags considered a good fit for each bucket. A bucket also accepts
# its own name so catalogs may tag activities with bucket names directly.
BUCKET_TAGS: dict[TimeBucket, frozenset[str]] = {
    TimeBucket.MORNING: frozenset({"morning", "energy", "strength"}),
    TimeBucket.MIDDAY: frozenset({"midday", "relax", "balance"}),
    TimeBucket.AFTERNOON: frozenset({"afternoon", "relax", "balance"}),
    TimeBucket.EVENING: frozenset({"evening", "relax", "sleep"}),
    TimeBucket.NIGHT: frozenset({"night", "relax", "sleep", "calming"}),
}


def get_time_bucket(hour: int) -> TimeBucket:
    """Classify an hour of the day.

    Args:
        hour: Hour in the range 0-23

    Returns:
        The TimeBucket containing the hour

    Raises:
        InvalidArgumentError: If hour is outside 0-23
    """
    if isinstance(hour, bool) or not isinstance(hour, int) or not 0 <= hour <= 23:
        raise InvalidArgumentError(f"Hour must be an integer in 0-23, got {hour!r}", "hour")

    for bucket, start, end in _BUCKET_RANGES:
        if start <= hour < end:
            return bucket
    return TimeBucket.NIGHT


def is_appropriate_for_time(catalog: "CatalogAccessor", activity_id: str, hour: int) -> bool:
    """Check whether an activity is tagged for the bucket of ``hour``.

    Activities missing from the catalog, or carrying no tags at all, are
    never considered appropriate.
    """
    activity = catalog.lookup(activity_id)
    if activity is None or not activity.time_tags:
        return False
    return not BUCKET_TAGS[get_time_bucket(hour)].isdisjoint(activity.time_tags)


__all__ = [
    "BUCKET_TAGS",
    "TimeBucket",
    "get_time_bucket",
    "is_appropriate_for_time",
]
