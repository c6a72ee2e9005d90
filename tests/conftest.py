"""Shared fixtures for Stillpoint tests."""

from collections.abc import Callable
from datetime import datetime

import pytest

from stillpoint.catalog import ActivityKind, ActivityMetadata, StaticCatalog
from stillpoint.history import HistoryEntry
from stillpoint.timeofday import TimeBucket

EntryFactory = Callable[..., HistoryEntry]


def _activity(activity_id: str, kind: ActivityKind, *tags: str) -> ActivityMetadata:
    return ActivityMetadata(
        id=activity_id,
        name=activity_id.replace("-", " ").title(),
        kind=kind,
        duration_minutes=10,
        time_tags=frozenset(tags),
    )


@pytest.fixture
def catalog() -> StaticCatalog:
    """Small catalog with one activity per tag family.

    Order: sunrise-flow, desk-stretch, night-calm, power-core, box-breath,
    untagged.
    """
    return StaticCatalog(
        [
            _activity("sunrise-flow", ActivityKind.YOGA, "energy"),
            _activity("desk-stretch", ActivityKind.YOGA, "relax"),
            _activity("night-calm", ActivityKind.YOGA, "sleep"),
            _activity("power-core", ActivityKind.YOGA, "strength"),
            _activity("box-breath", ActivityKind.BREATHING, "calming"),
            _activity("untagged", ActivityKind.BREATHING),
        ],
        {
            TimeBucket.MORNING: "sunrise-flow",
            TimeBucket.MIDDAY: "desk-stretch",
            TimeBucket.AFTERNOON: "desk-stretch",
            TimeBucket.EVENING: "night-calm",
            TimeBucket.NIGHT: "night-calm",
        },
    )


@pytest.fixture
def entry() -> EntryFactory:
    """Factory for history entries completed in March 2024.

    ``entry("sunrise-flow", day=4, hour=7)`` is a practice on 2024-03-04 at 07:00.
    """

    def make(
        activity_id: str,
        day: int = 4,
        hour: int = 7,
        duration: float = 10,
        **kwargs: float | None,
    ) -> HistoryEntry:
        return HistoryEntry(
            activity_id=activity_id,
            completed_at=datetime(2024, 3, day, hour, 0),
            duration_minutes=duration,
            **kwargs,
        )

    return make
