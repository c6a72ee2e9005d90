"""Built-in practice catalog.

Yoga sessions are declared before breathing exercises; that order is the
catalog's declaration order.
"""

from ..timeofday import TimeBucket
from .models import ActivityKind, ActivityMetadata
from .static import StaticCatalog

# (id, name, duration_minutes, focus, difficulty)
YOGA_SESSIONS: list[tuple[str, str, int, str, str]] = [
    ("morning-energizer", "5-min Morning Energizer", 5, "energy", "beginner"),
    ("lunch-break-relief", "10-min Lunch Break Relief", 10, "relax", "beginner"),
    ("evening-wind-down", "15-min Evening Wind-down", 15, "relax", "beginner"),
    ("quick-reset", "3-min Quick Reset", 3, "relax", "beginner"),
    ("desk-relief", "7-min Desk Relief", 7, "energy", "beginner"),
    ("hip-openers", "10-min Hip Openers", 10, "flexibility", "intermediate"),
    ("sleep-prep", "12-min Sleep Prep", 12, "relax", "beginner"),
    ("core-flow", "15-min Core Flow", 15, "strength", "intermediate"),
    ("balance-challenge", "20-min Balance Challenge", 20, "balance", "intermediate"),
    ("full-practice", "30-min Full Practice", 30, "full", "intermediate"),
    ("iyengar-foundation", "Iyengar Foundation", 15, "balance", "beginner"),
    ("sun-salutation", "Sun Salutation Flow", 6, "energy", "beginner"),
    ("standing-strong", "Standing Strong", 10, "strength", "beginner"),
    ("deep-backbend", "Deep Backbend Session", 12, "strength", "intermediate"),
    ("hamstring-release", "Hamstring Release", 15, "flexibility", "intermediate"),
    ("therapeutic-back-care", "Therapeutic Back Care", 10, "relax", "beginner"),
    ("pranayama-practice", "Pranayama Practice", 10, "relax", "beginner"),
    ("classical-complete", "Classical Complete Practice", 25, "full", "intermediate"),
]

# (id, name, default duration_minutes, category, difficulty)
BREATHING_EXERCISES: list[tuple[str, str, int, str, str]] = [
    ("box-breathing", "Box Breathing", 3, "calming", "beginner"),
    ("four-seven-eight", "4-7-8 Breathing", 2, "relaxing", "beginner"),
    ("energizing-breath", "Energizing Breath", 2, "energizing", "intermediate"),
    ("alternate-nostril", "Alternate Nostril Breathing", 5, "balancing", "intermediate"),
]

DEFAULT_ACTIVITIES: dict[TimeBucket, str] = {
    TimeBucket.MORNING: "morning-energizer",
    TimeBucket.MIDDAY: "lunch-break-relief",
    TimeBucket.AFTERNOON: "lunch-break-relief",
    TimeBucket.EVENING: "evening-wind-down",
    TimeBucket.NIGHT: "evening-wind-down",
}


def _build(rows: list[tuple[str, str, int, str, str]], kind: ActivityKind) -> list[ActivityMetadata]:
    return [
        ActivityMetadata(
            id=activity_id,
            name=name,
            kind=kind,
            duration_minutes=duration,
            time_tags=frozenset({tag}),
            difficulty=difficulty,
        )
        for activity_id, name, duration, tag, difficulty in rows
    ]


def builtin_catalog() -> StaticCatalog:
    """Create the built-in catalog of yoga sessions and breathing exercises."""
    activities = _build(YOGA_SESSIONS, ActivityKind.YOGA) + _build(
        BREATHING_EXERCISES, ActivityKind.BREATHING
    )
    return StaticCatalog(activities, DEFAULT_ACTIVITIES)


__all__ = [
    "BREATHING_EXERCISES",
    "DEFAULT_ACTIVITIES",
    "YOGA_SESSIONS",
    "builtin_catalog",
]
