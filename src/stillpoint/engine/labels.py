"""Canonical English labels for recommendations.

Button and tag texts a UI can show next to a recommendation. Localization
is the caller's concern.
"""

from ..timeofday import TimeBucket, get_time_bucket
from .models import Recommendation, RecommendationCategory

DEFAULT_BUTTON_TEXT = "Start Practice"
NEW_USER_BUTTON_TEXT = "Quick Start"

CATEGORY_BUTTON_TEXTS: dict[RecommendationCategory, str] = {
    RecommendationCategory.HISTORY: "Start Your Favorite",
    RecommendationCategory.ROUTINE: "Start Your Usual Practice",
    RecommendationCategory.MOOD: "Boost Your Mood",
    RecommendationCategory.EXPLORE: "Start Practice",
}

TIME_BUTTON_TEXTS: dict[TimeBucket, str] = {
    TimeBucket.MORNING: "Start Your Morning",
    TimeBucket.MIDDAY: "Take a Practice Break",
    TimeBucket.AFTERNOON: "Afternoon Reset",
    TimeBucket.EVENING: "Unwind This Evening",
    TimeBucket.NIGHT: "Evening Wind-down",
}

TIME_TAGS: dict[TimeBucket, str] = {
    TimeBucket.MORNING: "Morning pick-me-up",
    TimeBucket.MIDDAY: "Midday reset",
    TimeBucket.AFTERNOON: "Afternoon energy",
    TimeBucket.EVENING: "Evening calm",
    TimeBucket.NIGHT: "Sleep prep",
}


def button_text(recommendation: Recommendation, hour: int, has_history: bool = False) -> str:
    """Call-to-action text for a recommendation.

    Args:
        recommendation: Recommendation being shown
        hour: Current hour of day (0-23)
        has_history: Whether the user has any practice history

    Returns:
        Button label
    """
    if not has_history:
        return NEW_USER_BUTTON_TEXT
    if recommendation.category is RecommendationCategory.TIME:
        return TIME_BUTTON_TEXTS[get_time_bucket(hour)]
    return CATEGORY_BUTTON_TEXTS.get(recommendation.category, DEFAULT_BUTTON_TEXT)


def tag_text(recommendation: Recommendation, hour: int) -> str:
    """Short descriptive tag for a recommendation."""
    bucket = get_time_bucket(hour)
    category_tags = {
        RecommendationCategory.HISTORY: "Your favorite",
        RecommendationCategory.ROUTINE: f"Your {bucket.value} practice",
        RecommendationCategory.MOOD: "Mood booster",
        RecommendationCategory.TIME: TIME_TAGS[bucket],
        RecommendationCategory.FAVORITE: "You loved this",
        RecommendationCategory.EXPLORE: "Try this",
    }
    return category_tags.get(recommendation.category, recommendation.reason)


__all__ = ["button_text", "tag_text"]
