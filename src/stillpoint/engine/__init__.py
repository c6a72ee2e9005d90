"""Recommendation engine for Stillpoint.

Provides pattern analysis, primary and ranked recommendations, mood
analytics and display labels.
"""

from .labels import button_text, tag_text
from .models import (
    FavoriteActivity,
    MoodCorrelation,
    PatternProfile,
    Recommendation,
    RecommendationCategory,
)
from .mood import MoodSummary, MoodTrend, summarize_mood
from .patterns import analyze_patterns
from .recommender import Recommender, recommend, top_recommendations

__all__ = [
    "FavoriteActivity",
    "MoodCorrelation",
    "MoodSummary",
    "MoodTrend",
    "PatternProfile",
    "Recommendation",
    "RecommendationCategory",
    "Recommender",
    "analyze_patterns",
    "button_text",
    "recommend",
    "summarize_mood",
    "tag_text",
    "top_recommendations",
]
