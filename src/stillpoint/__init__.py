"""Stillpoint - adaptive practice recommendations.

Stillpoint suggests which yoga session or breathing exercise to do next:
- Pattern analysis of past practice (time of day, favorites, mood)
- A primary recommendation from an ordered decision policy
- A ranked, de-duplicated list of alternatives

Usage:
    python -m stillpoint --history history.json --limit 3
    python -m stillpoint --profile prod --user alice
"""

__version__ = "0.1.0"

from .catalog import ActivityMetadata, CatalogAccessor, StaticCatalog, builtin_catalog
from .config import StillpointConfig
from .config.loader import load_config
from .engine import (
    PatternProfile,
    Recommendation,
    RecommendationCategory,
    Recommender,
    analyze_patterns,
    recommend,
    top_recommendations,
)
from .errors import InvalidArgumentError, StillpointError
from .history import HistoryEntry
from .timeofday import TimeBucket, get_time_bucket, is_appropriate_for_time

__all__ = [
    "ActivityMetadata",
    "CatalogAccessor",
    "HistoryEntry",
    "InvalidArgumentError",
    "PatternProfile",
    "Recommendation",
    "RecommendationCategory",
    "Recommender",
    "StaticCatalog",
    "StillpointConfig",
    "StillpointError",
    "TimeBucket",
    "__version__",
    "analyze_patterns",
    "builtin_catalog",
    "get_time_bucket",
    "is_appropriate_for_time",
    "load_config",
    "recommend",
    "top_recommendations",
]
