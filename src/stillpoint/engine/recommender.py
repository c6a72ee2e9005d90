"""Practice recommendations from history patterns.

Picks the activity a user should do next with an ordered decision policy,
and assembles a ranked, de-duplicated list of alternatives around it.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import replace
from datetime import datetime

from ..catalog import CatalogAccessor, builtin_catalog
from ..config import EngineConfig
from ..errors import InvalidArgumentError
from ..history import HistoryEntry
from ..timeofday import TimeBucket, get_time_bucket, is_appropriate_for_time
from .models import PatternProfile, Recommendation, RecommendationCategory
from .patterns import analyze_patterns, latest_entry

logger = logging.getLogger(__name__)

# Reason and confidence for the time-of-day default of each bucket
TIME_DEFAULTS: dict[TimeBucket, tuple[str, float]] = {
    TimeBucket.MORNING: ("Start your day with energy", 0.9),
    TimeBucket.MIDDAY: ("Perfect for a midday reset", 0.9),
    TimeBucket.AFTERNOON: ("Release afternoon tension", 0.85),
    TimeBucket.EVENING: ("Unwind from your day", 0.9),
    TimeBucket.NIGHT: ("Prepare for restful sleep", 0.85),
}

NEW_USER_CONFIDENCE = 0.5
ROUTINE_CONFIDENCE = 0.8
MOOD_CONFIDENCE = 0.85
FALLBACK_CONFIDENCE = 0.7
MAX_FAVORITE_CONFIDENCE = 0.95

FAVORITE_CONFIDENCE = 0.8
BEST_MOOD_CONFIDENCE = 0.75
EXPLORE_CONFIDENCE = 0.6


class Recommender:
    """Recommends practice activities from a history snapshot.

    Stateless between calls: every call re-analyzes the history it is given
    and reads the catalog without modifying it.
    """

    def __init__(
        self,
        catalog: CatalogAccessor,
        config: EngineConfig | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize recommender.

        Args:
            catalog: Read-only catalog accessor
            config: Engine thresholds (defaults if omitted)
            clock: Source of the current time for top_recommendations
        """
        self._catalog = catalog
        self._config = config or EngineConfig()
        self._clock = clock or datetime.now

    def analyze(self, history: Sequence[HistoryEntry]) -> PatternProfile:
        """Analyze history with the configured favorites limit."""
        return analyze_patterns(history, favorites_limit=self._config.favorites_limit)

    def recommend(
        self,
        current_time: datetime,
        history: Sequence[HistoryEntry],
    ) -> Recommendation | None:
        """Pick the single best activity for now.

        Args:
            current_time: Time the recommendation is for
            history: Practice history snapshot (not modified)

        Returns:
            Primary recommendation, or None if nothing in the catalog can be
            recommended (e.g., an empty catalog)
        """
        return self._recommend(current_time, history, self.analyze(history))

    def top_recommendations(
        self,
        history: Sequence[HistoryEntry],
        limit: int | None = None,
        current_time: datetime | None = None,
    ) -> list[Recommendation]:
        """Build a ranked list of distinct recommendations.

        Args:
            history: Practice history snapshot (not modified)
            limit: Maximum list length (config default if omitted)
            current_time: Time the list is for (clock if omitted)

        Returns:
            Up to ``limit`` recommendations; the first is the primary one

        Raises:
            InvalidArgumentError: If limit is not a positive integer
        """
        if limit is None:
            limit = self._config.default_limit
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise InvalidArgumentError(f"Limit must be a positive integer, got {limit!r}", "limit")

        now = current_time or self._clock()
        hour = now.hour
        profile = self.analyze(history)

        recommendations: list[Recommendation] = []
        seen: set[str] = set()

        def add(recommendation: Recommendation) -> None:
            recommendations.append(recommendation)
            seen.add(recommendation.activity_id)

        # Without a primary (no resolvable default) the list is built from
        # the remaining layers and nothing is marked primary
        primary = self._recommend(now, history, profile)
        if primary is not None:
            add(replace(primary, is_primary=True))

        # Time-appropriate pick
        time_pick = self._time_default(get_time_bucket(hour))
        if time_pick and time_pick.activity_id not in seen and len(recommendations) < limit:
            add(time_pick)

        # Favorites by rank
        for favorite in profile.favorite_activities:
            if len(recommendations) >= limit:
                break
            if favorite.activity_id in seen or not self._resolves(favorite.activity_id):
                continue
            add(
                Recommendation(
                    activity_id=favorite.activity_id,
                    reason=f"You've loved this {favorite.count}x",
                    confidence=FAVORITE_CONFIDENCE,
                    category=RecommendationCategory.FAVORITE,
                )
            )

        # Best mood booster
        if len(recommendations) < limit and profile.mood_correlations:
            best = self._best_mood_activity(profile)
            if best and best not in seen:
                add(
                    Recommendation(
                        activity_id=best,
                        reason="Great for your mood",
                        confidence=BEST_MOOD_CONFIDENCE,
                        category=RecommendationCategory.MOOD,
                    )
                )

        # Fill with catalog order
        for activity in self._catalog.list_all():
            if len(recommendations) >= limit:
                break
            if activity.id in seen:
                continue
            add(
                Recommendation(
                    activity_id=activity.id,
                    reason=(
                        "Perfect for now"
                        if is_appropriate_for_time(self._catalog, activity.id, hour)
                        else "Try something new"
                    ),
                    confidence=EXPLORE_CONFIDENCE,
                    category=RecommendationCategory.EXPLORE,
                )
            )

        return recommendations[:limit]

    def _recommend(
        self,
        current_time: datetime,
        history: Sequence[HistoryEntry],
        profile: PatternProfile,
    ) -> Recommendation | None:
        hour = current_time.hour
        bucket = get_time_bucket(hour)

        if profile.total_entries == 0:
            default = self._time_default(bucket)
            if default:
                logger.debug("No history, using %s default", bucket.value)
                return replace(default, confidence=NEW_USER_CONFIDENCE)
            return None

        favorite = self._strong_favorite(profile, hour)
        if favorite:
            return favorite

        if (
            profile.total_entries >= self._config.routine_min_entries
            and bucket == profile.favorite_time_bucket
        ):
            default = self._time_default(bucket)
            if default:
                logger.debug("Routine match for %s", bucket.value)
                return Recommendation(
                    activity_id=default.activity_id,
                    reason="Perfect for your usual practice time",
                    confidence=ROUTINE_CONFIDENCE,
                    category=RecommendationCategory.ROUTINE,
                )

        latest = latest_entry(history)
        if latest is not None and latest.pre_mood is not None:
            best = self._best_mood_activity(profile)
            if best:
                logger.debug("Mood match: %s", best)
                return Recommendation(
                    activity_id=best,
                    reason="This always lifts your spirits",
                    confidence=MOOD_CONFIDENCE,
                    category=RecommendationCategory.MOOD,
                )

        default = self._time_default(bucket)
        if default:
            return replace(default, confidence=FALLBACK_CONFIDENCE)
        logger.debug("No resolvable recommendation for %s", current_time.isoformat())
        return None

    def _strong_favorite(self, profile: PatternProfile, hour: int) -> Recommendation | None:
        candidate = next(
            (
                f
                for f in profile.favorite_activities
                if f.count >= self._config.strong_favorite_count
            ),
            None,
        )
        if candidate is None:
            return None
        if not self._resolves(candidate.activity_id):
            logger.debug("Favorite '%s' is no longer in the catalog", candidate.activity_id)
            return None
        if (
            is_appropriate_for_time(self._catalog, candidate.activity_id, hour)
            or candidate.count >= self._config.override_favorite_count
        ):
            return Recommendation(
                activity_id=candidate.activity_id,
                reason=f"Your favorite practice, done {candidate.count} times",
                confidence=min(candidate.count / 10, MAX_FAVORITE_CONFIDENCE),
                category=RecommendationCategory.HISTORY,
            )
        return None

    def _best_mood_activity(self, profile: PatternProfile) -> str | None:
        """Resolvable activity with the highest average mood improvement."""
        best_id: str | None = None
        best_value = 0.0
        for activity_id, correlation in profile.mood_correlations.items():
            if correlation.sample_count < 1 or not self._resolves(activity_id):
                continue
            # Strict comparison keeps the first seen on ties
            if best_id is None or correlation.average_improvement > best_value:
                best_id = activity_id
                best_value = correlation.average_improvement
        return best_id

    def _time_default(self, bucket: TimeBucket) -> Recommendation | None:
        activity_id = self._catalog.default_activity_for(bucket)
        if not activity_id or not self._resolves(activity_id):
            return None
        reason, confidence = TIME_DEFAULTS[bucket]
        return Recommendation(
            activity_id=activity_id,
            reason=reason,
            confidence=confidence,
            category=RecommendationCategory.TIME,
        )

    def _resolves(self, activity_id: str) -> bool:
        return self._catalog.lookup(activity_id) is not None


def recommend(
    current_time: datetime,
    history: Sequence[HistoryEntry],
    catalog: CatalogAccessor | None = None,
) -> Recommendation | None:
    """Recommend one activity using the built-in catalog unless one is given."""
    return Recommender(catalog or builtin_catalog()).recommend(current_time, history)


def top_recommendations(
    history: Sequence[HistoryEntry],
    limit: int = 3,
    current_time: datetime | None = None,
    catalog: CatalogAccessor | None = None,
) -> list[Recommendation]:
    """Ranked recommendations using the built-in catalog unless one is given."""
    return Recommender(catalog or builtin_catalog()).top_recommendations(
        history, limit=limit, current_time=current_time
    )


__all__ = ["Recommender", "TIME_DEFAULTS", "recommend", "top_recommendations"]
