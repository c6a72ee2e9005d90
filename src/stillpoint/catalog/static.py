"""In-memory catalog accessor.

Provides the read-only lookup capability the engine consumes.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Protocol

from ..timeofday import TimeBucket
from .models import ActivityMetadata

logger = logging.getLogger(__name__)


class CatalogAccessor(Protocol):
    """Protocol for read-only catalog access."""

    def lookup(self, activity_id: str) -> ActivityMetadata | None:
        """Resolve an activity id, or None if it is not in the catalog."""
        ...

    def list_all(self) -> list[ActivityMetadata]:
        """List every activity in fixed declaration order."""
        ...

    def default_activity_for(self, bucket: TimeBucket) -> str:
        """Get the default activity id for a time bucket."""
        ...


class StaticCatalog:
    """Catalog backed by an ordered, immutable sequence of activities.

    Declaration order is preserved for ``list_all``. Defaults may point at
    ids that are not in the catalog; callers must resolve them with
    ``lookup`` before use.
    """

    def __init__(
        self,
        activities: Iterable[ActivityMetadata],
        defaults: Mapping[TimeBucket, str] | None = None,
    ) -> None:
        """Initialize catalog.

        Args:
            activities: Activities in declaration order
            defaults: Default activity id per time bucket
        """
        self._activities: tuple[ActivityMetadata, ...] = tuple(activities)
        self._by_id: dict[str, ActivityMetadata] = {}
        for activity in self._activities:
            if activity.id in self._by_id:
                logger.warning(f"Duplicate catalog id '{activity.id}', keeping first entry")
                continue
            self._by_id[activity.id] = activity
        self._defaults: dict[TimeBucket, str] = dict(defaults or {})

    def lookup(self, activity_id: str) -> ActivityMetadata | None:
        return self._by_id.get(activity_id)

    def list_all(self) -> list[ActivityMetadata]:
        return list(self._by_id.values())

    def default_activity_for(self, bucket: TimeBucket) -> str:
        return self._defaults.get(bucket, "")

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, activity_id: object) -> bool:
        return activity_id in self._by_id


__all__ = ["CatalogAccessor", "StaticCatalog"]
