"""MongoDB repository for recommendation acceptance tracking.

Records which recommendations were shown and whether the user took them.
Only the most recent records per user are kept.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import TYPE_CHECKING, Any

from ..engine import Recommendation
from .retry import retry_on_connection_failure

if TYPE_CHECKING:
    from pymongo.collection import Collection
    from pymongo.database import Database

logger = logging.getLogger(__name__)


class RecommendationLogRepository:
    """Repository for recommendation acceptance records."""

    COLLECTION_NAME = "recommendation_log"
    MAX_RECORDS = 100

    def __init__(
        self,
        database: Database,
        collection_name: str | None = None,
        max_records: int = MAX_RECORDS,
    ) -> None:
        """Initialize repository with database connection.

        Args:
            database: MongoDB database instance.
            collection_name: Collection override (defaults to recommendation_log).
            max_records: Records kept per user; older ones are pruned.
        """
        self._collection: Collection = database[collection_name or self.COLLECTION_NAME]
        self._max_records = max_records
        self._ensure_indexes()

    def _ensure_indexes(self) -> None:
        """Create indexes for efficient querying."""
        self._collection.create_index([("user_id", 1), ("timestamp", -1)])

    @retry_on_connection_failure()
    def track(
        self,
        recommendation: Recommendation,
        accepted: bool,
        timestamp: datetime,
        user_id: str = "default",
    ) -> str:
        """Record whether a recommendation was accepted.

        Args:
            recommendation: The recommendation that was shown.
            accepted: True if the user started the recommended activity.
            timestamp: When the user responded.
            user_id: User the recommendation was for.

        Returns:
            Document ID of the record.
        """
        doc_id = str(uuid.uuid4())
        document = {
            "_id": doc_id,
            "user_id": user_id,
            "activity_id": recommendation.activity_id,
            "reason": recommendation.reason,
            "category": recommendation.category.value,
            "confidence": recommendation.confidence,
            "accepted": accepted,
            "timestamp": timestamp,
            "hour": timestamp.hour,
        }
        self._collection.insert_one(document)
        self._prune(user_id)
        return doc_id

    def _prune(self, user_id: str) -> None:
        stale = self._collection.find({"user_id": user_id}, {"_id": 1}).sort(
            "timestamp", -1
        ).skip(self._max_records)
        stale_ids = [doc["_id"] for doc in stale]
        if stale_ids:
            self._collection.delete_many({"_id": {"$in": stale_ids}})
            logger.debug("Pruned %d recommendation records for %s", len(stale_ids), user_id)

    @retry_on_connection_failure()
    def recent(self, user_id: str, limit: int | None = None) -> list[dict[str, Any]]:
        """Get a user's records, most recent first."""
        cursor = self._collection.find({"user_id": user_id}).sort("timestamp", -1)
        if limit is not None:
            cursor = cursor.limit(limit)
        return list(cursor)

    @retry_on_connection_failure()
    def acceptance_rate(self, user_id: str) -> float:
        """Fraction of a user's recorded recommendations that were accepted."""
        total = self._collection.count_documents({"user_id": user_id})
        if total == 0:
            return 0.0
        accepted = self._collection.count_documents({"user_id": user_id, "accepted": True})
        return accepted / total


__all__ = ["RecommendationLogRepository"]
