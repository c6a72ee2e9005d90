"""MongoDB repository for practice history.

Implements the HistoryProvider protocol on top of a MongoDB collection.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import TYPE_CHECKING, Any

from ..history import HistoryEntry
from .retry import retry_on_connection_failure

if TYPE_CHECKING:
    from pymongo.collection import Collection
    from pymongo.database import Database

logger = logging.getLogger(__name__)


class MongoHistoryRepository:
    """Repository for completed practice activities."""

    COLLECTION_NAME = "practice_history"

    def __init__(self, database: Database, collection_name: str | None = None) -> None:
        """Initialize repository with database connection.

        Args:
            database: MongoDB database instance.
            collection_name: Collection override (defaults to practice_history).
        """
        self._collection: Collection = database[collection_name or self.COLLECTION_NAME]
        self._ensure_indexes()

    def _ensure_indexes(self) -> None:
        """Create indexes for efficient querying."""
        self._collection.create_index([("user_id", 1), ("completed_at", 1)])
        self._collection.create_index("activity_id")

    @retry_on_connection_failure()
    def insert(self, entry: HistoryEntry, user_id: str = "default") -> str:
        """Append a completed activity.

        Args:
            entry: History entry to store.
            user_id: Owner of the entry.

        Returns:
            Document ID of the stored entry.
        """
        doc_id = str(uuid.uuid4())
        document: dict[str, Any] = {"_id": doc_id, "user_id": user_id, **entry.to_dict()}
        self._collection.insert_one(document)
        return doc_id

    @retry_on_connection_failure()
    def get_history(self, user_id: str) -> list[HistoryEntry]:
        """Get a user's full history, oldest first."""
        cursor = self._collection.find({"user_id": user_id}).sort("completed_at", 1)
        entries = [HistoryEntry.from_dict(doc) for doc in cursor]
        logger.debug("Loaded %d history entries for %s", len(entries), user_id)
        return entries

    @retry_on_connection_failure()
    def get_since(self, user_id: str, start: datetime) -> list[HistoryEntry]:
        """Get a user's history completed at or after ``start``, oldest first."""
        cursor = self._collection.find(
            {"user_id": user_id, "completed_at": {"$gte": start}}
        ).sort("completed_at", 1)
        return [HistoryEntry.from_dict(doc) for doc in cursor]

    @retry_on_connection_failure()
    def count(self, user_id: str) -> int:
        """Count a user's history entries."""
        return self._collection.count_documents({"user_id": user_id})


__all__ = ["MongoHistoryRepository"]
