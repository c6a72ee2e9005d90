"""MongoDB storage client for Stillpoint.

Provides connection management, retry logic, and repository access.
"""

import logging
from typing import Any

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import ConnectionFailure, ServerSelectionTimeoutError

from ..config import StorageConfig
from .history import MongoHistoryRepository
from .recommendations import RecommendationLogRepository
from .retry import retry_on_connection_failure

logger = logging.getLogger(__name__)


class MongoStorageClient:
    """High-level MongoDB storage client.

    Manages connection and provides access to repositories.
    """

    def __init__(self, config: StorageConfig | None = None) -> None:
        """Initialize the storage client.

        Args:
            config: Storage settings (defaults if omitted).
        """
        self._config = config or StorageConfig()
        self._client: MongoClient[dict[str, Any]] | None = None
        self._db: Database[dict[str, Any]] | None = None
        self._history: MongoHistoryRepository | None = None
        self._recommendations: RecommendationLogRepository | None = None
        self._connected = False

    @retry_on_connection_failure(max_retries=3)
    def connect(self) -> None:
        """Connect to MongoDB.

        Raises:
            ConnectionFailure: If connection fails after retries.
        """
        if self._connected:
            return

        try:
            self._client = MongoClient(
                self._config.uri,
                serverSelectionTimeoutMS=self._config.server_selection_timeout_ms,
            )

            # Verify connection
            self._client.admin.command("ping")
        except (ConnectionFailure, ServerSelectionTimeoutError) as e:
            logger.error("Failed to connect to MongoDB: %s", str(e))
            self._connected = False
            raise

        self._attach(self._client[self._config.database_name])
        logger.info("Connected to MongoDB at %s", self._config.uri)

    def _attach(self, database: Database[dict[str, Any]]) -> None:
        self._db = database
        self._history = MongoHistoryRepository(database, self._config.history_collection)
        self._recommendations = RecommendationLogRepository(
            database,
            self._config.recommendation_collection,
            max_records=self._config.recommendation_log_limit,
        )
        self._connected = True

    def disconnect(self) -> None:
        """Disconnect from MongoDB."""
        if self._client is not None:
            self._client.close()
            logger.info("Disconnected from MongoDB")
        self._client = None
        self._db = None
        self._history = None
        self._recommendations = None
        self._connected = False

    def is_connected(self) -> bool:
        """Check if connected to MongoDB."""
        return self._connected and self._db is not None

    @property
    def history(self) -> MongoHistoryRepository:
        """Get the practice history repository.

        Raises:
            RuntimeError: If not connected.
        """
        if self._history is None:
            raise RuntimeError("Not connected to MongoDB. Call connect() first.")
        return self._history

    @property
    def recommendations(self) -> RecommendationLogRepository:
        """Get the recommendation log repository.

        Raises:
            RuntimeError: If not connected.
        """
        if self._recommendations is None:
            raise RuntimeError("Not connected to MongoDB. Call connect() first.")
        return self._recommendations

    @property
    def database(self) -> Database[dict[str, Any]]:
        """Get the database instance.

        Raises:
            RuntimeError: If not connected.
        """
        if self._db is None:
            raise RuntimeError("Not connected to MongoDB. Call connect() first.")
        return self._db

    def __enter__(self) -> "MongoStorageClient":
        """Context manager entry."""
        self.connect()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit."""
        self.disconnect()


__all__ = ["MongoStorageClient"]
