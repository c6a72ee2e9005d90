"""MongoDB storage module for Stillpoint.

Provides the persisted practice history and the recommendation
acceptance log.
"""

from .client import MongoStorageClient
from .history import MongoHistoryRepository
from .recommendations import RecommendationLogRepository
from .retry import retry_on_connection_failure

__all__ = [
    "MongoHistoryRepository",
    "MongoStorageClient",
    "RecommendationLogRepository",
    "retry_on_connection_failure",
]
