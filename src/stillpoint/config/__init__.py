"""Configuration module for Stillpoint.

This module provides configuration loading and profile management.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol


@dataclass
class EngineConfig:
    """Recommendation engine thresholds."""

    default_limit: int = 3
    favorites_limit: int = 5
    strong_favorite_count: int = 3
    override_favorite_count: int = 5
    routine_min_entries: int = 3


@dataclass
class CatalogConfig:
    """Activity catalog configuration."""

    path: str | None = None  # None selects the built-in catalog


@dataclass
class StorageConfig:
    """MongoDB history storage configuration."""

    enabled: bool = False
    uri: str = "mongodb://localhost:27017"
    database_name: str = "stillpoint"
    history_collection: str = "practice_history"
    recommendation_collection: str = "recommendation_log"
    recommendation_log_limit: int = 100
    server_selection_timeout_ms: int = 5000


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"


@dataclass
class StillpointConfig:
    """Main Stillpoint configuration."""

    engine: EngineConfig = field(default_factory=EngineConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigLoader(Protocol):
    """Protocol for configuration loading."""

    def load(self, path: Path) -> StillpointConfig:
        """Load configuration from file path."""
        ...

    def load_profile(self, profile: str) -> StillpointConfig:
        """Load configuration by profile name (dev, prod, test)."""
        ...

    def get_config_dir(self) -> Path:
        """Get the configuration directory path."""
        ...


# Public API
__all__ = [
    "CatalogConfig",
    "ConfigLoader",
    "EngineConfig",
    "LoggingConfig",
    "StillpointConfig",
    "StorageConfig",
]
