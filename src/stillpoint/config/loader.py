"""YAML configuration loader with inheritance support.

Supports:
- Loading YAML config files
- Config inheritance via 'extends' key
- Deep merging of nested config
- Environment overrides for deployment secrets
"""

import os
from pathlib import Path
from typing import Any

import yaml

from . import (
    CatalogConfig,
    EngineConfig,
    LoggingConfig,
    StillpointConfig,
    StorageConfig,
)
from .profiles import Profile, detect_profile, get_profile_path

MONGO_URI_ENV = "STILLPOINT_MONGO_URI"


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    Values from override take precedence. Nested dicts are merged recursively.
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_yaml_with_inheritance(path: Path) -> dict[str, Any]:
    """Load YAML file with inheritance support.

    If the file contains an 'extends' key, the base config is loaded first
    and merged with the current config.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        config = yaml.safe_load(f) or {}

    if "extends" in config:
        base_name = config.pop("extends")
        base_config = load_yaml_with_inheritance(path.parent / base_name)
        config = deep_merge(base_config, config)

    return config


def dict_to_config(data: dict[str, Any]) -> StillpointConfig:
    """Convert raw dict to typed StillpointConfig dataclass."""
    root = data.get("stillpoint", {}) or {}

    # YAML sections may be present but empty (None)
    def section(key: str) -> dict[str, Any]:
        value = root.get(key, {})
        return value if value is not None else {}

    return StillpointConfig(
        engine=EngineConfig(**section("engine")),
        catalog=CatalogConfig(**section("catalog")),
        storage=_apply_env_overrides(StorageConfig(**section("storage"))),
        logging=LoggingConfig(**section("logging")),
    )


def _apply_env_overrides(storage: StorageConfig) -> StorageConfig:
    uri = os.environ.get(MONGO_URI_ENV)
    if uri:
        storage.uri = uri
    return storage


class YAMLConfigLoader:
    """YAML configuration loader implementation."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize loader with optional config directory.

        Args:
            config_dir: Directory containing config files.
                        Defaults to 'config' relative to project root.
        """
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent.parent / "config"
        self._config_dir = config_dir

    def load(self, path: Path) -> StillpointConfig:
        """Load configuration from file path.

        Args:
            path: Path to YAML config file

        Returns:
            Parsed StillpointConfig
        """
        return dict_to_config(load_yaml_with_inheritance(path))

    def load_profile(self, profile: str) -> StillpointConfig:
        """Load configuration by profile name.

        Args:
            profile: Profile name (e.g., 'dev', 'prod')

        Returns:
            Parsed StillpointConfig for the profile

        Raises:
            ValueError: If the profile name is unknown
        """
        return self.load(get_profile_path(Profile(profile), self._config_dir))

    def get_config_dir(self) -> Path:
        """Get the configuration directory path."""
        return self._config_dir


def load_config(path: str | Path | None = None, profile: str | None = None) -> StillpointConfig:
    """Load Stillpoint configuration.

    Args:
        path: Direct path to config file (takes precedence)
        profile: Profile name ('dev', 'prod', 'test') if path not given;
            detected from STILLPOINT_PROFILE when omitted

    Returns:
        Parsed StillpointConfig

    Examples:
        >>> config = load_config(profile="dev")
        >>> config = load_config(path="/path/to/config.yaml")
    """
    loader = YAMLConfigLoader()

    if path is not None:
        return loader.load(Path(path))
    elif profile is not None:
        return loader.load_profile(profile)
    else:
        return loader.load_profile(detect_profile().value)


__all__ = [
    "MONGO_URI_ENV",
    "YAMLConfigLoader",
    "deep_merge",
    "dict_to_config",
    "load_config",
    "load_yaml_with_inheritance",
]
