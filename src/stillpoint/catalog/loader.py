"""YAML catalog loader.

Catalog files look like::

    activities:
      - id: morning-energizer
        name: 5-min Morning Energizer
        kind: yoga
        duration_minutes: 5
        time_tags: [energy]
    defaults:
      morning: morning-energizer
      evening: evening-wind-down
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from ..errors import CatalogError
from ..timeofday import TimeBucket
from .models import ActivityMetadata
from .static import StaticCatalog

logger = logging.getLogger(__name__)


def catalog_from_dict(data: dict[str, Any]) -> StaticCatalog:
    """Build a catalog from parsed YAML data.

    Raises:
        CatalogError: If an activity or default entry is invalid
    """
    raw_activities = data.get("activities") or []
    if not isinstance(raw_activities, list):
        raise CatalogError("'activities' must be a list")

    activities: list[ActivityMetadata] = []
    for index, raw in enumerate(raw_activities):
        if not isinstance(raw, dict):
            raise CatalogError(f"Activity #{index} must be a mapping")
        try:
            activities.append(ActivityMetadata.from_dict(raw))
        except (KeyError, ValueError, TypeError) as e:
            raise CatalogError(f"Invalid activity #{index}: {e}") from e

    raw_defaults = data.get("defaults") or {}
    if not isinstance(raw_defaults, dict):
        raise CatalogError("'defaults' must be a mapping of time bucket to activity id")

    defaults: dict[TimeBucket, str] = {}
    for bucket_name, activity_id in raw_defaults.items():
        try:
            bucket = TimeBucket(str(bucket_name).lower())
        except ValueError as e:
            raise CatalogError(f"Unknown time bucket in defaults: {bucket_name}") from e
        defaults[bucket] = str(activity_id)

    return StaticCatalog(activities, defaults)


def load_catalog(path: str | Path) -> StaticCatalog:
    """Load a catalog from a YAML file.

    Args:
        path: Path to the catalog YAML file

    Returns:
        StaticCatalog with activities in file order

    Raises:
        CatalogError: If the file is missing, unparseable or invalid
    """
    path = Path(path)
    if not path.exists():
        raise CatalogError(f"Catalog file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise CatalogError(f"Invalid YAML in catalog {path}: {e}") from e

    if not isinstance(data, dict):
        raise CatalogError(f"Catalog {path} must contain a mapping")

    catalog = catalog_from_dict(data)
    logger.debug(f"Loaded {len(catalog)} activities from {path}")
    return catalog


__all__ = ["catalog_from_dict", "load_catalog"]
