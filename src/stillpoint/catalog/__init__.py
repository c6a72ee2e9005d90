"""Catalog module for Stillpoint.

Provides read-only access to yoga sessions and breathing exercises.
"""

from .builtin import builtin_catalog
from .loader import catalog_from_dict, load_catalog
from .models import ActivityKind, ActivityMetadata
from .static import CatalogAccessor, StaticCatalog

__all__ = [
    "ActivityKind",
    "ActivityMetadata",
    "CatalogAccessor",
    "StaticCatalog",
    "builtin_catalog",
    "catalog_from_dict",
    "load_catalog",
]
