"""History module for Stillpoint.

Provides practice history records and parsing.
"""

from .models import HistoryEntry, HistoryProvider, load_history, parse_history, parse_timestamp

__all__ = [
    "HistoryEntry",
    "HistoryProvider",
    "load_history",
    "parse_history",
    "parse_timestamp",
]
