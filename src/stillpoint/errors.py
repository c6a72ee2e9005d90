"""Error types for the Stillpoint recommendation engine.

The engine itself degrades to empty results instead of raising; these
exceptions cover caller mistakes and unreadable external inputs.
"""


class StillpointError(Exception):
    """Base exception for Stillpoint errors."""

    pass


class InvalidArgumentError(StillpointError, ValueError):
    """Raised when a caller passes an argument outside its valid range."""

    def __init__(self, message: str, argument: str | None = None) -> None:
        """Initialize argument error.

        Args:
            message: Error message.
            argument: Name of the offending argument, if known.
        """
        super().__init__(message)
        self.argument = argument


class CatalogError(StillpointError):
    """Raised when a catalog file cannot be read or is malformed."""

    pass


class HistoryFormatError(StillpointError):
    """Raised when a history file cannot be parsed at all."""

    pass


class StorageUnavailableError(StillpointError):
    """Raised when stored history cannot be read from MongoDB."""

    pass


__all__ = [
    "CatalogError",
    "HistoryFormatError",
    "InvalidArgumentError",
    "StillpointError",
    "StorageUnavailableError",
]
