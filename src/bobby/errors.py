"""Error types for Bobby.

Every error the user can trigger derives from BobbyError and carries a
human-readable message. The REPL prints that message and keeps going.
"""

INVALID_INDEX_MESSAGE = "My apologies. There is no task at that number!"


class BobbyError(Exception):
    """Base class for user-facing errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidIndexError(BobbyError):
    """Raised when an index does not address a task in the active list."""

    def __init__(self, message: str = INVALID_INDEX_MESSAGE) -> None:
        super().__init__(message)


class CommandError(BobbyError):
    """Raised when a command receives malformed arguments."""

    pass


class StorageError(BobbyError):
    """Raised when the task file cannot be written."""

    pass
