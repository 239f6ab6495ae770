"""Error action enum for handling filesystem errors during directory traversal."""

from enum import Enum


class ErrorAction(str, Enum):
    """Action to take when a filesystem error interrupts directory traversal.

    Values:
        RAISE: Abort the whole traversal with a TraversalError (default behavior)
        WARN: Log a warning and leave the unreadable entry out of the output
    """

    RAISE = "raise"
    WARN = "warn"
