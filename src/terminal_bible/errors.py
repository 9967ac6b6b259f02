"""Exception types for Terminal Bible."""

from typing import Optional


class TerminalBibleError(Exception):
    """Base class for all Terminal Bible errors."""


class FetchError(TerminalBibleError):
    """Error looking up a passage from the verse service."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class FavoritesWriteError(TerminalBibleError):
    """Error persisting the favorites file."""
