"""Favorite verses persisted to a local JSON file.

The whole file is read on every access and rewritten on every change.
A single user and a single process are assumed, so there is no locking.
"""

import json
from enum import Enum
from pathlib import Path

from terminal_bible.errors import FavoritesWriteError
from terminal_bible.logging_config import get_logger
from terminal_bible.models import Verse

logger = get_logger(__name__)


class AddResult(Enum):
    """Outcome of adding a favorite."""

    ADDED = "added"
    ALREADY_EXISTS = "already_exists"


class RemoveResult(Enum):
    """Outcome of removing a favorite."""

    REMOVED = "removed"
    NOT_FOUND = "not_found"


class FavoritesStore:
    """Read/modify/write store for the favorites JSON array.

    Attributes:
        path: Location of the favorites file
    """

    def __init__(self, path: Path):
        """Initialize the store.

        Args:
            path: Location of the favorites file (created on first save)
        """
        self.path = Path(path)

    def load(self) -> list[Verse]:
        """Load all favorites in save order.

        A missing, unreadable or corrupt file yields an empty list.

        Returns:
            List of saved verses
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            if not isinstance(raw, list):
                raise ValueError(f"expected a JSON array, got {type(raw).__name__}")
            return [Verse.from_dict(item) for item in raw]
        except FileNotFoundError:
            return []
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.warning(f"Ignoring unreadable favorites file {self.path}: {e}")
            return []

    def save(self, favorites: list[Verse]) -> None:
        """Overwrite the file with the given favorites.

        Args:
            favorites: Complete list to persist

        Raises:
            FavoritesWriteError: If the file cannot be written
        """
        payload = json.dumps([v.to_dict() for v in favorites], indent=2, ensure_ascii=False)
        try:
            self.path.write_text(payload, encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to write favorites to {self.path}: {e}")
            raise FavoritesWriteError(f"Could not save favorites to {self.path}: {e}") from e
        logger.debug(f"Wrote {len(favorites)} favorite(s) to {self.path}")

    def contains(self, reference: str) -> bool:
        """Check whether a reference is already saved (case-insensitive)."""
        key = reference.lower()
        return any(v.key == key for v in self.load())

    def add(self, verse: Verse) -> AddResult:
        """Append a verse unless its reference is already saved.

        Args:
            verse: Verse to bookmark

        Returns:
            ADDED if written, ALREADY_EXISTS if a matching reference exists

        Raises:
            FavoritesWriteError: If the file cannot be written
        """
        favorites = self.load()
        if any(v.key == verse.key for v in favorites):
            return AddResult.ALREADY_EXISTS

        favorites.append(verse)
        self.save(favorites)
        logger.info(f"Saved favorite: {verse.reference}")
        return AddResult.ADDED

    def remove(self, reference: str) -> RemoveResult:
        """Remove every favorite whose reference matches (case-insensitive).

        Args:
            reference: Reference to delete

        Returns:
            REMOVED if anything was deleted, NOT_FOUND otherwise

        Raises:
            FavoritesWriteError: If the file cannot be written
        """
        key = reference.lower()
        favorites = self.load()
        kept = [v for v in favorites if v.key != key]

        if len(kept) == len(favorites):
            return RemoveResult.NOT_FOUND

        self.save(kept)
        logger.info(f"Removed favorite: {reference}")
        return RemoveResult.REMOVED
