"""Services for terminal-bible.

Provides the verse service client, the favorites store and text rendering.
"""

from terminal_bible.services.favorites import AddResult, FavoritesStore, RemoveResult
from terminal_bible.services.fetcher import VerseFetcher

__all__ = ["AddResult", "FavoritesStore", "RemoveResult", "VerseFetcher"]
