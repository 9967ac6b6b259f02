"""Session state for terminal-bible.

Holds the last viewed verse and the display flags for one run of the
program. Nothing here is persisted.
"""

from dataclasses import dataclass
from typing import Optional

from terminal_bible.models import Verse


@dataclass
class SessionState:
    """Mutable per-process state, owned by the command dispatcher.

    Attributes:
        last_verse: Most recent successful lookup (target of "save")
        show_references: Whether passages show per-verse reference labels
        active_color: Palette color for the verse pane (None means white)
    """

    last_verse: Optional[Verse] = None
    show_references: bool = False
    active_color: Optional[str] = None

    def toggle_references(self) -> bool:
        """Flip reference labels on or off.

        Returns:
            New value of show_references
        """
        self.show_references = not self.show_references
        return self.show_references

    def set_last_verse(self, verse: Verse) -> None:
        """Replace the last viewed verse."""
        self.last_verse = verse

    def set_color(self, color: Optional[str]) -> None:
        """Set the verse pane color (None to reset)."""
        self.active_color = color

    @property
    def display_color(self) -> str:
        """Color actually used for the verse pane."""
        return self.active_color or "white"
