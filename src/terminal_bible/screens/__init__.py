"""Screens for terminal-bible."""

from terminal_bible.screens.reader import ReaderScreen, VersePane

__all__ = ["ReaderScreen", "VersePane"]
