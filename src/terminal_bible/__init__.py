"""Terminal Bible - look up and bookmark Bible verses from the terminal.

This package provides:
- A Textual TUI for passage lookup with word-wrapped display
- A client for the bible-api.com verse service
- A local JSON store of favorite verses
"""

__version__ = "0.1.0"
