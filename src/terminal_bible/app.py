"""Main TUI application for terminal-bible.

Textual-based application for looking up passages and managing
favorite verses.
"""

from typing import Optional

from textual.app import App
from textual.binding import Binding

from terminal_bible.commands import CommandDispatcher
from terminal_bible.config import AppConfig
from terminal_bible.logging_config import get_logger
from terminal_bible.screens.reader import ReaderScreen
from terminal_bible.services.favorites import FavoritesStore
from terminal_bible.services.fetcher import VerseFetcher
from terminal_bible.state import SessionState

logger = get_logger(__name__)


class BibleApp(App):
    """Terminal Bible application.

    Owns the session state and services and shows a single reader screen.
    """

    CSS_PATH = "screens/app.tcss"
    TITLE = "Terminal Bible"
    SUB_TITLE = "Bible Verse App"
    ENABLE_COMMAND_PALETTE = False

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", priority=True, show=False),
    ]

    def __init__(
        self,
        config: AppConfig,
        fetcher: Optional[VerseFetcher] = None,
        store: Optional[FavoritesStore] = None,
        *args,
        **kwargs,
    ):
        """Initialize the application.

        Args:
            config: Application configuration
            fetcher: Verse service client (built from config if omitted)
            store: Favorites store (built from config if omitted)
        """
        super().__init__(*args, **kwargs)

        self.config = config
        self.session = SessionState()

        self.fetcher = fetcher or VerseFetcher(config.api_base_url, timeout=config.request_timeout)
        self.store = store or FavoritesStore(config.favorites_path)
        self.dispatcher = CommandDispatcher(
            self.session,
            self.store,
            self.fetcher,
            width=config.wrap_width,
        )

    def on_mount(self) -> None:
        """Handle app mount event."""
        logger.info(f"App mounted (favorites: {self.store.path}, service: {self.fetcher.base_url})")
        self.push_screen(ReaderScreen(self.session, self.dispatcher))

    def action_quit(self) -> None:
        """Quit immediately; an in-flight lookup is abandoned."""
        logger.info("Quit requested")
        self.exit()
