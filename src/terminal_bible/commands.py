"""Command dispatch for the input line.

Each submitted line is matched against an ordered table of
(predicate, handler) pairs. The first match wins, and anything unmatched
is looked up as a passage.

Color names are checked first, so a query such as "green" changes the
text color and is never looked up as a passage.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from terminal_bible.errors import FavoritesWriteError, FetchError
from terminal_bible.logging_config import get_logger
from terminal_bible.services import renderer
from terminal_bible.services.favorites import AddResult, FavoritesStore, RemoveResult
from terminal_bible.services.fetcher import VerseFetcher
from terminal_bible.state import SessionState

logger = get_logger(__name__)

DELETE_PREFIX = "delete "
QUIT_WORDS = ("q", "quit")


@dataclass
class CommandResult:
    """What the shell should do after a command.

    Attributes:
        markup: Content for the verse pane (None leaves it unchanged)
        severity: info, success, warning, removed or error
        quit: Whether the application should exit
        color: New pane color, if the command changed it
        centered: Whether the pane content is centred (passages and help)
    """

    markup: Optional[str] = None
    severity: str = "info"
    quit: bool = False
    color: Optional[str] = None
    centered: bool = False


Predicate = Callable[[str], bool]
Handler = Callable[[str], CommandResult]


class CommandDispatcher:
    """Routes input lines to commands.

    Attributes:
        session: Session state mutated by commands
        store: Favorites store
        fetcher: Verse service client
        width: Wrap width for passages
    """

    def __init__(
        self,
        session: SessionState,
        store: FavoritesStore,
        fetcher: VerseFetcher,
        width: int = renderer.DEFAULT_WIDTH,
    ):
        self.session = session
        self.store = store
        self.fetcher = fetcher
        self.width = width

        self.commands: list[tuple[str, Predicate, Handler]] = [
            ("color", lambda q: renderer.resolve_color(q) is not None, self._set_color),
            ("favs", lambda q: q == "favs", self._show_favorites),
            ("refs", lambda q: q == "refs", self._toggle_references),
            ("help", lambda q: q == "help", self._show_help),
            ("save", lambda q: q == "save", self._save),
            ("delete", lambda q: q.startswith(DELETE_PREFIX), self._delete),
            ("quit", lambda q: q in QUIT_WORDS, self._quit),
        ]

    def dispatch(self, line: str) -> CommandResult:
        """Run the command for one line of input.

        Args:
            line: Raw input line

        Returns:
            CommandResult for the shell to render. An empty line gives
            a result with no markup.
        """
        query = line.strip()
        if not query:
            return CommandResult()

        for name, matches, handler in self.commands:
            if matches(query):
                logger.info(f"Dispatching '{name}' command")
                return handler(query)

        logger.info("Dispatching 'lookup' command")
        return self._lookup(query)

    def _set_color(self, query: str) -> CommandResult:
        color = renderer.resolve_color(query)
        self.session.set_color(color)
        return CommandResult(
            markup=renderer.render_message(f"Text color set to {query.lower()}."),
            color=color,
        )

    def _show_favorites(self, query: str) -> CommandResult:
        return CommandResult(markup=renderer.render_favorites(self.store.load()))

    def _toggle_references(self, query: str) -> CommandResult:
        enabled = self.session.toggle_references()
        return CommandResult(
            markup=renderer.render_message(f"Verse references {'enabled' if enabled else 'hidden'}.")
        )

    def _show_help(self, query: str) -> CommandResult:
        return CommandResult(markup=renderer.render_help(), centered=True)

    def _save(self, query: str) -> CommandResult:
        verse = self.session.last_verse
        if verse is None:
            return self._message("No verse to save. Lookup one first.", "warning")

        try:
            outcome = self.store.add(verse)
        except FavoritesWriteError as e:
            return self._message(str(e), "error")

        if outcome is AddResult.ALREADY_EXISTS:
            return self._message("Verse already in favorites.", "warning")
        return self._message("Verse saved to favorites!", "success")

    def _delete(self, query: str) -> CommandResult:
        reference = query[len(DELETE_PREFIX):].strip().lower()

        try:
            outcome = self.store.remove(reference)
        except FavoritesWriteError as e:
            return self._message(str(e), "error")

        if outcome is RemoveResult.REMOVED:
            return self._message(f"Removed {reference} from favorites.", "removed")
        return self._message(f'Could not find "{reference}" in favorites.', "warning")

    def _quit(self, query: str) -> CommandResult:
        return CommandResult(quit=True)

    def _lookup(self, query: str) -> CommandResult:
        try:
            passage = self.fetcher.fetch(query)
        except FetchError as e:
            return self._message(e.message, "error")

        self.session.set_last_verse(passage.to_verse())
        return CommandResult(
            markup=renderer.render_passage(passage, self.session.show_references, self.width),
            centered=True,
        )

    @staticmethod
    def _message(text: str, severity: str) -> CommandResult:
        return CommandResult(markup=renderer.render_message(text, severity), severity=severity)
