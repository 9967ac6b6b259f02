"""Reader screen.

Shows the scrollable verse pane and the command input line.
"""

from typing import Optional

from textual import work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Header, Input, Static

from terminal_bible.commands import CommandDispatcher, CommandResult
from terminal_bible.logging_config import get_logger
from terminal_bible.services import renderer
from terminal_bible.state import SessionState

logger = get_logger(__name__)


class VersePane(VerticalScroll):
    """Scrollable output pane with vi-style keys while it has focus."""

    BINDINGS = [
        Binding("j", "scroll_down", "Down", show=False),
        Binding("k", "scroll_up", "Up", show=False),
        Binding("i", "screen.focus_input", "Insert"),
        Binding("q", "app.quit", "Quit"),
    ]


class ReaderScreen(Screen):
    """Main screen: verse pane above, command input below."""

    BINDINGS = [
        ("escape", "scroll_mode", "Scroll"),
    ]

    def __init__(self, session: SessionState, dispatcher: CommandDispatcher):
        """Initialize the screen.

        Args:
            session: Session state (read for display flags)
            dispatcher: Command dispatcher run for each submitted line
        """
        super().__init__()
        self.session = session
        self.dispatcher = dispatcher
        self.last_result: Optional[CommandResult] = None

    def compose(self) -> ComposeResult:
        """Compose the screen layout."""
        yield Header()
        yield VersePane(Static(renderer.render_welcome(), id="verse_box"), id="verse_pane")
        yield Input(placeholder="Search a passage (john 3:16) or type help", id="command_input")
        yield Footer()

    def on_mount(self) -> None:
        """Handle mount event."""
        self._apply_color()
        self.action_focus_input()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Run the submitted line as a command."""
        line = event.value
        event.input.value = ""

        if not line.strip():
            event.input.focus()
            return

        # One command at a time: the input stays disabled until the result is shown
        event.input.disabled = True
        self._run_command(line)

    @work(thread=True, exclusive=True, group="command")
    def _run_command(self, line: str) -> None:
        """Dispatch a command off the UI thread (lookups block on HTTP)."""
        result = self.dispatcher.dispatch(line)
        self.app.call_from_thread(self._show_result, result)

    def _show_result(self, result: CommandResult) -> None:
        """Render a command result (called on the UI thread).

        Args:
            result: Result returned by the dispatcher
        """
        self.last_result = result

        if result.quit:
            logger.info("Quit requested from input line")
            self.app.exit()
            return

        if result.markup is not None:
            verse_box = self.query_one("#verse_box", Static)
            verse_box.update(result.markup)
            verse_box.styles.text_align = "center" if result.centered else "left"
            self.query_one("#verse_pane", VersePane).scroll_home(animate=False)

        self._apply_color()

        command_input = self.query_one("#command_input", Input)
        command_input.disabled = False
        command_input.focus()

    def _apply_color(self) -> None:
        self.query_one("#verse_box", Static).styles.color = self.session.display_color

    def action_scroll_mode(self) -> None:
        """Move focus to the verse pane for scrolling."""
        self.query_one("#verse_pane", VersePane).focus()

    def action_focus_input(self) -> None:
        """Move focus back to the command input."""
        self.query_one("#command_input", Input).focus()
