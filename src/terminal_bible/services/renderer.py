"""Text rendering for the verse pane.

Wraps verse text to a fixed width and builds the Textual markup shown
for passages, favorites, help and status messages.
"""

import textwrap
from typing import Optional

from rich.markup import escape

from terminal_bible.models import Passage, Verse, VerseList

DEFAULT_WIDTH = 75

ALLOWED_COLORS = ["yellow", "cyan", "green", "magenta", "red", "blue", "white"]

# Stand-ins for names missing from the basic 8-color terminal palette
COLOR_ALIASES = {
    "purple": "magenta",
    "orange": "yellow",
}

REFERENCE_STYLE = "grey50"

NO_FAVORITES_TEXT = "No favorite verses saved yet."

HELP_ENTRIES = [
    ("search a passage", "1 thes 1:2-5"),
    ("", ""),
    ("scroll through text", "escape, then j/k"),
    ("insert mode", "i"),
    ("", ""),
    ("favorite the last searched verse", "save"),
    ("show saved favorites", "favs"),
    ("remove verse from favs", "delete john 3:16"),
    ("", ""),
    ("show verse locations", "refs"),
    ("change text color", "green"),
    ("", ""),
    ("quit the app", "q"),
    ("show these instructions", "help"),
]

_SEVERITY_PREFIX = {
    "warning": "⚠️ ",
    "success": "✅ ",
    "removed": "🗑️ ",
    "info": "",
}


def wrap_and_indent(text: str, width: int = DEFAULT_WIDTH, indent: str = "") -> str:
    """Hard-wrap text so no line exceeds ``width`` columns.

    Words longer than a line are split. Whitespace is kept at the break
    points, so joining the lines of a paragraph (after removing the indent)
    gives back the original paragraph. Existing newlines are kept.

    Args:
        text: Text to wrap
        width: Maximum line length including the indent
        indent: Prefix added to every line after the first

    Returns:
        Wrapped text

    Raises:
        ValueError: If width leaves no room after the indent
    """
    if width - len(indent) < 1:
        raise ValueError(f"width {width} too small for indent of {len(indent)}")

    wrapper = textwrap.TextWrapper(
        width=width - len(indent),
        expand_tabs=False,
        replace_whitespace=False,
        drop_whitespace=False,
        break_long_words=True,
        break_on_hyphens=False,
    )

    lines: list[str] = []
    for paragraph in text.split("\n"):
        lines.extend(wrapper.wrap(paragraph) or [""])

    return "\n".join(line if i == 0 else indent + line for i, line in enumerate(lines))


def format_reference_label(book: str, chapter: int, verse: int) -> str:
    """Format a verse locator as "<book> <chapter>:<verse>"."""
    return f"{book} {chapter}:{verse}"


def resolve_color(name: str) -> Optional[str]:
    """Map a user-typed color name to a palette color.

    Args:
        name: Color name, case-insensitive (aliases allowed)

    Returns:
        Palette color name, or None if the name is not allowed
    """
    key = name.strip().lower()
    if key in COLOR_ALIASES:
        return COLOR_ALIASES[key]
    if key in ALLOWED_COLORS:
        return key
    return None


def _display_block(text: str, width: int) -> str:
    # Break-point whitespace is trimmed for display only
    wrapped = wrap_and_indent(text.strip(), width)
    return "\n".join(escape(line.strip()) for line in wrapped.split("\n"))


def render_passage(passage: Passage, show_references: bool = False, width: int = DEFAULT_WIDTH) -> str:
    """Build the markup for a looked-up passage.

    Args:
        passage: SingleVerse or VerseList from the fetcher
        show_references: Prefix each verse with its reference label
        width: Wrap width

    Returns:
        Markup with the reference as title and the wrapped text below
    """
    if isinstance(passage, VerseList):
        blocks = []
        for entry in passage.entries:
            body = _display_block(entry.text, width)
            if show_references:
                label = format_reference_label(entry.book_name, entry.chapter, entry.verse)
                body = f"[{REFERENCE_STYLE}]{escape(label)}[/{REFERENCE_STYLE}]\n{body}"
            blocks.append(body)
        body = "\n".join(blocks)
    else:
        body = _display_block(passage.text, width)

    return f"[bold]{escape(passage.reference)}[/bold]\n\n{body}"


def render_favorites(favorites: list[Verse]) -> str:
    """Build the numbered favorites listing."""
    if not favorites:
        return NO_FAVORITES_TEXT

    lines = ["[bold]Favorite Verses:[/bold]", ""]
    for i, verse in enumerate(favorites, start=1):
        lines.append(f"[bold]{i}. {escape(verse.reference)}[/bold]")
        lines.append(escape(verse.text.strip()))
        lines.append("")
    return "\n".join(lines).rstrip("\n")


def format_help_line(command: str, desc: str, total_width: int = 50) -> str:
    """Pad a help line so descriptions line up on the right."""
    gap = total_width - len(command) - len(desc)
    return f"{command}{' ' * (gap if gap > 1 else 1)}{desc}"


def help_lines() -> list[str]:
    """Static command list, one formatted line per entry."""
    return [format_help_line(command, desc) for command, desc in HELP_ENTRIES]


def render_help() -> str:
    """Build the help screen markup."""
    body = escape("\n".join(help_lines()))
    return f"[bold green]{body}[/bold green]"


def render_welcome() -> str:
    """Build the startup screen markup."""
    body = escape("\n".join(help_lines()))
    return f"[bold green]Welcome to Terminal Bible!\n\n{body}[/bold green]"


def render_message(text: str, severity: str = "info") -> str:
    """Build a one-line status message.

    Args:
        text: Message text (escaped here)
        severity: One of info, success, warning, removed, error

    Returns:
        Markup for the message
    """
    if severity == "error":
        return f"[bold red]Error:[/bold red] {escape(text)}"
    prefix = _SEVERITY_PREFIX.get(severity, "")
    return f"[bold]{prefix}{escape(text)}[/bold]"
