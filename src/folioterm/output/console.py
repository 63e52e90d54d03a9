"""Themes and the StringIO-backed Rich console behind all folioterm output.

Everything is rendered into a buffer and returned as a string, which the
caller echoes. Without a TTY (tests, pipes) Rich emits no ANSI codes
unless ``force_terminal`` is set.

Two themes mirror the site's dark and light color schemes; every
terminal output kind has a ``folio.<kind>`` style in both.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

from folioterm.domain.types import OutputKind, ThemeName

_DARK_STYLES: dict[str, str] = {
    "folio.command": "bold bright_green",
    "folio.info": "cyan",
    "folio.success": "green",
    "folio.error": "bold red",
    "folio.muted": "dim",
    "folio.text": "none",
    "folio.accent": "bold bright_green",
    "folio.heading": "bold",
    "folio.ok": "bold green",
    "folio.op": "bold cyan",
    "folio.key": "dim",
    "folio.id": "bold blue",
    "folio.title": "bold",
    "folio.tag": "magenta",
}

_LIGHT_STYLES: dict[str, str] = {
    **_DARK_STYLES,
    "folio.command": "bold dark_green",
    "folio.info": "blue",
    "folio.success": "dark_green",
    "folio.error": "bold red3",
    "folio.muted": "grey46",
    "folio.accent": "bold dark_green",
    "folio.id": "bold dark_blue",
    "folio.tag": "dark_magenta",
}

FOLIO_THEMES: dict[ThemeName, Theme] = {
    ThemeName.DARK: Theme(_DARK_STYLES),
    ThemeName.LIGHT: Theme(_LIGHT_STYLES),
}


def create_console(
    *,
    theme: ThemeName = ThemeName.DARK,
    no_color: bool = False,
    width: int | None = None,
    force_terminal: bool | None = None,
) -> Console:
    """Create a themed Console writing into a fresh buffer.

    Args:
        theme: Color scheme to apply.
        no_color: Never emit ANSI codes.
        width: Fixed line width (default 100), independent of the real terminal.
        force_terminal: Emit ANSI codes even though the buffer is not a TTY
            (the interactive shell sets this when stdout is a terminal).
    """
    return Console(
        file=StringIO(),
        theme=FOLIO_THEMES[theme],
        no_color=no_color,
        highlight=False,
        width=width or 100,
        force_terminal=force_terminal,
    )


def get_output(console: Console) -> str:
    """Return everything printed to *console* so far."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_kind(kind: OutputKind) -> str:
    """Return the Rich style name for an output line kind."""
    return f"folio.{kind.value}"
