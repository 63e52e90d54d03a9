"""Render terminal output lines through a themed Rich console."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from rich.text import Text

from folioterm.domain.types import ThemeName
from folioterm.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from rich.console import Console

    from folioterm.domain.output import OutputLine


def print_lines(console: Console, lines: Iterable[OutputLine]) -> None:
    """Print each line with its kind's style.

    Lines are printed as Text, so ``[id]`` brackets are never read as
    Rich markup.
    """
    for line in lines:
        console.print(Text(line.text, style=style_for_kind(line.kind)), soft_wrap=True)


def render_lines(
    lines: Iterable[OutputLine],
    *,
    theme: ThemeName = ThemeName.DARK,
    color: bool | None = None,
    width: int | None = None,
) -> str:
    """Render lines to a string; ``color=None`` lets Rich decide."""
    console = create_console(
        theme=theme,
        no_color=color is False,
        width=width,
        force_terminal=color,
    )
    print_lines(console, lines)
    return get_output(console).rstrip("\n")
