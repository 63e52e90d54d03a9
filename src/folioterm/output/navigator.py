"""ConsoleNavigator — the terminal shell's presentation collaborator.

Tracks the current route and color theme and writes the rendered page
for every navigation (and the help surface on request) through a
``write`` callable, ``click.echo`` by default.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

import click

from folioterm.domain.types import Section, ThemeName
from folioterm.output.console import create_console, get_output
from folioterm.output.pages import help_page, render_page

if TYPE_CHECKING:
    from rich.console import RenderableType

    from folioterm.config.models import ProfileConfig
    from folioterm.infrastructure.repository import PostRepository

logger = logging.getLogger(__name__)


class ConsoleNavigator:
    """Applies navigation, theme, and help requests by rendering pages."""

    def __init__(
        self,
        repository: PostRepository,
        profile: ProfileConfig,
        *,
        theme: ThemeName = ThemeName.DARK,
        color: bool | None = None,
        width: int | None = None,
        write: Callable[[str], None] = click.echo,
    ) -> None:
        self._repo = repository
        self._profile = profile
        self._color = color
        self._width = width
        self._write = write
        self.theme = theme
        self.route = Section.HOME.route

    # -- Navigator protocol ------------------------------------------------

    def navigate(self, route: str) -> None:
        logger.debug("render route %s", route)
        self.route = route
        self.show(render_page(route, self._repo, self._profile))

    def toggle_theme(self) -> None:
        self.theme = self.theme.toggled()
        logger.debug("theme is now %s", self.theme)

    def open_help(self) -> None:
        self.show(help_page())

    # -- Rendering ---------------------------------------------------------

    def render(self, renderables: Iterable[RenderableType]) -> str:
        """Render with the current theme to a string."""
        console = create_console(
            theme=self.theme,
            no_color=self._color is False,
            width=self._width,
            force_terminal=self._color,
        )
        for renderable in renderables:
            console.print(renderable)
        return get_output(console).rstrip("\n")

    def show(self, renderables: Iterable[RenderableType]) -> None:
        self._write(self.render(renderables))
