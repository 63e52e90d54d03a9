"""Terminal enums: output line kinds, site sections, effects, and themes."""

from __future__ import annotations

from enum import StrEnum


class OutputKind(StrEnum):
    """Visual class of a line in the terminal output log."""

    COMMAND = "command"
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"
    MUTED = "muted"
    TEXT = "text"


class Section(StrEnum):
    """Top-level site sections reachable by name from the terminal."""

    HOME = "home"
    ABOUT = "about"
    BLOG = "blog"
    CONTACT = "contact"

    @property
    def route(self) -> str:
        """Route path for the section (home is the site root)."""
        if self is Section.HOME:
            return "/"
        return f"/{self.value}"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Effect(StrEnum):
    """Collaborator calls requested by a command besides navigation."""

    OPEN_HELP = "open_help"
    TOGGLE_THEME = "toggle_theme"


class ThemeName(StrEnum):
    """Color themes of the presentation layer."""

    DARK = "dark"
    LIGHT = "light"

    def toggled(self) -> ThemeName:
        return ThemeName.LIGHT if self is ThemeName.DARK else ThemeName.DARK
