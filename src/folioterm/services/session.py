"""TerminalSession — the thin shell around the pure interpreter.

Owns the output log and applies each Execution at the boundary: append
or clear the log, dispatch the navigation intent, and call the
collaborator for theme and help effects. Input is handled one line at a
time, each to completion.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from folioterm.domain.output import Execution, OutputLog
from folioterm.domain.types import Effect
from folioterm.services.executor import CommandExecutor

if TYPE_CHECKING:
    from folioterm.domain.output import OutputLine
    from folioterm.infrastructure.repository import PostRepository

logger = logging.getLogger(__name__)


class Navigator(Protocol):
    """Presentation collaborator driven by the terminal."""

    def navigate(self, route: str) -> None: ...

    def toggle_theme(self) -> None: ...

    def open_help(self) -> None: ...


class RecordingNavigator:
    """Navigator that only records calls (headless sessions and tests)."""

    def __init__(self) -> None:
        self.routes: list[str] = []
        self.theme_toggles = 0
        self.help_requests = 0

    def navigate(self, route: str) -> None:
        self.routes.append(route)

    def toggle_theme(self) -> None:
        self.theme_toggles += 1

    def open_help(self) -> None:
        self.help_requests += 1


class TerminalSession:
    """A single user's terminal: output log plus collaborator wiring."""

    def __init__(self, repository: PostRepository, navigator: Navigator | None = None) -> None:
        self._executor = CommandExecutor(repository)
        self.navigator: Navigator = navigator if navigator is not None else RecordingNavigator()
        self.log = OutputLog()

    def submit(self, raw: str) -> Execution | None:
        """Run one input line. Blank input is ignored and returns None."""
        if not raw.strip():
            return None
        execution = self._executor.interpret(raw)
        self.apply(execution)
        return execution

    def apply(self, execution: Execution) -> None:
        """Apply an Execution's side effects in order: log, effects, route."""
        if execution.clears_log:
            self.log.clear()
        else:
            self.log.extend(execution.lines)

        for effect in execution.effects:
            if effect is Effect.TOGGLE_THEME:
                self.navigator.toggle_theme()
            elif effect is Effect.OPEN_HELP:
                self.navigator.open_help()

        if execution.navigation is not None:
            logger.debug("navigate %s", execution.navigation.route)
            self.navigator.navigate(execution.navigation.route)

    @property
    def lines(self) -> tuple[OutputLine, ...]:
        return self.log.snapshot()
