"""Terminal output records and the session output log.

The log is an append-only sequence of immutable OutputLine records.
``clear()`` is the only other mutation and resets it to empty.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from folioterm.domain.types import Effect, OutputKind

if TYPE_CHECKING:
    from folioterm.domain.grammar import Command


@dataclass(frozen=True)
class OutputLine:
    """One rendered line of terminal output."""

    text: str
    kind: OutputKind = OutputKind.TEXT


@dataclass(frozen=True)
class NavigationIntent:
    """A route change for the presentation layer to apply."""

    route: str


@dataclass(frozen=True)
class Execution:
    """Everything one executed command asks of the boundary.

    Attributes:
        command: The parsed command.
        lines: Lines to append to the output log, in order.
        navigation: Route change to dispatch, if any.
        effects: Collaborator calls to make (theme, help), in order.
        clears_log: Whether the log must be emptied instead of appended to.
    """

    command: Command
    lines: tuple[OutputLine, ...] = ()
    navigation: NavigationIntent | None = None
    effects: tuple[Effect, ...] = ()
    clears_log: bool = False

    @property
    def failed(self) -> bool:
        """True if the command reported an error line."""
        return any(line.kind is OutputKind.ERROR for line in self.lines)


class OutputLog:
    """Append-only transcript of a terminal session."""

    def __init__(self, lines: Iterable[OutputLine] = ()) -> None:
        self._lines: list[OutputLine] = list(lines)

    def append(self, line: OutputLine) -> None:
        self._lines.append(line)

    def extend(self, lines: Iterable[OutputLine]) -> None:
        self._lines.extend(lines)

    def clear(self) -> None:
        self._lines.clear()

    def snapshot(self) -> tuple[OutputLine, ...]:
        """Immutable copy of the current lines."""
        return tuple(self._lines)

    def __iter__(self) -> Iterator[OutputLine]:
        return iter(tuple(self._lines))

    def __len__(self) -> int:
        return len(self._lines)
