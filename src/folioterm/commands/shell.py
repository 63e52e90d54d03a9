"""``folioterm shell`` — the interactive terminal mode."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from folioterm.commands._base import FolioCommand
from folioterm.domain.types import OutputKind, Section
from folioterm.output.navigator import ConsoleNavigator
from folioterm.output.terminal import render_lines
from folioterm.services.session import TerminalSession

if TYPE_CHECKING:
    from folioterm.commands._context import AppContext

EXIT_WORDS = frozenset({"exit", "quit"})


@click.command(
    cls=FolioCommand,
    examples="""\
  folioterm shell
  folioterm shell --no-welcome
  folioterm --content-dir ./posts shell""",
)
@click.option("--no-welcome", is_flag=True, help="Skip the home page on startup.")
@click.pass_obj
def shell(app: AppContext, no_welcome: bool) -> None:
    """Start the interactive terminal. Type 'exit' or press Ctrl-D to leave."""
    settings = app.settings
    repository = app.repository
    color = click.get_text_stream("stdout").isatty() or None

    # Pages are flushed after the command's own lines.
    pending: list[str] = []
    navigator = ConsoleNavigator(
        repository,
        settings.profile,
        theme=settings.terminal.theme,
        color=color,
        write=pending.append,
    )
    session = TerminalSession(repository, navigator)

    if settings.terminal.welcome and not no_welcome:
        navigator.navigate(Section.HOME.route)
        pending.append('Type "help" for available commands.')
        _flush(pending)

    while True:
        try:
            raw = click.prompt(
                settings.terminal.prompt, default="", show_default=False, prompt_suffix=" "
            )
        except click.Abort:
            click.echo()
            break
        if raw.strip().lower() in EXIT_WORDS:
            break

        execution = session.submit(raw)
        if execution is None:
            continue
        if execution.clears_log:
            click.clear()
            continue

        # The prompt line already shows the input, so the echo is skipped.
        shown = [line for line in execution.lines if line.kind is not OutputKind.COMMAND]
        output = render_lines(shown, theme=navigator.theme, color=color)
        if output:
            click.echo(output)
        _flush(pending)


def _flush(pending: list[str]) -> None:
    for page in pending:
        click.echo(page)
    pending.clear()
