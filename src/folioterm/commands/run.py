"""``folioterm run`` — execute terminal lines non-interactively."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from folioterm.commands._base import FolioCommand
from folioterm.output.terminal import render_lines
from folioterm.services.session import RecordingNavigator, TerminalSession

if TYPE_CHECKING:
    from folioterm.commands._context import AppContext


@click.command(
    cls=FolioCommand,
    examples="""\
  folioterm run blogs
  folioterm run "blogs search reasoning"
  folioterm run "blogs tag ai" "blog large-reasoning-models"
  folioterm --json run tags""",
)
@click.argument("lines", nargs=-1, required=True)
@click.pass_obj
def run(app: AppContext, lines: tuple[str, ...]) -> None:
    """Run terminal commands in one session and print the transcript.

    Navigation, theme, and help requests are recorded, not rendered.
    Command errors are part of the transcript and never change the exit
    status.
    """
    navigator = RecordingNavigator()
    session = TerminalSession(app.repository, navigator)
    for line in lines:
        session.submit(line)

    if app.settings.json_output:
        payload = {
            "lines": [{"text": ln.text, "kind": ln.kind.value} for ln in session.lines],
            "routes": navigator.routes,
            "theme_toggles": navigator.theme_toggles,
            "help_requests": navigator.help_requests,
        }
        click.echo(json.dumps(payload, indent=2))
        return

    output = render_lines(session.lines, theme=app.settings.terminal.theme)
    if output:
        click.echo(output)
