"""The ``folioterm`` entry point: global flags, settings, and subcommands."""

from __future__ import annotations

import click

from folioterm import __version__
from folioterm.commands import register_commands
from folioterm.commands._context import AppContext
from folioterm.config.settings import FolioSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="folioterm")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Log JSON lines instead of console text.")
@click.option("-c", "--config", "config_path", default=None, help="Use this config file.")
@click.option(
    "--content-dir",
    type=click.Path(file_okay=False, path_type=str),
    default=None,
    help="Directory of markdown posts (default: the bundled corpus).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: str | None,
    content_dir: str | None,
    **flags: bool,
) -> None:
    """Portfolio blog with a terminal-style command interface.

    Start the interactive terminal with `folioterm shell`, replay terminal
    commands with `folioterm run`, or query posts with `folioterm posts`.
    """
    settings = FolioSettings.from_cli(config_path=config_path, content_dir=content_dir, **flags)
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
