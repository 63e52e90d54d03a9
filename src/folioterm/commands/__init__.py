"""Subcommand modules for folioterm.

Provides register_commands() which uses deferred imports to keep
``folioterm --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``posts`` group and the terminal commands on the root group."""
    from folioterm.commands.posts import posts
    from folioterm.commands.run import run
    from folioterm.commands.shell import shell

    cli.add_command(posts)
    cli.add_command(shell)
    cli.add_command(run)
