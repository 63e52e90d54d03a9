"""Click command and group classes with an ``--examples`` flag.

Usage examples live next to each command (``examples=`` in the decorator)
instead of in its help text. ``--examples`` prints them and exits before
the command body runs.
"""

from __future__ import annotations

from typing import Any

import click


def _examples_option(examples: str) -> click.Option:
    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show,
        help="Show usage examples.",
    )


class _ExamplesMixin:
    """Accept ``examples=`` and register ``--examples`` when it is given."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option(examples))


class FolioCommand(_ExamplesMixin, click.Command):
    """A command that may carry usage examples."""


class FolioGroup(_ExamplesMixin, click.Group):
    """A group whose subcommands default to :class:`FolioCommand`."""

    command_class = FolioCommand
