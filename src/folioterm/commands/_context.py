"""AppContext — state shared by every subcommand of one CLI run.

The root group builds it from :class:`~folioterm.config.settings.FolioSettings`
and subcommands receive it with ``@click.pass_obj``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

from folioterm.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from folioterm.config.settings import FolioSettings
    from folioterm.infrastructure.repository import PostRepository
    from folioterm.services.result import ServiceResult

logger = logging.getLogger(__name__)


class AppContext:
    """Settings, the lazily loaded corpus, and result output.

    Nothing touches the content directory until :attr:`repository` is
    first read, so ``--help`` and ``--examples`` work without a corpus.
    """

    def __init__(self, settings: FolioSettings) -> None:
        self.settings = settings
        self._repository: PostRepository | None = None

        from folioterm.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def content_dir(self) -> Path:
        """Configured content directory, or the packaged corpus."""
        directory = self.settings.content.directory
        if directory is not None:
            return Path(directory).expanduser()
        from folioterm.infrastructure.filesystem import default_content_dir

        return default_content_dir()

    @property
    def repository(self) -> PostRepository:
        """The post corpus, loaded on first access.

        Raises:
            click.ClickException: If the corpus cannot be loaded.
        """
        if self._repository is None:
            from folioterm.domain.content import ContentError
            from folioterm.infrastructure.repository import PostRepository

            try:
                self._repository = PostRepository.from_directory(
                    self.content_dir, sort=self.settings.content.sort
                )
            except ContentError as exc:
                logger.warning("Failed to load corpus: %s", exc)
                raise click.ClickException(str(exc)) from exc
            logger.info("Loaded %d post(s) from %s", len(self._repository), self.content_dir)
        return self._repository

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult) -> None:
        """Print *result* in the selected output mode.

        Success goes to stdout with exit status 0; non-JSON warnings go
        to stderr. Failure goes to stderr and exits with status 1.
        """
        text = format_result(result, settings=self.output_settings)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)

        click.echo(text)
        if not self.settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
