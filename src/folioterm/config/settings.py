"""FolioSettings — one frozen object for CLI flags, env vars, and TOML.

Sources, strongest first:

- keyword arguments (the global CLI flags)
- ``FOLIOTERM_*`` environment variables; ``__`` separates nested keys,
  e.g. ``FOLIOTERM_TERMINAL__THEME=light``
- the ``folioterm.toml`` found by :func:`~folioterm.config.discovery.find_config`
- defaults baked into :mod:`folioterm.config.models`
"""

from __future__ import annotations

import threading
import tomllib
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from folioterm.config.discovery import find_config, read_config_data
from folioterm.config.models import ContentConfig, ProfileConfig, TerminalConfig

# pydantic-settings builds its sources in a classmethod, so the TOML path
# chosen by from_cli() is handed over through this slot.
_pending = threading.local()


@contextmanager
def _reading_toml(path: Path | None) -> Iterator[None]:
    _pending.path = path
    try:
        yield
    finally:
        _pending.path = None


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by a single ``folioterm.toml``.

    Raises:
        click.ClickException: If the file is not valid TOML.
    """

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self.toml_path = toml_path
        self._sections: dict[str, Any] = {}
        if toml_path is not None and toml_path.is_file():
            self._sections = self._read(toml_path)

    @staticmethod
    def _read(path: Path) -> dict[str, Any]:
        try:
            return read_config_data(path)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {path}: {exc}"
            raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._sections.get(field_name), field_name, field_name in self._sections

    def __call__(self) -> dict[str, Any]:
        return dict(self._sections)


class FolioSettings(BaseSettings):
    """Resolved settings for one CLI invocation.

    Built by the root command and kept on the
    :class:`~folioterm.commands._context.AppContext`.

    Attributes:
        config_path: The TOML file that was read, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "FOLIOTERM_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # Global flags
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # folioterm.toml sections
    content: ContentConfig = Field(default_factory=ContentConfig)
    terminal: TerminalConfig = Field(default_factory=TerminalConfig)
    profile: ProfileConfig = Field(default_factory=ProfileConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml = TomlSettingsSource(settings_cls, getattr(_pending, "path", None))
        return init_settings, env_settings, toml

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        content_dir: str | Path | None = None,
        **cli_flags: Any,
    ) -> FolioSettings:
        """Resolve settings for a CLI run.

        Args:
            config_path: ``--config`` value. A path that is not a file is
                ignored, as if no config existed.
            start: Directory the walk-up discovery starts from (default: cwd).
            content_dir: ``--content-dir`` value; replaces
                ``[content] directory`` and keeps the rest of the section.
            **cli_flags: Global flags, applied over every other source.
        """
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(start)

        with _reading_toml(toml_path):
            settings = cls(config_path=toml_path, **cli_flags)

        if content_dir is None:
            return settings
        content = settings.content.model_copy(update={"directory": Path(content_dir)})
        return settings.model_copy(update={"content": content})
