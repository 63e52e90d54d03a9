"""Tests for FolioSettings — unified settings with TOML source."""

from __future__ import annotations

from pathlib import Path

import click
import pytest

from folioterm.config.settings import FolioSettings
from folioterm.domain.types import ThemeName


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "FOLIOTERM_CONFIG",
        "FOLIOTERM_QUIET",
        "FOLIOTERM_JSON_OUTPUT",
        "FOLIOTERM_TERMINAL__THEME",
    ):
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = FolioSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.content.directory is None
        assert settings.terminal.theme is ThemeName.DARK

    def test_frozen(self, tmp_path: Path) -> None:
        settings = FolioSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_sections(self, tmp_path: Path) -> None:
        toml = tmp_path / "folioterm.toml"
        toml.write_text('[terminal]\ntheme = "light"\n[profile]\nname = "Ada"\n')
        settings = FolioSettings.from_cli(start=tmp_path)
        assert settings.config_path == toml
        assert settings.terminal.theme is ThemeName.LIGHT
        assert settings.profile.name == "Ada"
        assert settings.terminal.prompt == "$"

    def test_relative_content_dir(self, tmp_path: Path) -> None:
        (tmp_path / "folioterm.toml").write_text('[content]\ndirectory = "posts"\n')
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        settings = FolioSettings.from_cli(start=nested)
        assert settings.content.directory == tmp_path / "posts"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "site.toml"
        custom.parent.mkdir()
        custom.write_text('[profile]\nname = "Custom"\n')
        settings = FolioSettings.from_cli(config_path=str(custom), start=tmp_path)
        assert settings.profile.name == "Custom"
        assert settings.config_path == custom

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "folioterm.toml").write_text("[terminal\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            FolioSettings.from_cli(start=tmp_path)


class TestPriority:
    def test_cli_flags(self, tmp_path: Path) -> None:
        settings = FolioSettings.from_cli(start=tmp_path, json_output=True, quiet=True)
        assert settings.json_output is True
        assert settings.quiet is True

    def test_env_over_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "folioterm.toml").write_text('[terminal]\ntheme = "light"\n')
        monkeypatch.setenv("FOLIOTERM_TERMINAL__THEME", "dark")
        settings = FolioSettings.from_cli(start=tmp_path)
        assert settings.terminal.theme is ThemeName.DARK

    def test_env_flag(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FOLIOTERM_QUIET", "true")
        assert FolioSettings.from_cli(start=tmp_path).quiet is True

    def test_content_dir_override(self, tmp_path: Path) -> None:
        (tmp_path / "folioterm.toml").write_text('[content]\ndirectory = "posts"\nsort = "file"\n')
        settings = FolioSettings.from_cli(start=tmp_path, content_dir=tmp_path / "other")
        assert settings.content.directory == tmp_path / "other"
        assert settings.content.sort == "file"
