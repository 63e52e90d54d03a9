"""Tests for config discovery and loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from folioterm.config.discovery import (
    CONFIG_ENV_VAR,
    CONFIG_FILENAME,
    find_config,
    read_config_data,
)


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestFindConfig:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text('[profile]\nname = "Ada"\n')
        assert find_config(tmp_path) == config_file

    def test_walks_up(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        child = tmp_path / "site" / "posts"
        child.mkdir(parents=True)
        assert find_config(child) == config_file

    def test_nearest_wins(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        inner = tmp_path / "inner"
        inner.mkdir()
        (inner / CONFIG_FILENAME).write_text("")
        assert find_config(inner) == inner / CONFIG_FILENAME

    def test_none_when_absent(self, tmp_path: Path) -> None:
        empty = tmp_path / "empty"
        empty.mkdir()
        assert find_config(empty) is None

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        custom = tmp_path / "custom.toml"
        custom.write_text("")
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(custom))
        assert find_config(tmp_path) == custom

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "nope.toml"))
        assert find_config(tmp_path) is None


class TestReadConfigData:
    def test_relative_content_dir(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text('[content]\ndirectory = "posts"\n')
        data = read_config_data(path)
        assert data["content"]["directory"] == str(tmp_path / "posts")

    def test_absolute_content_dir_untouched(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        target = tmp_path / "elsewhere"
        path.write_text(f'[content]\ndirectory = "{target.as_posix()}"\n')
        assert read_config_data(path)["content"]["directory"] == target.as_posix()

