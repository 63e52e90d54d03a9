"""Tests for the root folioterm CLI."""

import pytest
from click.testing import CliRunner

from folioterm import __version__
from folioterm.cli import cli

pytestmark = pytest.mark.usefixtures("_isolated_cwd")


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "folioterm" in result.output
    for name in ("posts", "run", "shell"):
        assert name in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


# --- Global flags ---


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json"])
def test_global_flag_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


def test_invalid_config_reported(cli_runner: CliRunner, tmp_path) -> None:
    bad = tmp_path / "bad.toml"
    bad.write_text("[terminal\n")
    result = cli_runner.invoke(cli, ["-c", str(bad), "posts", "tags"])
    assert result.exit_code == 1
    assert "Invalid TOML" in result.output


def test_config_content_dir(cli_runner: CliRunner, content_dir, tmp_path) -> None:
    config = tmp_path / "site.toml"
    config.write_text(f'[content]\ndirectory = "{content_dir.name}"\n')
    result = cli_runner.invoke(cli, ["-q", "-c", str(config), "posts", "search", "kubernetes"])
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "raspberry-pi-cluster"
