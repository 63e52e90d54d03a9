"""Tests for --examples flag on CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from folioterm.cli import cli

# (CLI args, expected keywords in output)
EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["posts", "--examples"], ["folioterm posts list", "folioterm posts get"]),
    (["posts", "list", "--examples"], ["--tag"]),
    (["posts", "search", "--examples"], ["folioterm posts search"]),
    (["posts", "tags", "--examples"], ["folioterm posts tags"]),
    (["posts", "get", "--examples"], ["folioterm posts get"]),
    (["run", "--examples"], ["folioterm run blogs"]),
    (["shell", "--examples"], ["--no-welcome"]),
]


def _examples_id(item: tuple[list[str], list[str]]) -> str:
    args, _ = item
    return "_".join(a for a in args if a != "--examples")


@pytest.mark.usefixtures("_isolated_cwd")
@pytest.mark.parametrize(
    ("args", "keywords"),
    EXAMPLES_COMMANDS,
    ids=[_examples_id(item) for item in EXAMPLES_COMMANDS],
)
def test_examples_flag(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0, result.output
    assert "Examples for" in result.output
    for keyword in keywords:
        assert keyword in result.output


@pytest.mark.usefixtures("_isolated_cwd")
def test_examples_not_in_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["posts", "search", "--help"])
    assert result.exit_code == 0
    assert "--examples" in result.output
    assert "folioterm posts search llm" not in result.output
