"""Locate and read ``folioterm.toml``.

Resolution order: the ``FOLIOTERM_CONFIG`` env var, then a walk up from
the starting directory to the filesystem root. The first file found wins;
configs are never merged.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "folioterm.toml"
CONFIG_ENV_VAR = "FOLIOTERM_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file governing *start* (default: cwd), if any.

    A ``FOLIOTERM_CONFIG`` that points at a missing file disables
    discovery rather than falling back to the walk-up.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        candidate = Path(override).expanduser()
        return candidate if candidate.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config_data(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML with file-relative paths made absolute.

    ``[content] directory`` may be written relative to the config file;
    it is rewritten against the file's parent directory.

    Raises:
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    data = tomllib.loads(path.read_text(encoding="utf-8"))
    content = data.get("content")
    if isinstance(content, dict):
        directory = content.get("directory")
        if isinstance(directory, str) and not Path(directory).expanduser().is_absolute():
            content["directory"] = str(path.parent / directory)
    return data
