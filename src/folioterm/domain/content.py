"""Markdown frontmatter parsing for blog post files.

Post files start with a ``---`` delimited YAML block holding the post
metadata, followed by the markdown body. The corpus is read-only, so the
safe loader is used and plain Python types come back.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from folioterm.domain.post import Post

_FRONTMATTER_DELIMITER = "---"


class ContentError(ValueError):
    """A post file could not be turned into a Post."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


def _new_yaml() -> YAML:
    """Create a fresh safe YAML loader (the YAML object is stateful)."""
    return YAML(typ="safe", pure=True)


def parse_frontmatter(content: str) -> tuple[dict[str, Any], str]:
    """Split a markdown document into its YAML frontmatter and body.

    The first line must be ``---``; the next ``---`` line closes the block.
    ``\\r\\n`` line endings are accepted. A document without a complete
    block comes back unchanged as ``({}, content)``.

    Raises:
        ContentError: If the YAML block is malformed or is not a mapping.
    """
    first, _, rest = content.replace("\r\n", "\n").partition("\n")
    if first.strip() != _FRONTMATTER_DELIMITER:
        return {}, content

    lines = rest.split("\n")
    close = next(
        (i for i, line in enumerate(lines) if line.strip() == _FRONTMATTER_DELIMITER),
        None,
    )
    if close is None:
        return {}, content

    body = "\n".join(lines[close + 1 :]).removeprefix("\n")
    try:
        fm = _new_yaml().load("\n".join(lines[:close]))
    except YAMLError as exc:
        raise ContentError(f"Invalid frontmatter YAML: {exc}") from exc

    if fm is None:
        return {}, body
    if not isinstance(fm, dict):
        raise ContentError("Frontmatter must be a mapping")
    return fm, body


def post_from_markdown(content: str, *, path: Path | None = None) -> Post:
    """Build a Post from a markdown document with frontmatter.

    Raises:
        ContentError: If the frontmatter is missing, malformed, or fails
            Post validation. The error names *path* when given.
    """
    try:
        fm, body = parse_frontmatter(content)
    except ContentError as exc:
        raise ContentError(str(exc), path=path) from exc

    if not fm:
        raise ContentError("Missing frontmatter block", path=path)

    try:
        return Post.model_validate({**fm, "content": body})
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise ContentError(f"Invalid post frontmatter ({problems})", path=path) from exc
