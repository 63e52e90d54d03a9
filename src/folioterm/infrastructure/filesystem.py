"""Filesystem operations for the blog corpus.

INVARIANT: Files are truth. The corpus is read once at startup and never
written back. Pure parsing lives in :mod:`folioterm.domain.content`
(infrastructure -> domain); this module handles discovery and file I/O.
"""

from __future__ import annotations

from importlib import resources
from pathlib import Path

import structlog

from folioterm.domain.content import ContentError, post_from_markdown
from folioterm.domain.post import Post

log = structlog.get_logger(__name__)

POST_SUFFIXES = frozenset({".md", ".markdown"})

# Directories to skip when discovering post files.
_SKIP_DIRS = frozenset({".git", ".obsidian", "drafts"})

SORT_MODES = ("newest", "file")


def default_content_dir() -> Path:
    """Directory of the corpus shipped inside the package."""
    return Path(str(resources.files("folioterm") / "content" / "posts"))


def read_post_file(path: Path) -> Post:
    """Read one markdown post file.

    Raises:
        ContentError: If the file cannot be decoded or parsed.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ContentError(f"Cannot read post file: {exc}", path=path) from exc
    return post_from_markdown(text, path=path)


def find_post_files(content_dir: Path) -> list[Path]:
    """Discover all post files under *content_dir*, sorted by path.

    Skips hidden tool directories and ``drafts/``.
    """
    results: list[Path] = []
    for path in content_dir.rglob("*"):
        if not path.is_file():
            continue
        relative = path.relative_to(content_dir)
        if any(part in _SKIP_DIRS for part in relative.parts):
            continue
        if path.suffix.lower() in POST_SUFFIXES:
            results.append(path)
    return sorted(results)


def load_posts(content_dir: Path, *, sort: str = "newest") -> list[Post]:
    """Load every post under *content_dir*.

    Args:
        content_dir: Root of the corpus.
        sort: ``"newest"`` orders by date descending (ties keep file
            order); ``"file"`` keeps file-path order.

    Raises:
        ContentError: If the directory is missing, a file is invalid, an
            id is not lower-case, or two files declare the same id.
    """
    if sort not in SORT_MODES:
        msg = f"Unknown sort mode: {sort!r}"
        raise ValueError(msg)
    if not content_dir.is_dir():
        raise ContentError("Content directory not found", path=content_dir)

    posts: list[Post] = []
    origins: dict[str, Path] = {}
    for path in find_post_files(content_dir):
        post = read_post_file(path)
        if post.id != post.id.lower():
            msg = f"Post id {post.id!r} must be lower-case"
            raise ContentError(msg, path=path)
        if post.id in origins:
            msg = f"Duplicate post id {post.id!r} (also in {origins[post.id]})"
            raise ContentError(msg, path=path)
        origins[post.id] = path
        posts.append(post)

    if sort == "newest":
        posts.sort(key=lambda p: p.date, reverse=True)

    log.debug("posts_loaded", count=len(posts), content_dir=str(content_dir), sort=sort)
    return posts
