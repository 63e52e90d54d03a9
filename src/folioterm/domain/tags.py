"""Tag domain logic — case-insensitive matching and counting."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import NamedTuple


class TagCount(NamedTuple):
    """A distinct tag and the number of posts carrying it."""

    tag: str
    count: int


def normalize_tag(tag: str) -> str:
    """Return the comparison key for a tag.

    Examples:
        >>> normalize_tag("  Machine Learning ")
        'machine learning'
        >>> normalize_tag("AI") == normalize_tag("ai")
        True
    """
    return tag.strip().lower()


def count_tags(tag_lists: Iterable[Sequence[str]]) -> list[TagCount]:
    """Count distinct tags across posts, one vote per post.

    Tags that differ only in case are the same tag; the casing seen first
    is the one displayed. Results are sorted by the displayed tag string.
    """
    display: dict[str, str] = {}
    counts: dict[str, int] = {}
    for tags in tag_lists:
        seen_here: set[str] = set()
        for tag in tags:
            key = normalize_tag(tag)
            if not key or key in seen_here:
                continue
            seen_here.add(key)
            display.setdefault(key, tag.strip())
            counts[key] = counts.get(key, 0) + 1
    return sorted(
        (TagCount(display[key], counts[key]) for key in display),
        key=lambda tc: tc.tag,
    )
