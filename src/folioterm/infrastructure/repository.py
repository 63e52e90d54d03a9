"""PostRepository — the fixed, read-only corpus and its queries.

Every operation is a pure read over the posts supplied at construction.
Result order is always corpus order (the order posts were supplied).
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import cached_property
from pathlib import Path

from folioterm.domain.post import Post
from folioterm.domain.tags import TagCount, count_tags
from folioterm.infrastructure.filesystem import load_posts


class PostRepository:
    """In-memory blog corpus with list, find, filter, and search.

    Raises:
        ValueError: At construction if two posts share an id.
    """

    def __init__(self, posts: Iterable[Post]) -> None:
        self._posts: tuple[Post, ...] = tuple(posts)
        self._by_id: dict[str, Post] = {}
        for post in self._posts:
            if post.id in self._by_id:
                msg = f"Duplicate post id: {post.id!r}"
                raise ValueError(msg)
            self._by_id[post.id] = post

    @classmethod
    def from_directory(cls, content_dir: Path, *, sort: str = "newest") -> PostRepository:
        """Load the corpus from markdown files under *content_dir*."""
        return cls(load_posts(content_dir, sort=sort))

    def __len__(self) -> int:
        return len(self._posts)

    def list_all(self) -> tuple[Post, ...]:
        return self._posts

    def find_by_id(self, post_id: str) -> Post | None:
        """Exact id lookup."""
        return self._by_id.get(post_id)

    def filter_by_tag(self, tag: str) -> tuple[Post, ...]:
        """Posts carrying *tag*, compared case-insensitively."""
        return tuple(post for post in self._posts if post.has_tag(tag))

    def search(self, query: str) -> tuple[Post, ...]:
        """Posts whose title, excerpt, or any tag contains *query*.

        The caller rejects blank queries; a blank query here matches all.
        """
        return tuple(post for post in self._posts if post.matches(query))

    def all_tags(self) -> list[TagCount]:
        """Distinct tags with post counts, sorted by tag."""
        return list(self._tag_counts)

    @cached_property
    def _tag_counts(self) -> tuple[TagCount, ...]:
        return tuple(count_tags(post.tags for post in self._posts))
