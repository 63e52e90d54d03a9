"""PostService — structured post queries for the page layout.

Read-only surfaces over the repository, each returning ServiceResult:
- list_posts: every post, optionally filtered by tag
- search: substring search over title, excerpt, and tags
- get: a single post with its body
- tags: distinct tags with counts
"""

from __future__ import annotations

import logging

from folioterm.services.base import BaseService
from folioterm.services.result import ServiceResult

logger = logging.getLogger(__name__)


class PostService(BaseService):
    """Handles listing, search, tag filtering, and retrieval."""

    def list_posts(self, *, tag: str | None = None) -> ServiceResult:
        """List posts in corpus order, optionally only those tagged *tag*."""
        if tag is None:
            posts = self._repo.list_all()
        else:
            if not tag.strip():
                return ServiceResult.failure("list_posts", "EMPTY_TAG", "Tag cannot be empty")
            posts = self._repo.filter_by_tag(tag.strip())
        items = [post.summary() for post in posts]
        data: dict[str, object] = {"count": len(items), "items": items}
        if tag is not None:
            data["tag"] = tag.strip()
        return ServiceResult.success("list_posts", data)

    def search(self, query: str) -> ServiceResult:
        """Case-insensitive substring search.

        A blank query is rejected before reaching the repository.
        """
        needle = query.strip().lower()
        if not needle:
            return ServiceResult.failure("search", "EMPTY_QUERY", "Search query cannot be empty")
        items = [post.summary() for post in self._repo.search(needle)]
        logger.debug("search %r matched %d post(s)", needle, len(items))
        return ServiceResult.success(
            "search", {"query": needle, "count": len(items), "items": items}
        )

    def get(self, post_id: str) -> ServiceResult:
        """Retrieve a single post by id, including its body."""
        post = self._repo.find_by_id(post_id)
        if post is None:
            return ServiceResult.failure(
                "get", "NOT_FOUND", f"Blog post with ID {post_id!r} not found", id=post_id
            )
        return ServiceResult.success("get", post.model_dump(mode="json"))

    def tags(self) -> ServiceResult:
        """Distinct tags with post counts, sorted by tag."""
        items = [{"tag": tc.tag, "count": tc.count} for tc in self._repo.all_tags()]
        return ServiceResult.success("tags", {"count": len(items), "items": items})
