"""Route helpers for navigation intents.

Routes follow the site's hash-router paths: ``/``, ``/about``, ``/blog``,
``/contact`` and ``/blog/<id>`` for a single post.
"""

from __future__ import annotations

from folioterm.domain.types import Section

BLOG_POST_PREFIX = "/blog/"


def post_route(post_id: str) -> str:
    """Return the detail route for a post.

    Examples:
        >>> post_route("large-reasoning-models")
        '/blog/large-reasoning-models'
    """
    return f"{BLOG_POST_PREFIX}{post_id}"


def section_for_route(route: str) -> Section | None:
    """Return the section whose route is exactly *route*, if any."""
    for section in Section:
        if section.route == route:
            return section
    return None


def post_id_for_route(route: str) -> str | None:
    """Extract the post id from a ``/blog/<id>`` route, else None."""
    if not route.startswith(BLOG_POST_PREFIX):
        return None
    post_id = route[len(BLOG_POST_PREFIX) :]
    return post_id or None
