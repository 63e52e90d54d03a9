"""BaseService — foundation for services reading the post repository."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from folioterm.infrastructure.repository import PostRepository


class BaseService:
    """Base for service-layer classes.

    Every service receives the :class:`PostRepository` at construction.
    The repository is read-only, so services never own state of their own.
    """

    def __init__(self, repository: PostRepository) -> None:
        self._repo = repository
