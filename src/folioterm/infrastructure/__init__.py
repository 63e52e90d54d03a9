"""Infrastructure layer — content files on disk and the in-memory repository."""

from folioterm.infrastructure.repository import PostRepository

__all__ = ["PostRepository"]
