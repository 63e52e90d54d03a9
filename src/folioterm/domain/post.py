"""Post model — one blog post of the fixed corpus.

Attributes map 1:1 to YAML frontmatter keys, except ``read_time`` which
reads the ``readTime`` key. The markdown body becomes ``content`` and is
opaque to the query layer.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from folioterm.domain.tags import normalize_tag


class Post(BaseModel):
    """Immutable blog post record."""

    model_config = {"frozen": True, "populate_by_name": True}

    id: str
    title: str
    date: str = ""
    read_time: str = Field(default="", alias="readTime")
    excerpt: str = ""
    tags: tuple[str, ...] = ()
    content: str = ""

    @field_validator("id", "title")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            msg = "must not be blank"
            raise ValueError(msg)
        return value

    @field_validator("date", mode="before")
    @classmethod
    def _iso_date(cls, value: Any) -> Any:
        # Unquoted YAML dates arrive as date/datetime objects.
        if isinstance(value, datetime):
            return value.date().isoformat()
        if isinstance(value, date):
            return value.isoformat()
        return value

    @field_validator("id", "title", "read_time", "excerpt", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, (int, float)):
            return str(value)
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def _tag_sequence(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, str):
            return (value,)
        return tuple(str(tag) for tag in value)

    def has_tag(self, tag: str) -> bool:
        """True if any of the post's tags equals *tag*, ignoring case."""
        key = normalize_tag(tag)
        return any(normalize_tag(own) == key for own in self.tags)

    def matches(self, query: str) -> bool:
        """True if *query* is a substring of the title, excerpt, or a tag.

        Comparison is case-insensitive; *query* is trimmed first.
        """
        needle = query.strip().lower()
        if needle in self.title.lower() or needle in self.excerpt.lower():
            return True
        return any(needle in tag.lower() for tag in self.tags)

    def summary(self) -> dict[str, Any]:
        """Listing payload: every field except the body."""
        return self.model_dump(mode="json", exclude={"content"})
