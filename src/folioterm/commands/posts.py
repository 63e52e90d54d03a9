"""Command group: the page-layout view of the blog corpus."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from folioterm.commands._base import FolioGroup
from folioterm.services.posts import PostService

if TYPE_CHECKING:
    from folioterm.commands._context import AppContext

_POSTS_EXAMPLES = """\
  folioterm posts list
  folioterm posts list --tag llm
  folioterm posts search "reasoning"
  folioterm posts tags
  folioterm posts get large-reasoning-models
  folioterm --json posts search ai"""


@click.group(cls=FolioGroup, examples=_POSTS_EXAMPLES)
def posts() -> None:
    """List, search, and read blog posts."""


@posts.command(
    name="list",
    examples="""\
  folioterm posts list
  folioterm posts list --tag "machine learning"
  folioterm -q posts list""",
)
@click.option("--tag", default=None, help="Only posts with this tag (case-insensitive).")
@click.pass_obj
def list_cmd(app: AppContext, tag: str | None) -> None:
    """List posts, newest first."""
    app.emit(PostService(app.repository).list_posts(tag=tag))


@posts.command(
    examples="""\
  folioterm posts search llm
  folioterm posts search "chain of thought"
  folioterm --json posts search moe"""
)
@click.argument("query_text")
@click.pass_obj
def search(app: AppContext, query_text: str) -> None:
    """Substring search across titles, excerpts, and tags."""
    app.emit(PostService(app.repository).search(query_text))


@posts.command(
    examples="""\
  folioterm posts tags
  folioterm --json posts tags"""
)
@click.pass_obj
def tags(app: AppContext) -> None:
    """List distinct tags with post counts."""
    app.emit(PostService(app.repository).tags())


@posts.command(
    examples="""\
  folioterm posts get ai-model-taxonomy-2025
  folioterm --json posts get large-reasoning-models"""
)
@click.argument("post_id")
@click.pass_obj
def get(app: AppContext, post_id: str) -> None:
    """Show a single post with its body."""
    app.emit(PostService(app.repository).get(post_id))
