"""CommandExecutor — turns a parsed terminal command into an Execution.

Execution is pure: the executor reads the repository and describes the
output lines, navigation intent, and collaborator effects. Applying them
(log append, route change, theme flip) is the terminal session's job.

Every command except ``clear`` starts with a ``$ <input>`` echo line so
the log reads as a transcript.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from folioterm.domain.grammar import (
    Clear,
    Command,
    FilterByTag,
    ListPosts,
    ListTags,
    Navigate,
    OpenPost,
    SearchPosts,
    ShowHelp,
    ToggleTheme,
    Unknown,
    parse_command,
)
from folioterm.domain.output import Execution, NavigationIntent, OutputLine
from folioterm.domain.post import Post
from folioterm.domain.routes import post_route
from folioterm.domain.types import Effect, OutputKind
from folioterm.infrastructure.repository import PostRepository
from folioterm.services.base import BaseService

logger = logging.getLogger(__name__)

READ_HINT = 'Use "blog <id>" to read a post'
SEARCH_HINT = 'Use "blogs search <query>" to search posts'
TAG_HINT = 'Use "blogs tag <tag>" to filter by tag'
TAGS_HINT = 'Use "blogs tag <tag>" to filter posts by tag'
LIST_HINT = 'Use "blogs" to see available posts.'


@dataclass
class _Reply:
    """Mutable builder for one command's output."""

    lines: list[OutputLine] = field(default_factory=list)
    navigation: NavigationIntent | None = None
    effects: list[Effect] = field(default_factory=list)

    def emit(self, kind: OutputKind, text: str) -> None:
        self.lines.append(OutputLine(text, kind))

    def post_block(self, post: Post, *, with_tags: bool = False) -> None:
        self.emit(OutputKind.SUCCESS, f"  [{post.id}] {post.title}")
        self.emit(OutputKind.MUTED, f"      {post.excerpt}")
        self.emit(OutputKind.MUTED, f"      Date: {post.date} | {post.read_time}")
        if with_tags:
            self.emit(OutputKind.MUTED, f"      Tags: {', '.join(post.tags)}")

    def post_blocks(self, posts: Iterable[Post], *, with_tags: bool = False) -> None:
        for post in posts:
            self.post_block(post, with_tags=with_tags)


# ---------------------------------------------------------------------------
# Per-command handlers
# ---------------------------------------------------------------------------


def _list_posts(repo: PostRepository, command: ListPosts, reply: _Reply) -> None:
    reply.emit(OutputKind.INFO, "Available blog posts:")
    reply.post_blocks(repo.list_all())
    reply.emit(OutputKind.TEXT, "")
    reply.emit(OutputKind.INFO, SEARCH_HINT)
    reply.emit(OutputKind.INFO, TAG_HINT)


def _search_posts(repo: PostRepository, command: SearchPosts, reply: _Reply) -> None:
    query = command.query.strip().lower()
    if not query:
        reply.emit(OutputKind.ERROR, "Please provide a search query.")
        reply.emit(OutputKind.INFO, "Usage: blogs search <query>")
        return

    posts = repo.search(query)
    if not posts:
        reply.emit(OutputKind.ERROR, f'No posts found matching "{query}"')
        return

    reply.emit(OutputKind.INFO, f'Found {len(posts)} post(s) matching "{query}":')
    reply.post_blocks(posts)
    reply.emit(OutputKind.TEXT, "")
    reply.emit(OutputKind.INFO, READ_HINT)


def _filter_by_tag(repo: PostRepository, command: FilterByTag, reply: _Reply) -> None:
    tag = command.tag.strip()
    if not tag:
        reply.emit(OutputKind.ERROR, "Please provide a tag name.")
        reply.emit(OutputKind.INFO, "Usage: blogs tag <tag>")
        return

    posts = repo.filter_by_tag(tag)
    if not posts:
        reply.emit(OutputKind.ERROR, f'No posts found with tag "{tag}"')
        return

    reply.emit(OutputKind.INFO, f'Found {len(posts)} post(s) tagged with "{tag}":')
    reply.post_blocks(posts, with_tags=True)
    reply.emit(OutputKind.TEXT, "")
    reply.emit(OutputKind.INFO, READ_HINT)


def _list_tags(repo: PostRepository, command: ListTags, reply: _Reply) -> None:
    tags = repo.all_tags()
    reply.emit(OutputKind.INFO, f"Available tags ({len(tags)}):")
    for tc in tags:
        reply.emit(OutputKind.SUCCESS, f"  [{tc.tag}] {tc.count} post(s)")
    reply.emit(OutputKind.TEXT, "")
    reply.emit(OutputKind.INFO, TAGS_HINT)


def _open_post(repo: PostRepository, command: OpenPost, reply: _Reply) -> None:
    post = repo.find_by_id(command.post_id)
    if post is None:
        reply.emit(OutputKind.ERROR, f'Blog post with ID "{command.post_id}" not found.')
        reply.emit(OutputKind.INFO, LIST_HINT)
        return
    reply.emit(OutputKind.SUCCESS, f'Opening "{post.title}"...')
    reply.navigation = NavigationIntent(post_route(post.id))


def _navigate(repo: PostRepository, command: Navigate, reply: _Reply) -> None:
    reply.emit(OutputKind.SUCCESS, f"Navigating to {command.target.label}...")
    reply.navigation = NavigationIntent(command.target.route)


def _show_help(repo: PostRepository, command: ShowHelp, reply: _Reply) -> None:
    reply.emit(OutputKind.INFO, "Opening help...")
    reply.effects.append(Effect.OPEN_HELP)


def _toggle_theme(repo: PostRepository, command: ToggleTheme, reply: _Reply) -> None:
    reply.effects.append(Effect.TOGGLE_THEME)
    reply.emit(OutputKind.SUCCESS, "Theme toggled!")


def _clear(repo: PostRepository, command: Clear, reply: _Reply) -> None:
    """Nothing to emit; the session truncates the log."""


def _unknown(repo: PostRepository, command: Unknown, reply: _Reply) -> None:
    reply.emit(
        OutputKind.ERROR,
        f"Command not found: {command.first_token}. Type 'help' for available commands.",
    )


_HANDLERS: dict[type, Callable[..., None]] = {
    ListPosts: _list_posts,
    SearchPosts: _search_posts,
    FilterByTag: _filter_by_tag,
    ListTags: _list_tags,
    OpenPost: _open_post,
    Navigate: _navigate,
    ShowHelp: _show_help,
    ToggleTheme: _toggle_theme,
    Clear: _clear,
    Unknown: _unknown,
}


class CommandExecutor(BaseService):
    """Executes terminal commands against the repository."""

    def execute(self, command: Command, raw: str) -> Execution:
        """Describe the effect of *command*, entered as *raw*.

        Raises:
            TypeError: If *command* is not a known Command variant.
        """
        handler = _HANDLERS.get(type(command))
        if handler is None:
            msg = f"Unsupported command: {command!r}"
            raise TypeError(msg)

        reply = _Reply()
        clears_log = isinstance(command, Clear)
        if not clears_log:
            reply.emit(OutputKind.COMMAND, f"$ {raw.strip()}")
        handler(self._repo, command, reply)
        logger.debug("execute %s -> %d line(s)", type(command).__name__, len(reply.lines))
        return Execution(
            command=command,
            lines=tuple(reply.lines),
            navigation=reply.navigation,
            effects=tuple(reply.effects),
            clears_log=clears_log,
        )

    def interpret(self, raw: str) -> Execution:
        """Parse and execute one raw input line."""
        return self.execute(parse_command(raw), raw)


def interpret(raw: str, repository: PostRepository) -> Execution:
    """Pure function from ``(raw input, repository)`` to an Execution."""
    return CommandExecutor(repository).interpret(raw)
