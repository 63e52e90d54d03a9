"""Terminal command grammar — raw input line to a structured Command.

Matching runs on the trimmed, lower-cased line. Precedence (first match
wins):

1. ``blogs`` / ``list blogs``                      -> ListPosts
2. ``blogs search <q>`` / ``search blogs <q>``     -> SearchPosts
3. ``blogs tag <t>`` / ``tag blogs <t>``           -> FilterByTag
4. ``blogs tags`` / ``list tags`` / ``tags``       -> ListTags
5. ``blog <id>``                                   -> OpenPost
6. ``about|blog|contact|home|help|theme|clear``    -> fixed command
7. anything else                                   -> Unknown

Rule 5 must run before rule 6: a second token turns ``blog`` from
"go to the blog index" into "open this post", even when the id is itself
a reserved word.
"""

from __future__ import annotations

from dataclasses import dataclass

from folioterm.domain.types import Section


@dataclass(frozen=True)
class ListPosts:
    """List every post in corpus order."""


@dataclass(frozen=True)
class SearchPosts:
    """Substring search over title, excerpt, and tags."""

    query: str


@dataclass(frozen=True)
class FilterByTag:
    """Posts carrying a tag (case-insensitive)."""

    tag: str


@dataclass(frozen=True)
class ListTags:
    """Distinct tags with post counts."""


@dataclass(frozen=True)
class OpenPost:
    """Open a single post by id."""

    post_id: str


@dataclass(frozen=True)
class Navigate:
    """Go to a top-level site section."""

    target: Section


@dataclass(frozen=True)
class ShowHelp:
    """Present the help surface."""


@dataclass(frozen=True)
class ToggleTheme:
    """Flip the color theme."""


@dataclass(frozen=True)
class Clear:
    """Empty the output log."""


@dataclass(frozen=True)
class Unknown:
    """Input that matched no rule."""

    raw: str

    @property
    def first_token(self) -> str:
        tokens = self.raw.lower().split()
        return tokens[0] if tokens else ""


Command = (
    ListPosts
    | SearchPosts
    | FilterByTag
    | ListTags
    | OpenPost
    | Navigate
    | ShowHelp
    | ToggleTheme
    | Clear
    | Unknown
)

_LIST_POSTS = frozenset({"blogs", "list blogs"})
_SEARCH_PREFIXES = ("blogs search", "search blogs")
_TAG_PREFIXES = ("blogs tag", "tag blogs")
_LIST_TAGS = frozenset({"blogs tags", "list tags", "tags"})
_OPEN_KEYWORD = "blog"

_FIXED: dict[str, Command] = {
    "about": Navigate(Section.ABOUT),
    "blog": Navigate(Section.BLOG),
    "contact": Navigate(Section.CONTACT),
    "home": Navigate(Section.HOME),
    "help": ShowHelp(),
    "theme": ToggleTheme(),
    "clear": Clear(),
}

# First tokens that select a fixed command.
KEYWORDS: tuple[str, ...] = tuple(_FIXED)


def _remainder(line: str, prefixes: tuple[str, ...]) -> str | None:
    """Return the trimmed text after a matching prefix, or None.

    The bare prefix (nothing after it) yields ``""`` so the caller can
    report a missing argument rather than an unknown command.
    """
    for prefix in prefixes:
        if line == prefix:
            return ""
        if line.startswith(f"{prefix} "):
            return line[len(prefix) + 1 :].strip()
    return None


def parse_command(raw: str) -> Command:
    """Map one raw input line to a Command.

    Examples:
        >>> parse_command("BLOGS TAG ai")
        FilterByTag(tag='ai')
        >>> parse_command("blog")
        Navigate(target=<Section.BLOG: 'blog'>)
        >>> parse_command("blog large-reasoning-models")
        OpenPost(post_id='large-reasoning-models')
    """
    line = raw.strip().lower()

    if line in _LIST_POSTS:
        return ListPosts()

    query = _remainder(line, _SEARCH_PREFIXES)
    if query is not None:
        return SearchPosts(query)

    tag = _remainder(line, _TAG_PREFIXES)
    if tag is not None:
        return FilterByTag(tag)

    if line in _LIST_TAGS:
        return ListTags()

    tokens = line.split()
    if len(tokens) > 1 and tokens[0] == _OPEN_KEYWORD:
        return OpenPost(" ".join(tokens[1:]))

    if tokens and tokens[0] in _FIXED:
        return _FIXED[tokens[0]]

    return Unknown(raw.strip())
