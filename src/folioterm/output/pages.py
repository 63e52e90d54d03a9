"""Page renderers — what the presentation layer shows for each route.

A page is a list of Rich renderables; :func:`render_page` picks the page
for a route and :func:`help_page` builds the help surface.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from folioterm.domain.routes import post_id_for_route, section_for_route
from folioterm.domain.types import Section

if TYPE_CHECKING:
    from rich.console import RenderableType

    from folioterm.config.models import ProfileConfig
    from folioterm.domain.post import Post
    from folioterm.infrastructure.repository import PostRepository

HELP_ENTRIES: tuple[tuple[str, str], ...] = (
    ("blogs / list blogs", "List all blog posts"),
    ("blogs search <query>", "Search posts by title, excerpt, or tag"),
    ("blogs tag <tag>", "Filter posts by tag"),
    ("blogs tags / tags", "List all tags with post counts"),
    ("blog <id>", "Open a blog post"),
    ("about", "Go to About"),
    ("blog", "Go to the Blog index"),
    ("contact", "Go to Contact"),
    ("home", "Go to Home"),
    ("help", "Show this help"),
    ("theme", "Toggle the color theme"),
    ("clear", "Clear the terminal output"),
)


def _heading(text: str) -> Text:
    return Text(text, style="folio.accent")


def home_page(profile: ProfileConfig) -> list[RenderableType]:
    nav = Text()
    for section in (Section.ABOUT, Section.BLOG, Section.CONTACT):
        nav.append("> ", style="folio.accent")
        nav.append(f"{section.value}\n")
    return [
        _heading(f"Welcome to {profile.name}"),
        Text(
            "Navigate using the commands below or type a command in the terminal.",
            style="folio.muted",
        ),
        Text(),
        Text("Quick Navigation", style="folio.heading"),
        nav,
    ]


def about_page(profile: ProfileConfig) -> list[RenderableType]:
    page: list[RenderableType] = [_heading(f"About {profile.name}")]
    if profile.bio:
        page.append(Text(profile.bio))
    if profile.skills:
        page.append(Text())
        page.append(Text("Skills & Technologies", style="folio.heading"))
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("Category", style="folio.title")
        table.add_column("Skills")
        for category, items in profile.skills.items():
            table.add_row(category, ", ".join(items))
        page.append(table)
    return page


def contact_page(profile: ProfileConfig) -> list[RenderableType]:
    page: list[RenderableType] = [_heading("Contact")]
    if not profile.email and not profile.links:
        page.append(Text("No contact details configured.", style="folio.muted"))
        return page
    if profile.email:
        page.append(Text.assemble(("email: ", "folio.key"), profile.email))
    for name, url in profile.links.items():
        page.append(Text.assemble((f"{name}: ", "folio.key"), url))
    return page


def _post_card(post: Post) -> Panel:
    body = Text()
    body.append(f"{post.date} • {post.read_time}\n", style="folio.muted")
    if post.tags:
        body.append(" ".join(f"#{tag}" for tag in post.tags), style="folio.tag")
        body.append("\n")
    body.append(f"{post.excerpt}\n")
    body.append(f"Read more → blog {post.id}", style="folio.accent")
    return Panel(body, title=Text(post.title, style="folio.title"), title_align="left")


def blog_page(repository: PostRepository, profile: ProfileConfig) -> list[RenderableType]:
    page: list[RenderableType] = [_heading("Blog")]
    posts = repository.list_all()
    if not posts:
        page.append(Text("No blog posts yet. Check back soon!", style="folio.muted"))
        return page

    page.append(Text(profile.headline, style="folio.muted"))
    tags = repository.all_tags()
    if tags:
        filters = Text("Filter: ", style="folio.muted")
        filters.append(", ".join(tc.tag for tc in tags), style="folio.tag")
        page.append(filters)
    page.extend(_post_card(post) for post in posts)
    return page


def post_page(post: Post) -> list[RenderableType]:
    meta = Text(f"{post.date} • {post.read_time}", style="folio.muted")
    if post.tags:
        meta.append("  ")
        meta.append(", ".join(post.tags), style="folio.tag")
    return [
        _heading(post.title),
        meta,
        Text(),
        Markdown(post.content),
        Text(),
        Text("← blog", style="folio.accent"),
    ]


def not_found_page(route: str) -> list[RenderableType]:
    return [
        Text(f"Page not found: {route}", style="folio.error"),
        Text('Type "home" to go back.', style="folio.info"),
    ]


def render_page(
    route: str,
    repository: PostRepository,
    profile: ProfileConfig,
) -> list[RenderableType]:
    """Build the page for *route*; unknown routes get a not-found page."""
    section = section_for_route(route)
    if section is Section.HOME:
        return home_page(profile)
    if section is Section.ABOUT:
        return about_page(profile)
    if section is Section.BLOG:
        return blog_page(repository, profile)
    if section is Section.CONTACT:
        return contact_page(profile)

    post_id = post_id_for_route(route)
    if post_id is not None:
        post = repository.find_by_id(post_id)
        if post is not None:
            return post_page(post)
    return not_found_page(route)


def help_page() -> list[RenderableType]:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Command", style="folio.accent", no_wrap=True)
    table.add_column("Description")
    for pattern, description in HELP_ENTRIES:
        table.add_row(pattern, description)
    return [
        _heading("Available commands"),
        table,
        Text("Commands are case-insensitive. Type 'exit' to leave the shell.", style="folio.muted"),
    ]
