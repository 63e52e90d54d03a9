"""Human-readable rendering of post service results.

``render_result`` picks a renderer by ``result.op``: post tables for
``list_posts`` and ``search``, a tag table for ``tags``, and a metadata
panel plus markdown body for ``get``. Any other op gets key-value lines.
``render_quiet`` prints one id (or tag) per line for shell pipelines.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from folioterm.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from folioterm.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* for a person reading a terminal.

    ANSI styling only appears when Rich detects a terminal, so piped
    output and CliRunner captures are plain text.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: ids or tags only."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item.get("id", item.get("tag", ""))) for item in items)
    if "id" in result.data:
        return str(result.data["id"])
    return f"OK: {result.op}"


def _field(console: Console, key: str, value: Any) -> None:
    """Print ``  key: value``; containers are shown as compact JSON."""
    k = Text(f"  {key}: ", style="folio.key")
    if isinstance(value, (dict, list)):
        v = Text(json.dumps(value, separators=(",", ":")))
    elif key == "id":
        v = Text(str(value), style="folio.id")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _post_table(items: list[dict[str, Any]], *, verbose: bool = False) -> Table:
    """Build a Rich Table for a list of post summaries."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="folio.id", no_wrap=True)
    table.add_column("Title", style="folio.title")
    table.add_column("Date", no_wrap=True)
    table.add_column("Read")
    table.add_column("Tags", style="folio.tag")
    if verbose:
        table.add_column("Excerpt", style="folio.muted")

    for item in items:
        row = [
            Text(str(item.get("id", ""))),
            Text(str(item.get("title", ""))),
            Text(str(item.get("date", ""))),
            Text(str(item.get("read_time", ""))),
            Text(", ".join(item.get("tags", []))),
        ]
        if verbose:
            row.append(Text(str(item.get("excerpt", ""))))
        table.add_row(*row)
    return table


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="folio.error"),
        Text(f"  {result.op}", style="folio.op"),
        Text(f" — {msg}"),
        sep="",
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="folio.muted"))
        for k, v in err.detail.items():
            _field(console, k, v)


def _render_post_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render list_posts or search results as a table."""
    items = result.data.get("items", [])
    count = result.data.get("count", len(items))
    if not items:
        if "query" in result.data:
            console.print(Text(f'No posts found matching "{result.data["query"]}"'))
        elif "tag" in result.data:
            console.print(Text(f'No posts found with tag "{result.data["tag"]}"'))
        else:
            console.print(Text("No blog posts yet."))
        return
    console.print(_post_table(items, verbose=verbose))
    console.print(f"\n{count} post(s)")


def _render_tags(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Tag", style="folio.tag")
    table.add_column("Posts", justify="right")
    for item in result.data.get("items", []):
        table.add_row(Text(str(item["tag"])), Text(str(item["count"])))
    console.print(table)
    console.print(f"\n{result.data.get('count', 0)} tag(s)")


def _render_post(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a single post as a metadata panel followed by its body."""
    d = result.data
    meta = Text()
    for key in ("date", "read_time"):
        if d.get(key):
            meta.append(f"{key}: ", style="folio.key")
            meta.append(f"{d[key]}\n")
    if d.get("tags"):
        meta.append("tags: ", style="folio.key")
        meta.append(", ".join(d["tags"]), style="folio.tag")
        meta.append("\n")
    if d.get("excerpt"):
        meta.append(str(d["excerpt"]), style="folio.muted")

    title = Text(f"{d.get('id', '?')} — {d.get('title', 'Untitled')}", style="folio.title")
    console.print(Panel(meta, title=title, title_align="left", expand=False))
    body = d.get("content", "")
    if body:
        console.print(Markdown(body))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(Text("OK", style="folio.ok"), Text(f"  {result.op}", style="folio.op"), sep="")
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS = {
    "list_posts": _render_post_list,
    "search": _render_post_list,
    "tags": _render_tags,
    "get": _render_post,
}
