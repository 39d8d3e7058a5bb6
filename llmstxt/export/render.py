"""Text renderers for the two exports.

render_index -- one link line per page (``llms.txt``)
render_full  -- every page inlined with its normalized body (``llms-full.txt``)

Both take the already ordered page sequence; neither reorders or filters.
"""

from __future__ import annotations

from typing import Callable, Sequence

from llmstxt.models import DocumentEntry

SEPARATOR = "---"


def _header(title: str, summary: str) -> list[str]:
    return [f"# {title}", "", f"> {summary}", ""]


def page_url(site_origin: str, doc_id: str) -> str:
    """HTML page URL for *doc_id*."""
    return f"{site_origin}/{doc_id}/"


def markdown_url(site_origin: str, doc_id: str) -> str:
    """Markdown source URL for *doc_id*."""
    return f"{site_origin}/{doc_id}.md"


def render_index(
    ordered: Sequence[DocumentEntry],
    site_origin: str,
    *,
    title: str,
    summary: str,
) -> str:
    """Render the page index.

    Each page becomes ``- [Title](origin/id/): [markdown](origin/id.md)``.
    Untitled pages are labelled with their id.  Output ends with a newline.
    """
    lines = _header(title, summary)
    lines.extend(["## Pages", ""])
    for entry in ordered:
        lines.append(
            f"- [{entry.label}]({page_url(site_origin, entry.id)}): "
            f"[markdown]({markdown_url(site_origin, entry.id)})"
        )
    lines.append("")
    return "\n".join(lines)


def render_full(
    ordered: Sequence[DocumentEntry],
    normalize: Callable[[str], str],
    *,
    title: str,
    summary: str,
) -> str:
    """Render every page in order, separated by ``---`` lines.

    Per page: separator, blank, ``# Title``, blank, normalized body, blank.
    A page without a body renders an empty body segment.
    """
    lines = _header(title, summary)
    for entry in ordered:
        body = normalize(entry.body or "")
        lines.extend([SEPARATOR, "", f"# {entry.label}", "", body, ""])
    return "\n".join(lines)


def render_page(entry: DocumentEntry, normalize: Callable[[str], str]) -> str:
    """Render a single page as markdown: heading, blank line, normalized body."""
    body = normalize(entry.body or "")
    lines = [f"# {entry.label}", ""]
    if body:
        lines.append(body)
    lines.append("")
    return "\n".join(lines)
