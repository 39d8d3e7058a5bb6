"""Content store — Protocol + LocalContentStore + MemoryContentStore implementations.

LocalContentStore reads a directory of ``.md`` / ``.mdx`` pages with YAML
frontmatter (the layout of a static-site docs collection).
MemoryContentStore keeps pages in an insertion-ordered dict (tests, embedding).

The ContentStore Protocol exists so that implementations can be swapped without
modifying the export pipeline.  Use ``create_content_store()`` to obtain the
correct implementation for the current ``LLMSTXT_STORE`` environment variable.

Both stores hand out a fresh list on every ``get_all()`` call.  That list is
the snapshot an export works on; later writes to the store do not affect it.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Literal, Protocol

import anyio
import frontmatter
import yaml

from llmstxt.models import DocumentEntry

logger = logging.getLogger("llmstxt.storage")


# ---------------------------------------------------------------------------
# LLMSTXT_STORE helpers
# ---------------------------------------------------------------------------

StoreMode = Literal["local", "memory"]
_VALID_MODES: frozenset[str] = frozenset({"local", "memory"})

DEFAULT_CONTENT_DIR = "src/content/docs"

PAGE_SUFFIXES: tuple[str, ...] = (".md", ".mdx")


def get_store_mode() -> StoreMode:
    """Return the current LLMSTXT_STORE value, defaulting to ``'local'``.

    Unrecognised values fall back to ``'local'`` with a warning so that a
    misconfigured deployment never silently serves an empty corpus.
    """
    raw = os.environ.get("LLMSTXT_STORE", "local").strip().lower()
    if raw not in _VALID_MODES:
        logging.getLogger("llmstxt").warning(
            "Unknown LLMSTXT_STORE=%r — falling back to 'local'. "
            "Valid values are: %s",
            raw,
            ", ".join(sorted(_VALID_MODES)),
        )
        return "local"
    return raw  # type: ignore[return-value]


def get_content_dir() -> str:
    """Return the docs directory for LocalContentStore (``LLMSTXT_CONTENT_DIR``)."""
    return os.environ.get("LLMSTXT_CONTENT_DIR", DEFAULT_CONTENT_DIR)


def create_content_store() -> "LocalContentStore | MemoryContentStore":
    """Factory: return the appropriate ContentStore for the current LLMSTXT_STORE.

    - ``local``  → :class:`LocalContentStore` over ``LLMSTXT_CONTENT_DIR``
    - ``memory`` → :class:`MemoryContentStore` (starts empty)
    """
    if get_store_mode() == "memory":
        return MemoryContentStore()
    return LocalContentStore(base_path=get_content_dir())


# ---------------------------------------------------------------------------
# Protocol
# ---------------------------------------------------------------------------


class ContentStore(Protocol):
    """Protocol defining the content store interface."""

    async def get_all(self) -> list[DocumentEntry]: ...
    async def get(self, doc_id: str) -> DocumentEntry: ...


# ---------------------------------------------------------------------------
# LocalContentStore — docs directory on disk
# ---------------------------------------------------------------------------


def page_id(relative: Path) -> str:
    """Derive a page id from a path relative to the docs root.

    ``guides/local-testing.mdx`` → ``guides/local-testing``;
    ``deploy/index.mdx`` → ``deploy``.  A root ``index`` page keeps its name.
    """
    parts = list(relative.with_suffix("").parts)
    if len(parts) > 1 and parts[-1] == "index":
        parts.pop()
    return "/".join(parts)


def parse_page(doc_id: str, text: str) -> DocumentEntry:
    """Split frontmatter from *text* and build a DocumentEntry.

    Unparseable or non-mapping frontmatter leaves the page untitled with the
    raw text as its body.
    """
    # frontmatter.parse returns a plain dict; frontmatter.loads would feed the
    # keys to Post(**metadata) and fail on keys like ``content`` or ``1``.
    try:
        metadata, content = frontmatter.parse(text)
    except (yaml.YAMLError, ValueError) as exc:
        logger.warning("Failed to parse frontmatter for %s: %s", doc_id, exc)
        return DocumentEntry(id=doc_id, body=text)

    title = metadata.get("title") if isinstance(metadata, dict) else None
    return DocumentEntry(
        id=doc_id,
        title=str(title).strip() if title is not None else "",
        body=content,
    )


class LocalContentStore:
    """Reads documentation pages from a directory tree."""

    def __init__(self, base_path: str = DEFAULT_CONTENT_DIR) -> None:
        self.base_path = Path(base_path)

    def _page_files(self) -> list[Path]:
        if not self.base_path.is_dir():
            raise NotADirectoryError(f"Content directory not found: {self.base_path}")
        return sorted(
            p
            for p in self.base_path.rglob("*")
            if p.is_file() and p.suffix in PAGE_SUFFIXES
        )

    def read_all(self) -> list[DocumentEntry]:
        """Blocking read of every page, ordered by relative path.

        Raises NotADirectoryError if the content directory is missing.
        Individual unreadable files are skipped with a warning.  When two
        files map to the same id (``deploy.md`` and ``deploy/index.md``)
        the first in path order wins.
        """
        entries: dict[str, DocumentEntry] = {}
        for p in self._page_files():
            doc_id = page_id(p.relative_to(self.base_path))
            if doc_id in entries:
                logger.warning("Duplicate page id %r from %s — ignored", doc_id, p)
                continue
            try:
                text = p.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning("Skipping unreadable page %s: %s", p, exc)
                continue
            entries[doc_id] = parse_page(doc_id, text)
        logger.debug("Read %d page(s) from %s", len(entries), self.base_path)
        return list(entries.values())

    async def get_all(self) -> list[DocumentEntry]:
        """Return a snapshot of every page; disk reads run in a worker thread."""
        return await anyio.to_thread.run_sync(self.read_all)

    def _candidate_paths(self, doc_id: str) -> list[Path]:
        """Files that may hold *doc_id*, in the order read_all() would prefer them.

        Ids that read_all() can never produce (empty, ``..`` segments, a
        nested trailing ``index``) yield no candidates.
        """
        parts = doc_id.split("/")
        if any(part in ("", ".", "..") for part in parts):
            return []
        if len(parts) > 1 and parts[-1] == "index":
            return []
        stem = self.base_path.joinpath(*parts)
        return [stem / f"index{suffix}" for suffix in PAGE_SUFFIXES] + [
            stem.with_name(stem.name + suffix) for suffix in PAGE_SUFFIXES
        ]

    def read_page(self, doc_id: str) -> DocumentEntry:
        """Blocking read of the single file backing *doc_id*.

        Raises NotADirectoryError if the content directory is missing and
        FileNotFoundError if no readable page maps to *doc_id*.
        """
        if not self.base_path.is_dir():
            raise NotADirectoryError(f"Content directory not found: {self.base_path}")
        for p in self._candidate_paths(doc_id):
            if not p.is_file():
                continue
            try:
                text = p.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning("Skipping unreadable page %s: %s", p, exc)
                continue
            return parse_page(doc_id, text)
        raise FileNotFoundError(f"Document not found: {doc_id}")

    async def get(self, doc_id: str) -> DocumentEntry:
        """Return one page by id, reading only its own file.  Raises FileNotFoundError if missing."""
        return await anyio.to_thread.run_sync(self.read_page, doc_id)


# ---------------------------------------------------------------------------
# MemoryContentStore — in-memory
# ---------------------------------------------------------------------------


class MemoryContentStore:
    """Stores pages in an insertion-ordered dict.

    Re-putting an existing id replaces the page but keeps its position.
    Entries are frozen and handed out as-is.
    """

    def __init__(self, entries: Iterable[DocumentEntry] = ()) -> None:
        self._pages: dict[str, DocumentEntry] = {}
        for entry in entries:
            self.put(entry)

    def put(self, entry: DocumentEntry) -> None:
        """Insert or replace a page."""
        self._pages[entry.id] = entry

    def delete(self, doc_id: str) -> None:
        """Remove a page.

        Raises
        ------
        FileNotFoundError
            If *doc_id* is not stored.
        """
        if doc_id not in self._pages:
            raise FileNotFoundError(f"Document not found: {doc_id}")
        del self._pages[doc_id]

    def __len__(self) -> int:
        return len(self._pages)

    async def get_all(self) -> list[DocumentEntry]:
        """Return a snapshot list of all pages in insertion order."""
        return list(self._pages.values())

    async def get(self, doc_id: str) -> DocumentEntry:
        """Return one page by id.

        Raises
        ------
        FileNotFoundError
            If *doc_id* is not stored.
        """
        if doc_id not in self._pages:
            raise FileNotFoundError(f"Document not found: {doc_id}")
        return self._pages[doc_id]
