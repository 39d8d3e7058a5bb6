"""Fetch → order → render.

The store read is the only await.  ``index_document`` / ``full_document`` /
``page_document`` are the synchronous halves that work on an already read
snapshot; routes call them directly so a store failure and a rendering
failure stay distinguishable.
"""

from __future__ import annotations

import logging
from typing import Sequence

from llmstxt.export.normalize import normalize
from llmstxt.export.ordering import resolve_order
from llmstxt.export.render import render_full, render_index, render_page
from llmstxt.models import MARKDOWN_TEXT, PLAIN_TEXT, DocumentEntry, ExportDocument, ExportSettings
from llmstxt.storage import ContentStore

logger = logging.getLogger("llmstxt.export")


def index_document(snapshot: Sequence[DocumentEntry], settings: ExportSettings) -> ExportDocument:
    """Render ``llms.txt`` from a corpus snapshot."""
    ordered = resolve_order(settings.index_order, snapshot)
    logger.debug("Index export: %d page(s)", len(ordered))
    content = render_index(
        ordered,
        settings.site_origin,
        title=settings.title,
        summary=settings.summary,
    )
    return ExportDocument(content=content, media_type=PLAIN_TEXT)


def full_document(snapshot: Sequence[DocumentEntry], settings: ExportSettings) -> ExportDocument:
    """Render ``llms-full.txt`` from a corpus snapshot."""
    ordered = resolve_order(settings.full_order, snapshot)
    logger.debug("Full export: %d page(s)", len(ordered))
    content = render_full(
        ordered,
        normalize,
        title=settings.title,
        summary=settings.summary,
    )
    return ExportDocument(content=content, media_type=PLAIN_TEXT)


def page_document(entry: DocumentEntry) -> ExportDocument:
    """Render the markdown view of one page."""
    return ExportDocument(content=render_page(entry, normalize), media_type=MARKDOWN_TEXT)


async def export_index(store: ContentStore, settings: ExportSettings) -> ExportDocument:
    """Build ``llms.txt`` from one snapshot of *store*."""
    return index_document(await store.get_all(), settings)


async def export_full(store: ContentStore, settings: ExportSettings) -> ExportDocument:
    """Build ``llms-full.txt`` from one snapshot of *store*."""
    return full_document(await store.get_all(), settings)


async def export_page(store: ContentStore, doc_id: str) -> ExportDocument:
    """Build the markdown view of one page.  Raises FileNotFoundError if missing."""
    return page_document(await store.get(doc_id))
