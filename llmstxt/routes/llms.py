"""GET /llms.txt and GET /llms-full.txt — plain-text exports for crawlers and LLMs.

Both endpoints read one snapshot from the content store per request.  A
failing store read is logged and surfaced as 503; it is not retried and no
partial export is served.  Errors after the read are not store errors and
propagate as ordinary 500s.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from llmstxt.export.pipeline import full_document, index_document
from llmstxt.models import DocumentEntry, ExportSettings
from llmstxt.routes.deps import get_settings, get_store
from llmstxt.storage import ContentStore

logger = logging.getLogger("llmstxt.export")

router = APIRouter(tags=["llms"])


async def read_snapshot(store: ContentStore) -> list[DocumentEntry]:
    """Read one corpus snapshot; any store failure becomes a 503."""
    try:
        return await store.get_all()
    except Exception as exc:
        logger.exception("Content store read failed")
        raise HTTPException(status_code=503, detail="Content store unavailable") from exc


@router.get("/llms.txt")
async def llms_index(
    store: ContentStore = Depends(get_store),
    settings: ExportSettings = Depends(get_settings),
) -> Response:
    """Return the page index."""
    doc = index_document(await read_snapshot(store), settings)
    return Response(content=doc.content, media_type=doc.media_type)


@router.get("/llms-full.txt")
async def llms_full(
    store: ContentStore = Depends(get_store),
    settings: ExportSettings = Depends(get_settings),
) -> Response:
    """Return every page inlined as plain text."""
    doc = full_document(await read_snapshot(store), settings)
    return Response(content=doc.content, media_type=doc.media_type)
