"""GET /{id}.md — one page as markdown, the target of the index's ``[markdown]`` links."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from llmstxt.export.pipeline import page_document
from llmstxt.routes.deps import get_store
from llmstxt.storage import ContentStore

logger = logging.getLogger("llmstxt.export")

router = APIRouter(tags=["pages"])


@router.get("/{doc_id:path}.md")
async def page_markdown(
    doc_id: str,
    store: ContentStore = Depends(get_store),
) -> Response:
    """Return a single page.  404 if the id is not in the corpus."""
    try:
        entry = await store.get(doc_id)
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail=f"Document not found: {doc_id}")
    except Exception as exc:
        logger.exception("Content store read failed for %s", doc_id)
        raise HTTPException(status_code=503, detail="Content store unavailable") from exc
    doc = page_document(entry)
    return Response(content=doc.content, media_type=doc.media_type)
