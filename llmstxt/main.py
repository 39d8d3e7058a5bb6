"""FastAPI application — entry point for the llms.txt export service.

Lifespan builds the content store and export settings, injects them into the
route modules, and registers the export, page, and info routes.

LLMSTXT_STORE environment variable controls the content store:
  local (default) — LocalContentStore reads pages from LLMSTXT_CONTENT_DIR
  memory          — MemoryContentStore, empty until the host populates it
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from llmstxt import __version__
from llmstxt.routes.deps import set_settings, set_store
from llmstxt.routes.info import router as info_router
from llmstxt.routes.llms import router as llms_router
from llmstxt.routes.pages import router as pages_router
from llmstxt.site import load_export_settings
from llmstxt.storage import create_content_store, get_content_dir, get_store_mode

logger = logging.getLogger("llmstxt")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup tasks:
    1. Configure the content store based on LLMSTXT_STORE
    2. Load export settings (site origin, canonical page orders)
    """
    mode = get_store_mode()
    if mode == "memory":
        logger.info("LLMSTXT_STORE=memory — using MemoryContentStore")
    else:
        logger.info("LLMSTXT_STORE=%s — reading pages from %s", mode, get_content_dir())
    set_store(create_content_store())

    settings = load_export_settings()
    logger.info("Export links point at %s", settings.site_origin)
    set_settings(settings)

    yield


app = FastAPI(title="llmstxt", version=__version__, lifespan=lifespan)

# ---------------------------------------------------------------------------
# CORS — the exports are public, read-only text
# ---------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Route registration — pages router last, its /{id}.md pattern is a catch-all
# ---------------------------------------------------------------------------
app.include_router(llms_router)
app.include_router(info_router)


@app.get("/health")
async def health() -> dict:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


app.include_router(pages_router)
