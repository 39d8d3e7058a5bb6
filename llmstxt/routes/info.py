"""Info route — exposes runtime configuration.

GET /api/info returns the active store mode, the app version, a description
of the content store, and the site origin the index links point at.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from llmstxt.models import ExportSettings
from llmstxt.routes.deps import get_settings
from llmstxt.storage import get_content_dir, get_store_mode

router = APIRouter(prefix="/api", tags=["info"])


@router.get("/info")
async def get_info(
    request: Request,
    settings: ExportSettings = Depends(get_settings),
) -> dict:
    """Return runtime information about this deployment.

    Response fields
    ---------------
    mode : str
        ``"local"`` — pages read from a docs directory (default).
        ``"memory"`` — in-process store, empty unless populated by the host.
    version : str
        Application version string sourced from the FastAPI app metadata.
    storage : str
        Human-readable description of the active content store.
    site : str
        Origin used to build page links in ``/llms.txt``.
    """
    mode = get_store_mode()
    storage_desc = (
        f"LocalContentStore (docs directory, {get_content_dir()})"
        if mode == "local"
        else "MemoryContentStore (in-memory)"
    )
    return {
        "mode": mode,
        "version": request.app.version,
        "storage": storage_desc,
        "site": settings.site_origin,
    }
