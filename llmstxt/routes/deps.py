"""Shared FastAPI dependencies — the active ContentStore and ExportSettings.

main.py injects both at startup; tests call ``set_store()`` /
``set_settings()`` to swap in their own.
"""

from __future__ import annotations

from llmstxt.models import ExportSettings
from llmstxt.site import load_export_settings
from llmstxt.storage import ContentStore, create_content_store

_default_store: ContentStore | None = None
_default_settings: ExportSettings | None = None


def get_store() -> ContentStore:
    """FastAPI dependency returning the active ContentStore.

    On first call the store is created by ``create_content_store()``, which
    reads ``LLMSTXT_STORE`` (and ``LLMSTXT_CONTENT_DIR`` for local mode).
    """
    global _default_store  # noqa: PLW0603
    if _default_store is None:
        _default_store = create_content_store()
    return _default_store


def set_store(store: ContentStore | None) -> None:
    """Override the active content store (used by tests and main.py)."""
    global _default_store  # noqa: PLW0603
    _default_store = store


def get_settings() -> ExportSettings:
    """FastAPI dependency returning the active ExportSettings."""
    global _default_settings  # noqa: PLW0603
    if _default_settings is None:
        _default_settings = load_export_settings()
    return _default_settings


def set_settings(settings: ExportSettings | None) -> None:
    """Override the active export settings (used by tests and main.py)."""
    global _default_settings  # noqa: PLW0603
    _default_settings = settings
