"""Pydantic models — shared contract between the store, the export pipeline and the routes.

  - DocumentEntry is what a ContentStore hands out; it is frozen so that a
    snapshot cannot be mutated while an export is walking it.
  - ExportSettings carries everything a deployment configures (site origin,
    header text, canonical page orders).  It is passed explicitly into the
    pipeline instead of living in module globals so that several
    configurations can coexist in one process.
  - ExportDocument is the rendered blob plus its content type.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Content types
# ---------------------------------------------------------------------------

PLAIN_TEXT = "text/plain; charset=utf-8"
MARKDOWN_TEXT = "text/markdown; charset=utf-8"


# ---------------------------------------------------------------------------
# Corpus
# ---------------------------------------------------------------------------

class DocumentEntry(BaseModel):
    """One documentation page as read from the content store."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    title: str = ""
    body: str | None = None

    @property
    def label(self) -> str:
        """Display label: the title, or the id when the page has no title."""
        return self.title or self.id


# ---------------------------------------------------------------------------
# Export configuration / output
# ---------------------------------------------------------------------------

class ExportSettings(BaseModel):
    """Per-deployment export configuration.

    ``index_order`` and ``full_order`` are canonical id lists for the two
    exports; they may differ and may name ids the corpus does not contain.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    summary: str
    site_origin: str
    index_order: tuple[str, ...] = ()
    full_order: tuple[str, ...] = ()

    @field_validator("site_origin")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Links are built as ``{origin}/{id}/`` so the origin must not end in '/'."""
        return v.strip().rstrip("/")


class ExportDocument(BaseModel):
    """A rendered export and the content type it is served with."""

    content: str
    media_type: str = PLAIN_TEXT
