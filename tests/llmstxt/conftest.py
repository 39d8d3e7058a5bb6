"""Shared fixtures for llmstxt tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from llmstxt.models import DocumentEntry, ExportSettings
from llmstxt.storage import LocalContentStore, MemoryContentStore


# ---------------------------------------------------------------------------
# Page Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def abc_entries() -> list[DocumentEntry]:
    """Three minimal pages in corpus order a, b, c."""
    return [
        DocumentEntry(id="a", title="A", body="Alpha body"),
        DocumentEntry(id="b", title="B", body="Beta body"),
        DocumentEntry(id="c", title="C", body="Gamma body"),
    ]


@pytest.fixture
def mdx_entries() -> list[DocumentEntry]:
    """Pages shaped like the real docs: imports, components, nested ids."""
    return [
        DocumentEntry(
            id="reference/cli",
            title="CLI",
            body="Run `tollbooth start`.\n\n\n\nThat is all.",
        ),
        DocumentEntry(
            id="welcome",
            title="Welcome",
            body=(
                "import { Card, CardGrid } from '@astrojs/starlight/components';\n"
                "\n"
                "<CardGrid>\n"
                '<Card title="Fast" icon="rocket">One line of config.</Card>\n'
                "</CardGrid>\n"
            ),
        ),
        DocumentEntry(id="getting-started", title="Getting Started", body=None),
    ]


@pytest.fixture
def settings() -> ExportSettings:
    """Small, test-local export settings."""
    return ExportSettings(
        title="test docs",
        summary="Docs for tests.",
        site_origin="https://x.test",
        index_order=("welcome", "getting-started", "missing"),
        full_order=("getting-started",),
    )


# ---------------------------------------------------------------------------
# Store Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def memory_store(mdx_entries: list[DocumentEntry]) -> MemoryContentStore:
    """MemoryContentStore holding the mdx-shaped pages."""
    return MemoryContentStore(mdx_entries)


def write_page(root: Path, relative: str, text: str) -> Path:
    """Write *text* to *root*/*relative*, creating parent directories."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """A docs directory laid out like a static-site content collection."""
    root = tmp_path / "docs"
    write_page(root, "welcome.mdx", "---\ntitle: Welcome\n---\n\nHello <b>there</b>.\n")
    write_page(root, "getting-started.md", "---\ntitle: Getting Started\n---\n\nInstall it.\n")
    write_page(root, "deploy/index.mdx", "---\ntitle: Deploy\n---\n\nOverview.\n")
    write_page(root, "deploy/fly-io.mdx", "---\ntitle: Fly.io\n---\n\nfly deploy\n")
    write_page(root, "notes.txt", "not a page")
    return root


@pytest.fixture
def local_store(docs_dir: Path) -> LocalContentStore:
    """LocalContentStore over the docs_dir fixture."""
    return LocalContentStore(base_path=str(docs_dir))
