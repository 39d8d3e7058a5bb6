"""Tests for FastAPI routes — health, /llms.txt, /llms-full.txt, and /{id}.md."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from llmstxt.main import app
from llmstxt.models import DocumentEntry, ExportSettings
from llmstxt.routes.deps import set_settings, set_store
from llmstxt.storage import LocalContentStore, MemoryContentStore


class BrokenStore:
    async def get_all(self) -> list[DocumentEntry]:
        raise ConnectionError("store offline")

    async def get(self, doc_id: str) -> DocumentEntry:
        raise ConnectionError("store offline")


@pytest.fixture(autouse=True)
def _use_test_store(memory_store: MemoryContentStore, settings: ExportSettings):
    """Inject the in-memory store and test settings for every test."""
    set_store(memory_store)
    set_settings(settings)
    yield
    set_store(None)
    set_settings(None)


@pytest.fixture
def client() -> TestClient:
    """Return a TestClient for the FastAPI app."""
    return TestClient(app)


# ---------------------------------------------------------------------------
# Health endpoint
# ---------------------------------------------------------------------------


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "ok"
        assert data["version"] == "0.1.0"


# ---------------------------------------------------------------------------
# /llms.txt
# ---------------------------------------------------------------------------


class TestIndexEndpoint:
    def test_exact_body(self, client: TestClient) -> None:
        resp = client.get("/llms.txt")
        assert resp.status_code == 200
        assert resp.text == (
            "# test docs\n"
            "\n"
            "> Docs for tests.\n"
            "\n"
            "## Pages\n"
            "\n"
            "- [Welcome](https://x.test/welcome/): [markdown](https://x.test/welcome.md)\n"
            "- [Getting Started](https://x.test/getting-started/): [markdown](https://x.test/getting-started.md)\n"
            "- [CLI](https://x.test/reference/cli/): [markdown](https://x.test/reference/cli.md)\n"
        )

    def test_content_type(self, client: TestClient) -> None:
        resp = client.get("/llms.txt")
        assert resp.headers["content-type"] == "text/plain; charset=utf-8"

    def test_empty_store(self, client: TestClient) -> None:
        set_store(MemoryContentStore())
        resp = client.get("/llms.txt")
        assert resp.status_code == 200
        assert resp.text == "# test docs\n\n> Docs for tests.\n\n## Pages\n\n"

    def test_store_failure_is_503(self, client: TestClient) -> None:
        set_store(BrokenStore())
        resp = client.get("/llms.txt")
        assert resp.status_code == 503
        assert resp.json()["detail"] == "Content store unavailable"


# ---------------------------------------------------------------------------
# /llms-full.txt
# ---------------------------------------------------------------------------


class TestFullEndpoint:
    def test_pages_in_full_order(self, client: TestClient) -> None:
        resp = client.get("/llms-full.txt")
        assert resp.status_code == 200
        lines = resp.text.split("\n")
        separators = [i for i, line in enumerate(lines) if line == "---"]
        assert [lines[i + 2] for i in separators] == ["# Getting Started", "# CLI", "# Welcome"]

    def test_bodies_normalized(self, client: TestClient) -> None:
        text = client.get("/llms-full.txt").text
        assert "<Card" not in text
        assert "import {" not in text
        assert "# Welcome\n\nOne line of config.\n" in text

    def test_missing_body_renders_empty_segment(self, client: TestClient) -> None:
        text = client.get("/llms-full.txt").text
        assert "---\n\n# Getting Started\n\n\n\n---" in text

    def test_content_type(self, client: TestClient) -> None:
        resp = client.get("/llms-full.txt")
        assert resp.headers["content-type"] == "text/plain; charset=utf-8"

    def test_store_failure_is_503(self, client: TestClient) -> None:
        set_store(BrokenStore())
        assert client.get("/llms-full.txt").status_code == 503


# ---------------------------------------------------------------------------
# Failures after the store read
# ---------------------------------------------------------------------------


class TestRenderFailures:
    @pytest.mark.parametrize(
        ("path", "target"),
        [
            ("/llms.txt", "llmstxt.routes.llms.index_document"),
            ("/llms-full.txt", "llmstxt.routes.llms.full_document"),
            ("/welcome.md", "llmstxt.routes.pages.page_document"),
        ],
    )
    def test_render_error_is_500_not_store_unavailable(
        self, monkeypatch: pytest.MonkeyPatch, path: str, target: str
    ) -> None:
        def boom(*args, **kwargs):
            raise RuntimeError("render bug")

        monkeypatch.setattr(target, boom)
        client = TestClient(app, raise_server_exceptions=False)
        resp = client.get(path)
        assert resp.status_code == 500
        assert "Content store unavailable" not in resp.text


# ---------------------------------------------------------------------------
# /{id}.md
# ---------------------------------------------------------------------------


class TestPageEndpoint:
    def test_nested_page(self, client: TestClient) -> None:
        resp = client.get("/reference/cli.md")
        assert resp.status_code == 200
        assert resp.text == "# CLI\n\nRun `tollbooth start`.\n\nThat is all.\n"
        assert resp.headers["content-type"] == "text/markdown; charset=utf-8"

    def test_page_without_body(self, client: TestClient) -> None:
        resp = client.get("/getting-started.md")
        assert resp.status_code == 200
        assert resp.text == "# Getting Started\n\n"

    def test_missing_page_is_404(self, client: TestClient) -> None:
        resp = client.get("/nope.md")
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Document not found: nope"

    def test_store_failure_is_503(self, client: TestClient) -> None:
        set_store(BrokenStore())
        assert client.get("/welcome.md").status_code == 503


# ---------------------------------------------------------------------------
# Against a docs directory on disk
# ---------------------------------------------------------------------------


class TestLocalDocs:
    @pytest.mark.anyio
    async def test_full_export_from_disk(self, docs_dir: Path, settings: ExportSettings) -> None:
        set_store(LocalContentStore(base_path=str(docs_dir)))
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as client:
            resp = await client.get("/llms-full.txt")

        assert resp.status_code == 200
        assert "# Welcome\n\nHello there.\n" in resp.text
        assert "# Fly.io\n\nfly deploy\n" in resp.text

    @pytest.mark.anyio
    async def test_missing_docs_directory_is_503(self, tmp_path: Path) -> None:
        set_store(LocalContentStore(base_path=str(tmp_path / "missing")))
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as client:
            resp = await client.get("/llms.txt")

        assert resp.status_code == 503
