"""Tests for FastAPI web module."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

pytest.importorskip("fastapi.testclient")

from fastapi.testclient import TestClient  # type: ignore[import-not-found]

from bookweb import catalog
from bookweb.registry import ChapterRegistry, RawChapter
from bookweb.web import app
from bookweb.web.utils import get_registry


@pytest.fixture
def client(registry: ChapterRegistry[str]) -> Iterator[TestClient]:
    """Return a test client serving the three chapter ``registry``."""

    # Inject the fixture registry in place of the bundled chapters.
    app.dependency_overrides[get_registry] = lambda: registry
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_table_of_contents_html(client: TestClient) -> None:
    """Root page should link every chapter in order."""

    response = client.get("/")
    assert response.status_code == 200
    text = response.text
    assert '<a href="/intro">Intro</a>' in text
    assert text.index("/intro") < text.index("/middle") < text.index("/end")
    assert "70%" in text


def test_table_of_contents_json(client: TestClient) -> None:
    response = client.get("/", params={"format": "json"})
    assert response.status_code == 200
    assert [c["number"] for c in response.json()] == [1, 2, 3]


def test_list_chapters(client: TestClient) -> None:
    response = client.get("/chapters")
    assert response.status_code == 200
    assert response.json()[1] == {
        "number": 2,
        "title": "Middle",
        "completion": 50,
        "path": "/middle",
    }


def test_navigation_endpoints(client: TestClient) -> None:
    """Previous/next routes return lists of zero or one chapter."""

    assert client.get("/chapters/1/previous").json() == []
    assert client.get("/chapters/3/next").json() == []

    previous = client.get("/chapters/2/previous").json()
    following = client.get("/chapters/2/next").json()
    assert [c["title"] for c in previous] == ["Intro"]
    assert [c["title"] for c in following] == ["End"]


@pytest.mark.parametrize("number", [0, 4, -2])
def test_navigation_invalid_reference(
    client: TestClient, number: int
) -> None:
    response = client.get(f"/chapters/{number}/next")
    assert response.status_code == 404
    assert "Invalid chapter reference" in response.json()["detail"]


def test_chapter_json(client: TestClient) -> None:
    """Chapter payload carries content and navigation lists."""

    response = client.get("/middle", params={"format": "json"})
    assert response.status_code == 200
    data = response.json()
    assert data["number"] == 2
    assert data["content"] == "# Middle"
    assert [c["path"] for c in data["previous"]] == ["/intro"]
    assert [c["path"] for c in data["next"]] == ["/end"]


def test_chapter_html_links(client: TestClient) -> None:
    """First chapter page links only forward, last only backward."""

    first = client.get("/intro")
    assert first.status_code == 200
    assert "1. Intro" in first.text
    assert 'rel="prev"' not in first.text
    assert '<a rel="next" href="/middle">' in first.text

    last = client.get("/end")
    assert last.status_code == 200
    assert '<a rel="prev" href="/middle">' in last.text
    assert 'rel="next"' not in last.text


def test_chapter_html_escapes_content(client: TestClient) -> None:
    registry = ChapterRegistry.from_raw(
        [RawChapter("X", "1%", "/x", "<script>1</script>")]
    )
    app.dependency_overrides[get_registry] = lambda: registry

    response = client.get("/x")
    assert response.status_code == 200
    assert "<script>" not in response.text
    assert "&lt;script&gt;" in response.text


def test_unknown_chapter(client: TestClient) -> None:
    response = client.get("/nowhere")
    assert response.status_code == 404
    assert response.json()["detail"] == "Chapter not found"


def test_default_registry_uses_configured_documents(
    monkeypatch: pytest.MonkeyPatch, chapters_dir: Path
) -> None:
    """Without overrides the routes serve the authored catalog."""

    monkeypatch.setenv("BOOKWEB_CHAPTERS", str(chapters_dir))
    catalog.get_registry.cache_clear()
    try:
        response = TestClient(app).get(
            "/introduction", params={"format": "json"}
        )
    finally:
        catalog.get_registry.cache_clear()

    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Introduction"
    assert data["previous"] == []
    assert [c["title"] for c in data["next"]] == ["Basic types"]
