"""Shared fixtures for registry, CLI and web tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from bookweb.catalog import AUTHORED_CHAPTERS, CatalogEntry
from bookweb.registry import ChapterRegistry, RawChapter


@pytest.fixture
def raw_chapters() -> tuple[RawChapter[str], ...]:
    """Return three authored chapters with text content."""

    return (
        RawChapter("Intro", "70%", "/intro", "# Intro"),
        RawChapter("Middle", 50, "/middle", "# Middle"),
        RawChapter("End", "100%", "/end", "# End"),
    )


@pytest.fixture
def registry(
    raw_chapters: tuple[RawChapter[str], ...],
) -> ChapterRegistry[str]:
    """Return a registry built from ``raw_chapters``."""

    return ChapterRegistry.from_raw(raw_chapters)


@pytest.fixture
def chapters_dir(tmp_path: Path) -> Path:
    """Write a document for every authored chapter into ``tmp_path``."""

    for entry in AUTHORED_CHAPTERS:
        (tmp_path / entry.source).write_text(
            f"# {entry.title}\n", encoding="utf-8"
        )
    return tmp_path


@pytest.fixture
def small_catalog() -> tuple[CatalogEntry, ...]:
    """Return a two entry table of contents."""

    return (
        CatalogEntry("One", "10%", "/one", "one.md"),
        CatalogEntry("Two", "20%", "/two", "two.md"),
    )
