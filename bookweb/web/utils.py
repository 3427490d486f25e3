"""Utility helpers for web routes."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from fastapi import Request  # type: ignore[import-not-found]
from fastapi.templating import Jinja2Templates  # type: ignore

from bookweb import catalog
from bookweb.registry import Chapter, ChapterRegistry

JSONDict = dict[str, Any]
ChapterSummaryList = list[JSONDict]

SITE_TITLE = "Elixir book"

# Jinja templates bundled with the package.
TEMPLATES_DIR = Path(__file__).parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def get_registry() -> ChapterRegistry[str]:
    """Return the registry used by the routes.

    Tests replace this dependency through ``app.dependency_overrides``.
    """

    return catalog.get_registry()


def create_jinja_context(request: Request, **kwargs: Any) -> JSONDict:
    """Build the template context shared by all pages.

    Args:
        request: Incoming request.
        **kwargs: Page specific values.

    Returns:
        Context with the request and a default page title.
    """

    context: JSONDict = {"request": request, "title": SITE_TITLE}
    context.update(kwargs)
    return context


def summaries(chapters: list[Chapter[Any]]) -> ChapterSummaryList:
    """Return metadata of ``chapters`` without their content."""

    return [c.summary() for c in chapters]


def chapter_payload(
    registry: ChapterRegistry[Any], chapter: Chapter[Any]
) -> JSONDict:
    """Return a chapter with its content and navigation links.

    Args:
        registry: Registry the chapter belongs to.
        chapter: Chapter to serialize.

    Returns:
        Chapter metadata, content and zero-or-one element ``previous`` and
        ``next`` lists.
    """

    payload = chapter.summary()
    payload["content"] = chapter.content
    payload["previous"] = summaries(registry.previous_chapter(chapter))
    payload["next"] = summaries(registry.next_chapter(chapter))
    return payload
