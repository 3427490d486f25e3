"""Render a single chapter addressed by its route path."""

from __future__ import annotations

from typing import Any

from fastapi import (  # type: ignore[import-not-found]
    APIRouter,
    Depends,
    HTTPException,
    Query,
    Request,
    Response,
)
from fastapi.responses import JSONResponse  # type: ignore[import-not-found]

from bookweb.registry import ChapterRegistry

from ..utils import (
    chapter_payload,
    create_jinja_context,
    get_registry,
    templates,
)

router = APIRouter()


@router.get("/{slug}")
async def get_chapter(
    slug: str,
    request: Request,
    format: str = Query(default="html", enum=["json", "html"]),
    registry: ChapterRegistry[Any] = Depends(get_registry),
) -> Response:
    """Return the chapter routed at ``/{slug}``.

    Args:
        slug: Chapter path without the leading slash.
        request: Incoming request used for template rendering.
        format: Desired response format.
        registry: Chapters to look the path up in.

    Returns:
        The chapter page with previous/next links, or its JSON form.
    """

    chapter = registry.by_path(f"/{slug}")
    if chapter is None:
        raise HTTPException(status_code=404, detail="Chapter not found")

    payload = chapter_payload(registry, chapter)

    if format == "json":
        return JSONResponse(payload)

    return templates.TemplateResponse(
        request,
        "chapter.html",
        context=create_jinja_context(
            request=request,
            chapter=payload,
            title=f"{chapter.title} | Elixir book",
        ),
    )
