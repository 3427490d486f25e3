"""Table of contents page."""

from __future__ import annotations

from typing import Any

from fastapi import (  # type: ignore[import-not-found]
    APIRouter,
    Depends,
    Query,
    Request,
    Response,
)
from fastapi.responses import JSONResponse  # type: ignore[import-not-found]

from bookweb.registry import ChapterRegistry

from ..utils import (
    create_jinja_context,
    get_registry,
    summaries,
    templates,
)

router = APIRouter()


@router.get("/")
async def table_of_contents(
    request: Request,
    format: str = Query(default="html", enum=["json", "html"]),
    registry: ChapterRegistry[Any] = Depends(get_registry),
) -> Response:
    """List every chapter in book order.

    Args:
        request: Incoming request used for template rendering.
        format: Desired response format.
        registry: Chapters to list.

    Returns:
        Either an HTML page linking each chapter or a JSON list.
    """

    items = summaries(list(registry))

    if format == "json":
        return JSONResponse(items)

    return templates.TemplateResponse(
        request,
        "index.html",
        context=create_jinja_context(request=request, chapters=items),
    )
