"""Chapter listing and navigation queries."""

from __future__ import annotations

from typing import Any

from fastapi import (  # type: ignore[import-not-found]
    APIRouter,
    Depends,
    HTTPException,
)
from fastapi.responses import JSONResponse  # type: ignore[import-not-found]

from bookweb.registry import ChapterRegistry, InvalidChapterReference

from ..utils import get_registry, summaries

router = APIRouter()


# Keep ``catalog.RESERVED_PATHS`` in sync with the fixed paths below.
@router.get("/chapters")
async def list_chapters(
    registry: ChapterRegistry[Any] = Depends(get_registry),
) -> JSONResponse:
    """Return metadata of all chapters in book order."""

    return JSONResponse(summaries(list(registry)))


@router.get("/chapters/{number}/previous")
async def previous_chapter(
    number: int,
    registry: ChapterRegistry[Any] = Depends(get_registry),
) -> JSONResponse:
    """Return the chapter before ``number`` as a zero-or-one element list.

    Args:
        number: 1-based chapter number.
        registry: Chapters to navigate.

    Returns:
        JSON list with at most one chapter summary.
    """

    try:
        found = registry.previous_chapter(number)
    except InvalidChapterReference as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return JSONResponse(summaries(found))


@router.get("/chapters/{number}/next")
async def next_chapter(
    number: int,
    registry: ChapterRegistry[Any] = Depends(get_registry),
) -> JSONResponse:
    """Return the chapter after ``number`` as a zero-or-one element list.

    Args:
        number: 1-based chapter number.
        registry: Chapters to navigate.

    Returns:
        JSON list with at most one chapter summary.
    """

    try:
        found = registry.next_chapter(number)
    except InvalidChapterReference as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return JSONResponse(summaries(found))
