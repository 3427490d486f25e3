"""FastAPI application serving the book chapters."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI  # type: ignore[import-not-found]

from bookweb import catalog

from .routes import chapter_detail, chapters, root

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """Load every chapter once before serving requests."""

    registry = catalog.get_registry()
    logger.info("Serving %d chapters", len(registry))
    yield


app = FastAPI(title="bookweb", lifespan=lifespan)

app.include_router(root.router)
app.include_router(chapters.router)

# The catch-all chapter route must come last.
app.include_router(chapter_detail.router)
