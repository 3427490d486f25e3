"""Authored table of contents for the book."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, NamedTuple

from bookweb.content import load_content
from bookweb.registry import ChapterRegistry, RawChapter
from bookweb.registry.types import Completion

logger = logging.getLogger(__name__)

# Paths served by fixed web routes; a chapter routed there is unreachable.
RESERVED_PATHS: tuple[str, ...] = ("/chapters",)


class CatalogEntry(NamedTuple):
    """One line of the authored table of contents."""

    title: str
    completion: Completion
    path: str
    source: str


# Chapter order is the order of this table.
AUTHORED_CHAPTERS: tuple[CatalogEntry, ...] = (
    CatalogEntry(
        "Introduction", "70%", "/introduction", "01_introduction.md"
    ),
    CatalogEntry(
        "Basic types", "100%", "/basic_types", "02_basic_types.md"
    ),
    CatalogEntry(
        "Data structures",
        "80%",
        "/data_structures",
        "03_data_structures.md",
    ),
    CatalogEntry(
        "Conditional structures",
        "95%",
        "/conditionals",
        "04_conditionals.md",
    ),
    CatalogEntry(
        "Functions and modules",
        "90%",
        "/functions_modules",
        "05_functions_modules.md",
    ),
    CatalogEntry(
        "Pattern matching",
        "70%",
        "/pattern_matching",
        "06_pattern_matching.md",
    ),
    CatalogEntry(
        "High-order functions",
        "90%",
        "/high_order_fun",
        "07_high_order_functions.md",
    ),
    CatalogEntry(
        "Lazy evaluation and streams",
        "80%",
        "/lazy_streams",
        "08_lazy_streams.md",
    ),
    CatalogEntry(
        "Hello outside world! Input and output",
        "75%",
        "/file_io",
        "09_file_io.md",
    ),
    CatalogEntry(
        "Modules and structs",
        "60%",
        "/modules_structs",
        "10_modules_structs.md",
    ),
    CatalogEntry(
        "Parallelism with processes",
        "90%",
        "/processes",
        "11_processes.md",
    ),
    CatalogEntry(
        "Supervisors and process abstractions",
        "5%",
        "/supervisors_abstractions",
        "12_supervisors_and_otp.md",
    ),
    CatalogEntry(
        "Language tools", "40%", "/language_tools", "14_mix_hex_docs.md"
    ),
    CatalogEntry(
        "Composing an application",
        "50%",
        "/composing_an_application",
        "13_composing_an_application.md",
    ),
    CatalogEntry(
        "Drafts and ideas", "50%", "/drafts", "drafts_and_ideas.md"
    ),
)


def load_raw_chapters(
    directory: Path | None = None,
    entries: tuple[CatalogEntry, ...] = AUTHORED_CHAPTERS,
) -> tuple[RawChapter[str], ...]:
    """Load the document of every catalog entry.

    Args:
        directory: Folder holding the markdown documents.
        entries: Table of contents to load, in authored order.

    Returns:
        Unnumbered chapters carrying their document text.

    Raises:
        ContentLoadError: If any document is missing.
    """

    # Read each document in authored order; the first missing one aborts.
    return tuple(
        RawChapter(
            title=entry.title,
            completion=entry.completion,
            path=entry.path,
            content=load_content(entry.source, directory),
        )
        for entry in entries
    )


def build_registry(
    directory: Path | None = None,
    entries: tuple[CatalogEntry, ...] = AUTHORED_CHAPTERS,
) -> ChapterRegistry[str]:
    """Load all documents and build the numbered registry.

    Args:
        directory: Folder holding the markdown documents.
        entries: Table of contents to load, in authored order.

    Returns:
        Registry of the loaded chapters.
    """

    # Number the chapters by their position in ``entries``.
    registry = ChapterRegistry.from_raw(load_raw_chapters(directory, entries))
    logger.info("Loaded %d chapters", len(registry))

    # Report paths the router cannot resolve unambiguously.
    duplicates = registry.duplicate_paths()
    if duplicates:
        logger.warning("Duplicate chapter paths: %s", ", ".join(duplicates))

    reserved = reserved_path_conflicts(registry)
    if reserved:
        logger.warning("Reserved chapter paths: %s", ", ".join(reserved))
    return registry


def reserved_path_conflicts(registry: ChapterRegistry[Any]) -> list[str]:
    """Return chapter paths that collide with fixed web routes.

    Args:
        registry: Chapters to inspect.

    Returns:
        Paths from ``RESERVED_PATHS`` used by at least one chapter.
    """

    used = set(registry.paths())
    return [path for path in RESERVED_PATHS if path in used]


@lru_cache(maxsize=1)
def get_registry() -> ChapterRegistry[str]:
    """Return the process-wide registry, building it on first use."""

    # The cache keeps this the only construction for the process.
    return build_registry()
