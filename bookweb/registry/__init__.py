"""Ordered chapter registry with previous/next navigation."""

from .chapter import Chapter, RawChapter
from .registry import (
    ChapterRegistry,
    InvalidChapterReference,
    number_chapters,
)

__all__ = [
    "Chapter",
    "ChapterRegistry",
    "InvalidChapterReference",
    "RawChapter",
    "number_chapters",
]
