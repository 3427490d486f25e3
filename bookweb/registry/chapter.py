"""Authored and numbered chapter records."""

from __future__ import annotations

from typing import Generic

from attrs import field, frozen

from .types import Completion, ContentT


@frozen
class RawChapter(Generic[ContentT]):
    """Chapter entry as authored, before numbering.

    Attributes:
        title: Display name of the chapter.
        completion: Informational estimate of how finished the chapter is,
            such as "70%".
        path: Route identifier with a leading slash, e.g. "/introduction".
        content: Opaque document payload supplied by the content loader.
    """

    title: str
    completion: Completion
    path: str
    content: ContentT = field(repr=False)


@frozen
class Chapter(Generic[ContentT]):
    """Chapter entry with its 1-based position in the book.

    Attributes:
        title: Display name of the chapter.
        completion: Informational completion estimate.
        path: Route identifier with a leading slash.
        content: Opaque document payload.
        number: Position in the authored order, starting at 1.
    """

    title: str
    completion: Completion
    path: str
    content: ContentT = field(repr=False)
    number: int = field(kw_only=True)

    @classmethod
    def from_raw(
        cls, raw: RawChapter[ContentT], number: int
    ) -> Chapter[ContentT]:
        """Return a numbered copy of ``raw``; ``raw`` itself is untouched."""

        return cls(
            title=raw.title,
            completion=raw.completion,
            path=raw.path,
            content=raw.content,
            number=number,
        )

    def summary(self) -> dict[str, object]:
        """Return the chapter metadata without its content."""

        return {
            "number": self.number,
            "title": self.title,
            "completion": self.completion,
            "path": self.path,
        }
