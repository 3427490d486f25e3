"""Fixed, numbered sequence of chapters and its navigation queries."""

from __future__ import annotations

from collections import Counter
from typing import Any, Generic, Iterable, Iterator, Union

from attrs import field, frozen

from .chapter import Chapter, RawChapter
from .types import ContentT, StrList

# A chapter record or its bare 1-based number.
ChapterRef = Union[Chapter[ContentT], int]


class InvalidChapterReference(LookupError):
    """Raised when a chapter number does not belong to the registry."""

    def __init__(self, number: int, count: int) -> None:
        super().__init__(
            f"Invalid chapter reference: {number} (registry holds "
            f"{count} chapters)"
        )
        self.number = number
        self.count = count


def number_chapters(
    raw_chapters: Iterable[RawChapter[ContentT]],
) -> tuple[Chapter[ContentT], ...]:
    """Assign 1-based numbers to authored chapters.

    Args:
        raw_chapters: Chapters in authored order.

    Returns:
        New ``Chapter`` records in the same order, numbered from 1. The
        input entries are not modified.
    """

    return tuple(
        Chapter.from_raw(raw, number)
        for number, raw in enumerate(raw_chapters, start=1)
    )


@frozen
class ChapterRegistry(Generic[ContentT]):
    """Immutable, ordered collection of numbered chapters.

    Navigation queries return lists holding zero or one chapter so that
    renderers can iterate over them without checking for ``None``.

    Attributes:
        chapters: Numbered chapters in authored order.
    """

    chapters: tuple[Chapter[ContentT], ...] = field(converter=tuple)

    @chapters.validator
    def _check_numbers(
        self, attribute: Any, value: tuple[Chapter[ContentT], ...]
    ) -> None:
        """Require numbers 1..N in storage order."""

        numbers = [c.number for c in value]
        if numbers != list(range(1, len(value) + 1)):
            raise ValueError(
                f"Chapter numbers must run from 1 to {len(value)} in order, "
                f"got {numbers}"
            )

    @classmethod
    def from_raw(
        cls, raw_chapters: Iterable[RawChapter[ContentT]]
    ) -> ChapterRegistry[ContentT]:
        """Build a registry from chapters in authored order.

        Args:
            raw_chapters: Authored chapter entries.

        Returns:
            Registry whose chapters are numbered by position.
        """

        return cls(number_chapters(raw_chapters))

    def __len__(self) -> int:
        return len(self.chapters)

    def __iter__(self) -> Iterator[Chapter[ContentT]]:
        return iter(self.chapters)

    def _number_of(self, current: ChapterRef[ContentT]) -> int:
        """Return the validated number of ``current``.

        Raises:
            TypeError: If ``current`` is a ``bool``.
            InvalidChapterReference: If the number is outside ``[1, N]``.
        """

        # ``True`` and ``False`` are ints but never chapter numbers.
        if isinstance(current, bool):
            raise TypeError("Chapter reference must be a Chapter or an int")

        number = current if isinstance(current, int) else current.number
        if not 1 <= number <= len(self.chapters):
            raise InvalidChapterReference(number, len(self.chapters))
        return number

    def chapter(self, number: int) -> Chapter[ContentT]:
        """Return the chapter numbered ``number``.

        Raises:
            InvalidChapterReference: If no chapter has that number.
        """

        return self.chapters[self._number_of(number) - 1]

    def previous_chapter(
        self, current: ChapterRef[ContentT]
    ) -> list[Chapter[ContentT]]:
        """Return the chapter before ``current``.

        Args:
            current: Chapter record or chapter number.

        Returns:
            Empty list for the first chapter, otherwise a single-element
            list with the chapter numbered ``current.number - 1``.

        Raises:
            InvalidChapterReference: If ``current`` is not in the registry.
        """

        number = self._number_of(current)
        if number < 2:
            return []

        # Chapter ``n`` is stored at index ``n - 1``.
        return [self.chapters[number - 2]]

    def next_chapter(
        self, current: ChapterRef[ContentT]
    ) -> list[Chapter[ContentT]]:
        """Return the chapter after ``current``.

        Args:
            current: Chapter record or chapter number.

        Returns:
            Empty list for the last chapter, otherwise a single-element list
            with the chapter numbered ``current.number + 1``.

        Raises:
            InvalidChapterReference: If ``current`` is not in the registry.
        """

        number = self._number_of(current)
        if number == len(self.chapters):
            return []
        return [self.chapters[number]]

    def by_path(self, path: str) -> Chapter[ContentT] | None:
        """Return the first chapter routed at ``path``, if any."""

        return next((c for c in self.chapters if c.path == path), None)

    def paths(self) -> StrList:
        """Return chapter paths in authored order."""

        return [c.path for c in self.chapters]

    def duplicate_paths(self) -> StrList:
        """Return paths shared by more than one chapter."""

        counts = Counter(self.paths())
        return [path for path, count in counts.items() if count > 1]
