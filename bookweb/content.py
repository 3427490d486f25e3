"""Load the markdown documents backing each chapter."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

# Markdown documents shipped with the package.
BUNDLED_CHAPTERS_DIR = Path(__file__).parent / "chapters"


class ContentLoadError(RuntimeError):
    """Raised when a chapter document cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot load chapter content {path}: {reason}")
        self.path = path


def chapters_dir() -> Path:
    """Return the directory holding chapter documents.

    Returns:
        Value of ``BOOKWEB_CHAPTERS`` when set, otherwise the documents
        bundled with the package.
    """

    return Path(os.environ.get("BOOKWEB_CHAPTERS", BUNDLED_CHAPTERS_DIR))


def load_content(name: str, directory: Path | None = None) -> str:
    """Read the markdown document ``name``.

    The text is returned untouched; rendering it is left to the page.

    Args:
        name: File name of the document, e.g. ``01_introduction.md``.
        directory: Folder to read from. Defaults to ``chapters_dir()``.

    Returns:
        Raw document text.

    Raises:
        ContentLoadError: If the file is missing or unreadable.
    """

    # Resolve the document inside the configured folder.
    path = (directory or chapters_dir()) / name
    logger.debug("Loading chapter content from %s", path)

    # Surface read failures as load errors naming the file.
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ContentLoadError(path, "file not found") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ContentLoadError(path, str(exc)) from exc
