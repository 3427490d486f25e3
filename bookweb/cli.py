import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Any, Optional

import click
import yaml  # type: ignore
from dotenv import load_dotenv

from bookweb import catalog
from bookweb.content import ContentLoadError
from bookweb.json_utils import json_dumps
from bookweb.registry import ChapterRegistry
from bookweb.xlsx import write_workbook

try:
    __version__ = version("bookweb")
except PackageNotFoundError:
    __version__ = "0.0.1-dev"


@click.group()
@click.option("--debug/--no-debug", default=False)
@click.option("--trace/--no-trace", default=False)
@click.option(
    "--log-file",
    type=click.Path(file_okay=True, dir_okay=False),
    envvar="BOOKWEB_LOG_FILE",
)
@click.version_option(__version__, prog_name="bookweb")
def cli(debug: bool, trace: bool, log_file: Optional[str] = None) -> None:
    """Configure logging and load environment variables.

    Args:
        debug: Toggle debug logging.
        trace: Toggle trace logging.
        log_file: Optional path to the log file.
    """
    if trace:
        level = 1
    elif debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        filename=log_file,
        level=level,
        format="[%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if trace:
        logging.debug("Trace mode is on")
    if debug:
        logging.debug("Debug mode is on")
    load_dotenv()


def _load_registry(chapters_dir: Optional[str]) -> ChapterRegistry[str]:
    """Build the registry, turning load failures into CLI errors.

    Args:
        chapters_dir: Optional folder overriding the configured documents.

    Returns:
        The loaded registry.

    Throws:
        click.ClickException: If a chapter document cannot be loaded.
    """

    # Fall back to the configured documents when no folder is given.
    directory = Path(chapters_dir) if chapters_dir else None

    # Loading errors are fatal for every command.
    try:
        return catalog.build_registry(directory)
    except ContentLoadError as exc:
        raise click.ClickException(str(exc)) from exc


chapters_dir_option = click.option(
    "--chapters-dir",
    type=click.Path(file_okay=False, dir_okay=True, exists=True),
    default=None,
    envvar="BOOKWEB_CHAPTERS",
    help="Directory holding the chapter markdown files.",
)


@cli.command()
@chapters_dir_option
@click.option(
    "--output",
    "output_path",
    type=click.Path(file_okay=True, dir_okay=False),
    default=None,
    help="Write output to FILE instead of the console.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"]),
    default="json",
    help="Output format.",
)
def chapters(
    chapters_dir: Optional[str] = None,
    output_path: Optional[str] = None,
    output_format: str = "json",
) -> None:
    """Print the numbered table of contents.

    Args:
        chapters_dir: Directory holding the chapter documents.
        output_path: Optional file path for the listing.
        output_format: Format of the listing.
    """

    # Collect chapter metadata without the document text.
    registry = _load_registry(chapters_dir)
    summaries: list[dict[str, Any]] = [c.summary() for c in registry]

    # Serialize according to the requested format.
    if output_format == "json":
        content = json_dumps(summaries, pretty=True)
    else:
        content = yaml.safe_dump(
            summaries, allow_unicode=True, sort_keys=False
        )

    # Write to the file when given, otherwise to the console.
    if output_path:
        Path(output_path).write_text(content, encoding="utf-8")
    else:
        click.echo(content)


@cli.command()
@chapters_dir_option
@click.option(
    "--output",
    "output_path",
    type=click.Path(file_okay=True, dir_okay=True),
    required=True,
    help="Workbook FILE, or DIRECTORY receiving chapters.xlsx.",
)
def export(chapters_dir: Optional[str], output_path: str) -> None:
    """Write the table of contents to an Excel workbook.

    Args:
        chapters_dir: Directory holding the chapter documents.
        output_path: File or directory path for the workbook.
    """

    final_path = Path(output_path)

    # If the provided path is a directory, build the file path inside it.
    if final_path.is_dir():
        final_path = final_path / "chapters.xlsx"

    # Load the chapters and write the workbook.
    registry = _load_registry(chapters_dir)
    write_workbook(registry, final_path)
    logging.info("Wrote %d chapters to %s", len(registry), final_path)


@cli.command()
@click.argument("path")
@chapters_dir_option
def show(path: str, chapters_dir: Optional[str] = None) -> None:
    """Print a chapter and its neighbours.

    Args:
        path: Route of the chapter, with or without the leading slash.
        chapters_dir: Directory holding the chapter documents.
    """

    # Accept routes with or without the leading slash.
    registry = _load_registry(chapters_dir)
    route = path if path.startswith("/") else f"/{path}"
    chapter = registry.by_path(route)
    if chapter is None:
        raise click.ClickException(f"No chapter at {route}")

    # Print the chapter header followed by its raw document.
    click.echo(f"{chapter.number}. {chapter.title} ({chapter.completion})")
    click.echo("")
    click.echo(chapter.content)

    # Each list holds zero or one chapter.
    for prev in registry.previous_chapter(chapter):
        click.echo(f"Previous: {prev.number}. {prev.title} {prev.path}")
    for nxt in registry.next_chapter(chapter):
        click.echo(f"Next: {nxt.number}. {nxt.title} {nxt.path}")


@cli.command()
@chapters_dir_option
def check(chapters_dir: Optional[str] = None) -> None:
    """Load every chapter document and verify that paths are routable.

    Args:
        chapters_dir: Directory holding the chapter documents.
    """

    # Loading every document surfaces missing files first.
    registry = _load_registry(chapters_dir)

    # Each path must resolve to a single chapter.
    duplicates = registry.duplicate_paths()
    if duplicates:
        raise click.ClickException(
            f"Duplicate chapter paths: {', '.join(duplicates)}"
        )

    # Chapters routed at fixed web paths would never be served.
    reserved = catalog.reserved_path_conflicts(registry)
    if reserved:
        raise click.ClickException(
            f"Reserved chapter paths: {', '.join(reserved)}"
        )

    click.echo(f"{len(registry)} chapters OK")
