"""Export the table of contents to an Excel workbook."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from openpyxl import Workbook  # type: ignore[import-untyped]
from openpyxl.styles import Alignment  # type: ignore[import-untyped]
from openpyxl.utils import get_column_letter  # type: ignore[import-untyped]
from openpyxl.worksheet.table import (  # type: ignore[import-untyped]
    Table,
    TableStyleInfo,
)

from bookweb.registry import ChapterRegistry

SHEET_NAME = "Chapters"
HEADERS = ["number", "title", "completion", "path"]

# Column widths keyed by header.
WIDTHS = {"number": 10, "title": 50, "completion": 12, "path": 30}


def write_workbook(registry: ChapterRegistry[Any], path: Path) -> None:
    """Write the numbered chapter list into an Excel workbook.

    Args:
        registry: Chapters to export; their content is left out.
        path: Destination file path for the workbook.
    """

    workbook = Workbook()

    # Remove the default sheet created by openpyxl when present.
    default_sheet = workbook.active
    if default_sheet is not None:
        workbook.remove(default_sheet)

    ws = workbook.create_sheet(title=SHEET_NAME)
    ws.append(HEADERS)
    for chapter in registry:
        summary = chapter.summary()
        ws.append([summary[header] for header in HEADERS])

    # Long titles wrap instead of widening the sheet.
    title_col = HEADERS.index("title") + 1
    for col_cells in ws.iter_cols(
        min_col=title_col, max_col=title_col, min_row=1, max_row=ws.max_row
    ):
        for cell in col_cells:
            cell.alignment = Alignment(wrapText=True)

    for idx, header in enumerate(HEADERS, start=1):
        ws.column_dimensions[get_column_letter(idx)].width = WIDTHS[header]

    # A table needs at least one data row besides the header.
    if len(registry):
        end_column = get_column_letter(len(HEADERS))
        end_row = len(registry) + 1
        table = Table(
            displayName=SHEET_NAME, ref=f"A1:{end_column}{end_row}"
        )

        # Apply a simple table style with row stripes for readability.
        table.tableStyleInfo = TableStyleInfo(
            name="TableStyleMedium9", showRowStripes=True
        )
        ws.add_table(table)

    workbook.save(path)
