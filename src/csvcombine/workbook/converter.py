"""CSV directory to multi-sheet workbook conversion.

Each CSV file becomes one sheet named after the file. Lines are split on raw
commas with no quote handling, so a quoted field containing a comma spans
several cells. The first failure aborts the whole conversion and nothing is
saved.
"""

from __future__ import annotations

import time
from collections.abc import Sequence
from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils.exceptions import IllegalCharacterError
from openpyxl.worksheet.worksheet import Worksheet

from csvcombine.core.config import get_settings
from csvcombine.core.logging import get_logger, log_context
from csvcombine.core.models import FileMetadata, Result, SheetResult, WorkbookResult

logger = get_logger(__name__)


def split_line(line: str) -> list[str]:
    """Split a line on every comma, quotes included."""
    return line.split(",")


# Longest sheet title Excel accepts
MAX_SHEET_TITLE = 31


def find_sheet(workbook: Workbook, name: str) -> Worksheet | None:
    """Find a sheet by title, ignoring case as spreadsheet applications do."""
    wanted = name.lower()
    return next((ws for ws in workbook.worksheets if ws.title.lower() == wanted), None)


def _is_blank(sheet: Worksheet) -> bool:
    if sheet.max_row != 1 or sheet.max_column != 1:
        return False
    return sheet.cell(row=1, column=1).value is None


class WorkbookConverter:
    """Writes CSV files as sheets of a single xlsx workbook."""

    def __init__(
        self,
        encoding: str | None = None,
        prefix: str | None = None,
        extension: str | None = None,
    ):
        settings = get_settings()
        self.encoding = encoding or settings.encoding
        self.prefix = prefix if prefix is not None else settings.workbook_prefix
        self.extension = extension or settings.workbook_extension

    def output_path(self, dest_dir: Path, timestamp: int | None = None) -> Path:
        """Build the workbook path for a destination directory.

        Args:
            dest_dir: Destination directory
            timestamp: Unix timestamp (default: now)

        Returns:
            <dest_dir>/<prefix><timestamp><extension>
        """
        if timestamp is None:
            timestamp = int(time.time())
        return dest_dir / f"{self.prefix}{timestamp}{self.extension}"

    def write_sheet(self, workbook: Workbook, file: FileMetadata) -> Result[SheetResult]:
        """Write one CSV file into the sheet named after it.

        An existing sheet whose title matches case-insensitively is reused,
        so a later file overwrites the cells of an earlier one. A reused
        sheet keeps its title unless it is still blank.

        Args:
            workbook: Workbook being built
            file: CSV file to copy

        Returns:
            Result containing SheetResult
        """
        sheet_name = file.name_without_ext
        logger.info("reading_file", path=str(file.full_path))

        if len(sheet_name) > MAX_SHEET_TITLE:
            return Result.fail(
                f"failed to create sheet {sheet_name!r}: "
                f"title is longer than {MAX_SHEET_TITLE} characters"
            )

        try:
            sheet = find_sheet(workbook, sheet_name)
            if sheet is None:
                sheet = workbook.create_sheet(title=sheet_name)
            elif sheet.title != sheet_name and _is_blank(sheet):
                sheet.title = sheet_name
        except ValueError as e:
            return Result.fail(f"failed to create sheet {sheet_name!r}: {e}")
        sheet_name = sheet.title

        logger.info("writing_sheet", sheet=sheet_name)

        row_count = 0
        cell_count = 0
        try:
            with file.full_path.open(encoding=self.encoding) as handle:
                for row_idx, line in enumerate(handle, start=1):
                    for col_idx, token in enumerate(split_line(line.rstrip("\n")), start=1):
                        cell = sheet.cell(row=row_idx, column=col_idx)
                        cell.value = token
                        # Keep "=..." tokens as literal text, not formulas
                        if cell.data_type == "f":
                            cell.data_type = "s"
                        cell_count += 1
                    row_count = row_idx
        except (OSError, UnicodeDecodeError) as e:
            return Result.fail(f"failed to read {file.full_path}: {e}")
        except (IllegalCharacterError, ValueError) as e:
            return Result.fail(
                f"failed to set cell value in sheet {sheet_name!r} "
                f"(row {row_count + 1}): {e}"
            )

        logger.info("sheet_written", sheet=sheet_name, rows=row_count, cells=cell_count)
        return Result.ok(
            SheetResult(
                sheet_name=sheet_name,
                source_path=file.full_path,
                row_count=row_count,
                cell_count=cell_count,
            )
        )

    def convert(self, files: Sequence[FileMetadata], dest_dir: Path) -> Result[WorkbookResult]:
        """Convert CSV files into a workbook saved in dest_dir.

        Stops at the first failing file. The default sheet created with the
        workbook is removed before saving, unless a CSV file with the same
        name was written into it.

        Args:
            files: CSV files, one sheet each
            dest_dir: Directory receiving the workbook

        Returns:
            Result containing WorkbookResult
        """
        if not files:
            return Result.fail("No CSV files to convert")

        start_time = time.time()
        workbook = Workbook()
        placeholder = workbook.active

        try:
            sheets: list[SheetResult] = []
            for file in files:
                with log_context(file=file.full_path.name):
                    sheet_result = self.write_sheet(workbook, file)
                if not sheet_result.success:
                    return Result.fail(sheet_result.error or f"Failed to convert {file.full_path}")
                sheets.append(sheet_result.unwrap())

            written = {s.sheet_name.lower() for s in sheets}
            if placeholder is not None and placeholder.title.lower() not in written:
                workbook.remove(placeholder)

            output_path = self.output_path(dest_dir)
            try:
                workbook.save(output_path)
            except OSError as e:
                return Result.fail(f"failed to save workbook {output_path}: {e}")
        finally:
            workbook.close()

        logger.info("workbook_saved", path=str(output_path), sheets=len(sheets))
        return Result.ok(
            WorkbookResult(
                output_path=output_path,
                sheets=sheets,
                duration_seconds=time.time() - start_time,
            )
        )
