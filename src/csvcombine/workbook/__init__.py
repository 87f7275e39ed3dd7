"""Spreadsheet pipeline - one workbook sheet per CSV file."""

from csvcombine.workbook.converter import (
    MAX_SHEET_TITLE,
    WorkbookConverter,
    find_sheet,
    split_line,
)

__all__ = [
    "WorkbookConverter",
    "find_sheet",
    "split_line",
    "MAX_SHEET_TITLE",
]
