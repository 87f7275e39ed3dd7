"""Base models and types used across the conversion pipelines.

Result is shared by both pipelines; the remaining models are lightweight
DTOs describing what each pipeline produced.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class Result[T](BaseModel):
    """Result type for operations that can fail.

    Use this instead of exceptions for expected failures.
    Exceptions are reserved for unexpected/programming errors.
    """

    success: bool
    value: T | None = None
    error: str | None = None
    warnings: list[str] = Field(default_factory=list)

    @classmethod
    def ok(cls, value: T, warnings: list[str] | None = None) -> Result[T]:
        """Create a successful result."""
        return cls(success=True, value=value, warnings=warnings or [])

    @classmethod
    def fail(cls, error: str) -> Result[T]:
        """Create a failed result."""
        return cls(success=False, error=error)

    def unwrap(self) -> T:
        """Get the value or raise if failed."""
        if not self.success:
            raise ValueError(f"Result failed: {self.error}")
        assert self.value is not None
        return self.value


class FileMetadata(BaseModel):
    """A discovered CSV file."""

    model_config = ConfigDict(frozen=True)

    name_without_ext: str
    full_path: Path


# === Spreadsheet pipeline ===


class SheetResult(BaseModel):
    """A sheet written from one CSV file."""

    sheet_name: str
    source_path: Path
    row_count: int
    cell_count: int


class WorkbookResult(BaseModel):
    """Result of converting a directory into a workbook."""

    output_path: Path
    sheets: list[SheetResult]
    duration_seconds: float

    @property
    def total_rows(self) -> int:
        return sum(s.row_count for s in self.sheets)


# === Database pipeline ===


class TableImport(BaseModel):
    """A table populated from one CSV file.

    Columns are the sanitized header names, in header order.
    """

    table_name: str
    source_path: Path
    columns: list[str]
    row_count: int


class ImportSummary(BaseModel):
    """Result of importing a directory into the database."""

    database_path: Path
    tables: list[TableImport] = Field(default_factory=list)
    failures: dict[str, str] = Field(default_factory=dict)
    duration_seconds: float = 0.0

    @property
    def total_rows(self) -> int:
        return sum(t.row_count for t in self.tables)

    @property
    def files_processed(self) -> int:
        return len(self.tables) + len(self.failures)
