"""CSV directory to SQLite import.

Every CSV file becomes a table named after the file, with one TEXT column
per header field. Rows of one file are inserted in a single transaction; a
failing file is rolled back and reported, and the import moves on to the
next file.
"""

from __future__ import annotations

import csv
import time
from collections.abc import Iterator, Sequence
from pathlib import Path

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from csvcombine.core.config import get_settings
from csvcombine.core.logging import get_logger, log_context
from csvcombine.core.models import FileMetadata, ImportSummary, Result, TableImport
from csvcombine.sources.identifiers import sanitize_column_name, sanitize_table_name

logger = get_logger(__name__)


def fit_row(record: list[str], width: int) -> list[str]:
    """Pad a record with empty strings, or truncate it, to width fields."""
    if len(record) < width:
        return record + [""] * (width - len(record))
    return record[:width]


def _records(reader: Iterator[list[str]]) -> Iterator[list[str]]:
    """Yield non-blank records."""
    for record in reader:
        if record:
            yield record


class SQLiteImporter:
    """Imports CSV files as all-TEXT tables of one SQLite database."""

    def __init__(self, engine: Engine, encoding: str | None = None):
        self.engine = engine
        self.encoding = encoding or get_settings().encoding

    def _quote(self, name: str) -> str:
        return self.engine.dialect.identifier_preparer.quote(name)

    def create_table_sql(self, table_name: str, columns: Sequence[str]) -> str:
        column_defs = ", ".join(f"{self._quote(c)} TEXT" for c in columns)
        return f"CREATE TABLE IF NOT EXISTS {self._quote(table_name)} ({column_defs})"

    def insert_sql(self, table_name: str, columns: Sequence[str]) -> str:
        column_list = ", ".join(self._quote(c) for c in columns)
        placeholders = ", ".join(f":p{i}" for i in range(len(columns)))
        return f"INSERT INTO {self._quote(table_name)} ({column_list}) VALUES ({placeholders})"

    def import_file(self, file: FileMetadata) -> Result[TableImport]:
        """Create the file's table and insert its rows.

        Rows shorter than the header are padded with empty strings, longer
        rows are truncated. Any read or insert error rolls back every row of
        this file; the table itself is left in place.

        Args:
            file: CSV file to import

        Returns:
            Result containing TableImport
        """
        path = file.full_path
        logger.info("processing_file", path=str(path))

        try:
            handle = path.open(newline="", encoding=self.encoding)
        except OSError as e:
            return Result.fail(f"failed to open CSV file {path}: {e}")

        with handle:
            records = _records(csv.reader(handle))

            try:
                header = next(records)
            except StopIteration:
                return Result.fail(f"failed to read header from {path}: file is empty")
            except (csv.Error, UnicodeDecodeError, OSError) as e:
                return Result.fail(f"failed to read header from {path}: {e}")

            columns = [sanitize_column_name(h) for h in header]
            table_name = sanitize_table_name(file.name_without_ext)

            try:
                with self.engine.begin() as conn:
                    conn.execute(text(self.create_table_sql(table_name, columns)))
            except SQLAlchemyError as e:
                return Result.fail(f"failed to create table {table_name}: {e}")
            logger.info("table_ready", table=table_name, columns=len(columns))

            insert = text(self.insert_sql(table_name, columns))
            inserted = 0
            try:
                with self.engine.begin() as conn:
                    for record in records:
                        values = fit_row(record, len(columns))
                        conn.execute(insert, {f"p{i}": v for i, v in enumerate(values)})
                        inserted += 1
            except (csv.Error, UnicodeDecodeError, OSError) as e:
                return Result.fail(f"failed to read record from {path}: {e}")
            except SQLAlchemyError as e:
                return Result.fail(f"failed to insert row into {table_name}: {e}")

        logger.info("rows_inserted", table=table_name, rows=inserted)
        return Result.ok(
            TableImport(
                table_name=table_name,
                source_path=path,
                columns=columns,
                row_count=inserted,
            )
        )

    def import_files(
        self,
        files: Sequence[FileMetadata],
        database_path: Path,
    ) -> Result[ImportSummary]:
        """Import every file, isolating failures per file.

        Args:
            files: CSV files to import, in order
            database_path: Database file the engine points at (for reporting)

        Returns:
            Result.ok with an ImportSummary; failed files are listed in
            summary.failures and in the result warnings
        """
        start_time = time.time()
        summary = ImportSummary(database_path=database_path)
        warnings: list[str] = []

        for file in files:
            with log_context(file=file.full_path.name):
                file_result = self.import_file(file)

            if not file_result.success:
                error = file_result.error or "unknown error"
                logger.warning("file_import_failed", path=str(file.full_path), error=error)
                summary.failures[str(file.full_path)] = error
                warnings.append(f"Error processing {file.full_path}: {error}")
                continue

            summary.tables.append(file_result.unwrap())

        summary.duration_seconds = time.time() - start_time
        return Result.ok(summary, warnings=warnings)
