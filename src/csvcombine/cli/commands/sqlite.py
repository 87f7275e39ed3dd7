"""Import a CSV directory into one SQLite database."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table

from csvcombine.cli.common import (
    DestOption,
    LogFormatOption,
    QuietFlag,
    SrcOption,
    VerboseOption,
    console,
    setup_logging,
)
from csvcombine.core.config import get_settings


def sqlite(
    src: SrcOption = None,
    dest: DestOption = None,
    quiet: QuietFlag = False,
    verbose: VerboseOption = 0,
    log_format: LogFormatOption = None,
) -> None:
    """Import CSV files into a SQLite database, one table per file.

    Headers become TEXT columns. A file that fails is rolled back and
    reported; the remaining files are still imported.

    Examples:

        csv-to-sqlite -src=./exports -dest=./out

        csvcombine sqlite --src ./exports --dest ./out --log-format json
    """
    setup_logging(verbosity=verbose, log_format=log_format)

    from csvcombine.database import SQLiteImporter, open_database
    from csvcombine.sources import list_csv_files

    if not src or not dest:
        console.print("[red]src and dest are required[/red]")
        raise typer.Exit(1)

    database_path = Path(dest) / get_settings().database_filename

    try:
        engine = open_database(database_path)
    except RuntimeError as e:
        console.print(f"[red]Error opening database: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    try:
        if not quiet:
            console.print(f"Connected to SQLite database: {escape(str(database_path))}")

        try:
            files = list_csv_files(Path(src))
        except OSError as e:
            console.print(f"[red]Error reading CSV directory: {escape(str(e))}[/red]")
            raise typer.Exit(1) from e

        result = SQLiteImporter(engine).import_files(files, database_path)
    finally:
        engine.dispose()

    summary = result.unwrap()

    for warning in result.warnings:
        console.print(f"[red]{escape(warning)}[/red]")

    if not quiet:
        table = Table(title="Import Summary")
        table.add_column("File")
        table.add_column("Table")
        table.add_column("Rows", justify="right")
        table.add_column("Status")
        for imported in summary.tables:
            table.add_row(
                escape(imported.source_path.name),
                imported.table_name,
                f"{imported.row_count:,}",
                "[green]✓ imported[/green]",
            )
        for path in summary.failures:
            table.add_row(escape(Path(path).name), "-", "-", "[red]✗ failed[/red]")
        console.print(table)

        console.print(f"  Files: {summary.files_processed}")
        console.print(f"  [green]Imported:[/green] {len(summary.tables)}")
        console.print(f"  [red]Failed:[/red] {len(summary.failures)}")
        console.print(f"  Rows: {summary.total_rows:,}")
        console.print(f"  Duration: {summary.duration_seconds:.2f}s")

    console.print("\nAll CSV files processed. You can now inspect the database.")
