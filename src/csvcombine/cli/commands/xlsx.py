"""Convert a CSV directory into one workbook."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.markup import escape

from csvcombine.cli.common import (
    DestOption,
    LogFormatOption,
    QuietFlag,
    SrcOption,
    VerboseOption,
    console,
    setup_logging,
)
from csvcombine.core.logging import get_logger

logger = get_logger(__name__)


def xlsx(
    src: SrcOption = None,
    dest: DestOption = None,
    quiet: QuietFlag = False,
    verbose: VerboseOption = 0,
    log_format: LogFormatOption = None,
) -> None:
    """Combine CSV files into a workbook with one sheet per file.

    Lines are split on every comma; quoted fields are not recognised.
    The workbook is written to <dest>/output_<unix timestamp>.xlsx.

    Examples:

        csv-to-xlsx -src=./exports -dest=./out

        csvcombine xlsx --src ./exports --dest ./out -v
    """
    setup_logging(verbosity=verbose, log_format=log_format)

    from csvcombine.sources import list_csv_files
    from csvcombine.workbook import WorkbookConverter

    if not src or not dest:
        logger.error("src_and_dest_required")
        raise typer.Exit(1)

    logger.info("using_directories", src=src, dest=dest)

    try:
        files = list_csv_files(Path(src))
    except OSError as e:
        logger.error("csv_listing_failed", src=src, error=str(e))
        raise typer.Exit(1) from e

    if not files:
        logger.error("no_csv_files_found", src=src)
        raise typer.Exit(1)

    result = WorkbookConverter().convert(files, Path(dest))
    if not result.success:
        logger.error("workbook_conversion_failed", error=result.error)
        raise typer.Exit(1)

    workbook = result.unwrap()
    logger.info("workbook_created", path=str(workbook.output_path))

    if not quiet:
        console.print("\n[bold]Workbook[/bold]")
        console.print("=" * 60)
        for sheet in workbook.sheets:
            console.print(
                f"  [green]✓[/green] {escape(sheet.sheet_name)}: "
                f"{sheet.row_count:,} rows, {sheet.cell_count:,} cells"
            )
        console.print()
        console.print(f"  Sheets: {len(workbook.sheets)}")
        console.print(f"  Rows: {workbook.total_rows:,}")
        console.print(f"  Duration: {workbook.duration_seconds:.2f}s")
        console.print(f"\n[green]Excel file created: {escape(str(workbook.output_path))}[/green]")
