"""Main CLI application entry points.

``csvcombine`` bundles both converters as subcommands; ``csv-to-xlsx`` and
``csv-to-sqlite`` expose each one as a standalone command.
"""

from __future__ import annotations

import typer

from csvcombine.cli.commands import sqlite, xlsx

app = typer.Typer(
    name="csvcombine",
    help="Combine a directory of CSV files into one workbook or database.",
    no_args_is_help=True,
)

# Register commands
app.command()(xlsx.xlsx)
app.command()(sqlite.sqlite)

xlsx_app = typer.Typer(name="csv-to-xlsx", add_completion=False)
xlsx_app.command()(xlsx.xlsx)

sqlite_app = typer.Typer(name="csv-to-sqlite", add_completion=False)
sqlite_app.command()(sqlite.sqlite)


def main() -> None:
    """Entry point for the CLI."""
    app()


def xlsx_main() -> None:
    """Entry point for csv-to-xlsx."""
    xlsx_app()


def sqlite_main() -> None:
    """Entry point for csv-to-sqlite."""
    sqlite_app()


if __name__ == "__main__":
    main()
