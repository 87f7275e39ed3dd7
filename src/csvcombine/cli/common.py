"""Shared CLI utilities and constants."""

from __future__ import annotations

from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console

from csvcombine.core.config import get_settings
from csvcombine.core.logging import configure_logging

# Load .env file from current directory (for CSVCOMBINE_* overrides)
load_dotenv()

# Shared console instance
console = Console()

# Common type aliases for typer options.
# Single-dash long names keep the "-src=<dir>" spelling working.
SrcOption = Annotated[
    str | None,
    typer.Option(
        "-src",
        "--src",
        help="Source directory containing CSV files",
        show_default=False,
    ),
]

DestOption = Annotated[
    str | None,
    typer.Option(
        "-dest",
        "--dest",
        help="Destination directory for the output file",
        show_default=False,
    ),
]

QuietFlag = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Suppress progress output",
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-v=INFO, -vv=DEBUG)",
    ),
]

LogFormatOption = Annotated[
    str | None,
    typer.Option(
        "--log-format",
        help="Log output format (console or json)",
        show_default=False,
    ),
]


def setup_logging(verbosity: int = 0, log_format: str | None = None) -> None:
    """Configure structured logging based on verbosity level.

    Args:
        verbosity: 0=configured level (WARNING by default), 1=INFO, 2+=DEBUG
        log_format: "console" or "json" (default from settings)
    """
    settings = get_settings()
    if verbosity >= 2:
        level = "DEBUG"
    elif verbosity >= 1:
        level = "INFO"
    else:
        level = settings.log_level

    log_format = log_format or settings.log_format

    configure_logging(
        log_level=level,
        log_format=log_format,
        show_timestamps=verbosity >= 1,
        color=log_format == "console",
    )
