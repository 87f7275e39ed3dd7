"""SQLAlchemy engine setup for the destination SQLite file.

Usage:
    from csvcombine.database.connections import open_database

    engine = open_database(Path("./out/combined.db"))
    try:
        with engine.begin() as conn:
            conn.execute(text("SELECT 1"))
    finally:
        engine.dispose()
"""

from __future__ import annotations

from pathlib import Path

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from csvcombine.core.config import get_settings
from csvcombine.core.logging import get_logger

logger = get_logger(__name__)


def database_url(path: Path) -> str:
    """SQLAlchemy URL for a SQLite file (or :memory:)."""
    if path == Path(":memory:"):
        return "sqlite:///:memory:"
    return f"sqlite:///{path}"


def open_database(
    path: Path,
    timeout: float | None = None,
    echo: bool | None = None,
) -> Engine:
    """Create an engine for the SQLite file and check that it can connect.

    The file is created on first connect. The parent directory is not
    created.

    Args:
        path: SQLite database file
        timeout: SQLite busy timeout in seconds (default from settings)
        echo: Whether to echo SQL statements (default from settings)

    Returns:
        Connected SQLAlchemy engine. Caller is responsible for disposing it.

    Raises:
        RuntimeError: If the database cannot be opened
    """
    settings = get_settings()
    engine = create_engine(
        database_url(path),
        echo=settings.echo_sql if echo is None else echo,
        connect_args={
            "timeout": settings.sqlite_timeout if timeout is None else timeout,
        },
    )

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        engine.dispose()
        raise RuntimeError(f"Failed to connect to database {path}: {e}") from e

    logger.info("database_connected", path=str(path))
    return engine
