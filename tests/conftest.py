"""Shared pytest fixtures for all tests."""

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from csvcombine.core.config import get_settings
from csvcombine.core.logging import configure_logging


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Drop cached settings so environment overrides apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def quiet_logging() -> None:
    """Point logging at this test's stderr (CLI tests reconfigure it)."""
    configure_logging(log_level="WARNING", show_timestamps=False, color=False)


@pytest.fixture
def src_dir(tmp_path: Path) -> Path:
    """Empty source directory for CSV files."""
    directory = tmp_path / "src"
    directory.mkdir()
    return directory


@pytest.fixture
def dest_dir(tmp_path: Path) -> Path:
    """Empty destination directory."""
    directory = tmp_path / "dest"
    directory.mkdir()
    return directory


@pytest.fixture
def write_csv(src_dir: Path) -> Callable[[str, str], Path]:
    """Write a file into the source directory and return its path."""

    def _write(name: str, content: str) -> Path:
        path = src_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sqlite_engine(tmp_path: Path) -> Iterator[Engine]:
    """File-backed SQLite engine for importer tests."""
    engine = create_engine(f"sqlite:///{tmp_path / 'test.db'}")
    yield engine
    engine.dispose()
