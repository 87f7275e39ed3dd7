"""Tests for destination database setup."""

from pathlib import Path

import pytest
from sqlalchemy import text

from csvcombine.database import database_url, open_database


class TestDatabaseURL:
    def test_file_url(self, tmp_path):
        assert database_url(tmp_path / "x.db") == f"sqlite:///{tmp_path / 'x.db'}"

    def test_memory_url(self):
        assert database_url(Path(":memory:")) == "sqlite:///:memory:"


class TestOpenDatabase:
    """Tests for open_database()."""

    def test_creates_database_file(self, dest_dir):
        path = dest_dir / "combined.db"

        engine = open_database(path)
        try:
            with engine.connect() as conn:
                assert conn.execute(text("SELECT 1")).scalar() == 1
        finally:
            engine.dispose()

        assert path.exists()

    def test_missing_parent_directory_fails(self, tmp_path):
        with pytest.raises(RuntimeError, match="Failed to connect"):
            open_database(tmp_path / "missing" / "combined.db")

    def test_in_memory(self):
        engine = open_database(Path(":memory:"))
        engine.dispose()
