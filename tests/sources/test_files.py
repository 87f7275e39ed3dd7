"""Tests for CSV file discovery."""

from pathlib import Path

import pytest

from csvcombine.sources import list_csv_files


class TestListCSVFiles:
    """Tests for list_csv_files()."""

    def test_counts_only_csv_files(self, src_dir, write_csv):
        """N CSV files plus M other files yield exactly N entries."""
        for name in ["a.csv", "b.csv", "c.csv"]:
            write_csv(name, "x\n1\n")
        for name in ["notes.txt", "data.csv.bak", "report.xlsx", "upper.CSV"]:
            write_csv(name, "ignored\n")

        files = list_csv_files(src_dir)

        assert len(files) == 3

    def test_metadata_fields(self, src_dir, write_csv):
        """Name drops the extension, path points at the file."""
        path = write_csv("customers.csv", "id\n1\n")

        files = list_csv_files(src_dir)

        assert len(files) == 1
        assert files[0].name_without_ext == "customers"
        assert files[0].full_path == path

    def test_sorted_by_name(self, src_dir, write_csv):
        for name in ["zeta.csv", "alpha.csv", "mid.csv"]:
            write_csv(name, "x\n")

        names = [f.name_without_ext for f in list_csv_files(src_dir)]

        assert names == ["alpha", "mid", "zeta"]

    def test_skips_directories(self, src_dir, write_csv):
        """Subdirectories are skipped even when named like CSV files."""
        (src_dir / "nested.csv").mkdir()
        (src_dir / "sub").mkdir()
        (src_dir / "sub" / "inner.csv").write_text("x\n")
        write_csv("top.csv", "x\n")

        files = list_csv_files(src_dir)

        assert [f.name_without_ext for f in files] == ["top"]

    def test_bare_suffix_is_not_a_csv_file(self, src_dir, write_csv):
        write_csv(".csv", "x\n")

        assert list_csv_files(src_dir) == []

    def test_empty_directory(self, src_dir):
        assert list_csv_files(src_dir) == []

    def test_custom_suffix(self, src_dir, write_csv):
        write_csv("a.tsv", "x\n")
        write_csv("b.csv", "x\n")

        files = list_csv_files(src_dir, suffix=".tsv")

        assert [f.name_without_ext for f in files] == ["a"]

    def test_suffix_from_settings(self, src_dir, write_csv, monkeypatch):
        monkeypatch.setenv("CSVCOMBINE_CSV_SUFFIX", ".txt")
        write_csv("a.txt", "x\n")
        write_csv("b.csv", "x\n")

        files = list_csv_files(src_dir)

        assert [f.name_without_ext for f in files] == ["a"]

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            list_csv_files(tmp_path / "does-not-exist")

    def test_file_instead_of_directory_raises(self, src_dir, write_csv):
        path = write_csv("a.csv", "x\n")

        with pytest.raises(OSError):
            list_csv_files(Path(path))

    def test_metadata_is_immutable(self, src_dir, write_csv):
        write_csv("a.csv", "x\n")
        file = list_csv_files(src_dir)[0]

        with pytest.raises(ValueError):
            file.name_without_ext = "b"
