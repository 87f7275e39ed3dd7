"""CSV file discovery."""

from pathlib import Path

from csvcombine.core.config import get_settings
from csvcombine.core.logging import get_logger
from csvcombine.core.models import FileMetadata

logger = get_logger(__name__)


def list_csv_files(directory: Path, suffix: str | None = None) -> list[FileMetadata]:
    """List the CSV files directly inside a directory.

    Only regular files whose name ends with the suffix (and is longer than
    it) are returned; subdirectories and other files are skipped. Entries
    are sorted by file name.

    Args:
        directory: Directory to scan
        suffix: File name suffix, case sensitive (default from settings)

    Returns:
        One FileMetadata per CSV file, possibly empty

    Raises:
        OSError: If the directory cannot be read
    """
    if suffix is None:
        suffix = get_settings().csv_suffix

    files: list[FileMetadata] = []
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        name = entry.name
        if not entry.is_file():
            continue
        if len(name) <= len(suffix) or not name.endswith(suffix):
            continue
        files.append(
            FileMetadata(
                name_without_ext=name[: -len(suffix)],
                full_path=entry,
            )
        )

    logger.debug("csv_files_listed", directory=str(directory), count=len(files))
    return files
