"""CSV discovery and identifier helpers shared by both pipelines."""

from csvcombine.sources.files import list_csv_files
from csvcombine.sources.identifiers import (
    DEFAULT_COLUMN_NAME,
    DEFAULT_TABLE_NAME,
    sanitize_column_name,
    sanitize_identifier,
    sanitize_table_name,
)

__all__ = [
    "list_csv_files",
    "sanitize_identifier",
    "sanitize_column_name",
    "sanitize_table_name",
    "DEFAULT_COLUMN_NAME",
    "DEFAULT_TABLE_NAME",
]
