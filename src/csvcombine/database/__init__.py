"""Database pipeline - one SQLite table per CSV file."""

from csvcombine.database.connections import database_url, open_database
from csvcombine.database.importer import SQLiteImporter, fit_row

__all__ = [
    "SQLiteImporter",
    "fit_row",
    "open_database",
    "database_url",
]
