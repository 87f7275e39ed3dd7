"""csvcombine - fold a directory of CSV files into one workbook or database.

Example:
    from csvcombine.sources import list_csv_files
    from csvcombine.database import SQLiteImporter, open_database

    files = list_csv_files(Path("./exports"))
    engine = open_database(Path("./out/combined.db"))
    result = SQLiteImporter(engine).import_files(files, Path("./out/combined.db"))
"""

__version__ = "0.1.0"

from csvcombine.core.models import Result

__all__ = [
    "Result",
    "__version__",
]
