"""SQL identifier sanitization for table and column names."""

import re

DEFAULT_COLUMN_NAME = "unnamed_column"
DEFAULT_TABLE_NAME = "default_table"

_INVALID_RUN = re.compile(r"[^A-Za-z0-9_]+")


def sanitize_identifier(name: str, default: str = DEFAULT_COLUMN_NAME) -> str:
    """Turn an arbitrary string into a valid SQL identifier.

    Runs of characters outside [A-Za-z0-9_] collapse to one underscore,
    leading and trailing underscores are trimmed, and a digit-initial result
    gets an underscore prefix. Distinct inputs can map to the same name.

    Args:
        name: Raw header or file name
        default: Returned when nothing usable is left

    Returns:
        Identifier matching [A-Za-z_][A-Za-z0-9_]*
    """
    sanitized = _INVALID_RUN.sub("_", name).strip("_")
    if not sanitized:
        return default
    if sanitized[0].isdigit():
        sanitized = "_" + sanitized
    return sanitized


def sanitize_column_name(name: str) -> str:
    return sanitize_identifier(name, default=DEFAULT_COLUMN_NAME)


def sanitize_table_name(name: str) -> str:
    return sanitize_identifier(name, default=DEFAULT_TABLE_NAME)
