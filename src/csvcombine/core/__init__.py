"""Core module - configuration, logging, and shared models."""

from csvcombine.core.config import Settings, get_settings
from csvcombine.core.models import (
    FileMetadata,
    ImportSummary,
    Result,
    SheetResult,
    TableImport,
    WorkbookResult,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Models
    "FileMetadata",
    "Result",
    "SheetResult",
    "WorkbookResult",
    "TableImport",
    "ImportSummary",
]
