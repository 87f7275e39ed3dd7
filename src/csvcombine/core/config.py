"""Configuration management.

Uses pydantic-settings for type-safe configuration from environment variables.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables.
    Prefix: CSVCOMBINE_
    """

    model_config = SettingsConfigDict(
        env_prefix="CSVCOMBINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Input
    csv_suffix: str = Field(
        default=".csv",
        description="File name suffix (case sensitive) that marks a CSV file",
    )
    encoding: str = Field(
        default="utf-8",
        description="Text encoding used to read CSV files",
    )

    # Spreadsheet output
    workbook_prefix: str = Field(
        default="output_",
        description="Workbook file name prefix, followed by the unix timestamp",
    )
    workbook_extension: str = Field(default=".xlsx")

    # Database output
    database_filename: str = Field(
        default="combined.db",
        description="SQLite file created inside the destination directory",
    )
    sqlite_timeout: float = Field(
        default=30.0,
        description="SQLite busy timeout in seconds",
    )
    echo_sql: bool = Field(default=False)

    # Logging
    log_level: str = Field(default="WARNING")
    log_format: str = Field(default="console")  # 'json' or 'console'


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
