# kvcsv/config/models.py

"""
Pydantic models for the kvcsv tool configuration (kvcsv.toml).
Uses Pydantic V2 syntax.

This configuration drives the command-line tool only; LayeredTable itself
takes its sources as arguments and reads no configuration.
"""

import os
from pathlib import Path
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class SourcesConfig(BaseModel):
    """Default source layers, lowest priority first."""
    files: List[Path] = Field(default_factory=list, description="CSV sources used when none are given on the command line.")

    @field_validator('files', mode='before')
    @classmethod
    def split_path_list(cls, value: Any) -> Any:
        """Accepts an os.pathsep-separated string (as set through environment variables)."""
        if value is None:
            return []
        if isinstance(value, str):
            return [part for part in value.split(os.pathsep) if part]
        return value


class LoggingConfig(BaseModel):
    """Logging configuration settings."""
    log_file_enabled: bool = Field(False, description="Enable/disable file logging.")
    log_file: Path = Field(default=Path("./kvcsv.log"), description="Path of the log file when file logging is enabled.")
    log_level_file: str = Field("DEBUG", description="Minimum level for file logs (DEBUG, INFO, WARNING, ERROR, CRITICAL).")
    log_level_console: str = Field("WARNING", description="Minimum console level when no verbosity flag is given.")
    log_format: str = Field("%(asctime)s [%(levelname)-8s] %(name)-24s - %(message)s", description="Format string for file log entries.")

    @field_validator('log_file', mode='before')
    @classmethod
    def expand_log_file(cls, value: Any) -> Any:
        if isinstance(value, (str, Path)):
            return Path(value).expanduser()
        return value

    @field_validator('log_level_file', 'log_level_console')
    @classmethod
    def check_log_level(cls, value: str) -> str:
        """Validate log level strings."""
        upper_value = value.upper()
        if upper_value not in ALLOWED_LOG_LEVELS:
            raise ValueError(f"Invalid log level '{value}'. Must be one of {sorted(ALLOWED_LOG_LEVELS)}")
        return upper_value


class KvcsvConfig(BaseModel):
    """Root configuration model for the kvcsv tool."""
    model_config = ConfigDict(extra='ignore')

    sources: SourcesConfig = Field(default_factory=SourcesConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

