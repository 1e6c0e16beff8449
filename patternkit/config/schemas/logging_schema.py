"""Logging configuration schema."""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Log level enumeration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""

    FILE = "file"
    CONSOLE = "console"
    BOTH = "both"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.WARNING, description="Root log level")
    destination: LogDestination = Field(
        LogDestination.CONSOLE, description="Where log records are written"
    )
    file_path: str = Field("logs/patternkit.log", description="Log file path")
    max_size_mb: int = Field(10, gt=0, description="Rotate the log file after this size")
    backup_count: int = Field(5, ge=0, description="Number of rotated files to keep")
    json_format: bool = Field(False, description="Render records as JSON lines")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("destination", mode="before")
    @classmethod
    def normalize_destination(cls, v):
        """Accept destinations in any case."""
        if isinstance(v, str):
            return v.lower()
        return v
