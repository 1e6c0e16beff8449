"""Configuration schemas."""

from .app_schema import AppConfig, DemoDefaults, SelectionConfig
from .logging_schema import LogDestination, LoggingConfig, LogLevel

__all__ = [
    "AppConfig",
    "DemoDefaults",
    "LogDestination",
    "LogLevel",
    "LoggingConfig",
    "SelectionConfig",
]
