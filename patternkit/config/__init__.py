"""Configuration package."""

from .manager import ConfigurationLoader, ConfigurationManager
from .schemas import AppConfig, DemoDefaults, LogDestination, LoggingConfig, LogLevel, SelectionConfig

__all__ = [
    "AppConfig",
    "ConfigurationLoader",
    "ConfigurationManager",
    "DemoDefaults",
    "LogDestination",
    "LogLevel",
    "LoggingConfig",
    "SelectionConfig",
]
