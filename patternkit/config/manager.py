# patternkit/config/manager.py
from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from patternkit.config.defaults import CONFIG_PATH_ENV, DEFAULT_CONFIG
from patternkit.config.schemas import AppConfig
from patternkit.config.utils.env_expansion import expand_env_vars
from patternkit.domain.base.exceptions import ConfigurationError
from patternkit.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class ConfigurationLoader:
    """Loads raw configuration from defaults, a JSON file and the environment."""

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> Dict[str, Any]:
        """
        Load configuration.

        Args:
            config_path: Optional path to a JSON configuration file. Falls back
                to the PATTERNKIT_CONFIG environment variable.

        Returns:
            Raw configuration dictionary with environment variables expanded

        Raises:
            ConfigurationError: If the file is missing or is not valid JSON
        """
        config = cls._deep_copy(DEFAULT_CONFIG)

        path = config_path or os.environ.get(CONFIG_PATH_ENV)
        if path:
            file_config = cls._load_file(path)
            cls._deep_merge(config, file_config)

        return expand_env_vars(config)

    @classmethod
    def create_app_config(cls, raw_config: Dict[str, Any]) -> AppConfig:
        """Validate raw configuration into the typed AppConfig."""
        try:
            return AppConfig.model_validate(raw_config)
        except PydanticValidationError as e:
            invalid_fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
            raise ConfigurationError(
                f"Invalid configuration: {', '.join(invalid_fields)}",
                "INVALID_CONFIGURATION",
                {"fields": invalid_fields},
            ) from e

    @classmethod
    def _load_file(cls, path: str) -> Dict[str, Any]:
        file_path = Path(path).expanduser()
        if not file_path.is_file():
            raise ConfigurationError(
                f"Configuration file not found: {file_path}",
                "CONFIG_FILE_NOT_FOUND",
                {"path": str(file_path)},
            )
        try:
            with file_path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in configuration file {file_path}: {e}",
                "CONFIG_FILE_INVALID",
                {"path": str(file_path)},
            ) from e
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {file_path} must contain a JSON object",
                "CONFIG_FILE_INVALID",
                {"path": str(file_path)},
            )
        logger.debug("Loaded configuration file", path=str(file_path))
        return data

    @classmethod
    def _deep_merge(cls, target: Dict[str, Any], source: Dict[str, Any]) -> None:
        """Merge source into target in place, recursing into nested dicts."""
        for key, value in source.items():
            if isinstance(value, dict) and isinstance(target.get(key), dict):
                cls._deep_merge(target[key], value)
            else:
                target[key] = value

    @staticmethod
    def _deep_copy(config: Dict[str, Any]) -> Dict[str, Any]:
        return copy.deepcopy(config)


class ConfigurationManager:
    """Typed access to the application configuration."""

    def __init__(self, config_path: Optional[str] = None) -> None:
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to configuration file
        """
        self.config_path = config_path
        self.raw_config = ConfigurationLoader.load(config_path)
        self._app_config = ConfigurationLoader.create_app_config(self.raw_config)
        logger.debug("Configuration loaded", config_path=config_path)

    @property
    def config(self) -> AppConfig:
        """Get typed application configuration."""
        return self._app_config

    def get_raw_config(self) -> Dict[str, Any]:
        """Get raw configuration dictionary."""
        return ConfigurationLoader._deep_copy(self.raw_config)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key (dot notation for nested keys)
            default: Default value if key not found

        Returns:
            Configuration value
        """
        value: Any = self.raw_config
        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def reload(self) -> None:
        """Reload configuration from its sources."""
        self.raw_config = ConfigurationLoader.load(self.config_path)
        self._app_config = ConfigurationLoader.create_app_config(self.raw_config)
        logger.info("Configuration reloaded", config_path=self.config_path)
