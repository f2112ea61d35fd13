"""
Configuration management for the SVG Components Builder.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import json
import os
from pathlib import Path
from typing import Any, List, Optional, Union

from .constants import CONFIG_FILE_NAME, MAX_CONFIG_FILE_SIZE, PACKAGE_JSON_NAME
from .exceptions import ConfigurationError
from .models import AppConfig, ComponentDefaults, Framework, ReadmeConfig
from .utils.logger import get_logger
from .utils.validators import validate_config_json

logger = get_logger(__name__)


class Config:
    """Loads build.config.json and resolves paths against the working directory."""

    def __init__(self, config_file: Optional[Union[str, Path]] = None,
                 working_dir: Optional[Union[str, Path]] = None) -> None:
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file (default: build.config.json
                in the working directory)
            working_dir: Directory relative paths are resolved against

        Raises:
            ConfigurationError: If the file is unreadable or invalid
        """
        self.working_dir = Path(working_dir) if working_dir else Path.cwd()
        self.config_file = Path(config_file) if config_file else self.working_dir / CONFIG_FILE_NAME
        if not self.config_file.is_absolute():
            self.config_file = self.working_dir / self.config_file

        self._app_config = self._load_config()
        self.config = self._app_config.to_dict()

    def _load_config(self) -> AppConfig:
        """
        Load configuration from file, falling back to defaults when absent.

        Returns:
            AppConfig instance
        """
        if not self.config_file.exists():
            logger.warning(f"{self.config_file.name} not found, using default options")
            return AppConfig()

        try:
            file_size = os.path.getsize(self.config_file)
            if file_size > MAX_CONFIG_FILE_SIZE:
                raise ConfigurationError(f"Config file too large: {file_size} bytes")

            with open(self.config_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in config file {self.config_file}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Error reading config file {self.config_file}: {e}") from e

        try:
            validate_config_json(data)
        except ValueError as e:
            raise ConfigurationError(f"Invalid configuration in {self.config_file}: {e}") from e

        if "generate" in data:
            # Keep first occurrence of each framework
            data["generate"] = list(dict.fromkeys(data["generate"]))

        logger.info(f"Loaded configuration from {self.config_file}")
        return AppConfig.from_dict(data)

    def get(self, key: str, default: Optional[Any] = None) -> Optional[Any]:
        """
        Get configuration value.

        Args:
            key: Configuration key as written in build.config.json
            default: Default value if key not found

        Returns:
            Configuration value
        """
        value = self.config.get(key)
        return default if value is None else value

    @property
    def app_config(self) -> AppConfig:
        return self._app_config

    @property
    def entry_path(self) -> Path:
        """Entry folder resolved against the working directory."""
        return self._resolve(self._app_config.entry)

    @property
    def output_path(self) -> Path:
        """Output folder resolved against the working directory."""
        return self._resolve(self._app_config.output)

    @property
    def frameworks(self) -> List[Framework]:
        return list(self._app_config.generate)

    @property
    def defaults(self) -> ComponentDefaults:
        return self._app_config.defaults

    @property
    def readme(self) -> Optional[ReadmeConfig]:
        return self._app_config.readme

    def _resolve(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        return path if path.is_absolute() else self.working_dir / path

    def resolve(self, path: Union[str, Path]) -> Path:
        """Resolve a configured path against the working directory."""
        return self._resolve(path)

    def require_entry(self) -> Path:
        """
        Check that the entry folder exists.

        Returns:
            Entry folder path

        Raises:
            ConfigurationError: If the entry folder does not exist
        """
        entry = self.entry_path
        if not entry.is_dir():
            raise ConfigurationError(f'Entry folder "{self._app_config.entry}" does not exist')
        return entry

    def get_project_name(self) -> str:
        """
        Name used in readme import statements.

        Taken from projectName, else package.json "name", else the working
        directory's name.
        """
        if self._app_config.project_name:
            return self._app_config.project_name

        package_json = self.working_dir / PACKAGE_JSON_NAME
        if package_json.is_file():
            try:
                with open(package_json, "r", encoding="utf-8") as f:
                    name = json.load(f).get("name")
                if isinstance(name, str) and name:
                    return name
            except (OSError, json.JSONDecodeError, AttributeError) as e:
                logger.warning(f"Could not read project name from {package_json}: {e}")

        return self.working_dir.resolve().name
