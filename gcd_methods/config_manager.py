"""
Configuration Manager Utility

Loads YAML configuration files with deep merge support for local overrides:
a base file such as gcd.yaml is combined with gcd.local.yaml when that file
sits next to it.
"""

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Manage configuration loading with automatic local overrides.

    Handles:
    - Loading the base configuration file
    - Auto-detecting and merging the matching .local.yaml file
    - Deep merging nested dictionaries
    """

    def __init__(self):
        """Initialize configuration manager."""
        self.logger = logging.getLogger(f"{__name__}.ConfigManager")

    def load_config(self, config_path: str) -> Dict[str, Any]:
        """
        Load configuration from YAML file with automatic local overrides.

        Args:
            config_path: Path to base configuration file (e.g., 'gcd.yaml')

        Returns:
            Merged configuration dictionary

        Raises:
            FileNotFoundError: If base config file doesn't exist
            ValueError: If the file does not hold a mapping
            yaml.YAMLError: If YAML parsing of the base file fails
        """
        config_file = Path(config_path)

        if not config_file.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {config_path}"
            )

        self.logger.debug(f"Loading base configuration from: {config_path}")
        config = self._read_yaml(config_file)

        if not config:
            self.logger.warning(f"Configuration file is empty: {config_path}")
            config = {}

        local_config_path = self._get_local_config_path(config_file)

        if local_config_path.exists():
            self.logger.info(
                f"Loading local configuration overrides from: {local_config_path}"
            )
            try:
                local_config = self._read_yaml(local_config_path)
            except (yaml.YAMLError, ValueError) as e:
                # An unreadable or non-mapping override falls back to the base configuration
                self.logger.error(
                    f"Failed to parse local configuration {local_config_path}: {e}"
                )
            else:
                if local_config:
                    config = self.deep_merge(config, local_config)
                else:
                    self.logger.warning(
                        f"Local configuration file is empty: {local_config_path}"
                    )
        else:
            self.logger.debug(
                f"No local configuration file found at {local_config_path}"
            )

        return config

    def _read_yaml(self, path: Path) -> Dict[str, Any]:
        """Parse a YAML file that must contain a mapping (or nothing)."""
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Configuration file must contain a mapping: {path}")
        return data

    def _get_local_config_path(self, base_config_path: Path) -> Path:
        """
        Determine the path for local configuration overrides.

        For 'gcd.yaml' returns 'gcd.local.yaml'; for 'config/app.yaml'
        returns 'config/app.local.yaml'.
        """
        return base_config_path.parent / f"{base_config_path.stem}.local.yaml"

    def deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """
        Deep merge override dictionary into base dictionary.

        Nested dictionaries are merged recursively. For non-dict values the
        override value replaces the base value.

        Example:
            base = {'a': {'b': 1, 'c': 2}, 'd': 3}
            override = {'a': {'b': 99}, 'e': 4}
            result = {'a': {'b': 99, 'c': 2}, 'd': 3, 'e': 4}

        Returns:
            Merged configuration dictionary (new dict, inputs unchanged)
        """
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self.deep_merge(result[key], value)
            else:
                result[key] = value

        return result
