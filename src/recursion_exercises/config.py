"""
Configuration management for recursion_exercises

Settings are read from a YAML file and merged over built-in defaults.
Values may reference environment variables as ``${VAR:-default}``.
"""

import copy
import logging
import os
import re
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = 'RECURSION_EXERCISES_CONFIG'
DEFAULT_CONFIG_FILE = 'recursion_exercises.yaml'

_ENV_PATTERN = re.compile(r'\$\{([^:}]+)(?::-?([^}]*))?\}')


class ConfigManager:
    """Holds the merged configuration and answers dot-path lookups"""

    def __init__(self, path: Optional[str] = None):
        """
        Args:
            path: YAML file to load. When given explicitly, a file that
                cannot be read is an error. Otherwise the location comes
                from ``$RECURSION_EXERCISES_CONFIG`` or the working directory
                and a missing file falls back to defaults.
        """
        self._explicit = path is not None
        self.path = path or os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_FILE)
        self._config: Dict[str, Any] = {}
        self.reload()

    def reload(self):
        """Re-read the configuration file"""
        defaults = self._get_default_config()

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
        except FileNotFoundError:
            if self._explicit:
                raise ConfigError(f"Config file not found: {self.path}")
            logger.warning(f"Config file not found: {self.path}, using defaults")
            self._config = defaults
            return
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {self.path}: {e}") from e

        if not isinstance(loaded, dict):
            raise ConfigError(f"Top level of {self.path} must be a mapping")

        self._config = self._merge(defaults, self._expand_env_vars(loaded))
        logger.info(f"Configuration loaded from {self.path}")

    def _expand_env_vars(self, config: Any) -> Any:
        """Expand ${VAR:-default} references inside string values

        A value that is exactly one reference is re-read as YAML, so
        "${FLAG:-false}" yields a bool and "${LIMIT:-0}" an int.
        """
        if isinstance(config, dict):
            return {k: self._expand_env_vars(v) for k, v in config.items()}
        elif isinstance(config, list):
            return [self._expand_env_vars(item) for item in config]
        elif isinstance(config, str):
            def replacer(match):
                return os.environ.get(match.group(1), match.group(2) or '')

            expanded = _ENV_PATTERN.sub(replacer, config)
            if not _ENV_PATTERN.fullmatch(config):
                return expanded
            try:
                return yaml.safe_load(expanded)
            except yaml.YAMLError:
                return expanded
        else:
            return config

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        merged = dict(base)
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(merged.get(key), dict):
                merged[key] = self._merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    def _get_default_config(self) -> Dict[str, Any]:
        return {
            'logging': {
                'level': 'INFO',
                'format': 'json',
            },
            'recursion': {
                'limit': None,
            },
            'timing': {
                'enabled': False,
                'precision': 6,
            },
        }

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Look up a nested value using dot notation

        Args:
            key_path: e.g. "logging.level"
            default: returned when any key along the path is missing

        Returns:
            The configured value or *default*
        """
        value = self._config
        try:
            for key in key_path.split('.'):
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default

    def update_runtime(self, key_path: str, value: Any):
        """
        Change a value in memory only; the file is left untouched

        Args:
            key_path: dot-separated key
            value: new value
        """
        keys = key_path.split('.')
        config = self._config

        for key in keys[:-1]:
            if not isinstance(config.get(key), dict):
                config[key] = {}
            config = config[key]

        config[keys[-1]] = value
        logger.debug(f"Updated runtime config: {key_path} = {value}")

    @property
    def config(self) -> Dict[str, Any]:
        """Copy of the whole configuration"""
        return copy.deepcopy(self._config)


_config_manager: Optional[ConfigManager] = None


def get_config(path: Optional[str] = None) -> ConfigManager:
    """Return the process-wide ConfigManager, creating it on first use.

    Passing *path* always loads a fresh manager from that file.
    """
    global _config_manager
    if _config_manager is None or path is not None:
        _config_manager = ConfigManager(path)
    return _config_manager


def reset_config():
    """Forget the process-wide ConfigManager"""
    global _config_manager
    _config_manager = None
