"""Unified configuration management for the catalogue."""
from __future__ import annotations

import copy
import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from pattern_catalog._package import ENV_PREFIX
from pattern_catalog.config.schemas import AppConfig, validate_config
from pattern_catalog.config.utils import expand_config_env_vars
from pattern_catalog.domain.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_FILE_ENV = f"{ENV_PREFIX}CONFIG"

# Environment variable -> dotted configuration key
ENV_OVERRIDES: Dict[str, str] = {
    f"{ENV_PREFIX}LOG_LEVEL": "logging.level",
    f"{ENV_PREFIX}LOG_DESTINATION": "logging.destination",
    f"{ENV_PREFIX}SIMULATE_LATENCY": "narration.simulate_latency",
    f"{ENV_PREFIX}RANDOM_SEED": "demos.random_seed",
    f"{ENV_PREFIX}ENVIRONMENT": "environment",
}

_BOOLEAN_KEYS = {"narration.simulate_latency"}
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge ``override`` into a copy of ``base``, descending into nested dicts."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _set_dotted(config: Dict[str, Any], dotted_key: str, value: Any) -> None:
    parts = dotted_key.split(".")
    node = config
    for part in parts[:-1]:
        node = node.setdefault(part, {})
    node[parts[-1]] = value


def _coerce_env_value(dotted_key: str, raw: str) -> Any:
    if dotted_key not in _BOOLEAN_KEYS:
        return raw.strip()
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    return raw.strip()


class ConfigurationManager:
    """
    Single source of truth for catalogue configuration.

    Configuration is assembled lazily from, in increasing precedence:
    - schema defaults
    - a JSON or YAML file (explicit path or ``PATTERN_CATALOG_CONFIG``)
    - ``PATTERN_CATALOG_*`` environment variables
    - explicit overrides passed by the caller (for example CLI flags)

    The merged mapping has ``$VAR`` references expanded and is validated
    against :class:`AppConfig`.
    """

    def __init__(self, config_file: Optional[str] = None,
                 overrides: Optional[Dict[str, Any]] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file or os.environ.get(CONFIG_FILE_ENV)
        self._overrides = overrides or {}
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None
        self._raw_config: Optional[Dict[str, Any]] = None

    @property
    def config_file(self) -> Optional[str]:
        """Configuration file in use, if any."""
        return self._config_file

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def get_app_config(self) -> AppConfig:
        """Get the validated application configuration."""
        return self.app_config

    def reload(self) -> AppConfig:
        """Discard the cached configuration and load it again."""
        with self._lock:
            self._app_config = None
            self._raw_config = None
        return self.app_config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Read a configuration value by dotted key.

        Args:
            key: Dotted path such as ``logging.level``
            default: Value returned when the key is absent

        Returns:
            The configuration value or ``default``
        """
        node: Any = self.app_config.model_dump()
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        raw: Dict[str, Any] = {}
        if self._config_file:
            raw = _deep_merge(raw, self._load_file(self._config_file))
        raw = _deep_merge(raw, self._environment_overrides())
        raw = _deep_merge(raw, self._overrides)
        raw = expand_config_env_vars(raw)
        self._raw_config = raw

        try:
            config = validate_config(raw)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}", e.errors()) from e

        logger.debug("Configuration loaded from %s", self._config_file or "defaults")
        return config

    def _load_file(self, path: str) -> Dict[str, Any]:
        """Load a JSON or YAML configuration file."""
        file_path = Path(os.path.expandvars(path)).expanduser()
        if not file_path.is_file():
            raise ConfigurationError(f"Configuration file not found: {file_path}")

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                if file_path.suffix.lower() in (".yaml", ".yml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot parse configuration file {file_path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {file_path} must contain a mapping at the top level"
            )
        return data

    @staticmethod
    def _environment_overrides() -> Dict[str, Any]:
        """Collect ``PATTERN_CATALOG_*`` overrides from the environment."""
        overrides: Dict[str, Any] = {}
        for env_name, dotted_key in ENV_OVERRIDES.items():
            if env_name in os.environ:
                _set_dotted(overrides, dotted_key, _coerce_env_value(dotted_key, os.environ[env_name]))
        return overrides
