"""Configuration loading from files and environment variables."""
import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

import yaml

from delivery_routing.domain.base.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Environment variable -> (section, key)
ENV_OVERRIDES = {
    "ROUTING_LOG_LEVEL": ("logging", "level"),
    "ROUTING_EVENTS_MODE": ("events", "mode"),
    "ROUTING_ENVIRONMENT": (None, "environment"),
}


class ConfigurationLoader:
    """Loads raw configuration dictionaries from YAML/JSON files and the environment."""

    def load_from_file(self, path: str) -> Dict[str, Any]:
        """
        Load configuration from a YAML or JSON file.

        Raises:
            ConfigurationError: If the file is missing or cannot be parsed
        """
        config_path = Path(path)
        if not config_path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with config_path.open("r", encoding="utf-8") as f:
                if config_path.suffix == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to read configuration file {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")

        logger.debug(f"Loaded configuration from {path}")
        return data

    def apply_environment_overrides(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Return a copy of the configuration with environment overrides applied."""
        result = copy.deepcopy(data)
        for env_var, (section, key) in ENV_OVERRIDES.items():
            value = os.environ.get(env_var)
            if value is None:
                continue
            if section is None:
                result[key] = value
            else:
                section_data = result.setdefault(section, {})
                if not isinstance(section_data, dict):
                    raise ConfigurationError(f"Configuration section '{section}' must be a mapping")
                section_data[key] = value
            logger.debug(f"Applied environment override {env_var}")
        return result
