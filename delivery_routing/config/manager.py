"""Configuration management for the application."""
from __future__ import annotations

import logging
import os
import threading
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from delivery_routing.config.loader import ConfigurationLoader
from delivery_routing.config.schemas import AppConfig
from delivery_routing.domain.base.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "ROUTING_CONFIG"


class ConfigurationManager:
    """
    Single source of truth for application configuration.

    Configuration is loaded lazily from the given file (or the file named by
    ``ROUTING_CONFIG``), environment overrides are applied, and the result is
    validated into an ``AppConfig``. Without a file the defaults are used.
    """

    def __init__(self, config_file: Optional[str] = None):
        self._config_file = config_file or os.environ.get(CONFIG_PATH_ENV)
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None
        self._loader = ConfigurationLoader()

    @property
    def config_file(self) -> Optional[str]:
        return self._config_file

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        config_data = {}
        if self._config_file:
            config_data = self._loader.load_from_file(self._config_file)

        config_data = self._loader.apply_environment_overrides(config_data)

        try:
            app_config = AppConfig.from_dict(config_data)
        except PydanticValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e}",
                missing_fields=[
                    ".".join(str(part) for part in error["loc"])
                    for error in e.errors()
                    if error["type"] == "missing"
                ],
            ) from e

        logger.debug(f"Configuration loaded (environment={app_config.environment})")
        return app_config

    def reload(self) -> None:
        """Reload configuration from sources on next access."""
        with self._lock:
            self._app_config = None


def get_config_manager(config_file: Optional[str] = None) -> ConfigurationManager:
    """Create a configuration manager."""
    return ConfigurationManager(config_file)
