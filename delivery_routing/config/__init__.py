"""Configuration package with clean public API."""

from .loader import ConfigurationLoader
from .manager import ConfigurationManager, get_config_manager
from .schemas import (
    AlgorithmConfig,
    AppConfig,
    ConstraintConfig,
    DeliveryTypeConfig,
    EventsConfig,
    LoggingConfig,
    RoutingConfig,
)

__all__ = [
    # Main configuration
    "AppConfig",
    # Specific configurations
    "LoggingConfig",
    "EventsConfig",
    "RoutingConfig",
    "AlgorithmConfig",
    "ConstraintConfig",
    "DeliveryTypeConfig",
    # Configuration management
    "ConfigurationLoader",
    "ConfigurationManager",
    "get_config_manager",
]
