"""Configuration schemas."""

from .app_schema import AppConfig
from .common_schema import EventsConfig
from .logging_schema import LoggingConfig
from .routing_schema import (
    AlgorithmConfig,
    ConstraintConfig,
    DeliveryTypeConfig,
    RoutingConfig,
)

__all__ = [
    "AppConfig",
    "EventsConfig",
    "LoggingConfig",
    "RoutingConfig",
    "AlgorithmConfig",
    "ConstraintConfig",
    "DeliveryTypeConfig",
]
