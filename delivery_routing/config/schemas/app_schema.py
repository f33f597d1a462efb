"""Main application configuration schema."""
from typing import Any, Dict

from pydantic import BaseModel, Field

from .common_schema import EventsConfig
from .logging_schema import LoggingConfig
from .routing_schema import RoutingConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    environment: str = Field("development", description="Environment")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    events: EventsConfig = Field(default_factory=lambda: EventsConfig())
    routing: RoutingConfig = Field(default_factory=lambda: RoutingConfig())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Create and validate configuration from a dictionary."""
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")
