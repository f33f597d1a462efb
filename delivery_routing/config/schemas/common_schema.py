"""Common configuration schemas."""
from pydantic import BaseModel, Field, field_validator


class EventsConfig(BaseModel):
    """Route event publishing configuration."""

    enabled: bool = Field(True, description="Publish route calculation events")
    mode: str = Field("logging", description="Publishing mode: logging or sync")

    @field_validator("mode")
    @classmethod
    def validate_mode(cls, v: str) -> str:
        valid_modes = ["logging", "sync"]
        if v not in valid_modes:
            raise ValueError(f"Events mode must be one of {valid_modes}")
        return v
