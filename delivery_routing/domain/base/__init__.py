"""Base domain layer - shared kernel for all bounded contexts."""

from .events import DomainEvent, EventPublisher
from .exceptions import (
    ConfigurationError,
    DomainException,
    InvalidStateTransitionError,
    ValidationError,
)

__all__ = [
    "DomainEvent",
    "EventPublisher",
    "DomainException",
    "ValidationError",
    "ConfigurationError",
    "InvalidStateTransitionError",
]
