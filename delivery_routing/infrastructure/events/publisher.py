"""Configurable Event Publisher - mode-based route event publishing."""
from typing import Callable, Dict, List

from delivery_routing.domain.base.events import DomainEvent, EventPublisher
from delivery_routing.infrastructure.logging.logger import get_logger

VALID_MODES = ("logging", "sync")


class ConfigurableEventPublisher(EventPublisher):
    """
    Event publisher with two modes.

    Modes:
    - "logging": log events for an audit trail
    - "sync": call registered listeners synchronously, in registration order
    """

    def __init__(self, mode: str = "logging"):
        """Initialize with publishing mode."""
        if mode not in VALID_MODES:
            raise ValueError(f"Invalid mode '{mode}'. Must be one of: {list(VALID_MODES)}")
        self.mode = mode
        self._handlers: Dict[str, List[Callable[[DomainEvent], None]]] = {}
        self._logger = get_logger(__name__)

    def publish(self, event: DomainEvent) -> None:
        """Publish event based on configured mode."""
        if self.mode == "logging":
            self._log_event(event)
        else:
            self._call_handlers_sync(event)

    def register_handler(self, event_type: str, handler: Callable[[DomainEvent], None]) -> None:
        """Register event handler for specific event type."""
        self._handlers.setdefault(event_type, []).append(handler)
        self._logger.debug(f"Registered handler for {event_type}")

    def unregister_handler(self, event_type: str, handler: Callable[[DomainEvent], None]) -> bool:
        """Remove one handler; returns False if it was not registered."""
        handlers = self._handlers.get(event_type, [])
        if handler not in handlers:
            return False
        handlers.remove(handler)
        return True

    def _log_event(self, event: DomainEvent) -> None:
        self._logger.info(
            f"Event: {event.event_type} | "
            f"Aggregate: {event.aggregate_type}:{event.aggregate_id} | "
            f"Time: {event.occurred_at.isoformat()}"
        )

    def _call_handlers_sync(self, event: DomainEvent) -> None:
        handlers = self._handlers.get(event.event_type, [])

        if not handlers:
            self._logger.debug(f"No handlers registered for {event.event_type}")
            return

        for handler in list(handlers):
            try:
                handler(event)
            except Exception as e:
                # Listener failures must not break the route calculation
                self._logger.error(f"Event handler failed for {event.event_type}: {e}")

    def get_registered_handlers(self) -> Dict[str, int]:
        """Get count of registered handlers by event type."""
        return {event_type: len(handlers) for event_type, handlers in self._handlers.items()}


def create_event_publisher(mode: str = "logging") -> ConfigurableEventPublisher:
    """Create event publisher with specified mode."""
    return ConfigurableEventPublisher(mode=mode)
