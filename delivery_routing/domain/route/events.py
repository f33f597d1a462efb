"""Route calculation domain events."""
from typing import List, Optional

from delivery_routing.domain.base.events import DomainEvent


class RouteEvent(DomainEvent):
    """Base class for events raised during a route calculation run."""
    aggregate_type: str = "route"
    delivery_type: Optional[str] = None


class RouteCalculationStartedEvent(RouteEvent):
    pass


class ConstraintChainAppliedEvent(RouteEvent):
    steps: List[str]
    accumulated_cost: float


class AlgorithmSelectedEvent(RouteEvent):
    algorithm: str
    accumulated_cost: float


class RouteCalculatedEvent(RouteEvent):
    algorithm: str
    final_cost: float
    trace: List[str]
