"""Route application services."""

from .orchestrator import RouteOrchestrator, RouteRun, orchestrate
from .service import RouteCalculationService

__all__ = ["RouteOrchestrator", "RouteRun", "orchestrate", "RouteCalculationService"]
