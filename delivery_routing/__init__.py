"""Delivery Routing - Root Package.

Calculates delivery route costs by running an ordered chain of route
constraints over a route context and then applying a routing algorithm
selected by the accumulated cost.

Key Components:
- build_chain: links constraint handlers in list order
- orchestrate: runs one route calculation over a chain
- RouteCalculationService: route calculation per configured delivery type
"""

__version__ = "1.0.0"

from delivery_routing.application.route.orchestrator import RouteOrchestrator, orchestrate
from delivery_routing.domain.route.constraints import build_chain
from delivery_routing.domain.route.selector import AlgorithmSelector

__all__ = [
    "__version__",
    "build_chain",
    "orchestrate",
    "RouteOrchestrator",
    "AlgorithmSelector",
]
