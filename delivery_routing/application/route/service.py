"""Route calculation application service."""
from typing import Any, Dict, List, Optional, Sequence

from delivery_routing.application.route.orchestrator import RouteOrchestrator
from delivery_routing.config.schemas import RoutingConfig
from delivery_routing.domain.base.exceptions import ValidationError
from delivery_routing.domain.route.constraints import build_chain
from delivery_routing.domain.route.value_objects import RouteResult
from delivery_routing.infrastructure.logging.logger import get_logger
from delivery_routing.infrastructure.registry import AlgorithmRegistry, ConstraintRegistry


class RouteCalculationService:
    """Calculates routes for configured delivery types."""

    def __init__(self,
                 orchestrator: RouteOrchestrator,
                 constraint_registry: ConstraintRegistry,
                 algorithm_registry: AlgorithmRegistry,
                 routing_config: RoutingConfig):
        self._orchestrator = orchestrator
        self._constraints = constraint_registry
        self._algorithms = algorithm_registry
        self._config = routing_config
        self._logger = get_logger(__name__)

    def calculate(self,
                  delivery_type: Optional[str] = None,
                  extra_constraints: Sequence[str] = ()) -> RouteResult:
        """
        Calculate a route for a delivery type.

        Args:
            delivery_type: Configured delivery type, defaults to the configured default
            extra_constraints: Constraint names applied after the delivery type's own

        Returns:
            RouteResult for the run

        Raises:
            ValidationError: If the delivery type is not configured
            UnknownConstraintError: If a constraint name is not registered
        """
        type_name = delivery_type or self._config.default_delivery_type
        try:
            delivery_config = self._config.get_delivery_type(type_name)
        except KeyError:
            raise ValidationError(
                f"Unknown delivery type: {type_name}",
                {"available": [d.name for d in self._config.delivery_types]},
            )

        names = list(delivery_config.constraints) + list(extra_constraints)
        self._logger.debug(f"Calculating {type_name} route with constraints {names}")

        handlers = self._constraints.create_handlers(names)
        return self._orchestrator.run(build_chain(handlers), delivery_type=type_name)

    def list_delivery_types(self) -> List[Dict[str, Any]]:
        return [
            {
                "name": d.name,
                "constraints": list(d.constraints),
                "default": d.name == self._config.default_delivery_type,
            }
            for d in self._config.delivery_types
        ]

    def list_algorithms(self) -> List[Dict[str, Any]]:
        brackets: Dict[str, List[Dict[str, Any]]] = {}
        for bracket in self._orchestrator.selector.brackets:
            brackets.setdefault(bracket.algorithm, []).append(
                {"above": bracket.above, "up_to": bracket.up_to}
            )
        return [
            {
                "name": name,
                "description": self._algorithms.get_registration(name).description,
                "brackets": brackets.get(name, []),
            }
            for name in self._algorithms.get_registered_types()
        ]

    def list_constraints(self) -> List[Dict[str, Any]]:
        return [
            {"name": name, "description": self._constraints.get_registration(name).description}
            for name in self._constraints.get_registered_types()
        ]
