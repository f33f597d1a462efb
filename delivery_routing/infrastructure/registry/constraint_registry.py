"""Constraint Registry - route constraint factories by name.

Factories return a new handler on every call, so each chain owns its own
handler instances and their links.
"""
from typing import Iterable, List

from delivery_routing.domain.route.constraints import (
    AvoidTollHandler,
    ConstraintHandler,
    FixedCostConstraint,
    SkipConstructionHandler,
)
from delivery_routing.domain.route.exceptions import UnknownConstraintError
from delivery_routing.infrastructure.registry.base_registry import BaseRegistry


class ConstraintRegistry(BaseRegistry):
    """Registry for route constraint factories."""

    @property
    def kind(self) -> str:
        return "constraint"

    def _unknown_type_error(self, type_name: str) -> Exception:
        return UnknownConstraintError(type_name)

    def create_handlers(self, names: Iterable[str]) -> List[ConstraintHandler]:
        """Create one fresh handler per name, in order."""
        return [self.create(name) for name in names]

    def register_fixed_cost(self, name: str, cost: float, step: str) -> None:
        """Register a constraint that adds a fixed cost and records a step."""
        self.register(
            name,
            lambda: FixedCostConstraint(cost, step, name=name),
            f"+{cost} ({step})",
        )


def register_builtin_constraints(registry: ConstraintRegistry) -> None:
    registry.register("avoid_toll", AvoidTollHandler, f"+{AvoidTollHandler.COST} (avoid toll roads)")
    registry.register(
        "skip_construction",
        SkipConstructionHandler,
        f"+{SkipConstructionHandler.COST} (skip construction zones)",
    )


def create_constraint_registry(extra: Iterable = ()) -> ConstraintRegistry:
    """
    Create a registry holding the built-in constraints plus configured ones.

    Args:
        extra: ConstraintConfig entries to register as fixed-cost constraints
    """
    registry = ConstraintRegistry()
    register_builtin_constraints(registry)
    for constraint_config in extra:
        registry.register_fixed_cost(constraint_config.name, constraint_config.cost, constraint_config.step)
    return registry
