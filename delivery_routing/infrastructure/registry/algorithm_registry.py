"""Algorithm Registry - routing algorithm factories by name."""
from typing import Iterable

from delivery_routing.domain.route.algorithms import (
    DijkstraAlgorithm,
    GeneticAlgorithm,
    MultiplierAlgorithm,
    RoutingAlgorithm,
)
from delivery_routing.domain.route.exceptions import UnknownAlgorithmError
from delivery_routing.infrastructure.registry.base_registry import BaseRegistry


class AlgorithmRegistry(BaseRegistry):
    """Registry for routing algorithm factories."""

    @property
    def kind(self) -> str:
        return "algorithm"

    def _unknown_type_error(self, type_name: str) -> Exception:
        return UnknownAlgorithmError(type_name)

    def create_algorithm(self, name: str) -> RoutingAlgorithm:
        """Create an algorithm by name; usable as an AlgorithmSelector factory."""
        return self.create(name)

    def register_multiplier(self, name: str, factor: float) -> None:
        """Register a fixed-factor algorithm."""
        # Fail on a bad factor at registration rather than on first use
        MultiplierAlgorithm(name, factor)
        self.register(name, lambda: MultiplierAlgorithm(name, factor), f"cost x {factor}")


def register_builtin_algorithms(registry: AlgorithmRegistry) -> None:
    registry.register("dijkstra", DijkstraAlgorithm, f"cost x {DijkstraAlgorithm.FACTOR}")
    registry.register("genetic", GeneticAlgorithm, f"cost x {GeneticAlgorithm.FACTOR}")


def create_algorithm_registry(extra: Iterable = ()) -> AlgorithmRegistry:
    """
    Create a registry holding the built-in algorithms plus configured ones.

    Args:
        extra: AlgorithmConfig entries to register as multiplier algorithms
    """
    registry = AlgorithmRegistry()
    register_builtin_algorithms(registry)
    for algorithm_config in extra:
        registry.register_multiplier(algorithm_config.name, algorithm_config.factor)
    return registry
