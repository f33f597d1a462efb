"""Routing algorithms - interchangeable cost strategies.

The algorithms are placeholders for real route searches: each one scales the
accumulated cost by a fixed factor and never mutates the context.
"""
from abc import ABC, abstractmethod

from delivery_routing.domain.base.exceptions import ValidationError
from delivery_routing.domain.route.context import RouteContext


class RoutingAlgorithm(ABC):
    """Strategy interface for the final route cost computation."""

    name: str = ""

    @abstractmethod
    def apply(self, context: RouteContext) -> float:
        """Compute the final cost for a context."""


class MultiplierAlgorithm(RoutingAlgorithm):
    """Algorithm that multiplies the accumulated cost by a fixed factor."""

    def __init__(self, name: str, factor: float) -> None:
        if factor <= 0:
            raise ValidationError(f"Algorithm factor must be positive, got {factor}", {"factor": factor})
        self.name = name
        self.factor = factor

    def apply(self, context: RouteContext) -> float:
        return context.accumulated_cost * self.factor

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, factor={self.factor!r})"


class DijkstraAlgorithm(MultiplierAlgorithm):
    FACTOR = 0.9

    def __init__(self) -> None:
        super().__init__("dijkstra", self.FACTOR)


class GeneticAlgorithm(MultiplierAlgorithm):
    FACTOR = 1.1

    def __init__(self) -> None:
        super().__init__("genetic", self.FACTOR)
