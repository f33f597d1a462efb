"""Algorithm selection by accumulated cost bracket."""
from __future__ import annotations

import logging
import math
from typing import Callable, Dict, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, model_validator

from delivery_routing.domain.route.algorithms import (
    DijkstraAlgorithm,
    GeneticAlgorithm,
    RoutingAlgorithm,
)
from delivery_routing.domain.route.exceptions import (
    InvalidStrategyRequestError,
    UnknownAlgorithmError,
)

logger = logging.getLogger(__name__)

DEFAULT_COST_THRESHOLD = 100000


class CostBracket(BaseModel):
    """
    Cost range served by one algorithm.

    ``above`` is an exclusive lower bound and ``up_to`` an inclusive upper
    bound; ``None`` leaves that side open.
    """
    model_config = ConfigDict(frozen=True)

    algorithm: str
    above: Optional[float] = None
    up_to: Optional[float] = None

    @model_validator(mode="after")
    def check_bounds(self) -> "CostBracket":
        if self.above is not None and self.up_to is not None and self.up_to <= self.above:
            raise ValueError(
                f"Bracket for '{self.algorithm}' is empty: up_to ({self.up_to}) must exceed above ({self.above})"
            )
        return self

    def matches(self, cost: float) -> bool:
        if self.above is not None and not cost > self.above:
            return False
        if self.up_to is not None and not cost <= self.up_to:
            return False
        return True


def default_brackets(threshold: float = DEFAULT_COST_THRESHOLD) -> List[CostBracket]:
    """Genetic up to and including the threshold, Dijkstra above it."""
    return [
        CostBracket(algorithm="genetic", up_to=threshold),
        CostBracket(algorithm="dijkstra", above=threshold),
    ]


_BUILTIN_ALGORITHMS: Dict[str, Callable[[], RoutingAlgorithm]] = {
    "dijkstra": DijkstraAlgorithm,
    "genetic": GeneticAlgorithm,
}


def _builtin_factory(name: str) -> RoutingAlgorithm:
    if name not in _BUILTIN_ALGORITHMS:
        raise UnknownAlgorithmError(name)
    return _BUILTIN_ALGORITHMS[name]()


class AlgorithmSelector:
    """
    Chooses a routing algorithm from the final accumulated cost.

    Brackets are checked in order and the first match wins. Selection is
    evaluated once per run, after the constraint chain has finished.
    """

    def __init__(self,
                 brackets: Optional[Sequence[CostBracket]] = None,
                 algorithm_factory: Optional[Callable[[str], RoutingAlgorithm]] = None):
        """
        Initialize the selector.

        Args:
            brackets: Ordered cost brackets, defaults to the 100000 threshold table
            algorithm_factory: Creates an algorithm from its name, defaults to
                the built-in dijkstra/genetic algorithms
        """
        self._brackets = list(default_brackets() if brackets is None else brackets)
        self._algorithm_factory = algorithm_factory or _builtin_factory

    @property
    def brackets(self) -> List[CostBracket]:
        return list(self._brackets)

    def select(self, cost: float) -> RoutingAlgorithm:
        """
        Return the algorithm for a cost.

        Raises:
            InvalidStrategyRequestError: If the cost is NaN or no bracket covers it
        """
        if isinstance(cost, float) and math.isnan(cost):
            raise InvalidStrategyRequestError(cost, "Cannot select a routing algorithm for a NaN cost")

        for bracket in self._brackets:
            if bracket.matches(cost):
                algorithm = self._algorithm_factory(bracket.algorithm)
                logger.debug(f"Selected algorithm {algorithm.name} for cost {cost}")
                return algorithm

        raise InvalidStrategyRequestError(cost)
