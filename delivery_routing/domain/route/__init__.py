"""Route bounded context - constraints, algorithms and route context."""

from .algorithms import (
    DijkstraAlgorithm,
    GeneticAlgorithm,
    MultiplierAlgorithm,
    RoutingAlgorithm,
)
from .constraints import (
    AvoidTollHandler,
    ConstraintHandler,
    FixedCostConstraint,
    SkipConstructionHandler,
    build_chain,
    validate_chain,
)
from .context import RouteContext
from .exceptions import (
    InvalidStrategyRequestError,
    MalformedChainError,
    RouteException,
    UnknownAlgorithmError,
    UnknownConstraintError,
)
from .selector import AlgorithmSelector, CostBracket, default_brackets
from .value_objects import RouteResult, RouteStep, RunState

__all__ = [
    # Context and value objects
    "RouteContext",
    "RouteStep",
    "RouteResult",
    "RunState",
    # Constraints
    "ConstraintHandler",
    "FixedCostConstraint",
    "AvoidTollHandler",
    "SkipConstructionHandler",
    "build_chain",
    "validate_chain",
    # Algorithms
    "RoutingAlgorithm",
    "MultiplierAlgorithm",
    "DijkstraAlgorithm",
    "GeneticAlgorithm",
    "AlgorithmSelector",
    "CostBracket",
    "default_brackets",
    # Exceptions
    "RouteException",
    "InvalidStrategyRequestError",
    "MalformedChainError",
    "UnknownAlgorithmError",
    "UnknownConstraintError",
]
