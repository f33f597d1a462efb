"""Route constraints - chain of responsibility over a RouteContext.

Each constraint adjusts the route context and then hands it to the next
constraint in the chain. New constraints are added by subclassing
``ConstraintHandler`` (or configuring a ``FixedCostConstraint``) and wiring
them into a chain; existing handlers and the orchestrator stay untouched.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Union

from delivery_routing.domain.route.context import RouteContext
from delivery_routing.domain.route.exceptions import MalformedChainError
from delivery_routing.domain.route.value_objects import RouteStep

logger = logging.getLogger(__name__)


class ConstraintHandler(ABC):
    """Base class for a node in a constraint chain."""

    def __init__(self) -> None:
        self._next_handler: Optional[ConstraintHandler] = None

    @property
    def next_handler(self) -> Optional[ConstraintHandler]:
        return self._next_handler

    def set_next(self, handler: Optional[ConstraintHandler]) -> Optional[ConstraintHandler]:
        """
        Link a successor and return it, so chains can be wired fluently.

        Any previously linked successor is replaced.
        """
        self._next_handler = handler
        return handler

    def handle(self, context: RouteContext) -> None:
        """
        Apply this constraint, then each successor in chain order.

        Raises:
            MalformedChainError: If the chain loops back on itself
        """
        for handler in validate_chain(self):
            handler.apply(context)

    @abstractmethod
    def apply(self, context: RouteContext) -> None:
        """Apply this constraint's effect to the context."""


class FixedCostConstraint(ConstraintHandler):
    """Constraint that adds a fixed cost and records one trace step."""

    def __init__(self, cost: float, step: Union[RouteStep, str], name: Optional[str] = None) -> None:
        super().__init__()
        self.cost = cost
        self.step = step.value if isinstance(step, RouteStep) else step
        self.name = name or self.step

    def apply(self, context: RouteContext) -> None:
        context.add_cost(self.cost)
        context.append_step(self.step)
        logger.debug(f"Applied constraint {self.name}: +{self.cost} (total {context.accumulated_cost})")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, cost={self.cost!r})"


class AvoidTollHandler(FixedCostConstraint):
    """Avoid toll roads."""

    COST = 20

    def __init__(self) -> None:
        super().__init__(self.COST, RouteStep.AVOID_TOLL, name="avoid_toll")


class SkipConstructionHandler(FixedCostConstraint):
    """Skip construction zones."""

    COST = 10

    def __init__(self) -> None:
        super().__init__(self.COST, RouteStep.SKIP_CONSTRUCTION, name="skip_construction")


def build_chain(handlers: Iterable[ConstraintHandler]) -> Optional[ConstraintHandler]:
    """
    Link handlers in list order and return the head of the chain.

    Args:
        handlers: Ordered constraint handlers

    Returns:
        The first handler, or None for an empty list

    Raises:
        MalformedChainError: If the same handler instance is listed twice
    """
    ordered = list(handlers)
    seen = set()
    for handler in ordered:
        if id(handler) in seen:
            raise MalformedChainError(handler)
        seen.add(id(handler))

    if not ordered:
        return None

    for current, following in zip(ordered, ordered[1:]):
        current.set_next(following)
    # The tail may still point at a handler from an earlier wiring
    ordered[-1].set_next(None)
    return ordered[0]


def validate_chain(head: Optional[ConstraintHandler]) -> List[ConstraintHandler]:
    """
    Walk a chain and return its handlers in order.

    Raises:
        MalformedChainError: If the chain loops back on itself
    """
    visited: List[ConstraintHandler] = []
    seen = set()
    current = head
    while current is not None:
        if id(current) in seen:
            raise MalformedChainError(
                current, f"Constraint chain contains a cycle at {current!r}"
            )
        seen.add(id(current))
        visited.append(current)
        current = current.next_handler
    return visited
