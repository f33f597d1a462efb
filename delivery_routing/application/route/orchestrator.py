"""Route orchestrator - drives one route calculation end to end."""
from __future__ import annotations

import uuid
from typing import Optional

from delivery_routing.domain.base.events import DomainEvent, EventPublisher
from delivery_routing.domain.base.exceptions import InvalidStateTransitionError
from delivery_routing.domain.route.constraints import ConstraintHandler
from delivery_routing.domain.route.context import RouteContext
from delivery_routing.domain.route.events import (
    AlgorithmSelectedEvent,
    ConstraintChainAppliedEvent,
    RouteCalculatedEvent,
    RouteCalculationStartedEvent,
)
from delivery_routing.domain.route.selector import AlgorithmSelector
from delivery_routing.domain.route.value_objects import RouteResult, RouteStep, RunState
from delivery_routing.infrastructure.logging.logger import get_logger


class RouteRun:
    """State of a single run: its own context and lifecycle state."""

    def __init__(self, run_id: str, delivery_type: Optional[str] = None):
        self.run_id = run_id
        self.delivery_type = delivery_type
        self.context = RouteContext()
        self.state = RunState.CREATED

    def advance(self, new_state: RunState) -> None:
        if not self.state.can_transition_to(new_state):
            raise InvalidStateTransitionError(self.state.value, new_state.value)
        self.state = new_state


class RouteOrchestrator:
    """
    Runs a constraint chain and a cost-selected routing algorithm.

    The orchestrator holds no per-run state, so a single instance can serve
    any number of runs; every run gets a fresh RouteContext.
    """

    def __init__(self,
                 selector: Optional[AlgorithmSelector] = None,
                 event_publisher: Optional[EventPublisher] = None):
        """
        Initialize the orchestrator.

        Args:
            selector: Algorithm selector, defaults to the 100000 threshold policy
            event_publisher: Optional publisher for route events
        """
        self._selector = selector or AlgorithmSelector()
        self._event_publisher = event_publisher
        self._logger = get_logger(__name__)

    @property
    def selector(self) -> AlgorithmSelector:
        return self._selector

    def run(self, chain_head: Optional[ConstraintHandler], delivery_type: Optional[str] = None) -> RouteResult:
        """
        Calculate one route.

        Args:
            chain_head: First handler of the constraint chain, or None for no constraints
            delivery_type: Optional delivery type recorded on the result

        Returns:
            RouteResult with the final cost and the full trace

        Raises:
            MalformedChainError: If the chain loops back on itself
            InvalidStrategyRequestError: If no algorithm covers the accumulated cost
        """
        run = RouteRun(str(uuid.uuid4()), delivery_type)
        context = run.context
        self._publish(RouteCalculationStartedEvent(aggregate_id=run.run_id, delivery_type=delivery_type))

        if chain_head is not None:
            try:
                chain_head.handle(context)
            except Exception as e:
                self._logger.error(f"Constraint chain failed for route {run.run_id}: {e}")
                raise
        run.advance(RunState.CHAIN_APPLIED)
        self._publish(ConstraintChainAppliedEvent(
            aggregate_id=run.run_id,
            delivery_type=delivery_type,
            steps=context.trace[1:],
            accumulated_cost=context.accumulated_cost,
        ))

        algorithm = self._selector.select(context.accumulated_cost)
        run.advance(RunState.STRATEGY_SELECTED)
        self._publish(AlgorithmSelectedEvent(
            aggregate_id=run.run_id,
            delivery_type=delivery_type,
            algorithm=algorithm.name,
            accumulated_cost=context.accumulated_cost,
        ))

        final_cost = algorithm.apply(context)
        context.append_step(RouteStep.DESTINATION)
        run.advance(RunState.COMPLETED)

        result = RouteResult(
            run_id=run.run_id,
            final_cost=final_cost,
            accumulated_cost=context.accumulated_cost,
            algorithm=algorithm.name,
            trace=list(context.trace),
            delivery_type=delivery_type,
            state=run.state,
        )
        self._logger.info(f"Final Route: {result.route}")
        self._logger.info(f"Final Cost: {result.final_cost}")
        self._publish(RouteCalculatedEvent(
            aggregate_id=run.run_id,
            delivery_type=delivery_type,
            algorithm=result.algorithm,
            final_cost=result.final_cost,
            trace=result.trace,
        ))
        return result

    def _publish(self, event: DomainEvent) -> None:
        if self._event_publisher is not None:
            self._event_publisher.publish(event)


def orchestrate(chain_head: Optional[ConstraintHandler],
                selector: Optional[AlgorithmSelector] = None) -> RouteResult:
    """Run one route calculation over a chain with the given selector."""
    return RouteOrchestrator(selector).run(chain_head)
