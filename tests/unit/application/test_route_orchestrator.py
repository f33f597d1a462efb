"""Tests for the route orchestrator."""

from unittest.mock import Mock

import pytest

from delivery_routing import build_chain, orchestrate
from delivery_routing.application.route.orchestrator import RouteOrchestrator, RouteRun
from delivery_routing.domain.base.exceptions import InvalidStateTransitionError, ValidationError
from delivery_routing.domain.route.constraints import (
    AvoidTollHandler,
    ConstraintHandler,
    FixedCostConstraint,
    SkipConstructionHandler,
)
from delivery_routing.domain.route.exceptions import (
    InvalidStrategyRequestError,
    MalformedChainError,
)
from delivery_routing.domain.route.selector import AlgorithmSelector, CostBracket
from delivery_routing.domain.route.value_objects import RouteStep, RunState


class TestRouteOrchestrator:
    """Test cases for RouteOrchestrator.run and orchestrate."""

    def test_avoid_toll_then_skip_construction(self, orchestrator):
        head = build_chain([AvoidTollHandler(), SkipConstructionHandler()])

        result = orchestrator.run(head)

        assert result.accumulated_cost == 30
        assert result.algorithm == "genetic"
        assert result.final_cost == pytest.approx(33)
        assert result.trace == [
            RouteStep.START,
            RouteStep.AVOID_TOLL,
            RouteStep.SKIP_CONSTRUCTION,
            RouteStep.DESTINATION,
        ]
        assert result.route == "start -> avoidToll -> skipConstruction -> destination"
        assert result.state == RunState.COMPLETED

    def test_empty_chain_goes_straight_to_selection(self, orchestrator):
        result = orchestrator.run(build_chain([]))

        assert result.accumulated_cost == 0
        assert result.algorithm == "genetic"
        assert result.final_cost == 0
        assert result.trace == ["start", "destination"]

    def test_cost_above_threshold_selects_dijkstra(self, orchestrator):
        head = build_chain([FixedCostConstraint(100000, "bulkLoad"), AvoidTollHandler()])

        result = orchestrator.run(head)

        assert result.accumulated_cost == 100020
        assert result.algorithm == "dijkstra"
        assert result.final_cost == pytest.approx(90018)

    def test_cost_exactly_at_threshold_selects_genetic(self, orchestrator):
        result = orchestrator.run(FixedCostConstraint(100000, "bulkLoad"))

        assert result.algorithm == "genetic"
        assert result.final_cost == pytest.approx(110000)

    def test_trace_has_one_step_per_handler_plus_sentinels(self, orchestrator, make_constraint):
        handlers = [make_constraint(1, f"leg{i}") for i in range(6)]

        result = orchestrator.run(build_chain(handlers))

        assert len(result.trace) == 1 + len(handlers) + 1
        assert result.trace == ["start"] + [f"leg{i}" for i in range(6)] + ["destination"]

    def test_runs_do_not_share_context(self, orchestrator):
        first = orchestrator.run(AvoidTollHandler())
        second = orchestrator.run(AvoidTollHandler())

        assert first.accumulated_cost == second.accumulated_cost == 20
        assert second.trace == ["start", "avoidToll", "destination"]
        assert first.run_id != second.run_id

    def test_delivery_type_is_recorded(self, orchestrator):
        result = orchestrator.run(None, delivery_type="express")
        assert result.delivery_type == "express"
        assert result.to_dict()["delivery_type"] == "express"

    def test_selector_is_asked_once_with_final_cost(self):
        selector = AlgorithmSelector()
        selector.select = Mock(wraps=selector.select)

        RouteOrchestrator(selector).run(build_chain([AvoidTollHandler(), SkipConstructionHandler()]))

        selector.select.assert_called_once_with(30)

    def test_handler_failure_is_fatal(self, orchestrator):
        head = AvoidTollHandler()
        head.apply = Mock(side_effect=RuntimeError("boom"))

        with pytest.raises(RuntimeError, match="boom"):
            orchestrator.run(head)

    def test_cyclic_chain_is_rejected_before_running(self, orchestrator, make_constraint, call_log):
        first = make_constraint(1, "a")
        second = make_constraint(1, "b")
        first.set_next(second)
        second.set_next(first)

        with pytest.raises(MalformedChainError):
            orchestrator.run(first)

        assert call_log == []

    def test_long_chain_completes(self, orchestrator):
        head = build_chain([FixedCostConstraint(1, f"leg{i}") for i in range(1500)])

        result = orchestrator.run(head)

        assert result.accumulated_cost == 1500
        assert len(result.trace) == 1502
        assert result.final_cost == pytest.approx(1650)

    def test_handler_cannot_lower_accumulated_cost(self, orchestrator):
        class DiscountHandler(ConstraintHandler):
            def apply(self, context):
                context.accumulated_cost = context.accumulated_cost - 50

        head = build_chain([FixedCostConstraint(10, "a"), DiscountHandler()])

        with pytest.raises(ValidationError, match="must not decrease"):
            orchestrator.run(head)

    def test_uncovered_cost_raises_invalid_strategy_request(self):
        selector = AlgorithmSelector([CostBracket(algorithm="genetic", up_to=10)])

        with pytest.raises(InvalidStrategyRequestError):
            RouteOrchestrator(selector).run(AvoidTollHandler())

    def test_orchestrate_uses_default_selector(self):
        result = orchestrate(build_chain([AvoidTollHandler(), SkipConstructionHandler()]))
        assert result.final_cost == pytest.approx(33)

    def test_orchestrate_with_custom_selector(self):
        selector = AlgorithmSelector([CostBracket(algorithm="dijkstra")])
        result = orchestrate(AvoidTollHandler(), selector)
        assert result.algorithm == "dijkstra"
        assert result.final_cost == pytest.approx(18)


class TestRouteEvents:
    """Test cases for events published during a run."""

    def test_events_published_in_run_order(self, selector, sync_publisher):
        received = []
        for event_type in (
            "RouteCalculationStartedEvent",
            "ConstraintChainAppliedEvent",
            "AlgorithmSelectedEvent",
            "RouteCalculatedEvent",
        ):
            sync_publisher.register_handler(event_type, received.append)

        result = RouteOrchestrator(selector, sync_publisher).run(
            build_chain([AvoidTollHandler(), SkipConstructionHandler()]), delivery_type="express"
        )

        assert [e.event_type for e in received] == [
            "RouteCalculationStartedEvent",
            "ConstraintChainAppliedEvent",
            "AlgorithmSelectedEvent",
            "RouteCalculatedEvent",
        ]
        assert {e.aggregate_id for e in received} == {result.run_id}
        assert received[1].steps == ["avoidToll", "skipConstruction"]
        assert received[1].accumulated_cost == 30
        assert received[2].algorithm == "genetic"
        assert received[3].final_cost == pytest.approx(33)
        assert received[3].delivery_type == "express"

    def test_failing_listener_does_not_break_run(self, selector, sync_publisher):
        sync_publisher.register_handler("RouteCalculatedEvent", Mock(side_effect=RuntimeError("listener")))

        result = RouteOrchestrator(selector, sync_publisher).run(AvoidTollHandler())

        assert result.final_cost == pytest.approx(22)


class TestRouteRun:
    """Test cases for the per-run state machine."""

    def test_states_advance_in_order(self):
        run = RouteRun("run-1")
        assert run.state == RunState.CREATED

        for state in (RunState.CHAIN_APPLIED, RunState.STRATEGY_SELECTED, RunState.COMPLETED):
            run.advance(state)

        assert run.state == RunState.COMPLETED

    def test_skipping_a_state_is_rejected(self):
        run = RouteRun("run-1")

        with pytest.raises(InvalidStateTransitionError) as exc_info:
            run.advance(RunState.STRATEGY_SELECTED)

        assert exc_info.value.current_state == "created"
        assert exc_info.value.attempted_state == "strategy_selected"

    def test_completed_run_cannot_advance(self):
        run = RouteRun("run-1")
        run.advance(RunState.CHAIN_APPLIED)
        run.advance(RunState.STRATEGY_SELECTED)
        run.advance(RunState.COMPLETED)

        with pytest.raises(InvalidStateTransitionError):
            run.advance(RunState.CREATED)
