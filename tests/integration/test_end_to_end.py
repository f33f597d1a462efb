"""End-to-end tests through the bootstrapped application."""

import pytest

from delivery_routing import build_chain
from delivery_routing.bootstrap import Application, create_application
from delivery_routing.domain.base.exceptions import ConfigurationError
from delivery_routing.domain.route.constraints import (
    AvoidTollHandler,
    ConstraintHandler,
    SkipConstructionHandler,
)


class HazmatHandler(ConstraintHandler):
    """A constraint plugged in from outside the package."""

    def apply(self, context):
        context.add_cost(150000)
        context.append_step("hazmatCorridor")


CUSTOM_CONFIG = """
environment: test
events:
  mode: sync
routing:
  algorithms:
    - name: astar
      factor: 0.5
  brackets:
    - algorithm: genetic
      up_to: 25
    - algorithm: astar
      above: 25
      up_to: 1000
    - algorithm: dijkstra
      above: 1000
  constraints:
    - name: low_bridge
      cost: 3
      step: lowBridge
  delivery_types:
    - name: express
      constraints: [avoid_toll, skip_construction]
    - name: oversize
      constraints: [low_bridge, avoid_toll]
  default_delivery_type: oversize
"""


class TestApplication:
    """End-to-end route calculations."""

    def test_default_application_express_route(self, app):
        result = app.route_service.calculate("express")

        assert result.route == "start -> avoidToll -> skipConstruction -> destination"
        assert result.final_cost == pytest.approx(33)

    def test_custom_configuration(self, config_file):
        app = create_application(config_file(CUSTOM_CONFIG), configure_logging=False)

        oversize = app.route_service.calculate()
        express = app.route_service.calculate("express")

        assert oversize.delivery_type == "oversize"
        assert oversize.trace == ["start", "lowBridge", "avoidToll", "destination"]
        assert oversize.accumulated_cost == 23
        assert oversize.algorithm == "genetic"
        assert express.algorithm == "astar"
        assert express.final_cost == pytest.approx(15)

    def test_listeners_receive_route_events(self, config_file):
        app = create_application(config_file(CUSTOM_CONFIG), configure_logging=False)
        finished = []
        app.event_publisher.register_handler("RouteCalculatedEvent", finished.append)

        result = app.route_service.calculate("express")

        assert len(finished) == 1
        assert finished[0].aggregate_id == result.run_id
        assert finished[0].trace == result.trace

    def test_events_can_be_disabled(self, config_file):
        app = create_application(config_file("events:\n  enabled: false\n"), configure_logging=False)

        assert app.event_publisher is None
        assert app.route_service.calculate("standard").final_cost == 0

    def test_new_constraint_without_modifying_existing_code(self, app):
        head = build_chain([HazmatHandler(), AvoidTollHandler(), SkipConstructionHandler()])

        result = app.orchestrator.run(head)

        assert result.trace == ["start", "hazmatCorridor", "avoidToll", "skipConstruction", "destination"]
        assert result.algorithm == "dijkstra"
        assert result.final_cost == pytest.approx(150030 * 0.9)

    def test_runtime_registered_constraint(self, app):
        app.constraint_registry.register("hazmat", HazmatHandler)

        result = app.route_service.calculate("standard", ["hazmat"])

        assert result.accumulated_cost == 150000

    def test_initialize_is_idempotent(self, app):
        service = app.route_service
        assert app.initialize(configure_logging=False) is app
        assert app.route_service is service


class TestConfigurationErrors:
    """Invalid configurations are rejected at bootstrap."""

    def test_bracket_with_unknown_algorithm(self, config_file):
        path = config_file("routing:\n  brackets:\n    - algorithm: astar\n")

        with pytest.raises(ConfigurationError, match="unknown algorithms: \\['astar'\\]"):
            create_application(path, configure_logging=False)

    def test_delivery_type_with_unknown_constraint(self, config_file):
        path = config_file(
            "routing:\n"
            "  delivery_types:\n"
            "    - name: express\n"
            "      constraints: [teleport]\n"
        )

        with pytest.raises(ConfigurationError, match="unknown constraints: \\['teleport'\\]"):
            create_application(path, configure_logging=False)

    def test_constraint_name_clashing_with_builtin(self, config_file):
        path = config_file(
            "routing:\n"
            "  constraints:\n"
            "    - name: avoid_toll\n"
            "      cost: 1\n"
            "      step: toll\n"
        )

        with pytest.raises(ConfigurationError, match="already registered"):
            Application(path).initialize(configure_logging=False)

    def test_missing_config_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            create_application(str(tmp_path / "nope.yml"), configure_logging=False)
