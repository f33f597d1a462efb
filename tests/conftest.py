import logging

import pytest
import structlog

from delivery_routing.application.route.orchestrator import RouteOrchestrator
from delivery_routing.bootstrap import Application
from delivery_routing.config.loader import ENV_OVERRIDES
from delivery_routing.config.manager import CONFIG_PATH_ENV
from delivery_routing.domain.route.constraints import FixedCostConstraint
from delivery_routing.domain.route.selector import AlgorithmSelector
from delivery_routing.infrastructure.events.publisher import ConfigurableEventPublisher


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep host environment variables out of configuration loading."""
    monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
    for env_var in ENV_OVERRIDES:
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo handler changes made by setup_logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    structlog.reset_defaults()


class RecordingConstraint(FixedCostConstraint):
    """Fixed-cost constraint that records the order handlers ran in."""

    def __init__(self, cost, step, calls):
        super().__init__(cost, step)
        self.calls = calls

    def apply(self, context):
        self.calls.append(self.step)
        super().apply(context)


@pytest.fixture
def call_log():
    return []


@pytest.fixture
def make_constraint(call_log):
    """Factory for constraints that record their execution in call_log."""
    def _make(cost, step):
        return RecordingConstraint(cost, step, call_log)
    return _make


@pytest.fixture
def selector():
    return AlgorithmSelector()


@pytest.fixture
def sync_publisher():
    return ConfigurableEventPublisher(mode="sync")


@pytest.fixture
def orchestrator(selector):
    return RouteOrchestrator(selector)


@pytest.fixture
def app():
    """Application with default configuration and untouched logging."""
    return Application().initialize(configure_logging=False)


@pytest.fixture
def config_file(tmp_path):
    """Write a YAML configuration file and return its path."""
    def _write(content: str, name: str = "routing.yml") -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write
