"""Application bootstrap - wires configuration, registries and services."""

from __future__ import annotations

from typing import Optional

from delivery_routing.application.route.orchestrator import RouteOrchestrator
from delivery_routing.application.route.service import RouteCalculationService
from delivery_routing.config.manager import ConfigurationManager, get_config_manager
from delivery_routing.config.schemas import AppConfig
from delivery_routing.domain.base.exceptions import ConfigurationError
from delivery_routing.domain.route.selector import AlgorithmSelector
from delivery_routing.infrastructure.events.publisher import (
    ConfigurableEventPublisher,
    create_event_publisher,
)
from delivery_routing.infrastructure.logging.logger import get_logger, setup_logging
from delivery_routing.infrastructure.registry import (
    AlgorithmRegistry,
    ConstraintRegistry,
    create_algorithm_registry,
    create_constraint_registry,
)


class Application:
    """Application context holding the wired services."""

    def __init__(self,
                 config_path: Optional[str] = None,
                 config_manager: Optional[ConfigurationManager] = None,
                 log_level: Optional[str] = None):
        self.config_path = config_path
        self.log_level = log_level
        self._config_manager = config_manager
        self._initialized = False

        self.algorithm_registry: Optional[AlgorithmRegistry] = None
        self.constraint_registry: Optional[ConstraintRegistry] = None
        self.event_publisher: Optional[ConfigurableEventPublisher] = None
        self.orchestrator: Optional[RouteOrchestrator] = None
        self.route_service: Optional[RouteCalculationService] = None

        self.logger = get_logger(__name__)

    @property
    def config(self) -> AppConfig:
        if self._config_manager is None:
            self._config_manager = get_config_manager(self.config_path)
        return self._config_manager.app_config

    def initialize(self, configure_logging: bool = True) -> Application:
        """
        Build registries and services from configuration.

        Raises:
            ConfigurationError: If the configuration is invalid or references
                unregistered algorithms or constraints
        """
        if self._initialized:
            return self

        app_config = self.config
        if configure_logging:
            logging_config = app_config.logging
            if self.log_level:
                logging_config = logging_config.model_copy(update={"level": self.log_level.upper()})
            setup_logging(logging_config).info(
                "Configuration loaded",
                environment=app_config.environment,
                events_mode=app_config.events.mode if app_config.events.enabled else None,
            )

        routing = app_config.routing
        try:
            self.algorithm_registry = create_algorithm_registry(routing.algorithms)
            self.constraint_registry = create_constraint_registry(routing.constraints)
        except ValueError as e:
            # Configured names clashing with built-in registrations
            raise ConfigurationError(str(e)) from e
        self._check_references(app_config)

        if app_config.events.enabled:
            self.event_publisher = create_event_publisher(app_config.events.mode)

        selector = AlgorithmSelector(routing.brackets, self.algorithm_registry.create_algorithm)
        self.orchestrator = RouteOrchestrator(selector, self.event_publisher)
        self.route_service = RouteCalculationService(
            self.orchestrator,
            self.constraint_registry,
            self.algorithm_registry,
            routing,
        )

        self._initialized = True
        self.logger.info(f"Application initialized (environment={app_config.environment})")
        return self

    def _check_references(self, app_config: AppConfig) -> None:
        routing = app_config.routing
        unknown_algorithms = sorted({
            b.algorithm for b in routing.brackets
            if not self.algorithm_registry.is_registered(b.algorithm)
        })
        if unknown_algorithms:
            raise ConfigurationError(f"Cost brackets reference unknown algorithms: {unknown_algorithms}")

        unknown_constraints = sorted({
            name for d in routing.delivery_types for name in d.constraints
            if not self.constraint_registry.is_registered(name)
        })
        if unknown_constraints:
            raise ConfigurationError(f"Delivery types reference unknown constraints: {unknown_constraints}")


def create_application(config_path: Optional[str] = None,
                       configure_logging: bool = True,
                       log_level: Optional[str] = None) -> Application:
    """Create and initialize the application."""
    return Application(config_path, log_level=log_level).initialize(configure_logging=configure_logging)
