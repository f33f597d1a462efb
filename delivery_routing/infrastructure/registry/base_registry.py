"""Base registry - name to factory mapping shared by the route registries.

Registries replace hard-coded conditionals: new algorithms and constraints
are added by registering a factory, without modifying existing code. They are
plain objects built once at bootstrap and passed to whoever needs lookups.
"""
import threading
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

from delivery_routing.infrastructure.logging.logger import get_logger


class Registration:
    """Container for registration information."""

    def __init__(self, type_name: str, factory: Callable[[], Any], description: str = ""):
        """
        Initialize registration.

        Args:
            type_name: Name the factory is registered under (e.g., 'dijkstra')
            factory: Zero-argument callable creating a fresh instance
            description: Optional human readable description
        """
        self.type_name = type_name
        self.factory = factory
        self.description = description

    def __repr__(self) -> str:
        return f"Registration(type='{self.type_name}')"


class BaseRegistry(ABC):
    """Thread-safe registry of named factories."""

    def __init__(self):
        self._registrations: Dict[str, Registration] = {}
        self._registration_lock = threading.RLock()
        self._logger = get_logger(__name__)

    @property
    @abstractmethod
    def kind(self) -> str:
        """What this registry holds, used in log messages."""

    @abstractmethod
    def _unknown_type_error(self, type_name: str) -> Exception:
        """Exception raised when creating an unregistered type."""

    def register(self, type_name: str, factory: Callable[[], Any], description: str = "") -> None:
        """
        Register a factory under a name.

        Raises:
            ValueError: If the name is already registered
        """
        with self._registration_lock:
            if type_name in self._registrations:
                raise ValueError(f"{self.kind.capitalize()} type '{type_name}' is already registered")
            self._registrations[type_name] = Registration(type_name, factory, description)
            self._logger.debug(f"Registered {self.kind}: {type_name}")

    def unregister(self, type_name: str) -> bool:
        """
        Unregister a name.

        Returns:
            True if the name was unregistered, False if not found
        """
        with self._registration_lock:
            if type_name in self._registrations:
                del self._registrations[type_name]
                self._logger.debug(f"Unregistered {self.kind}: {type_name}")
                return True
            return False

    def is_registered(self, type_name: str) -> bool:
        return type_name in self._registrations

    def get_registered_types(self) -> List[str]:
        return list(self._registrations.keys())

    def get_registration(self, type_name: str) -> Optional[Registration]:
        return self._registrations.get(type_name)

    def create(self, type_name: str) -> Any:
        """
        Create a fresh instance using the registered factory.

        Raises:
            The registry's unknown-type error if the name is not registered
        """
        registration = self._registrations.get(type_name)
        if registration is None:
            raise self._unknown_type_error(type_name)
        return registration.factory()

    def clear_registrations(self) -> None:
        with self._registration_lock:
            self._registrations.clear()
