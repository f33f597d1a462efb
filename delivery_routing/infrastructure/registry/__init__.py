"""Registries for routing algorithms and route constraints."""

from .algorithm_registry import AlgorithmRegistry, create_algorithm_registry
from .base_registry import BaseRegistry, Registration
from .constraint_registry import ConstraintRegistry, create_constraint_registry

__all__ = [
    "BaseRegistry",
    "Registration",
    "AlgorithmRegistry",
    "ConstraintRegistry",
    "create_algorithm_registry",
    "create_constraint_registry",
]
