"""Route-specific domain exceptions."""
from typing import Any

from delivery_routing.domain.base.exceptions import DomainException


class RouteException(DomainException):
    """Base exception for route calculation errors."""
    pass


class InvalidStrategyRequestError(RouteException):
    """Raised when no algorithm bracket covers the requested cost."""
    def __init__(self, cost: Any, message: str = ""):
        super().__init__(message or f"No routing algorithm bracket covers cost {cost}")
        self.cost = cost


class MalformedChainError(RouteException):
    """Raised when a constraint chain contains a cycle or a repeated handler."""
    def __init__(self, handler: Any, message: str = ""):
        super().__init__(message or f"Constraint handler {handler!r} appears more than once in the chain")
        self.handler = handler


class UnknownAlgorithmError(RouteException):
    """Raised when an algorithm name has no registration."""
    def __init__(self, name: str):
        super().__init__(f"Unknown routing algorithm: {name}")
        self.name = name


class UnknownConstraintError(RouteException):
    """Raised when a constraint name has no registration."""
    def __init__(self, name: str):
        super().__init__(f"Unknown route constraint: {name}")
        self.name = name
