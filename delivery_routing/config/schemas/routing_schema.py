"""Routing configuration schemas: constraints, algorithms, brackets and delivery types."""
from typing import List

from pydantic import BaseModel, Field, field_validator, model_validator

from delivery_routing.domain.route.selector import CostBracket, default_brackets


def _check_name(v: str) -> str:
    if not v or not v.strip():
        raise ValueError("Name cannot be empty")
    if not v.replace('-', '').replace('_', '').isalnum():
        raise ValueError("Name must contain only alphanumeric characters, hyphens, and underscores")
    return v.strip()


class ConstraintConfig(BaseModel):
    """Custom fixed-cost route constraint."""

    name: str = Field(..., description="Unique constraint name")
    cost: float = Field(..., description="Cost added to the route")
    step: str = Field(..., description="Label recorded in the route trace")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _check_name(v)

    @field_validator("cost")
    @classmethod
    def validate_cost(cls, v: float) -> float:
        """Validate constraint cost."""
        if v < 0:
            raise ValueError("Constraint cost must not be negative")
        return v


class AlgorithmConfig(BaseModel):
    """Custom fixed-factor routing algorithm."""

    name: str = Field(..., description="Unique algorithm name")
    factor: float = Field(..., description="Multiplier applied to the accumulated cost")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _check_name(v)

    @field_validator("factor")
    @classmethod
    def validate_factor(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Algorithm factor must be positive")
        return v


class DeliveryTypeConfig(BaseModel):
    """Delivery type and the ordered constraints applied to its routes."""

    name: str
    constraints: List[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _check_name(v)


def _default_delivery_types() -> List[DeliveryTypeConfig]:
    return [
        DeliveryTypeConfig(name="express", constraints=["avoid_toll", "skip_construction"]),
        DeliveryTypeConfig(name="standard", constraints=[]),
        DeliveryTypeConfig(name="refrigerated", constraints=["skip_construction"]),
    ]


class RoutingConfig(BaseModel):
    """Routing configuration."""

    brackets: List[CostBracket] = Field(default_factory=lambda: default_brackets(), description="Ordered algorithm cost brackets")
    algorithms: List[AlgorithmConfig] = Field(default_factory=list, description="Additional algorithms")
    constraints: List[ConstraintConfig] = Field(default_factory=list, description="Additional constraints")
    delivery_types: List[DeliveryTypeConfig] = Field(default_factory=_default_delivery_types)
    default_delivery_type: str = Field("express", description="Delivery type used when none is given")

    @model_validator(mode="after")
    def validate_names(self) -> "RoutingConfig":
        for label, items in (
            ("algorithm", self.algorithms),
            ("constraint", self.constraints),
            ("delivery type", self.delivery_types),
        ):
            names = [item.name for item in items]
            duplicates = sorted({name for name in names if names.count(name) > 1})
            if duplicates:
                raise ValueError(f"Duplicate {label} names: {duplicates}")

        if self.default_delivery_type not in {d.name for d in self.delivery_types}:
            raise ValueError(f"Default delivery type '{self.default_delivery_type}' is not configured")
        return self

    def get_delivery_type(self, name: str) -> DeliveryTypeConfig:
        for delivery_type in self.delivery_types:
            if delivery_type.name == name:
                return delivery_type
        raise KeyError(name)
