"""Route context - mutable state carried through the constraint chain."""
from typing import Any, List, Union

from pydantic import BaseModel, ConfigDict, Field

from delivery_routing.domain.base.exceptions import ValidationError
from delivery_routing.domain.route.value_objects import RouteStep


def _initial_trace() -> List[str]:
    return [RouteStep.START.value]


class RouteContext(BaseModel):
    """
    Accumulated cost and audit trail of a single route calculation.

    A context is created fresh for every run and is owned by that run only.
    The trace always starts with the ``start`` step; each constraint handler
    appends exactly one step and the orchestrator appends ``destination``.
    """
    model_config = ConfigDict(validate_assignment=True)

    accumulated_cost: float = Field(0.0, ge=0)
    trace: List[str] = Field(default_factory=_initial_trace)

    def __setattr__(self, name: str, value: Any) -> None:
        # accumulated_cost only ever grows, whichever way it is assigned
        if name == "accumulated_cost" and isinstance(value, (int, float)) and value < self.accumulated_cost:
            raise ValidationError(
                f"Accumulated cost must not decrease, got {value} after {self.accumulated_cost}",
                {"accumulated_cost": self.accumulated_cost, "value": value},
            )
        super().__setattr__(name, value)

    def append_step(self, step: Union[RouteStep, str]) -> None:
        """Append a step to the trace."""
        self.trace.append(step.value if isinstance(step, RouteStep) else step)

    def add_cost(self, amount: float) -> None:
        """Increase the accumulated cost; the total never decreases."""
        if amount < 0:
            raise ValidationError(
                f"Cost increment must not be negative, got {amount}",
                {"amount": amount},
            )
        self.accumulated_cost += amount
