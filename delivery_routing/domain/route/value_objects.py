"""Route value objects: trace steps, run states and calculation results."""
from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RouteStep(str, Enum):
    """Built-in route trace steps.

    Custom constraints may record their own labels; the trace holds plain
    strings so these members compare equal to their values.
    """
    START = "start"
    AVOID_TOLL = "avoidToll"
    SKIP_CONSTRUCTION = "skipConstruction"
    DESTINATION = "destination"


class RunState(str, Enum):
    """Lifecycle of a single route calculation run."""
    CREATED = "created"
    CHAIN_APPLIED = "chain_applied"
    STRATEGY_SELECTED = "strategy_selected"
    COMPLETED = "completed"

    def can_transition_to(self, new_state: RunState) -> bool:
        return new_state in _RUN_TRANSITIONS[self]


_RUN_TRANSITIONS: Dict[RunState, FrozenSet[RunState]] = {
    RunState.CREATED: frozenset({RunState.CHAIN_APPLIED}),
    RunState.CHAIN_APPLIED: frozenset({RunState.STRATEGY_SELECTED}),
    RunState.STRATEGY_SELECTED: frozenset({RunState.COMPLETED}),
    RunState.COMPLETED: frozenset(),
}


class RouteResult(BaseModel):
    """Outcome of one route calculation."""
    model_config = ConfigDict(frozen=True)

    run_id: str
    final_cost: float
    accumulated_cost: float = Field(..., description="Cost after the constraint chain, before the algorithm")
    algorithm: str
    trace: List[str]
    delivery_type: Optional[str] = None
    state: RunState = RunState.COMPLETED

    @property
    def route(self) -> str:
        """Human readable route, e.g. ``start -> avoidToll -> destination``."""
        return " -> ".join(self.trace)

    def to_dict(self) -> Dict[str, object]:
        return {
            "run_id": self.run_id,
            "delivery_type": self.delivery_type,
            "algorithm": self.algorithm,
            "accumulated_cost": self.accumulated_cost,
            "final_cost": self.final_cost,
            "route": self.route,
            "trace": list(self.trace),
            "state": self.state.value,
        }
