"""
Domain constraints. Dataclasses only. No FastAPI, no external deps beyond dataclasses/typing.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class OptimizerConfig:
    """
    Safety cap for the swap local search. Both limits are opt-in: with the
    defaults the search runs until a full pass finds no improving swap.
    """
    max_passes: Optional[int] = None  # passes = restarts + the final clean scan
    time_budget_s: Optional[float] = None  # wall clock, checked between passes

    def __post_init__(self) -> None:
        if self.max_passes is not None and self.max_passes < 1:
            raise ValueError("max_passes must be >= 1")
        if self.time_budget_s is not None and self.time_budget_s <= 0:
            raise ValueError("time_budget_s must be > 0")


UNCAPPED = OptimizerConfig()
