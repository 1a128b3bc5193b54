"""
Domain models. Dataclasses only. No FastAPI, no external deps beyond dataclasses/typing.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set


# Area name -> ordered, duplicate-free kid names.
AreaMembership = Dict[str, List[str]]

# Driver name -> passenger names in pickup order.
Assignment = Dict[str, List[str]]


@dataclass(frozen=True)
class Driver:
    name: str
    seats: int  # seats excluding the driver
    # True: a parent drives and their own kid rides as a normal passenger.
    # False: the named kid drives and never rides.
    is_parent: bool = False


@dataclass
class RideAssignmentResult:
    ride_assignments: Assignment
    unassigned_people: List[str]

    def to_dict(self) -> dict:
        return {
            "rideAssignments": {d: list(p) for d, p in self.ride_assignments.items()},
            "unassignedPeople": list(self.unassigned_people),
        }


@dataclass
class AllocationContext:
    """
    Mutable state shared by the three seat passes and the swap optimizer.
    `present_kids` fixes the enumeration order of `remaining` for the whole run.
    """
    drivers: List[Driver]
    present_kids: List[str]
    assignment: Assignment = field(default_factory=dict)
    remaining: Set[str] = field(default_factory=set)

    @classmethod
    def start(cls, present_kids: List[str], drivers: List[Driver]) -> "AllocationContext":
        ordered = list(dict.fromkeys(present_kids))
        return cls(
            drivers=list(drivers),
            present_kids=ordered,
            assignment={d.name: [] for d in drivers},
            remaining=set(ordered),
        )

    def remaining_in_order(self) -> List[str]:
        return [k for k in self.present_kids if k in self.remaining]

    def seats_left(self, driver: Driver) -> int:
        return max(0, driver.seats - len(self.assignment[driver.name]))

    def seat(self, driver: Driver, kid: str) -> None:
        self.assignment[driver.name].append(kid)
        self.remaining.discard(kid)

    def to_result(self) -> RideAssignmentResult:
        return RideAssignmentResult(
            ride_assignments={d: list(p) for d, p in self.assignment.items()},
            unassigned_people=self.remaining_in_order(),
        )


@dataclass
class SwapReport:
    """Outcome of a swap optimisation run (observability only)."""
    swaps: int
    passes: int
    converged: bool
    stop_reason: Optional[str] = None  # "max_passes" | "time_budget" when capped
