"""
Initial seat assignment. Greedy deterministic, three passes. No solver.
"""

from typing import List, Optional

from ridematch.domain.area_index import AreaIndex
from ridematch.domain.distance_table import DistanceTable
from ridematch.domain.models import AllocationContext, Driver


def seat_own_kids(ctx: AllocationContext) -> None:
    """
    Pass 1. A parent takes their own present kid at position 0 if they have a
    seat; a kid-driver leaves the pool without taking a seat.
    """
    for d in ctx.drivers:
        if not d.is_parent:
            ctx.remaining.discard(d.name)
        elif d.name in ctx.remaining and ctx.seats_left(d) > 0:
            ctx.seat(d, d.name)


def fill_same_area(ctx: AllocationContext, area_index: AreaIndex) -> None:
    """Pass 2. Fill free seats with kids from the driver's own area, input order."""
    for d in ctx.drivers:
        free = ctx.seats_left(d)
        home = area_index.area_of(d.name)
        if free <= 0 or home is None:
            continue
        candidates = [
            kid for kid in ctx.remaining_in_order()
            if kid != d.name and area_index.area_of(kid) == home
        ]
        for kid in candidates[:free]:
            ctx.seat(d, kid)


def _nearest_kid(
    ctx: AllocationContext,
    current: str,
    area_index: AreaIndex,
    distances: DistanceTable,
) -> Optional[str]:
    best_kid, best_dist = None, float("inf")
    for kid in ctx.remaining_in_order():
        dist = distances.distance(current, area_index.area_of(kid))
        # strict: ties keep the earliest kid
        if dist is not None and dist < best_dist:
            best_kid, best_dist = kid, dist
    return best_kid


def fill_nearest_neighbor(
    ctx: AllocationContext,
    area_index: AreaIndex,
    distances: DistanceTable,
    depot: str,
) -> None:
    """
    Pass 3. Greedy walk from the depot: take the closest reachable remaining kid,
    move to their area, repeat. Stops early when nobody is reachable.
    """
    for d in ctx.drivers:
        current = depot
        while ctx.seats_left(d) > 0 and ctx.remaining:
            kid = _nearest_kid(ctx, current, area_index, distances)
            if kid is None:
                break
            ctx.seat(d, kid)
            current = area_index.area_of(kid)


def allocate_seats(
    present_kids: List[str],
    drivers: List[Driver],
    area_index: AreaIndex,
    distances: DistanceTable,
    depot: str,
) -> AllocationContext:
    """
    1. Seat parents' own kids, drop kid-drivers from the pool.
    2. Same-area fill.
    3. Nearest-neighbour fill from the depot.
    Whatever is left in `ctx.remaining` is unassigned.
    """
    ctx = AllocationContext.start(present_kids, drivers)
    seat_own_kids(ctx)
    fill_same_area(ctx, area_index)
    fill_nearest_neighbor(ctx, area_index, distances, depot)
    return ctx
