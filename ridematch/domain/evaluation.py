"""
Route cost evaluation. Pure scoring. No I/O.
"""

from typing import Callable, Sequence

from ridematch.domain.area_index import AreaIndex
from ridematch.domain.distance_table import DistanceTable

RouteCostFn = Callable[[str, Sequence[str]], float]


def approximate_route_cost(
    driver_name: str,
    passengers: Sequence[str],
    area_index: AreaIndex,
    distances: DistanceTable,
    depot: str,
) -> float:
    """
    Depot -> p1 -> p2 -> ... -> driver's home area, in list order.
    A hop whose area or distance is unknown costs nothing and does not move
    the current position. Lower is better.
    """
    cost = 0.0
    current = depot
    for kid in passengers:
        area = area_index.area_of(kid)
        d = distances.distance(current, area)
        if d is not None:
            cost += d
            current = area
    d = distances.distance(current, area_index.area_of(driver_name))
    if d is not None:
        cost += d
    return cost


def route_cost_fn(area_index: AreaIndex, distances: DistanceTable, depot: str) -> RouteCostFn:
    """Bind the lookups so callers only pass (driver_name, passengers)."""

    def cost(driver_name: str, passengers: Sequence[str]) -> float:
        return approximate_route_cost(driver_name, passengers, area_index, distances, depot)

    return cost
