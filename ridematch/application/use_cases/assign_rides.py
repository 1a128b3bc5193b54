"""
Assign rides use case. Orchestrates data sources + domain. No FastAPI.

Flow: fetch people_areas.csv and distance_matrix.csv in parallel (fail-fast)
      -> merge client areas -> AreaIndex / DistanceTable
      -> three-pass seat allocation -> swap local search -> RideAssignmentResult.
"""

import logging
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import Mapping, Optional, Sequence, Tuple

from ridematch.application.config import (
    DATA_BASE_URL,
    DATA_DIR,
    DEFAULT_DEPOT,
    DEFAULT_OPTIMIZER_CONFIG,
    DISTANCE_MATRIX_FILE,
    FETCH_TIMEOUT_S,
    PEOPLE_AREAS_FILE,
)
from ridematch.core.allocation_engine.swap_optimizer import optimize_swaps
from ridematch.domain.area_index import AreaIndex
from ridematch.domain.assignment import allocate_seats
from ridematch.domain.constraints import OptimizerConfig
from ridematch.domain.distance_table import DistanceTable
from ridematch.domain.evaluation import route_cost_fn
from ridematch.domain.models import AreaMembership, Driver, RideAssignmentResult
from ridematch.infrastructure.area_loader import (
    all_kids,
    merge_area_overrides,
    parse_people_areas,
)
from ridematch.infrastructure.data_source import DataSource
from ridematch.infrastructure.distance_loader import parse_distance_matrix

logger = logging.getLogger(__name__)


def default_data_source() -> DataSource:
    return DataSource(data_dir=DATA_DIR, base_url=DATA_BASE_URL, timeout_s=FETCH_TIMEOUT_S)


def load_areas(source: DataSource) -> AreaMembership:
    return parse_people_areas(source.read_text(PEOPLE_AREAS_FILE))


def load_distances(source: DataSource) -> DistanceTable:
    return parse_distance_matrix(source.read_text(DISTANCE_MATRIX_FILE))


def load_inputs(source: DataSource) -> Tuple[AreaMembership, DistanceTable]:
    """
    Fetch both files concurrently. The first failure is re-raised as soon as it
    happens; the other fetch is abandoned and nothing is returned.
    """
    executor = ThreadPoolExecutor(max_workers=2)
    try:
        fut_areas = executor.submit(load_areas, source)
        fut_dist = executor.submit(load_distances, source)
        done, _ = wait([fut_areas, fut_dist], return_when=FIRST_EXCEPTION)
        for fut in done:
            fut.result()
        return fut_areas.result(), fut_dist.result()
    finally:
        executor.shutdown(wait=False, cancel_futures=True)


def load_area_roster(source: Optional[DataSource] = None) -> Tuple[AreaMembership, list]:
    """Persisted areas plus the sorted list of every known kid."""
    areas = load_areas(source or default_data_source())
    return areas, all_kids(areas)


def validate_request(
    present_kids: Sequence[str],
    drivers: Sequence[Driver],
) -> Tuple[list, list]:
    """Same checks as the original sign-up form. Raises ValueError."""
    kids = [k.strip() for k in present_kids if k and k.strip()]
    if not kids:
        raise ValueError("Please select at least one kid for today.")
    if not drivers:
        raise ValueError("Please add at least one driver.")
    cleaned: list[Driver] = []
    seen: set[str] = set()
    for d in drivers:
        name = (d.name or "").strip()
        if not name:
            raise ValueError("Driver name must not be empty")
        if d.seats < 0:
            raise ValueError(f"Invalid seats number for driver {name!r}: {d.seats}")
        if name in seen:
            raise ValueError(f"Driver {name!r} listed more than once")
        seen.add(name)
        cleaned.append(Driver(name=name, seats=int(d.seats), is_parent=bool(d.is_parent)))
    return kids, cleaned


def solve_rides(
    present_kids: Sequence[str],
    drivers: Sequence[Driver],
    areas: AreaMembership,
    distances: DistanceTable,
    depot: str = DEFAULT_DEPOT,
    optimizer_config: OptimizerConfig = DEFAULT_OPTIMIZER_CONFIG,
) -> RideAssignmentResult:
    """Pure part: already-loaded data in, result out."""
    area_index = AreaIndex(areas)
    for kid, owner, ignored in area_index.duplicates:
        logger.warning("Kid %r listed in %r and %r; using %r", kid, owner, ignored, owner)

    ctx = allocate_seats(list(present_kids), list(drivers), area_index, distances, depot)
    logger.info(
        "Initial assignment: %d seated, %d unassigned",
        sum(len(p) for p in ctx.assignment.values()),
        len(ctx.remaining),
    )
    report = optimize_swaps(ctx, route_cost_fn(area_index, distances, depot), optimizer_config)
    logger.info("Swap search: %d swaps, %d passes, converged=%s", report.swaps, report.passes, report.converged)
    return ctx.to_result()


def assign_rides(
    present_kids: Sequence[str],
    drivers: Sequence[Driver],
    client_areas: Optional[Mapping[str, Sequence[str]]] = None,
    source: Optional[DataSource] = None,
    depot: Optional[str] = None,
    optimizer_config: Optional[OptimizerConfig] = None,
) -> RideAssignmentResult:
    """
    1. Validate the request.
    2. Load both data files (DataSourceError aborts before any allocation).
    3. Merge client areas over the persisted ones.
    4. Solve.
    """
    kids, drivers = validate_request(present_kids, drivers)
    base_areas, distances = load_inputs(source or default_data_source())
    areas = merge_area_overrides(base_areas, client_areas)
    logger.info(
        "Assigning %d kids to %d drivers (%d areas, %d distance entries)",
        len(kids), len(drivers), len(areas), len(distances),
    )
    return solve_rides(
        kids,
        drivers,
        areas,
        distances,
        depot=depot or DEFAULT_DEPOT,
        optimizer_config=optimizer_config or DEFAULT_OPTIMIZER_CONFIG,
    )
