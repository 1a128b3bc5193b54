"""
Run a ride assignment from the command line.

Uso (desde raíz del repo):
  python -m ridematch.application.run_assignment --present Noa Ido Maya \
      --driver Noa:3 --driver Ido:2:parent
  python -m ridematch.application.run_assignment ... --data-dir public --json

Flujo:
  people_areas.csv + distance_matrix.csv (en paralelo) →
  áreas fusionadas con --areas-override →
  asignación inicial (3 pasadas) →
  búsqueda local por intercambios →
  rutas por conductor + no asignados.
"""

import argparse
import json
import logging
from pathlib import Path
from typing import List

from ridematch.application.config import (
    DATA_BASE_URL,
    DATA_DIR,
    DEFAULT_DEPOT,
    DEFAULT_OPTIMIZER_CONFIG,
    FETCH_TIMEOUT_S,
)
from ridematch.application.use_cases.assign_rides import (
    load_inputs,
    solve_rides,
    validate_request,
)
from ridematch.domain.area_index import AreaIndex
from ridematch.domain.constraints import OptimizerConfig
from ridematch.domain.evaluation import route_cost_fn
from ridematch.domain.models import Driver
from ridematch.infrastructure.area_loader import merge_area_overrides
from ridematch.infrastructure.data_source import DataSource, DataSourceError


def parse_driver(value: str) -> Driver:
    """`name:seats` or `name:seats:parent`."""
    parts = value.split(":")
    if len(parts) not in (2, 3) or not parts[0].strip():
        raise argparse.ArgumentTypeError(f"driver must be NAME:SEATS[:parent], got {value!r}")
    try:
        seats = int(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid seats in {value!r}")
    if seats < 0:
        raise argparse.ArgumentTypeError(f"invalid seats in {value!r}")
    is_parent = len(parts) == 3 and parts[2].strip().lower() in ("parent", "p", "true", "1")
    return Driver(name=parts[0].strip(), seats=seats, is_parent=is_parent)


def _load_overrides(path: Path | None) -> dict:
    if path is None:
        return {}
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object area -> [kids]")
    return data


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Ridematch: assign present kids to drivers and improve with swaps"
    )
    parser.add_argument("--present", nargs="+", required=True, help="Kids present today, in priority order")
    parser.add_argument(
        "--driver",
        action="append",
        type=parse_driver,
        required=True,
        help="NAME:SEATS or NAME:SEATS:parent (repeatable, order matters)",
    )
    parser.add_argument("--areas-override", type=Path, default=None, help="JSON area -> [kids] merged after the CSV")
    parser.add_argument("--data-dir", type=Path, default=DATA_DIR, help="Directory with the CSV files")
    parser.add_argument("--base-url", default=DATA_BASE_URL, help="Fetch the CSV files from this URL instead")
    parser.add_argument("--depot", default=DEFAULT_DEPOT, help="Start area of every route")
    parser.add_argument("--max-passes", type=int, default=DEFAULT_OPTIMIZER_CONFIG.max_passes)
    parser.add_argument("--time-budget", type=float, default=DEFAULT_OPTIMIZER_CONFIG.time_budget_s)
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)8s | %(name)s | %(message)s",
    )

    try:
        kids, drivers = validate_request(args.present, args.driver)
        config = OptimizerConfig(max_passes=args.max_passes, time_budget_s=args.time_budget)
        overrides = _load_overrides(args.areas_override)
        source = DataSource(data_dir=args.data_dir, base_url=args.base_url, timeout_s=FETCH_TIMEOUT_S)
        base_areas, distances = load_inputs(source)
    except (ValueError, OSError, DataSourceError) as e:
        print(f"ERROR: {e}")
        return 1

    areas = merge_area_overrides(base_areas, overrides)
    result = solve_rides(kids, drivers, areas, distances, depot=args.depot, optimizer_config=config)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return 0

    cost = route_cost_fn(AreaIndex(areas), distances, args.depot)
    total = 0.0
    print(f"\n--- Rutas (salida: {args.depot}) ---")
    for d in drivers:
        passengers = result.ride_assignments[d.name]
        c = cost(d.name, passengers)
        total += c
        role = "padre" if d.is_parent else "conductor"
        print(f"  {d.name} ({role}, {len(passengers)}/{d.seats}): {' -> '.join(passengers) or '-'}  coste≈{c:.1f}")
    print(f"  Coste total aproximado: {total:.1f}")
    print(f"  Sin asignar: {', '.join(result.unassigned_people) or '-'}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
