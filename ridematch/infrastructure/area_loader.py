"""
Area loader. people_areas.csv text -> AreaMembership. Merge persisted file + client overrides.
"""

import csv
import io
from typing import Iterable, Mapping

from ridematch.domain.models import AreaMembership


def _append_unique(target: list, kids: Iterable[str]) -> None:
    for kid in kids:
        kid = kid.strip() if isinstance(kid, str) else ""
        if kid and kid not in target:
            target.append(kid)


def parse_people_areas(text: str) -> AreaMembership:
    """
    One line per area: `Area,kid1,kid2,...`. No header. Cells are trimmed,
    empty cells dropped, repeated area lines merged, duplicate kids ignored.
    """
    areas: AreaMembership = {}
    for row in csv.reader(io.StringIO(text)):
        cells = [c.strip() for c in row]
        if not cells or not cells[0]:
            continue
        _append_unique(areas.setdefault(cells[0], []), cells[1:])
    return areas


def merge_area_overrides(
    base: Mapping[str, Iterable[str]],
    overrides: Mapping[str, Iterable[str]] | None,
) -> AreaMembership:
    """
    Final mapping: base areas in their order, override kids appended to the
    same area without duplicating names, override-only areas appended last.
    Neither input is modified.
    """
    merged: AreaMembership = {area: list(kids) for area, kids in base.items()}
    for area, kids in (overrides or {}).items():
        area = area.strip()
        if not area:
            continue
        _append_unique(merged.setdefault(area, []), kids)
    return merged


def all_kids(areas: Mapping[str, Iterable[str]]) -> list[str]:
    """Sorted, de-duplicated kid names across every area (roster view)."""
    seen: set[str] = set()
    for kids in areas.values():
        seen.update(kids)
    return sorted(seen)
