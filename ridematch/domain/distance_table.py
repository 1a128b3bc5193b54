"""
Sparse area -> area cost lookup. May be incomplete and need not be symmetric.
"""

import math
from typing import Dict, Mapping, Optional


def clean_distance(value: object) -> Optional[float]:
    """Nonnegative finite number, or None. Bad values mean 'no edge', never 0."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        d = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(d) or d < 0:
        return None
    return d


class DistanceTable:
    def __init__(self, rows: Optional[Mapping[str, Mapping[str, object]]] = None):
        self._rows: Dict[str, Dict[str, float]] = {}
        for origin, dests in (rows or {}).items():
            clean: Dict[str, float] = {}
            for dest, raw in dests.items():
                d = clean_distance(raw)
                if d is not None:
                    clean[dest] = d
            self._rows[origin] = clean

    def distance(self, origin: Optional[str], dest: Optional[str]) -> Optional[float]:
        if origin is None or dest is None:
            return None
        return self._rows.get(origin, {}).get(dest)

    def __len__(self) -> int:
        return sum(len(d) for d in self._rows.values())
