"""
Kid -> area reverse index. Built once per run, read-only afterwards.
"""

from typing import Dict, List, Mapping, Optional, Sequence, Tuple


class AreaIndex:
    """
    Inverts an area membership mapping so `area_of` is a dict lookup.

    A kid listed under several areas belongs to the first one declared, in the
    mapping's iteration order (persisted file first, then override-only areas).
    Ignored duplicates are kept in `duplicates` as (kid, owner, ignored_area).
    """

    def __init__(self, areas: Mapping[str, Sequence[str]]):
        self._owner: Dict[str, str] = {}
        self.duplicates: List[Tuple[str, str, str]] = []
        for area, kids in areas.items():
            for kid in kids:
                owner = self._owner.get(kid)
                if owner is None:
                    self._owner[kid] = area
                elif owner != area:
                    self.duplicates.append((kid, owner, area))

    def area_of(self, kid: str) -> Optional[str]:
        return self._owner.get(kid)
