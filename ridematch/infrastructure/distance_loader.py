"""
Distance loader. distance_matrix.csv text -> DistanceTable.
"""

import csv
import io
import logging

from ridematch.domain.distance_table import DistanceTable, clean_distance
from ridematch.infrastructure.data_source import DataSourceError

logger = logging.getLogger(__name__)


def parse_distance_matrix(text: str) -> DistanceTable:
    """
    Header `<corner>,dest1,dest2,...`, then `origin,v1,v2,...` per line.
    Cells that are not nonnegative numbers are dropped (no edge). A repeated
    origin row replaces the earlier one.
    """
    rows = [[c.strip() for c in r] for r in csv.reader(io.StringIO(text.strip()))]
    rows = [r for r in rows if any(r)]
    if not rows or len(rows[0]) < 2:
        raise DataSourceError("distance matrix has no header row")
    header = rows[0][1:]

    table: dict[str, dict[str, float]] = {}
    skipped = 0
    for row in rows[1:]:
        origin = row[0]
        if not origin:
            continue
        dests: dict[str, float] = {}
        for dest, raw in zip(header, row[1:]):
            if not dest:
                continue
            d = clean_distance(raw)
            if d is None:
                skipped += 1
                continue
            dests[dest] = d
        table[origin] = dests
    if skipped:
        logger.warning("Distance matrix: %d cells without a usable value treated as no edge", skipped)
    return DistanceTable(table)
