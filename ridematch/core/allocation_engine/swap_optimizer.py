"""
Swap local search over an initial seat assignment. First improvement with full
restart: after every accepted swap the scan starts again from the first driver
pair. Stops when one full scan finds no swap that strictly lowers the combined
approximate cost of the two drivers involved.
"""

import logging
import time
from typing import List, Optional, Tuple

from ridematch.domain.constraints import UNCAPPED, OptimizerConfig
from ridematch.domain.evaluation import RouteCostFn
from ridematch.domain.models import AllocationContext, Driver, SwapReport

logger = logging.getLogger(__name__)


def _swapped(
    passengers: List[str], out_kid: str, in_kid: str
) -> List[str]:
    # incoming kid goes to the end, not into the freed position
    return [k for k in passengers if k != out_kid] + [in_kid]


def find_improving_swap(
    ctx: AllocationContext,
    cost: RouteCostFn,
) -> Optional[Tuple[Driver, Driver, List[str], List[str], float]]:
    """
    First (i < j, pA, pB) in scan order whose exchange respects both capacities
    and strictly lowers cost(A) + cost(B). Returns (A, B, newA, newB, gain).
    """
    drivers = ctx.drivers
    for i in range(len(drivers)):
        a = drivers[i]
        for j in range(i + 1, len(drivers)):
            b = drivers[j]
            old_a = ctx.assignment[a.name]
            old_b = ctx.assignment[b.name]
            if not old_a or not old_b:
                continue
            old_cost = cost(a.name, old_a) + cost(b.name, old_b)
            for p_a in old_a:
                if p_a == a.name:
                    continue
                for p_b in old_b:
                    if p_b == b.name:
                        continue
                    new_a = _swapped(old_a, p_a, p_b)
                    new_b = _swapped(old_b, p_b, p_a)
                    if len(new_a) > a.seats or len(new_b) > b.seats:
                        continue
                    new_cost = cost(a.name, new_a) + cost(b.name, new_b)
                    if new_cost < old_cost:
                        return a, b, new_a, new_b, old_cost - new_cost
    return None


def _budget_exhausted(config: OptimizerConfig, passes: int, started: float) -> Optional[str]:
    if config.max_passes is not None and passes >= config.max_passes:
        return "max_passes"
    if config.time_budget_s is not None and time.monotonic() - started >= config.time_budget_s:
        return "time_budget"
    return None


def optimize_swaps(
    ctx: AllocationContext,
    cost: RouteCostFn,
    config: OptimizerConfig = UNCAPPED,
) -> SwapReport:
    """
    Mutates ctx.assignment in place. Each accepted swap strictly lowers a sum of
    nonnegative costs, so the uncapped search terminates; the cap in `config`
    only bounds pathological inputs.
    """
    started = time.monotonic()
    swaps = 0
    passes = 0
    while True:
        reason = _budget_exhausted(config, passes, started)
        if reason is not None:
            logger.warning(
                "Swap search stopped early (%s) after %d passes, %d swaps", reason, passes, swaps
            )
            return SwapReport(swaps=swaps, passes=passes, converged=False, stop_reason=reason)
        passes += 1
        found = find_improving_swap(ctx, cost)
        if found is None:
            logger.info("Swap search converged: %d swaps in %d passes", swaps, passes)
            return SwapReport(swaps=swaps, passes=passes, converged=True)
        a, b, new_a, new_b, gain = found
        logger.debug("Swap %s <-> %s: %s | %s (gain %.3f)", a.name, b.name, new_a, new_b, gain)
        ctx.assignment[a.name] = new_a
        ctx.assignment[b.name] = new_b
        swaps += 1
