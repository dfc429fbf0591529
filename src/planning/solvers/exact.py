# -*- coding: utf-8 -*-
"""
Exhaustive reference oracle. Verification only; never on the production path.

select_exact            -> subsets applied in route order (2^N masks)
select_exact_any_order  -> subsets applied in the best order of their own

Both refuse N > limit with OracleLimitError.
"""

from __future__ import annotations
import logging
from typing import Optional, Sequence, Tuple

from src.business_objects.errors import OracleLimitError
from src.planning import RouteState, Policy, Solution
from src.planning.tracker import Tracker

logger = logging.getLogger(__name__)

SOLVER_NAME = "exact"
EXACT_LIMIT = 20


def _check_limit(n: int, limit: int) -> None:
    if n > limit:
        raise OracleLimitError(
            f"Exact oracle enumerates 2^N subsets; N={n} exceeds limit {limit}."
        )


def _best_mask_in_order(values: Sequence[int]) -> Tuple[int, int]:
    """Return (best_count, best_mask); first best mask in enumeration order wins."""
    n = len(values)
    best_count = 0
    best_mask = 0
    for mask in range(1 << n):
        cities = bin(mask).count("1")
        if cities <= best_count:
            continue
        balance = 0
        for i in range(n):
            if mask & (1 << i):
                balance += values[i]
                if balance < 0:
                    break
        else:
            best_count = cities
            best_mask = mask
    return best_count, best_mask


def select_exact(values: Sequence[int], limit: int = EXACT_LIMIT) -> int:
    """Maximum count over all subsets applied in original index order."""
    _check_limit(len(values), limit)
    best_count, _ = _best_mask_in_order(values)
    return best_count


def select_exact_any_order(values: Sequence[int], limit: int = EXACT_LIMIT) -> int:
    """
    Maximum count over all subsets, each applied in its best order.

    Applying a subset in descending profit order is never worse than any
    other order, so only that order is checked per subset.
    """
    n = len(values)
    _check_limit(n, limit)
    best = 0
    for mask in range(1 << n):
        chosen = sorted((values[i] for i in range(n) if mask & (1 << i)), reverse=True)
        if len(chosen) <= best:
            continue
        balance = 0
        for v in chosen:
            balance += v
            if balance < 0:
                break
        else:
            best = len(chosen)
    return best


def run_exact(
    state: RouteState,
    policy: Optional[Policy] = None,
    tracker: Optional[Tracker] = None,
) -> Solution:
    """Run the route-order oracle and rebuild the winning subset."""
    limit = policy.exact_limit if policy is not None else EXACT_LIMIT
    values = state.values
    _check_limit(len(values), limit)
    best_count, best_mask = _best_mask_in_order(values)
    selected = tuple(i for i in range(len(values)) if best_mask & (1 << i))

    if tracker is not None:
        tracker.write_selection_queue_csv(state, [s.index for s in state.stops])

    logger.debug("exact oracle selected %d of %d stops", best_count, len(values))
    return Solution(
        count=best_count,
        selected=selected,
        application_order=selected,
        final_balance=sum(values[i] for i in selected),
        solver=SOLVER_NAME,
    )
