# -*- coding: utf-8 -*-
"""
Route-order selector.

Stops must be applied in the order they are visited; skipped stops are simply
not applied. Walk the route, commit every stop, and whenever the balance goes
negative evict the biggest loss committed so far. Evicting the most negative
value restores the most balance for the cost of a single stop, so the number
of committed stops stays maximal at every prefix.

O(N log N) time (heap), O(N) space. Agrees with solvers.exact.select_exact.
"""

from __future__ import annotations
import heapq
import logging
from typing import List, Optional, Sequence, Tuple

from src.planning import RouteState, Policy, Solution, SelectionDecision
from src.planning.tracker import Tracker

logger = logging.getLogger(__name__)

SOLVER_NAME = "ordered"


def select_in_order(values: Sequence[int]) -> int:
    """Maximum number of stops selectable when applied in route order."""
    balance = 0
    committed: List[int] = []
    for v in values:
        balance += v
        heapq.heappush(committed, v)
        if balance < 0:
            balance -= heapq.heappop(committed)
    return len(committed)


def run_ordered(
    state: RouteState,
    policy: Optional[Policy] = None,
    tracker: Optional[Tracker] = None,
) -> Solution:
    """Run the route-order selector and return the full Solution."""
    if tracker is not None:
        tracker.write_selection_queue_csv(state, [s.index for s in state.stops])

    balance = 0
    # (profit, index) so equal losses evict the earlier stop first
    committed: List[Tuple[int, int]] = []
    for stop in state.stops:
        before = balance
        balance += stop.profit
        heapq.heappush(committed, (stop.profit, stop.index))
        evicted: Optional[Tuple[int, int]] = None
        if balance < 0:
            evicted = heapq.heappop(committed)
            balance -= evicted[0]

        if tracker is not None:
            taken = evicted is None or evicted[1] != stop.index
            tracker.append_selection_decision(SelectionDecision(
                stop_index=stop.index,
                profit=stop.profit,
                taken=taken,
                balance_before=before,
                balance_after=balance,
                reason="taken" if evicted is None else (
                    f"evicted:{evicted[1]}" if taken else "negative_balance"
                ),
            ))

    selected = tuple(sorted(idx for _, idx in committed))
    logger.debug("ordered selected %d of %d stops (balance=%d)", len(selected), len(state), balance)
    return Solution(
        count=len(selected),
        selected=selected,
        application_order=selected,
        final_balance=balance,
        solver=SOLVER_NAME,
    )
