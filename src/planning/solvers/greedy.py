# -*- coding: utf-8 -*-
"""
Greedy selector (production path).

Pipeline:
  1) Rank stops by profit descending, ties by route index ascending
     (heuristics.select_next).
  2) Walk the ranking with balance = 0; commit a stop iff
     balance + profit >= 0, otherwise skip it for good.
  3) The number of committed stops is the answer.

The application order is free: committing every gain before any loss, and
the smallest losses first, is optimal for the free-order problem. It is not
exact when stops must be applied in route order; see solvers.ordered.

O(N log N) time (the sort), O(N) space.
"""

from __future__ import annotations
import logging
from typing import List, Optional, Sequence

from src.planning import RouteState, Policy, Solution, SelectionDecision
from src.heuristics.select_next.selector import order_values, select_next
from src.planning.tracker import Tracker

logger = logging.getLogger(__name__)

SOLVER_NAME = "greedy"


def select(values: Sequence[int]) -> int:
    """Maximum number of stops selectable with a never-negative balance."""
    balance = 0
    count = 0
    for profit, _ in order_values(values):
        if balance + profit >= 0:
            balance += profit
            count += 1
    return count


def run_greedy(
    state: RouteState,
    policy: Optional[Policy] = None,
    tracker: Optional[Tracker] = None,
) -> Solution:
    """
    Run the greedy selector and return the full Solution.

    The ranking follows policy.select_order (default: profit descending).

    If a tracker is given, the ranking is written to stops.csv and every
    decision to selection_log.csv.
    """
    order = policy.select_order if policy is not None else None
    ordered_ids = select_next(state.stops, order=order)
    if tracker is not None:
        tracker.write_selection_queue_csv(state, ordered_ids)

    stops_by_index = {s.index: s for s in state.stops}
    balance = 0
    applied: List[int] = []
    for idx in ordered_ids:
        profit = stops_by_index[idx].profit
        before = balance
        taken = balance + profit >= 0
        if taken:
            balance += profit
            applied.append(idx)
        if tracker is not None:
            tracker.append_selection_decision(SelectionDecision(
                stop_index=idx,
                profit=profit,
                taken=taken,
                balance_before=before,
                balance_after=balance,
                reason="taken" if taken else "negative_balance",
            ))

    logger.debug("greedy selected %d of %d stops (balance=%d)", len(applied), len(state), balance)
    return Solution(
        count=len(applied),
        selected=tuple(sorted(applied)),
        application_order=tuple(applied),
        final_balance=balance,
        solver=SOLVER_NAME,
    )
