# -*- coding: utf-8 -*-
"""
Selection Orchestrator

Thin wrapper that connects Policy → Solvers, and (optionally) writes CSV
reports via planning.Tracker.

- Reads the solver name from Policy.solver
- "auto" picks the exhaustive oracle for short routes, greedy otherwise
- Optionally writes problem_summary.csv if a Tracker is provided
"""

from __future__ import annotations
import logging
from typing import Callable, Dict, Optional, Sequence

from src.planning.state import RouteState
from src.planning.policy import Policy
from src.planning.solution import Solution
from src.planning.tracker import Tracker
from src.planning.solvers.greedy import run_greedy
from src.planning.solvers.exact import run_exact
from src.planning.solvers.ordered import run_ordered

logger = logging.getLogger(__name__)

SolverFn = Callable[[RouteState, Optional[Policy], Optional[Tracker]], Solution]

_SOLVERS: Dict[str, SolverFn] = {
    "greedy": run_greedy,
    "exact": run_exact,
    "ordered": run_ordered,
}


def resolve_solver(state: RouteState, policy: Policy) -> str:
    """Name of the concrete solver `policy` selects for `state`."""
    if policy.solver == "auto":
        return "exact" if len(state) <= policy.exact_limit else "greedy"
    return policy.solver


def run_selection(
    state: RouteState,
    policy: Optional[Policy] = None,
    tracker: Optional[Tracker] = None,
) -> Solution:
    """
    Execute one selection run.

    Parameters
    ----------
    state : RouteState
        Immutable problem input.
    policy : Policy | None
        Solver choice; defaults to Policy() (greedy).
    tracker : Tracker | None
        If provided, solvers log their decisions and the summary is written.

    Returns
    -------
    Solution
    """
    if policy is None:
        policy = Policy()
    name = resolve_solver(state, policy)
    logger.debug("running solver %s on %d stops (policy=%s)", name, len(state), policy.solver)

    solution = _SOLVERS[name](state, policy, tracker)

    if tracker is not None:
        tracker.write_problem_summary_csv(state, solution)
    return solution


def solve(values: Optional[Sequence[int]], policy: Optional[Policy] = None) -> int:
    """Count-only entry point; None or empty input gives 0."""
    if not values:
        return 0
    return run_selection(RouteState.from_values(values), policy).count
