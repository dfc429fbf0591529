#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Run a selection on one route file and print the number of stops taken.

This version does NOT use argparse.
Just set the variables at the top of the file and run:

    python scripts/run_problem.py

Artifacts under OUT_DIR (when OUT_DIR is set):
  - stops.csv              (order in which stops were considered)
  - selection_log.csv      (step-by-step decisions with balances)
  - problem_summary.csv    (global KPIs)
"""

from __future__ import annotations
import logging
import os
from typing import List

# ====== CONFIGURATION ======
INPUT_PATH = "problems/route_1.txt"   # count-prefixed text; use a .json path for JSON
OUT_DIR = "reports/route_1"            # set to None to skip CSV artifacts

# Solver: "greedy" | "exact" | "ordered" | "auto"
SOLVER = "greedy"
EXACT_LIMIT = 20

LOG_LEVEL = logging.INFO
# ============================

from src.planning import RouteState, Policy, Solution
from src.planning.selection_orchestrator import run_selection
from src.planning.tracker import Tracker
from src.utils.read_inputs import read_profits_file, read_profits_json


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Load problem
    if INPUT_PATH.endswith(".json"):
        profits: List[int] = read_profits_json(INPUT_PATH)
    else:
        profits = read_profits_file(INPUT_PATH)

    state = RouteState.from_values(profits)
    policy = Policy(solver=SOLVER, exact_limit=EXACT_LIMIT)
    tracker = Tracker(out_dir=OUT_DIR) if OUT_DIR else None

    solution: Solution = run_selection(state, policy, tracker=tracker)

    print(solution.count)
    if tracker is not None:
        print(f"\nArtifacts written to: {os.path.abspath(OUT_DIR)}")


if __name__ == "__main__":
    main()
