# -*- coding: utf-8 -*-
"""
Planning tracker: CSV artifacts for a selection run.

Files produced (when Tracker is used):
  - stops.csv              (ranking the solver walks; write_selection_queue_csv)
  - selection_log.csv      (append-as-you-go, one row per considered stop)
  - problem_summary.csv    (global KPIs)

Notes
-----
- Callers decide when to invoke these writers; solvers call the first two,
  the orchestrator writes the summary at the end.
"""

from __future__ import annotations
import csv
import os
from dataclasses import dataclass, field
from typing import List

from src.planning import RouteState, SelectionDecision, Solution
from src.quality_metrics.core import compute_global_metrics


@dataclass
class Tracker:
    """
    Thin, opt-in artifact writer. Callers control when/where to dump.
    """
    out_dir: str
    _selection_log_path: str = field(init=False, repr=False)
    _selection_started: bool = field(default=False, init=False, repr=False)
    _selection_step_idx: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:  # type: ignore[override]
        os.makedirs(self.out_dir, exist_ok=True)
        self._selection_log_path = os.path.join(self.out_dir, "selection_log.csv")
        # A reused out_dir must not keep a log from an earlier run.
        if os.path.exists(self._selection_log_path):
            os.remove(self._selection_log_path)

    @property
    def selection_log_path(self) -> str:
        return self._selection_log_path

    # -----------------------------
    # Ranking CSV
    # -----------------------------
    def write_selection_queue_csv(
        self,
        state: RouteState,
        ordered_indices: List[int],
        filename: str = "stops.csv",
    ) -> str:
        """
        Persist the order in which stops are considered.

        Columns:
          order_index, stop_index, profit
        """
        path = os.path.join(self.out_dir, filename)
        stops_by_index = {s.index: s for s in state.stops}

        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["order_index", "stop_index", "profit"])
            for pos, idx in enumerate(ordered_indices):
                w.writerow([pos, idx, stops_by_index[idx].profit])
        return path

    # -----------------------------
    # Decision log CSV
    # -----------------------------
    def _ensure_selection_header(self) -> None:
        if self._selection_started:
            return
        with open(self._selection_log_path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow([
                "step_index",
                "stop_index",
                "profit",
                "taken",
                "balance_before",
                "balance_after",
                "reason",
            ])
        self._selection_started = True

    def append_selection_decision(self, decision: SelectionDecision) -> str:
        """Append a single decision row (header is written on first call)."""
        self._ensure_selection_header()
        with open(self._selection_log_path, "a", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow([
                self._selection_step_idx,
                decision.stop_index,
                decision.profit,
                1 if decision.taken else 0,
                decision.balance_before,
                decision.balance_after,
                decision.reason or "",
            ])
        self._selection_step_idx += 1
        return self._selection_log_path

    # -----------------------------
    # Final artifacts after solve
    # -----------------------------
    def write_problem_summary_csv(
        self,
        state: RouteState,
        solution: Solution,
        filename: str = "problem_summary.csv",
    ) -> str:
        """
        Global KPIs, one metric per row.

        Columns:
          metric, value
        """
        path = os.path.join(self.out_dir, filename)
        metrics = compute_global_metrics(state, solution)

        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["metric", "value"])
            w.writerow(["Solver", solution.solver])
            for name, value in metrics.items():
                w.writerow([name, value])
        return path
