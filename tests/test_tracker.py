"""Tests for CSV artifacts written during a run."""

from __future__ import annotations

import csv
from pathlib import Path

from src.planning import Policy, RouteState
from src.planning.selection_orchestrator import run_selection
from src.planning.tracker import Tracker


def _read(path: Path):
    with open(path, newline="", encoding="utf-8") as f:
        return list(csv.DictReader(f))


class TestTracker:
    def test_greedy_artifacts(self, tmp_path: Path, sample_state):
        tracker = Tracker(out_dir=str(tmp_path / "run"))
        run_selection(sample_state, Policy(solver="greedy"), tracker=tracker)

        ranking = _read(tmp_path / "run" / "stops.csv")
        assert [int(r["stop_index"]) for r in ranking] == [0, 3, 2, 1]

        log = _read(Path(tracker.selection_log_path))
        assert [r["taken"] for r in log] == ["1", "1", "1", "0"]
        assert log[-1]["reason"] == "negative_balance"
        assert log[-1]["balance_before"] == log[-1]["balance_after"] == "1"

        summary = {r["metric"]: r["value"] for r in _read(tmp_path / "run" / "problem_summary.csv")}
        assert summary["Solver"] == "greedy"
        assert summary["Selected Stops"] == "3"

    def test_ordered_log_records_evictions(self, tmp_path: Path):
        tracker = Tracker(out_dir=str(tmp_path))
        run_selection(RouteState.from_values([2, -2, -1]), Policy(solver="ordered"), tracker=tracker)

        log = _read(tmp_path / "selection_log.csv")
        assert [r["step_index"] for r in log] == ["0", "1", "2"]
        assert log[2]["reason"] == "evicted:1"
        assert log[2]["taken"] == "1"
        assert log[2]["balance_after"] == "1"

    def test_ordered_log_rejects_current_stop(self, tmp_path: Path):
        tracker = Tracker(out_dir=str(tmp_path))
        run_selection(RouteState.from_values([4, -8, 3]), Policy(solver="ordered"), tracker=tracker)

        log = _read(tmp_path / "selection_log.csv")
        assert log[1]["taken"] == "0"
        assert log[1]["reason"] == "negative_balance"

    def test_exact_writes_ranking_and_summary(self, tmp_path: Path):
        tracker = Tracker(out_dir=str(tmp_path))
        run_selection(RouteState.from_values([4, -8, 3]), Policy(solver="exact"), tracker=tracker)
        assert (tmp_path / "stops.csv").exists()
        assert (tmp_path / "problem_summary.csv").exists()
        assert not (tmp_path / "selection_log.csv").exists()

    def test_reused_out_dir_drops_stale_log(self, tmp_path: Path, sample_state):
        run_selection(sample_state, Policy(solver="greedy"), tracker=Tracker(out_dir=str(tmp_path)))
        assert (tmp_path / "selection_log.csv").exists()

        run_selection(sample_state, Policy(solver="exact"), tracker=Tracker(out_dir=str(tmp_path)))
        assert not (tmp_path / "selection_log.csv").exists()
        assert (tmp_path / "stops.csv").exists()

    def test_greedy_select_order_in_ranking(self, tmp_path: Path, sample_state):
        tracker = Tracker(out_dir=str(tmp_path))
        run_selection(sample_state, Policy(select_order=("-profit",)), tracker=tracker)
        ranking = _read(tmp_path / "stops.csv")
        assert [int(r["stop_index"]) for r in ranking] == [1, 2, 3, 0]
