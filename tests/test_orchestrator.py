"""Tests for solver dispatch."""

from __future__ import annotations

import pytest

from conftest import SCENARIOS
from src.business_objects import INT64_MIN, OracleLimitError
from src.planning import Policy, RouteState
from src.planning.selection_orchestrator import resolve_solver, run_selection, solve


class TestResolveSolver:
    def test_explicit(self, sample_state):
        assert resolve_solver(sample_state, Policy(solver="ordered")) == "ordered"

    def test_auto_small_uses_exact(self, sample_state):
        assert resolve_solver(sample_state, Policy(solver="auto")) == "exact"

    def test_auto_large_uses_greedy(self, sample_state):
        assert resolve_solver(sample_state, Policy(solver="auto", exact_limit=3)) == "greedy"


class TestRunSelection:
    def test_default_is_greedy(self, sample_state):
        sol = run_selection(sample_state)
        assert sol.solver == "greedy"
        assert sol.count == 3

    def test_exact_over_limit_raises(self):
        state = RouteState.from_values([1] * 25)
        with pytest.raises(OracleLimitError):
            run_selection(state, Policy(solver="exact"))

    def test_auto_over_limit_falls_back(self):
        state = RouteState.from_values([1] * 25)
        sol = run_selection(state, Policy(solver="auto"))
        assert sol.solver == "greedy"
        assert sol.count == 25

    def test_variants_diverge(self, diverging_state):
        assert run_selection(diverging_state, Policy(solver="greedy")).count == 2
        assert run_selection(diverging_state, Policy(solver="ordered")).count == 1
        assert run_selection(diverging_state, Policy(solver="exact")).count == 1


class TestSolve:
    @pytest.mark.parametrize("values,expected", SCENARIOS)
    def test_scenarios(self, values, expected):
        assert solve(values) == expected

    def test_none(self):
        assert solve(None) == 0

    def test_int64_min_accepted(self):
        assert solve([5, INT64_MIN]) == 1
        assert solve([5, INT64_MIN], Policy(solver="ordered")) == 1
