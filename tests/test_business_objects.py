"""Tests for the stop model and route state."""

from __future__ import annotations

import pytest

from src.business_objects import INT64_MAX, INT64_MIN, Stop, StateValidationError
from src.planning import Policy, RouteState


class TestStop:
    def test_valid_stop(self):
        stop = Stop(index=2, profit=-7)
        assert stop.is_loss
        assert not Stop(index=0, profit=0).is_loss

    def test_negative_index_rejected(self):
        with pytest.raises(StateValidationError):
            Stop(index=-1, profit=1)

    def test_non_int_profit_rejected(self):
        with pytest.raises(StateValidationError):
            Stop(index=0, profit=1.5)
        with pytest.raises(StateValidationError):
            Stop(index=0, profit=True)

    def test_profit_range(self):
        Stop(index=0, profit=INT64_MAX)
        with pytest.raises(StateValidationError):
            Stop(index=0, profit=INT64_MAX + 1)
        Stop(index=0, profit=INT64_MIN)
        with pytest.raises(StateValidationError):
            Stop(index=0, profit=INT64_MIN - 1)

    def test_frozen(self):
        stop = Stop(index=0, profit=1)
        with pytest.raises(AttributeError):
            stop.profit = 2


class TestRouteState:
    def test_from_values(self):
        state = RouteState.from_values([3, -1, 4])
        assert state.values == (3, -1, 4)
        assert [s.index for s in state.stops] == [0, 1, 2]
        assert len(state) == 3

    def test_empty(self):
        state = RouteState.from_values([])
        assert state.values == ()
        assert len(state) == 0

    def test_stops_stored_as_tuple(self):
        state = RouteState(stops=[Stop(0, 1), Stop(1, 2)])
        assert isinstance(state.stops, tuple)

    def test_index_mismatch_rejected(self):
        with pytest.raises(StateValidationError):
            RouteState(stops=(Stop(0, 1), Stop(2, 2)))


class TestPolicy:
    def test_defaults(self):
        policy = Policy()
        assert policy.solver == "greedy"
        assert policy.exact_limit == 20

    def test_unknown_solver(self):
        with pytest.raises(ValueError, match="Unknown solver"):
            Policy(solver="dp")

    def test_negative_limit(self):
        with pytest.raises(ValueError, match=">= 0"):
            Policy(exact_limit=-1)

    @pytest.mark.parametrize("limit", [True, 2.5, "20"])
    def test_non_int_limit(self, limit):
        with pytest.raises(ValueError, match="must be an int"):
            Policy(exact_limit=limit)

    def test_select_order_default(self):
        assert Policy().select_order is None
        assert Policy(select_order=("-profit",)).select_order == ("-profit",)
