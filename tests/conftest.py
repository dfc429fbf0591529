"""Shared test fixtures for the trader route selection."""

from __future__ import annotations

import random

import pytest

from src.planning import RouteState


# (values, expected count) pairs from the problem statement.
SCENARIOS = [
    ([4, -8, 3], 2),
    ([6, -5, -3, -2], 3),
    ([6, -6, 3, -5, 3, -5], 5),
    ([10], 1),
    ([-10], 0),
    ([], 0),
    ([100, -50, -30, -20], 4),
    ([-1, -2, -3], 0),
]


def random_routes(seed: int, count: int, max_len: int, magnitude: int = 10):
    """Deterministic batch of random routes for property checks."""
    rng = random.Random(seed)
    routes = []
    for _ in range(count):
        n = rng.randint(0, max_len)
        routes.append([rng.randint(-magnitude, magnitude) for _ in range(n)])
    return routes


@pytest.fixture
def sample_state() -> RouteState:
    return RouteState.from_values([6, -5, -3, -2])


@pytest.fixture
def diverging_state() -> RouteState:
    """A loss before any gain: free order takes both, route order only one."""
    return RouteState.from_values([-1, 5])
