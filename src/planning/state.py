# -*- coding: utf-8 -*-
"""
Input state container for the trader route pipeline.

This module defines:
  - RouteState: immutable input snapshot (the ordered stops of one route)

Notes
-----
- Business (timeless) entities live in `business_objects/`:
  * business_objects.stops.Stop
- Solvers never mutate a RouteState; every run builds its own balance.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Tuple

from src.business_objects.errors import StateValidationError
from src.business_objects.stops import Stop


@dataclass(frozen=True)
class RouteState:
    """
    Immutable problem input for a selection run.

    Attributes
    ----------
    stops : tuple[Stop, ...]
        All stops of the route, in visiting order. stops[i].index == i.
    """
    stops: Tuple[Stop, ...]

    def __post_init__(self) -> None:  # type: ignore[override]
        # Accept any iterable but store a tuple so the snapshot stays immutable.
        object.__setattr__(self, "stops", tuple(self.stops))
        for pos, stop in enumerate(self.stops):
            if stop.index != pos:
                raise StateValidationError(
                    f"Stop at position {pos} carries index {stop.index}; "
                    "indices must be 0..N-1 in route order."
                )

    @classmethod
    def from_values(cls, values: Iterable[int]) -> "RouteState":
        """Build a state from raw profit values (index = position)."""
        return cls(stops=tuple(Stop(index=i, profit=v) for i, v in enumerate(values)))

    @property
    def values(self) -> Tuple[int, ...]:
        return tuple(s.profit for s in self.stops)

    def __len__(self) -> int:
        return len(self.stops)
