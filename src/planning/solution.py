# -*- coding: utf-8 -*-
"""
Solution and decision models for trader route results.

These data classes define the shape of outputs produced by the solvers
and consumed by the metrics/reporting layers.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class SelectionDecision:
    """
    Outcome of considering a single stop.

    Attributes
    ----------
    stop_index : int
        The stop acted upon (original index).
    profit : int
        Its profit/loss.
    taken : bool
        Whether the stop was committed.
    balance_before : int
        Balance before this step.
    balance_after : int
        Balance after this step (unchanged if skipped).
    reason : str | None
        Short label, e.g. "taken", "negative_balance", "evicted".
    """
    stop_index: int
    profit: int
    taken: bool
    balance_before: int
    balance_after: int
    reason: Optional[str] = None


@dataclass(frozen=True)
class Solution:
    """
    Aggregated results of one selection run.

    Attributes
    ----------
    count : int
        Number of stops selected.
    selected : tuple[int, ...]
        Original indices of the selected stops, ascending.
    application_order : tuple[int, ...]
        The same indices, in the order their profits hit the balance.
    final_balance : int
        Balance after applying every selected stop.
    solver : str
        Name of the solver that produced this result.
    """
    count: int
    selected: Tuple[int, ...]
    application_order: Tuple[int, ...]
    final_balance: int
    solver: str
