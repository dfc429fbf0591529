# -*- coding: utf-8 -*-
"""
quality_metrics/core.py

Pure helpers to verify and summarize selection runs.
- No side effects
- Works off RouteState and Solution

Public API:
  - prefix_balances(values, order) -> List[int]
  - is_feasible(values, order) -> bool
  - verify_solution(state, solution) -> None (raises StateValidationError)
  - compute_global_metrics(state, solution) -> Dict[str, float]
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Sequence

from src.business_objects.errors import StateValidationError
from src.planning.state import RouteState
from src.planning.solution import Solution


def prefix_balances(values: Sequence[int], order: Iterable[int]) -> List[int]:
    """Running balance after each index of `order` is applied, starting at 0."""
    balances: List[int] = []
    balance = 0
    for idx in order:
        balance += values[idx]
        balances.append(balance)
    return balances


def is_feasible(values: Sequence[int], order: Iterable[int]) -> bool:
    return all(b >= 0 for b in prefix_balances(values, order))


def verify_solution(state: RouteState, solution: Solution) -> None:
    """
    Check a Solution against its input:
      - count matches the number of selected stops
      - selected and application_order hold the same distinct, in-range indices
      - every prefix balance along application_order is >= 0
      - final_balance is the sum of the selected profits
    """
    values = state.values
    n = len(values)
    order = list(solution.application_order)

    if solution.count != len(solution.selected):
        raise StateValidationError(
            f"count={solution.count} but {len(solution.selected)} stops are selected."
        )
    if len(set(order)) != len(order):
        raise StateValidationError("application_order repeats a stop.")
    if sorted(order) != sorted(solution.selected):
        raise StateValidationError("application_order and selected disagree.")
    for idx in order:
        if not 0 <= idx < n:
            raise StateValidationError(f"Stop index {idx} out of range 0..{n - 1}.")

    balances = prefix_balances(values, order)
    for step, b in enumerate(balances):
        if b < 0:
            raise StateValidationError(
                f"Balance drops to {b} at step {step} (stop {order[step]})."
            )
    expected = balances[-1] if balances else 0
    if solution.final_balance != expected:
        raise StateValidationError(
            f"final_balance={solution.final_balance} but selected profits sum to {expected}."
        )


def compute_global_metrics(state: RouteState, solution: Solution) -> Dict[str, float]:
    """
    Returns:
      {
        "Total Stops": ...,
        "Selected Stops": ...,
        "Skipped Stops": ...,
        "Coverage": ...,              # percent (0..100)
        "Final Balance": ...,
        "Min Balance": ...,           # lowest balance after any step (0 if nothing selected)
        "Positive Profit Sum": ...,   # over all stops
        "Negative Profit Sum": ...,   # over all stops
      }
    """
    values = state.values
    total = len(values)
    balances = prefix_balances(values, solution.application_order)

    return {
        "Total Stops": total,
        "Selected Stops": solution.count,
        "Skipped Stops": total - solution.count,
        "Coverage": 0.0 if total == 0 else (solution.count / total) * 100.0,
        "Final Balance": solution.final_balance,
        "Min Balance": min(balances) if balances else 0,
        "Positive Profit Sum": sum(v for v in values if v > 0),
        "Negative Profit Sum": sum(s.profit for s in state.stops if s.is_loss),
    }
