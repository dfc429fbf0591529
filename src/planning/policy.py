# -*- coding: utf-8 -*-
"""
Policy (configuration knobs) for the trader route pipeline.

Solver choice:
  - solver: one of
      * "greedy"  (default) descending-profit greedy; free application order
      * "exact"   brute force over all subsets in route order (N <= exact_limit)
      * "ordered" min-heap eviction; route-order variant, any N
      * "auto"    "exact" when N <= exact_limit, else "greedy"
  - exact_limit: largest N the brute-force oracle will enumerate

Greedy ranking:
  - select_order: tuple[str, ...] | None
    The left→right priority used by the greedy solver. Allowed keys:
      * "profit"  (descending; higher first)
      * "-profit" (ascending; biggest loss first)
      * "index"   (ascending; auto-appended as final tiebreaker)
    If None/empty, the selector uses ["profit"] and then appends "index".
    Only the default ranking guarantees the maximum count.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

SOLVERS = ("greedy", "exact", "ordered", "auto")
DEFAULT_EXACT_LIMIT = 20


@dataclass(frozen=True)
class Policy:
    """
    Planning knobs (pure data holder).

    Attributes
    ----------
    solver : str
        "greedy" | "exact" | "ordered" | "auto".
    exact_limit : int
        Upper bound on N for the exhaustive oracle (2^N subsets).
    select_order : tuple[str, ...] | None
        Ranking keys for the greedy solver. Examples:
          ("profit",)
          ("-profit",)
    """
    solver: str = "greedy"
    exact_limit: int = DEFAULT_EXACT_LIMIT
    select_order: Optional[Tuple[str, ...]] = None

    def __post_init__(self) -> None:  # type: ignore[override]
        if self.solver not in SOLVERS:
            raise ValueError(f"Unknown solver '{self.solver}'. Allowed: {sorted(SOLVERS)}")
        if isinstance(self.exact_limit, bool) or not isinstance(self.exact_limit, int):
            raise ValueError(f"Policy.exact_limit must be an int, got {self.exact_limit!r}.")
        if self.exact_limit < 0:
            raise ValueError(f"Policy.exact_limit must be >= 0, got {self.exact_limit}.")
