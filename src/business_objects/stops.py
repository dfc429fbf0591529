# -*- coding: utf-8 -*-
"""
Stop model for the trader route problem.
"""

from __future__ import annotations
from dataclasses import dataclass
from .errors import StateValidationError

# Balances are accumulated in signed 64-bit range.
INT64_MAX: int = 2**63 - 1
INT64_MIN: int = -2**63


@dataclass(frozen=True)
class Stop:
    """
    A city on the route where the trader may (or may not) do business.

    Attributes
    ----------
    index : int
        Original 0-based position in the route.
    profit : int
        Signed profit (>0) or loss (<0) applied to the balance if selected.
    """
    index: int
    profit: int

    def __post_init__(self) -> None:  # type: ignore[override]
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            raise StateValidationError(f"Stop.index must be an int, got {self.index!r}.")
        if self.index < 0:
            raise StateValidationError(f"Stop.index must be >= 0, got {self.index}.")
        if isinstance(self.profit, bool) or not isinstance(self.profit, int):
            raise StateValidationError(f"Stop[{self.index}] profit must be an int, got {self.profit!r}.")
        if not INT64_MIN <= self.profit <= INT64_MAX:
            raise StateValidationError(f"Stop[{self.index}] profit exceeds the 64-bit range.")

    @property
    def is_loss(self) -> bool:
        return self.profit < 0
