# -*- coding: utf-8 -*-
"""
Select Next (stop sequencing).

You provide an `order` list defining priority left→right.

Direction rules (fixed):
  - profit   -> descending (higher first)
  - -profit  -> ascending (biggest loss first)
  - index    -> ascending (only used as final deterministic tiebreaker)

We always append 'index' at the end if missing.

The greedy solver uses the default ["profit", "index"]: most profitable stops
first, so the balance has the most headroom before any loss is considered.
Equal profits keep route order, which fixes which stops are chosen but never
changes how many.
"""

from __future__ import annotations
from typing import List, Sequence, Tuple

from src.business_objects.stops import Stop

# Allowed keys for user order
_ALLOWED_KEYS = {"profit", "-profit", "index"}


def _normalize_order(order: Sequence[str] | None) -> list[str]:
    """
    Normalize the user-provided order:
      - Default to ["profit"] if None/empty
      - Keep first occurrence only (deduplicate while preserving order)
      - Validate keys against the allowed set
      - Ensure 'index' is present as the final key
    """
    if not order:
        norm = ["profit"]
    else:
        seen: set[str] = set()
        norm = []
        for raw in order:
            key = str(raw).strip()
            if key not in _ALLOWED_KEYS:
                raise ValueError(
                    f"Unknown order key '{key}'. "
                    f"Allowed: {sorted(_ALLOWED_KEYS)}"
                )
            if key not in seen:
                seen.add(key)
                norm.append(key)

    if "index" not in norm:
        norm.append("index")
    return norm


def _sort_key_for_stop(stop: Stop, order_keys: list[str]) -> Tuple[int, ...]:
    """
    Build a Python sort key tuple following our direction rules.
    Python sorts ascending; for "descending" we negate.
    """
    key: list[int] = []
    for k in order_keys:
        if k == "profit":
            key.append(-stop.profit)
        elif k == "-profit":
            key.append(stop.profit)
        elif k == "index":
            key.append(stop.index)
        else:
            raise AssertionError(f"Unhandled order key: {k}")
    return tuple(key)


def select_next(
    stops: Sequence[Stop],
    order: Sequence[str] | None = None,
) -> List[int]:
    """
    Return stop indices in the order they should be considered.

    Notes
    -----
    - No mutation occurs here.
    - Sorting is deterministic; 'index' is always the final tiebreaker (ascending).
    """
    order_keys = _normalize_order(order)
    ranked = sorted(stops, key=lambda s: _sort_key_for_stop(s, order_keys))
    return [s.index for s in ranked]


def order_values(values: Sequence[int]) -> List[Tuple[int, int]]:
    """
    Fast path of the default order for raw values.

    Returns (profit, index) pairs sorted by profit descending, index ascending.
    """
    return sorted(((v, i) for i, v in enumerate(values)), key=lambda p: (-p[0], p[1]))
