# -*- coding: utf-8 -*-
"""
I/O helpers for loading trader route problems.

Text format (one token per line, or any whitespace):
    N
    P[0]
    ...
    P[N-1]

JSON formats:
    [<int>, <int>, ...]
    {"profits": [<int>, ...]}

Both map to a plain list of ints; build the state with
planning.RouteState.from_values(...).
"""

from __future__ import annotations
import json
from typing import Any, List

from src.business_objects.errors import SchemaError


def _to_int(token: Any, where: str) -> int:
    if isinstance(token, bool):
        raise SchemaError(f"{where}: expected an integer, got {token!r}.")
    if isinstance(token, int):
        return token
    if isinstance(token, str):
        try:
            return int(token.strip())
        except ValueError as e:
            raise SchemaError(f"{where}: expected an integer, got {token!r}.") from e
    raise SchemaError(f"{where}: expected an integer, got {token!r}.")


def parse_profits_text(text: str, source: str = "<text>") -> List[int]:
    """
    Parse the count-prefixed format. A count <= 0 (or empty input) yields [].
    Tokens beyond the declared count are rejected.
    """
    tokens = text.split()
    if not tokens:
        return []
    n = _to_int(tokens[0], f"{source}: count")
    if n <= 0:
        return []

    body = tokens[1:]
    if len(body) < n:
        raise SchemaError(f"{source}: declared {n} profits but found {len(body)}.")
    if len(body) > n:
        raise SchemaError(f"{source}: declared {n} profits but found {len(body)} (trailing data).")
    return [_to_int(tok, f"{source}[{i}]") for i, tok in enumerate(body)]


def read_profits_file(path: str) -> List[int]:
    """Load the count-prefixed text format from `path`."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise SchemaError(f"{path}: failed to read: {e}") from e
    return parse_profits_text(text, source=path)


def read_profits_json(path: str) -> List[int]:
    """Load profits from a JSON array, or an object with a "profits" array."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise SchemaError(f"{path}: failed to read/parse JSON: {e}") from e

    if isinstance(data, dict):
        if "profits" not in data:
            raise SchemaError(f"{path}: missing required key 'profits' in object.")
        data = data["profits"]
    if not isinstance(data, list):
        raise SchemaError(f"{path}: expected a JSON array.")
    return [_to_int(v, f"{path}[{i}]") for i, v in enumerate(data)]
