# -*- coding: utf-8 -*-
"""
Planning layer public API for the trader route pipeline.

This module exposes the core planning-time data contracts:
  - State model (RouteState)
  - Policy configuration
  - Solution and SelectionDecision models

Other planning modules (orchestrator, solvers, tracker) are intentionally
not exported here to avoid cluttering the namespace. They should be imported
explicitly when needed.
"""

from .state import RouteState
from .policy import Policy
from .solution import SelectionDecision, Solution

__all__ = [
    "RouteState",
    "Policy",
    "SelectionDecision",
    "Solution",
]
