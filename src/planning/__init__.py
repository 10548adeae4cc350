# -*- coding: utf-8 -*-
"""
Planning layer public API for the ratio knapsack pipeline.

This module exposes the core planning-time data contracts:
  - State models (SelectionState, AnnotatedItem, ScoredSubset)
  - Policy configuration
  - Selection result model

Orchestrators, solvers and the tracker are intentionally not exported here
to avoid import cycles. They should be imported explicitly when needed.
"""

from .state import SelectionState, AnnotatedItem, ScoredSubset
from .policy import Policy, UNCONSTRAINED
from .solution import Selection

__all__ = [
    "SelectionState",
    "AnnotatedItem",
    "ScoredSubset",
    "Policy",
    "UNCONSTRAINED",
    "Selection",
]
