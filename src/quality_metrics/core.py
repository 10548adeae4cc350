# -*- coding: utf-8 -*-
"""
quality_metrics/core.py

Pure helpers to compute run-level KPIs for a ratio knapsack solve.
- No side effects
- No external dependencies
- Works off SelectionState, Selection and the capacity used

Public API:
  - compute_selection_metrics(state, solution, capacity) -> Dict[str, float]
"""

from __future__ import annotations
import math
from typing import Dict, Optional

from src.business_objects.items import Item
from src.planning import SelectionState, Selection


def _utilization(used: float, capacity: Optional[float]) -> float:
    # Undefined for unconstrained or non-positive capacity; report 0.
    if capacity is None or not math.isfinite(capacity) or capacity <= 0.0:
        return 0.0
    return (used / capacity) * 100.0


def compute_selection_metrics(
    state: SelectionState,
    solution: Selection,
    capacity: Optional[float] = None,
) -> Dict[str, float]:
    """
    Returns:
      {
        "Total Items": ...,
        "Selected Items": ...,
        "Capacity": ...,               # inf when unconstrained
        "Total Possible Benefit": ...,
        "Total Ratio": ...,            # the optimized objective
        "Total Benefit": ...,          # reported only; NOT optimized
        "Total Weight": ...,
        "Utilization": ...,            # percent (0..100), 0 when unconstrained
        "Subsets Examined": ...,
        "Feasible Subsets": ...,
      }
    """
    items = [Item.coerce(it) for it in state.items]
    total_weight = float(solution.total_weight)

    return {
        "Total Items": len(items),
        "Selected Items": len(solution.pairs),
        "Capacity": math.inf if capacity is None else float(capacity),
        "Total Possible Benefit": float(sum(it.benefit for it in items)),
        "Total Ratio": float(solution.total_ratio),
        "Total Benefit": float(solution.total_benefit),
        "Total Weight": total_weight,
        "Utilization": _utilization(total_weight, capacity),
        "Subsets Examined": solution.subsets_examined,
        "Feasible Subsets": solution.feasible_subsets,
    }
