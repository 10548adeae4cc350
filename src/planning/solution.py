# -*- coding: utf-8 -*-
"""
Solution model for ratio knapsack results.

This data class defines the shape of the output produced by the brute-force
solver and consumed by the metrics/reporting layers.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class Selection:
    """
    The winning subset of a full run.

    Attributes
    ----------
    pairs : list[(weight, benefit)]
        Selected items in ranked order (descending ratio, then descending weight).
    total_ratio : float
        Objective value: sum of member benefit/weight ratios.
    total_weight : float
        Sum of member weights.
    total_benefit : float
        Sum of member benefits (reported, not optimized).
    mask : int
        Enumeration index of the winner over the ranked sequence.
    subsets_examined : int
        Number of subsets scored (2^N).
    feasible_subsets : int
        Number of subsets that passed the capacity filter.
    """
    pairs: List[Tuple[float, float]]
    total_ratio: float
    total_weight: float
    total_benefit: float
    mask: int
    subsets_examined: int
    feasible_subsets: int
