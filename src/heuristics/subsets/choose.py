# -*- coding: utf-8 -*-
"""
Selector: best-of reduction over scored, feasible subsets.

Ordering rule (deterministic):
  1) higher total_ratio wins
  2) on equal total_ratio, the smaller mask (earlier in enumeration) wins

The rule is a strict total order on distinct masks, so the reduction is
associative and shards can be combined in any grouping.
"""

from __future__ import annotations
from typing import Iterable, List, Optional, Tuple

from src.business_objects.errors import NoFeasibleSolution
from src.planning.state import ScoredSubset


def is_better(candidate: ScoredSubset, incumbent: Optional[ScoredSubset]) -> bool:
    if incumbent is None:
        return True
    if candidate.total_ratio != incumbent.total_ratio:
        return candidate.total_ratio > incumbent.total_ratio
    return candidate.mask < incumbent.mask


def reduce_best(candidates: Iterable[Optional[ScoredSubset]]) -> Optional[ScoredSubset]:
    """Fold candidates with `is_better`; None entries (empty shards) are skipped."""
    best: Optional[ScoredSubset] = None
    for c in candidates:
        if c is not None and is_better(c, best):
            best = c
    return best


def select_best(scored: Iterable[ScoredSubset]) -> ScoredSubset:
    """
    Single linear pass keeping the current best.

    Raises NoFeasibleSolution if the stream is empty.
    """
    best = reduce_best(scored)
    if best is None:
        raise NoFeasibleSolution("No subset satisfies the capacity bound.")
    return best


def unwrap(best: ScoredSubset) -> List[Tuple[float, float]]:
    """Strip ratios: (weight, benefit) pairs in ranked order."""
    return [m.as_pair() for m in best.members]
