# -*- coding: utf-8 -*-
"""
AggregateScorer and CapacityFilter.

The objective is the SUM OF PER-ITEM RATIOS, not the total benefit.
A subset of several efficient items therefore beats a single item with a
larger absolute benefit. Keep it that way; see the divergence test in
tests/test_solver.py.
"""

from __future__ import annotations
from typing import Iterable, Iterator, Optional, Sequence, Tuple

from src.planning.state import AnnotatedItem, ScoredSubset


def score_subset(mask: int, members: Sequence[AnnotatedItem]) -> ScoredSubset:
    """Sum ratios and weights of `members`; the empty subset scores (0, 0)."""
    # int start keeps Fraction/Decimal-exact inputs exact
    total_ratio = 0
    total_weight = 0
    for m in members:
        total_ratio += m.ratio
        total_weight += m.weight
    return ScoredSubset(
        total_ratio=total_ratio,
        total_weight=total_weight,
        members=tuple(members),
        mask=mask,
    )


def score_all(
    subsets: Iterable[Tuple[int, Sequence[AnnotatedItem]]],
) -> Iterator[ScoredSubset]:
    for mask, members in subsets:
        yield score_subset(mask, members)


def fits(scored: ScoredSubset, capacity: Optional[float], eps: float = 0.0) -> bool:
    if capacity is None:
        return True
    if capacity < 0:
        return False
    return scored.total_weight <= capacity + eps


def filter_by_capacity(
    scored: Iterable[ScoredSubset],
    capacity: Optional[float] = None,
    eps: float = 0.0,
) -> Iterator[ScoredSubset]:
    """
    Keep subsets with total_weight <= capacity (+ eps).

    capacity=None keeps everything. A negative capacity keeps nothing,
    not even the empty subset; eps never lifts it back to feasible.
    """
    for s in scored:
        if fits(s, capacity, eps):
            yield s
