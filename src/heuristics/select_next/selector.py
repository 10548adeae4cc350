# -*- coding: utf-8 -*-
"""
Ranker: canonical traversal order for subset enumeration.

Direction rules (fixed):
  - ratio  -> descending (higher first)
  - weight -> descending (heavier first), tie-break only

Python's sort is stable, so items with equal (ratio, weight) keep their
input order. Every subset generated downstream is a subsequence of this
order, which also fixes the selection tie-break.
"""

from __future__ import annotations
from typing import Iterable, Tuple

from src.planning.state import AnnotatedItem


def _sort_key(item: AnnotatedItem) -> Tuple[float, float]:
    # Python sorts ascending; negate for descending.
    return (-item.ratio, -item.weight)


def rank_items(annotated: Iterable[AnnotatedItem]) -> Tuple[AnnotatedItem, ...]:
    """
    Return a new tuple ordered by descending ratio, then descending weight.

    Examples (weight, benefit):
      (3, 5) ratio 1.67 ranks before (4, 5) ratio 1.25
      (4, 2) ranks before (2, 1): same ratio 0.5, heavier first
    """
    return tuple(sorted(annotated, key=_sort_key))
