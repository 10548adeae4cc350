# -*- coding: utf-8 -*-
"""
Run-time state containers for the ratio knapsack pipeline.

This module defines:
  - SelectionState: immutable input snapshot (raw items)
  - AnnotatedItem:  item + merit ratio (Annotator output)
  - ScoredSubset:   subset + aggregate scores (AggregateScorer output)

Notes
-----
- Business (timeless) entities live in `business_objects/`:
  * business_objects.items.Item
- Planning entities (below) exist only for the duration of one solve and
  are never mutated after construction.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, List, Tuple

from src.business_objects.items import Item


# ----------------------------
# Per-item annotation
# ----------------------------

@dataclass(frozen=True)
class AnnotatedItem:
    """
    Item with its merit ratio attached.

    Attributes
    ----------
    ratio : float
        benefit / weight
    weight : float
        Strictly positive weight (copied from the Item).
    benefit : float
        Benefit (copied from the Item).
    """
    ratio: float
    weight: float
    benefit: float

    @classmethod
    def from_item(cls, item: Item) -> "AnnotatedItem":
        return cls(ratio=item.benefit / item.weight, weight=item.weight, benefit=item.benefit)

    def as_pair(self) -> Tuple[float, float]:
        """Strip the ratio and return (weight, benefit)."""
        return (self.weight, self.benefit)


# ----------------------------
# Per-subset aggregate
# ----------------------------

@dataclass(frozen=True)
class ScoredSubset:
    """
    A subset of the ranked sequence with its aggregate scores.

    Attributes
    ----------
    total_ratio : float
        Sum of member ratios (NOT of member benefits).
    total_weight : float
        Sum of member weights.
    members : tuple[AnnotatedItem, ...]
        Members in ranked order.
    mask : int
        Enumeration index; bit i set <=> ranked element i is a member.
    """
    total_ratio: float
    total_weight: float
    members: Tuple[AnnotatedItem, ...]
    mask: int

    @property
    def total_benefit(self) -> float:
        return sum(m.benefit for m in self.members)


# ----------------------------
# Immutable input snapshot
# ----------------------------

@dataclass(frozen=True)
class SelectionState:
    """
    Immutable problem input for a solve.

    Attributes
    ----------
    items : list[Item | (weight, benefit)]
        Caller's items in caller order. Raw pairs are accepted and validated
        by the annotator, not here.
    """
    items: List[Any]

    @classmethod
    def from_pairs(cls, pairs: Any) -> "SelectionState":
        return cls(items=list(pairs))

    @property
    def n_items(self) -> int:
        return len(self.items)
