# -*- coding: utf-8 -*-
"""
Item model for the ratio knapsack.
"""

from __future__ import annotations
import math
import numbers
from dataclasses import dataclass
from typing import Any, Tuple

from .errors import InvalidItem


@dataclass(frozen=True)
class Item:
    """
    A weighted item carrying a benefit value.

    Attributes
    ----------
    weight : float
        Strictly positive, finite weight (capacity consumption).
    benefit : float
        Finite benefit; may be zero or negative.
    """
    weight: float
    benefit: float

    def __post_init__(self) -> None:  # type: ignore[override]
        if isinstance(self.weight, bool) or not isinstance(self.weight, numbers.Real):
            raise InvalidItem(f"Item weight must be a number, got {self.weight!r}.")
        if isinstance(self.benefit, bool) or not isinstance(self.benefit, numbers.Real):
            raise InvalidItem(f"Item benefit must be a number, got {self.benefit!r}.")
        if not math.isfinite(self.weight) or self.weight <= 0:
            raise InvalidItem(f"Item weight must be finite and > 0, got {self.weight!r}.")
        if not math.isfinite(self.benefit):
            raise InvalidItem(f"Item benefit must be finite, got {self.benefit!r}.")

    @classmethod
    def coerce(cls, obj: Any) -> "Item":
        """Accept an Item as-is, or build one from a (weight, benefit) pair."""
        if isinstance(obj, cls):
            return obj
        try:
            weight, benefit = obj
        except (TypeError, ValueError) as e:
            raise InvalidItem(f"Expected a (weight, benefit) pair, got {obj!r}.") from e
        return cls(weight=weight, benefit=benefit)

    def as_pair(self) -> Tuple[float, float]:
        return (self.weight, self.benefit)
