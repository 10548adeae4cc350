# -*- coding: utf-8 -*-
"""
Policy (configuration knobs) for the ratio knapsack solver.

Capacity:
  - capacity: float | None
    Maximum total weight of the selected subset. `None` is the explicit
    "unconstrained" variant (same effect as +inf). A negative capacity is
    accepted here and surfaces later as NoFeasibleSolution.
  - eps: feasibility tolerance added to the capacity in weight checks.

Run control:
  - max_items: refuse inputs larger than this (cost is 2^N); None disables.
  - shards: split the bitmask range into this many contiguous shards and
    score them on a thread pool of at most min(shards, cpu_count) workers.
    1 means a single sequential pass.
"""

from __future__ import annotations
import math
import numbers
from dataclasses import dataclass
from typing import Optional

from src.business_objects.errors import StateValidationError

UNCONSTRAINED: Optional[float] = None
DEFAULT_MAX_ITEMS: int = 20


@dataclass(frozen=True)
class Policy:
    """
    Solver knobs (pure data holder).

    Attributes
    ----------
    capacity : float | None
        Weight bound; None means unconstrained.
    eps : float
        Tolerance for `total_weight <= capacity + eps`.
    max_items : int | None
        Complexity guard on the number of items.
    shards : int
        Number of bitmask ranges scored independently.
    """
    capacity: Optional[float] = UNCONSTRAINED
    eps: float = 0.0

    # Run control
    max_items: Optional[int] = DEFAULT_MAX_ITEMS
    shards: int = 1

    def __post_init__(self) -> None:  # type: ignore[override]
        if self.capacity is not None and (
            isinstance(self.capacity, bool) or not isinstance(self.capacity, numbers.Real)
        ):
            raise StateValidationError(f"Policy.capacity must be a number or None, got {self.capacity!r}.")
        if self.capacity is not None and math.isnan(self.capacity):
            raise StateValidationError("Policy.capacity must not be NaN.")
        if not math.isfinite(self.eps) or self.eps < 0:
            raise StateValidationError(f"Policy.eps must be finite and >= 0, got {self.eps!r}.")
        if self.max_items is not None and self.max_items < 0:
            raise StateValidationError(f"Policy.max_items must be >= 0, got {self.max_items!r}.")
        if self.shards < 1:
            raise StateValidationError(f"Policy.shards must be >= 1, got {self.shards!r}.")

    @property
    def unconstrained(self) -> bool:
        return self.capacity is None or self.capacity == math.inf
