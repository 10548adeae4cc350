# -*- coding: utf-8 -*-
"""
Lazy subset enumeration over a ranked sequence.

Index space
-----------
For a ranked sequence of length N, every integer mask in [0, 2^N) names
exactly one subset: ranked element i is a member iff bit i of mask is set.
  - mask = 0          -> empty subset
  - mask = 2^N - 1    -> the full sequence

Members are always emitted in ranked order, so each subset is an
order-preserving subsequence. Nothing is materialized beyond the current
subset; a sub-range [start, stop) can be walked independently (sharding).
"""

from __future__ import annotations
from typing import Iterator, Optional, Sequence, Tuple

from src.planning.state import AnnotatedItem


def count_subsets(n: int) -> int:
    """Size of the power set of an n-element sequence."""
    return 1 << n


def subset_for_mask(ranked: Sequence[AnnotatedItem], mask: int) -> Tuple[AnnotatedItem, ...]:
    """Decode one mask into its members (ranked order)."""
    if mask < 0 or mask >= count_subsets(len(ranked)):
        raise ValueError(f"mask {mask} out of range for {len(ranked)} items")
    return tuple(it for i, it in enumerate(ranked) if (mask >> i) & 1)


def iter_subsets(
    ranked: Sequence[AnnotatedItem],
    start: int = 0,
    stop: Optional[int] = None,
) -> Iterator[Tuple[int, Tuple[AnnotatedItem, ...]]]:
    """
    Yield (mask, members) for every mask in [start, stop), ascending.

    `stop` defaults to 2^N. The generator is finite and not restartable.
    """
    total = count_subsets(len(ranked))
    if stop is None or stop > total:
        stop = total
    for mask in range(max(0, start), stop):
        yield mask, subset_for_mask(ranked, mask)


def shard_bounds(n: int, shards: int) -> list[Tuple[int, int]]:
    """
    Split [0, 2^n) into at most `shards` contiguous, non-empty ranges.
    Ranges are returned in ascending order and cover the space exactly once.
    """
    total = count_subsets(n)
    shards = max(1, min(shards, total))
    base, extra = divmod(total, shards)
    bounds: list[Tuple[int, int]] = []
    lo = 0
    for s in range(shards):
        hi = lo + base + (1 if s < extra else 0)
        bounds.append((lo, hi))
        lo = hi
    return bounds
