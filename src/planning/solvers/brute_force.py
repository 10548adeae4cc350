# -*- coding: utf-8 -*-
"""
Exhaustive ratio-knapsack solver (Phase 1 + streaming Phase 2).

Pipeline:
  1) Guard: len(items) <= policy.max_items, else ComplexityExceeded
  2) Phase 1: annotate + rank (run_selection_phase)
  3) Phase 2: for every mask in [0, 2^N): decode subset -> score -> capacity
     filter -> keep best. Fused into one pass; only the current subset and
     the incumbent are held in memory.
     With policy.shards > 1 the mask range is split into contiguous shards
     scored on a thread pool; shard winners are folded with `is_better`,
     which yields the same winner as the sequential pass.
  4) Build Selection and (optionally) write artifacts via Tracker

Return:
  - Selection for the winning subset; NoFeasibleSolution if none fits.
"""

from __future__ import annotations
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, replace
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from loguru import logger

from src.business_objects.errors import ComplexityExceeded, NoFeasibleSolution
from src.planning import AnnotatedItem, Policy, ScoredSubset, Selection, SelectionState
from src.planning.selection_orchestrator import run_selection_phase
from src.planning.tracker import Tracker
from src.heuristics.subsets.enumerator import count_subsets, iter_subsets, shard_bounds
from src.heuristics.subsets.scoring import fits, score_subset
from src.heuristics.subsets.choose import is_better, reduce_best, unwrap


@dataclass(frozen=True)
class ShardResult:
    """Local outcome of scoring one mask range."""
    best: Optional[ScoredSubset]
    examined: int
    feasible: int


def _check_complexity(state: SelectionState, policy: Policy) -> None:
    if policy.max_items is not None and state.n_items > policy.max_items:
        raise ComplexityExceeded(
            f"{state.n_items} items exceed max_items={policy.max_items} "
            f"({count_subsets(state.n_items)} subsets)."
        )


def scan_range(
    ranked: Sequence[AnnotatedItem],
    policy: Policy,
    start: int = 0,
    stop: Optional[int] = None,
) -> ShardResult:
    """Score, filter and reduce masks in [start, stop) in a single pass."""
    best: Optional[ScoredSubset] = None
    examined = 0
    feasible = 0
    for mask, members in iter_subsets(ranked, start, stop):
        examined += 1
        scored = score_subset(mask, members)
        if not fits(scored, policy.capacity, policy.eps):
            continue
        feasible += 1
        if is_better(scored, best):
            best = scored
    return ShardResult(best=best, examined=examined, feasible=feasible)


def _worker_count(n_shards: int) -> int:
    """Threads used for `n_shards` ranges: never more than shards or CPUs."""
    return max(1, min(n_shards, os.cpu_count() or 1))


def _scan_sharded(ranked: Sequence[AnnotatedItem], policy: Policy) -> ShardResult:
    bounds = shard_bounds(len(ranked), policy.shards)
    if len(bounds) == 1:
        return scan_range(ranked, policy)

    with ThreadPoolExecutor(max_workers=_worker_count(len(bounds))) as pool:
        parts: List[ShardResult] = list(
            pool.map(lambda b: scan_range(ranked, policy, b[0], b[1]), bounds)
        )

    return ShardResult(
        best=reduce_best(p.best for p in parts),
        examined=sum(p.examined for p in parts),
        feasible=sum(p.feasible for p in parts),
    )


def run_brute_force(
    state: SelectionState,
    policy: Optional[Policy] = None,
    tracker: Optional[Tracker] = None,
) -> Selection:
    """
    Enumerate every subset and return the best feasible one.

    Raises
    ------
    ComplexityExceeded
        Before any work, if the item count exceeds policy.max_items.
    InvalidItem
        During annotation, before enumeration.
    NoFeasibleSolution
        If no subset fits (capacity < 0).
    """
    if policy is None:
        policy = Policy()

    _check_complexity(state, policy)

    ranked = run_selection_phase(state, tracker=tracker)
    logger.debug(
        "Enumerating {} subsets of {} items (capacity={}, shards={})",
        count_subsets(len(ranked)),
        len(ranked),
        "unconstrained" if policy.unconstrained else policy.capacity,
        policy.shards,
    )

    result = _scan_sharded(ranked, policy)
    if result.best is None:
        logger.warning(
            "No feasible subset among {} (capacity={})", result.examined, policy.capacity
        )
        raise NoFeasibleSolution(
            f"No subset of {len(ranked)} items fits capacity {policy.capacity!r}."
        )

    best = result.best
    sol = Selection(
        pairs=unwrap(best),
        total_ratio=best.total_ratio,
        total_weight=best.total_weight,
        total_benefit=best.total_benefit,
        mask=best.mask,
        subsets_examined=result.examined,
        feasible_subsets=result.feasible,
    )
    logger.info(
        "Selected {} of {} items: total_ratio={:.4f} total_weight={}",
        len(sol.pairs),
        len(ranked),
        float(sol.total_ratio),
        sol.total_weight,
    )

    if tracker is not None:
        tracker.write_selection_csv(best)
        tracker.write_problem_summary_csv(state=state, solution=sol, capacity=policy.capacity)

    return sol


def solve_knapsack(
    items: Iterable[Any],
    capacity: Optional[float] = None,
    policy: Optional[Policy] = None,
) -> List[Tuple[float, float]]:
    """
    Functional entry point: (weight, benefit) pairs in, selected pairs out.

    `capacity` overrides policy.capacity when given. Output is in ranked
    order (descending ratio, then descending weight), not input order.
    """
    if policy is None:
        policy = Policy(capacity=capacity)
    elif capacity is not None:
        policy = replace(policy, capacity=capacity)
    return run_brute_force(SelectionState.from_pairs(items), policy).pairs


# Alias mirroring the classic name
knapsack = solve_knapsack
