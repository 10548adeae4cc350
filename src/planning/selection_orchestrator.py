# -*- coding: utf-8 -*-
"""
Phase 1 Orchestrator: Annotation + Ranking

Thin wrapper that connects the input snapshot to the pure heuristics, and
(optionally) writes a CSV report of the ranking via planning.Tracker.

- Annotates every item (fails fast with InvalidItem on a malformed collection)
- Ranks by descending ratio, tie-break descending weight
- Optionally writes ranked_items.csv if a Tracker is provided
"""

from __future__ import annotations
from typing import Optional, Tuple

from src.planning.state import AnnotatedItem, SelectionState
from src.heuristics.select_next.features import annotate_items
from src.heuristics.select_next.selector import rank_items
from src.planning.tracker import Tracker


def run_selection_phase(
    state: SelectionState,
    tracker: Optional[Tracker] = None,
) -> Tuple[AnnotatedItem, ...]:
    """
    Execute Phase 1 to compute (and optionally log) the ranked sequence.

    Parameters
    ----------
    state : SelectionState
        Immutable problem input.
    tracker : Tracker | None
        If provided, writes ranked_items.csv into tracker.out_dir.

    Returns
    -------
    tuple[AnnotatedItem, ...]
        Canonical enumeration order.
    """
    ranked = rank_items(annotate_items(state.items))

    if tracker is not None:
        tracker.write_ranked_items_csv(ranked)

    return ranked
