#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Run the brute-force ratio knapsack on a small collection for several
capacities and print each selection.

This version does NOT use argparse.
Just set the variables at the top of the file and run from the repo root:

    python -m scripts.run_problem
"""

from __future__ import annotations
import os
from typing import List, Optional

# ====== CONFIGURATION ======
# Optional JSON problem file ({"items": [...], "capacity": ...}); None uses ITEMS below
PROBLEM_PATH: Optional[str] = None

# (weight, benefit) pairs
ITEMS = [[1, 1], [2, 1], [3, 2], [3, 5], [4, 2], [4, 5]]

# None = unconstrained
CAPACITIES: List[Optional[float]] = [None, 12, 3, 2, 1]

OUT_DIR = "reports/example"
MAX_ITEMS = 20
SHARDS = 1
# ============================

from src.business_objects.errors import NoFeasibleSolution
from src.planning import Policy, SelectionState
from src.planning.solvers.brute_force import run_brute_force
from src.planning.tracker import Tracker
from src.utils.read_jsons import read_problem_json


def main() -> None:
    items = ITEMS
    capacities = CAPACITIES
    if PROBLEM_PATH is not None:
        items, cap = read_problem_json(PROBLEM_PATH)
        capacities = [cap]

    state = SelectionState.from_pairs(items)

    for cap in capacities:
        label = "unconstrained" if cap is None else f"{cap:g}"
        policy = Policy(capacity=cap, max_items=MAX_ITEMS, shards=SHARDS)
        tracker = Tracker(out_dir=os.path.join(OUT_DIR, f"capacity_{label}"))

        print(f"\n=== Capacity: {label} ===")
        try:
            sol = run_brute_force(state, policy, tracker=tracker)
        except NoFeasibleSolution as e:
            print(f"No feasible selection: {e}")
            continue

        print(f"Selected: {[list(p) for p in sol.pairs]}")
        print(f"Total ratio: {sol.total_ratio:.4f}  "
              f"Total weight: {sol.total_weight:g}  "
              f"Total benefit: {sol.total_benefit:g}")
        print(f"Artifacts: {os.path.abspath(tracker.out_dir)}")


if __name__ == "__main__":
    main()
