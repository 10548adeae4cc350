# -*- coding: utf-8 -*-
"""
Planning tracker: CSV artifacts for Phase 1 (ranking) and Phase 2 (selection).

Files produced (when Tracker is used):
  - ranked_items.csv     (Phase-1 ranking; written by write_ranked_items_csv)
  - selection.csv        (winning subset in ranked order)
  - problem_summary.csv  (global KPIs)

Notes
-----
- Callers decide when to invoke these writers; the brute-force solver calls
  them once Phase 1 and Phase 2 are done.
"""

from __future__ import annotations
import csv
import math
import os
from dataclasses import dataclass
from typing import Optional, Sequence

from src.planning import AnnotatedItem, ScoredSubset, Selection, SelectionState
from src.quality_metrics.core import compute_selection_metrics


@dataclass
class Tracker:
    """
    Thin, opt-in artifact writer. Callers control when/where to dump.
    """
    out_dir: str

    def __post_init__(self) -> None:  # type: ignore[override]
        os.makedirs(self.out_dir, exist_ok=True)

    def _write_members(self, path: str, members: Sequence[AnnotatedItem]) -> str:
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["order_index", "weight", "benefit", "ratio"])
            for idx, it in enumerate(members):
                w.writerow([idx, it.weight, it.benefit, _fmt(it.ratio)])
        return path

    # -----------------------------
    # Phase 1: ranking CSV
    # -----------------------------
    def write_ranked_items_csv(
        self,
        ranked: Sequence[AnnotatedItem],
        filename: str = "ranked_items.csv",
    ) -> str:
        """
        Persist the Phase-1 ordering to CSV.

        Columns:
          order_index, weight, benefit, ratio
        """
        return self._write_members(os.path.join(self.out_dir, filename), ranked)

    # -----------------------------
    # Phase 2: winner + summary
    # -----------------------------
    def write_selection_csv(
        self,
        best: ScoredSubset,
        filename: str = "selection.csv",
    ) -> str:
        """Same columns as ranked_items.csv, restricted to the winning subset."""
        return self._write_members(os.path.join(self.out_dir, filename), best.members)

    def write_problem_summary_csv(
            self,
            state: SelectionState,
            solution: Selection,
            capacity: Optional[float] = None,
            filename: str = "problem_summary.csv",
    ) -> str:
        """
        Global KPIs, one header row and one data row.

        Columns follow compute_selection_metrics() key order.
        """
        path = os.path.join(self.out_dir, filename)
        metrics = compute_selection_metrics(state, solution, capacity)

        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(list(metrics.keys()))
            w.writerow([_fmt(v) if isinstance(v, float) else v for v in metrics.values()])
        return path


def _fmt(x: float) -> str:
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    return f"{float(x):.3f}"
