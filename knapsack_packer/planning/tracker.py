# -*- coding: utf-8 -*-
"""
Packing tracker: CSV artifacts for a batch of packing runs.

Files produced (when Tracker is used):
  - items.csv    (inventory in branch-and-bound processing order; written by write_inventory_csv)
  - results.csv  (one row per packed problem; append-as-you-go)

Notes
-----
- Callers decide when to invoke these writers; the driver script calls them
  once per problem.
"""

from __future__ import annotations
import csv
import os
from dataclasses import dataclass, field
from typing import Optional, Set

from knapsack_packer.utils.report import render_ids
from .policy import Policy
from .solution import PackingResult
from .state import PackingProblem


@dataclass
class Tracker:
    """
    Thin, opt-in artifact writer. Callers control when/where to dump.
    """
    out_dir: str
    _started: Set[str] = field(default_factory=set, init=False, repr=False)

    def __post_init__(self) -> None:  # type: ignore[override]
        os.makedirs(self.out_dir, exist_ok=True)

    # -----------------------------
    # Inventory (ratio order) CSV
    # -----------------------------
    def write_inventory_csv(
        self,
        problem: PackingProblem,
        policy: Optional[Policy] = None,
        filename: str = "items.csv",
    ) -> str:
        """
        Persist the inventory sorted by descending cost/weight ratio.

        Columns:
          order_index, item_id, cost, weight, ratio
        """
        policy = policy or Policy()
        path = os.path.join(self.out_dir, filename)
        ordered = sorted(
            problem.inventory.items,
            key=lambda it: it.cost_weight_ratio(policy.ratio_scale),
            reverse=True,
        )

        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["order_index", "item_id", "cost", "weight", "ratio"])
            for idx, it in enumerate(ordered):
                w.writerow([idx, it.id, it.cost, it.weight, it.cost_weight_ratio(policy.ratio_scale)])

        return path

    # -----------------------------
    # Per-problem results CSV
    # -----------------------------
    def append_result(self, result: PackingResult, filename: str = "results.csv") -> str:
        """
        Append one result row, writing the header the first time a file is touched.

        Columns:
          problem, packer, capacity, item_ids, total_cost, total_weight
        """
        path = os.path.join(self.out_dir, filename)
        if path not in self._started:
            with open(path, "w", newline="", encoding="utf-8") as f:
                w = csv.writer(f)
                w.writerow(["problem", "packer", "capacity", "item_ids", "total_cost", "total_weight"])
            self._started.add(path)

        with open(path, "a", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow([
                result.problem,
                result.packer,
                result.capacity,
                render_ids(result.item_ids),
                result.total_cost,
                result.total_weight,
            ])

        return path
