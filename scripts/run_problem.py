#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pack every problem of a text file (one problem per line) and export CSVs.

This version does NOT use argparse.
Just set the variables at the top of the file and run:

    python scripts/run_problem.py

Outputs under OUT_DIR:
  - results.csv                (one row per problem)
  - <problem index>_items.csv  (inventory in ratio order)
"""

from __future__ import annotations
import logging
import os
from typing import List

# ====== CONFIGURATION ======
INPUT_PATH = "problems/sample.txt"
OUT_DIR = "reports/sample"

# Packer: "recursive" or "branch_and_bound"
PACKER = "branch_and_bound"

# Refuse items sharing a cost but differing in weight
REJECT_AMBIGUOUS_COSTS = True

LOG_LEVEL = "INFO"
# ============================

from knapsack_packer.planning import PackingProblem, PackingResult, Policy
from knapsack_packer.planning.solvers import build_packer
from knapsack_packer.planning.tracker import Tracker
from knapsack_packer.utils.read_text import read_problems_text
from knapsack_packer.utils.report import format_result, render_ids


def main() -> None:
    logging.basicConfig(level=getattr(logging, LOG_LEVEL), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    policy = Policy(packer=PACKER, reject_ambiguous_costs=REJECT_AMBIGUOUS_COSTS)

    # Load problems
    problems: List[PackingProblem] = read_problems_text(INPUT_PATH, policy=policy)

    tracker = Tracker(out_dir=OUT_DIR)

    print(f"\n=== Packing {len(problems)} problem(s) with {policy.packer} ===")
    for idx, problem in enumerate(problems, start=1):
        tracker.write_inventory_csv(problem, policy=policy, filename=f"{idx:02d}_items.csv")

        package = problem.to_package()
        build_packer(problem.inventory, policy).pack(package)

        result = PackingResult.from_package(problem=problem.name, packer=policy.packer, package=package)
        tracker.append_result(result)
        logging.getLogger(__name__).info(format_result(result))

        # Canonical output: ids or '-'
        print(render_ids(result.item_ids))

    print(f"\nResults CSV written to: {os.path.join(OUT_DIR, 'results.csv')}")


if __name__ == "__main__":
    main()
