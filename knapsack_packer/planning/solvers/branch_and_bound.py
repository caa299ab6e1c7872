# -*- coding: utf-8 -*-
"""
Whole-item branch-and-bound packer.

Items are sorted by cost/weight ratio (descending) so the fractional-relaxation
bound of a node is tight. Nodes wait in a priority queue keyed on that bound;
the most promising partial selection is expanded first.

Per popped node:
  1) Discard it if its bound cannot beat the best selection found so far,
     or if no item is left to branch on.
  2) Take-branch: add the next item if it fits; it may become the new best.
  3) Leave-branch: skip the next item.
A child is queued only while its bound is strictly above the best cost.

In the worst case the whole tree is expanded; at best a single path is.
"""

from __future__ import annotations
import heapq
import logging
from decimal import Decimal
from typing import List, Optional, Sequence

from knapsack_packer.business_objects.inventory import Inventory
from knapsack_packer.business_objects.items import Item
from knapsack_packer.planning.node import Node
from knapsack_packer.planning.policy import Policy
from .base import Packer

logger = logging.getLogger(__name__)


def _is_better(candidate: Node, best: Node) -> bool:
    # equal cost and lighter also wins; pruning stays strict on cost
    return candidate.cost > best.cost or (candidate.cost == best.cost and candidate.weight < best.weight)


def sort_by_ratio(items: Sequence[Item], policy: Optional[Policy] = None) -> List[Item]:
    """Items by descending cost/weight ratio; equal ratios keep input order."""
    scale = (policy or Policy()).ratio_scale
    return sorted(items, key=lambda it: it.cost_weight_ratio(scale), reverse=True)


def solve_branch_and_bound(
    items: Sequence[Item],
    capacity: Decimal,
    policy: Optional[Policy] = None,
) -> List[Item]:
    """
    Return an optimal-cost subset of `items` for `capacity`, in ratio order.

    Parameters
    ----------
    items : sequence of Item
        Candidate items (positive weights).
    capacity : Decimal
        Nonnegative weight limit.
    policy : Policy | None
        Supplies the ratio scale and the bound rounding mode.
    """
    policy = policy or Policy()
    ordered = sort_by_ratio(items, policy)
    logger.debug("Sorted items: %s", ordered)

    best = Node()
    queue: List[Node] = [Node().compute_bound(capacity, ordered, policy)]
    expanded = pruned = 0

    while queue:
        node = heapq.heappop(queue)
        if node.bound <= best.cost or node.next_index >= len(ordered):
            pruned += 1
            continue
        expanded += 1
        item = ordered[node.next_index]
        logger.debug("Expanding %s on item %s", node, item.id)

        took = node.descend().take(item)
        if took.weight <= capacity:
            took = took.compute_bound(capacity, ordered, policy)
            if _is_better(took, best):
                best = took
                logger.debug("New best: cost=%s weight=%s", best.cost, best.weight)
            if took.bound > best.cost:
                heapq.heappush(queue, took)

        left = node.descend().compute_bound(capacity, ordered, policy)
        if left.bound > best.cost:
            heapq.heappush(queue, left)

    logger.debug("Search done: expanded=%d pruned=%d", expanded, pruned)
    return list(best.taken)


class BranchAndBoundPacker(Packer):
    """Best-first branch and bound over the ratio-ordered inventory."""

    name = "branch_and_bound"

    def __init__(self, inventory: Inventory, policy: Optional[Policy] = None) -> None:
        super().__init__(inventory)
        self.policy = policy or Policy()

    def solve(self, items: Sequence[Item], capacity: Decimal) -> List[Item]:
        return solve_branch_and_bound(items, capacity, self.policy)
