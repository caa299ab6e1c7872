# -*- coding: utf-8 -*-
"""
Decision-tree node for the branch-and-bound packer.

A node is a partial selection: every item before `next_index` (in ratio order)
has been either taken or left. Nodes are never mutated; each derivation returns
a new node, so queue entries never share mutable ancestor state.

Bound
-----
Fractional relaxation from `next_index` onwards:
  - add whole items while they fit,
  - add (capacity - weight_so_far) * ratio(first item that does not fit),
    rounded to an integer with the policy's rounding mode when every cost is
    integral, otherwise computed from the exact ratio and rounded up.
The result is never below the best cost reachable from the node.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from decimal import Decimal, ROUND_CEILING
from typing import Optional, Sequence, Tuple

from knapsack_packer.business_objects.items import Item
from .policy import Policy

_ZERO = Decimal(0)
_DEFAULT_POLICY = Policy()


def _integral_costs(items: Sequence[Item]) -> bool:
    return all(it.cost == it.cost.to_integral_value() for it in items)


@dataclass(frozen=True)
class Node:
    """
    Attributes
    ----------
    next_index : int
        Index (in ratio order) of the next item to branch on.
    taken : tuple[Item, ...]
        Items taken on the path from the root.
    weight : Decimal
        Total weight of `taken`.
    cost : Decimal
        Total cost of `taken`.
    bound : Decimal
        Upper bound on the cost of any completion of this node.
    """
    next_index: int = 0
    taken: Tuple[Item, ...] = ()
    weight: Decimal = _ZERO
    cost: Decimal = _ZERO
    bound: Decimal = _ZERO

    def __lt__(self, other: "Node") -> bool:
        # heapq is a min-heap; invert so the highest bound pops first
        return self.bound > other.bound

    def descend(self) -> "Node":
        return replace(self, next_index=self.next_index + 1)

    def add_weight(self, weight: Decimal) -> "Node":
        return replace(self, weight=self.weight + weight)

    def add_cost(self, cost: Decimal) -> "Node":
        return replace(self, cost=self.cost + cost)

    def take(self, item: Item) -> "Node":
        return replace(self.add_weight(item.weight).add_cost(item.cost), taken=self.taken + (item,))

    def compute_bound(
        self,
        capacity: Decimal,
        items: Sequence[Item],
        policy: Optional[Policy] = None,
    ) -> "Node":
        """Return a copy of this node carrying its upper bound; `items` must be in ratio order."""
        policy = policy or _DEFAULT_POLICY
        if self.weight > capacity:
            return replace(self, bound=_ZERO)

        index = self.next_index
        total_weight = self.weight
        upper = self.cost
        while index < len(items) and total_weight + items[index].weight <= capacity:
            total_weight += items[index].weight
            upper += items[index].cost
            index += 1

        if index < len(items):
            item = items[index]
            room = capacity - total_weight
            if _integral_costs(items):
                fraction = room * item.cost_weight_ratio(policy.ratio_scale)
                upper += fraction.quantize(Decimal(1), rounding=policy.bound_rounding)
            else:
                # rounding a fractional cost down could undercut the optimum
                upper += (room * item.cost / item.weight).quantize(Decimal(1), rounding=ROUND_CEILING)
        return replace(self, bound=upper)
