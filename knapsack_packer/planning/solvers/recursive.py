# -*- coding: utf-8 -*-
"""
Whole-item recursive packer (direct recursion, no memoization).

Every call either includes the current item or excludes it, walking the
inventory from the last item to the first. The two branches are compared on
cost, then on weight: among equal-cost selections the lighter one wins.

Time complexity is O(2^n); with at most 15 items that is 32768 leaves in the
worst case. Overlapping subproblems are recomputed.
"""

from __future__ import annotations
import logging
from decimal import Decimal
from typing import List, Sequence

from knapsack_packer.business_objects.items import Item
from .base import Packer

logger = logging.getLogger(__name__)

_ZERO = Decimal(0)


def _total_cost(items: Sequence[Item]) -> Decimal:
    return sum((it.cost for it in items), _ZERO)


def _total_weight(items: Sequence[Item]) -> Decimal:
    return sum((it.weight for it in items), _ZERO)


def _solve(items: Sequence[Item], capacity: Decimal, count: int) -> List[Item]:
    if count == 0 or capacity == 0:
        return []

    current = items[count - 1]
    if current.weight > capacity:
        return _solve(items, capacity, count - 1)

    include = _solve(items, capacity - current.weight, count - 1) + [current]
    include_cost, include_weight = _total_cost(include), _total_weight(include)

    exclude = _solve(items, capacity, count - 1)
    exclude_cost, exclude_weight = _total_cost(exclude), _total_weight(exclude)

    # same cost -> keep the lighter selection
    if include_cost > exclude_cost or (include_cost == exclude_cost and include_weight <= exclude_weight):
        return include
    return exclude


def solve_recursive(items: Sequence[Item], capacity: Decimal) -> List[Item]:
    """
    Return the optimal subset of `items` for `capacity`, in input order.

    Parameters
    ----------
    items : sequence of Item
        Candidate items (positive weights).
    capacity : Decimal
        Nonnegative weight limit.
    """
    return _solve(list(items), capacity, len(items))


class RecursivePacker(Packer):
    """Exhaustive include/exclude recursion with the cost-then-weight tie-break."""

    name = "recursive"

    def solve(self, items: Sequence[Item], capacity: Decimal) -> List[Item]:
        logger.debug("%s: exploring %d items for capacity %s", self.name, len(items), capacity)
        return solve_recursive(items, capacity)
