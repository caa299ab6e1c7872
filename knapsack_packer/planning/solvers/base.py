# -*- coding: utf-8 -*-
"""
Packer base: guard the target package, solve, commit once.

Subclasses implement `solve(items, capacity)` as a pure function returning the
chosen items. `pack` is the only place a package is mutated.
"""

from __future__ import annotations
import logging
from decimal import Decimal
from typing import List, Sequence

from knapsack_packer.business_objects.errors import (
    PackingConsistencyError,
    StateValidationError,
)
from knapsack_packer.business_objects.inventory import Inventory
from knapsack_packer.business_objects.items import Item
from knapsack_packer.business_objects.packages import Package

logger = logging.getLogger(__name__)


class Packer:
    """Selects zero or more inventory items and adds them to a target package."""

    name = "packer"

    def __init__(self, inventory: Inventory) -> None:
        if not isinstance(inventory, Inventory):
            raise StateValidationError(f"Packer needs an Inventory, got {inventory!r}.")
        self.inventory = inventory

    def solve(self, items: Sequence[Item], capacity: Decimal) -> List[Item]:
        raise NotImplementedError

    def pack(self, target: Package) -> None:
        if target is None:
            raise StateValidationError("Target package is required.")
        with target.packing():
            chosen = self.solve(self.inventory.items, target.capacity)
            for item in chosen:
                if not target.add(item):
                    raise PackingConsistencyError(f"Could not pack {item} into {target}.")

        if target.is_empty():
            logger.info("%s: no item fits in %s lbs.", self.name, target.capacity)
        else:
            logger.info(
                "%s: packed %s (cost=%s, weight=%s)",
                self.name, target.ids(), target.total_cost(), target.total_weight(),
            )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(items={len(self.inventory)})"
