# -*- coding: utf-8 -*-
"""
Input snapshot for a packing run.

Notes
-----
- Business (timeless) entities live in `business_objects/`.
- A PackingProblem is what the readers produce and what the driver packs:
  capacity + inventory, plus the expected ids when loaded from a fixture.
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Tuple

from knapsack_packer.business_objects.errors import StateValidationError
from knapsack_packer.business_objects.inventory import Inventory
from knapsack_packer.business_objects.items import to_decimal
from knapsack_packer.business_objects.packages import MAX_CAPACITY, Package


@dataclass(frozen=True)
class PackingProblem:
    """
    Immutable problem input.

    Attributes
    ----------
    name : str
        Label used in logs and reports.
    capacity : Decimal
        Package capacity.
    inventory : Inventory
        Items to choose from.
    expected_ids : tuple[int, ...] | None
        Known solution, if the source provided one.
    """
    name: str
    capacity: Decimal
    inventory: Inventory
    expected_ids: Optional[Tuple[int, ...]] = None

    def __post_init__(self) -> None:  # type: ignore[override]
        object.__setattr__(self, "capacity", to_decimal(self.capacity))
        if not 0 <= self.capacity <= MAX_CAPACITY:
            raise StateValidationError(
                f"PackingProblem[{self.name}] capacity must be between 0 and {MAX_CAPACITY}."
            )
        if self.expected_ids is not None:
            object.__setattr__(self, "expected_ids", tuple(self.expected_ids))

    def to_package(self) -> Package:
        """Create a fresh, empty package sized for this problem."""
        return Package(capacity=self.capacity)
