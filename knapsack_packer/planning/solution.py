# -*- coding: utf-8 -*-
"""
Result model for a packing run.

Built from a packed Package and consumed by the tracker and the report helpers.
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple

from knapsack_packer.business_objects.packages import Package


@dataclass(frozen=True)
class PackingResult:
    """
    Attributes
    ----------
    problem : str
        Problem name.
    packer : str
        Packer that produced the selection.
    capacity : Decimal
        Package capacity.
    item_ids : tuple[int, ...]
        Ids of the packed items, in commit order.
    total_cost : Decimal
    total_weight : Decimal
    """
    problem: str
    packer: str
    capacity: Decimal
    item_ids: Tuple[int, ...]
    total_cost: Decimal
    total_weight: Decimal

    @classmethod
    def from_package(cls, problem: str, packer: str, package: Package) -> "PackingResult":
        return cls(
            problem=problem,
            packer=packer,
            capacity=package.capacity,
            item_ids=tuple(package.ids()),
            total_cost=package.total_cost(),
            total_weight=package.total_weight(),
        )
