# -*- coding: utf-8 -*-
"""
Packer implementations and the policy-driven factory.
"""

from __future__ import annotations
from typing import Optional

from knapsack_packer.business_objects.inventory import Inventory
from knapsack_packer.planning.policy import Policy
from .base import Packer
from .branch_and_bound import BranchAndBoundPacker, solve_branch_and_bound
from .recursive import RecursivePacker, solve_recursive


def build_packer(inventory: Inventory, policy: Optional[Policy] = None) -> Packer:
    """Return the packer named by `policy.packer`."""
    policy = policy or Policy()
    if policy.packer == RecursivePacker.name:
        return RecursivePacker(inventory)
    return BranchAndBoundPacker(inventory, policy)


__all__ = [
    "Packer",
    "RecursivePacker",
    "BranchAndBoundPacker",
    "solve_recursive",
    "solve_branch_and_bound",
    "build_packer",
]
