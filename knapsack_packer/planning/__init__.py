# -*- coding: utf-8 -*-
"""
Planning layer public API.

This module exposes the core planning-time data contracts:
  - PackingProblem (input snapshot)
  - Policy configuration
  - Node (branch-and-bound decision-tree node)
  - PackingResult

Other planning modules (solvers, tracker) are intentionally not exported here
to avoid cluttering the namespace. They should be imported explicitly when
needed.
"""

from .state import PackingProblem
from .policy import Policy
from .node import Node
from .solution import PackingResult

__all__ = [
    "PackingProblem",
    "Policy",
    "Node",
    "PackingResult",
]
