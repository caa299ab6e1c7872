# -*- coding: utf-8 -*-
"""
0/1 knapsack packing for small inventories (at most 15 items).

Layers:
  - business_objects: Item, Inventory, Package and the error taxonomy
  - planning:         Policy, PackingProblem, Node, PackingResult, Tracker, solvers
  - utils:            text/JSON readers and report rendering
"""

__version__ = "0.1.0"
