# -*- coding: utf-8 -*-
"""
I/O helpers for loading packing problems stored as JSON.

JSON format (one problem per file):
    {
      "name": "...",                      # optional, defaults to the file stem
      "capacity": <number>,
      "items": [{"id": <int>, "weight": <number>, "cost": <number>}, ...],
      "solution": [<int>, ...]            # optional, expected item ids
    }

Numbers are read as Decimal so weights such as 53.38 keep their exact digits.
These map directly to:
- business_objects.items.Item
- planning.state.PackingProblem
"""

from __future__ import annotations
import json
import os
from decimal import Decimal
from typing import List

from knapsack_packer.business_objects.errors import SchemaError
from knapsack_packer.business_objects.inventory import Inventory
from knapsack_packer.business_objects.items import Item
from knapsack_packer.planning.state import PackingProblem


def _require(obj: dict, key: str, path: str) -> object:
    if key not in obj:
        raise SchemaError(f"{path}: missing required key '{key}' in object {obj}")
    return obj[key]


def read_problem_json(path: str) -> PackingProblem:
    """
    Load a single problem. The top-level object must have:
      - capacity (number)
      - items (array of {id, weight, cost})
    and may have `name` and `solution`.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f, parse_float=Decimal)
    except Exception as e:
        raise SchemaError(f"{path}: failed to read/parse JSON: {e}") from e

    if not isinstance(data, dict):
        raise SchemaError(f"{path}: expected a JSON object.")

    raw_items = _require(data, "items", path)
    if not isinstance(raw_items, list):
        raise SchemaError(f"{path}: 'items' must be a JSON array.")

    items: List[Item] = []
    for idx, obj in enumerate(raw_items, start=1):
        if not isinstance(obj, dict):
            raise SchemaError(f"{path}[{idx}]: expected an object.")
        try:
            iid = _require(obj, "id", path)
            weight = _require(obj, "weight", path)
            cost = _require(obj, "cost", path)
            items.append(Item(id=iid, weight=weight, cost=cost))
        except Exception as e:
            raise SchemaError(f"{path}[{idx}]: {e}") from e

    solution = data.get("solution")
    if solution is not None and not isinstance(solution, list):
        raise SchemaError(f"{path}: 'solution' must be a JSON array.")
    if solution is not None and any(isinstance(i, bool) or not isinstance(i, int) for i in solution):
        raise SchemaError(f"{path}: 'solution' must hold integer item ids.")

    name = str(data.get("name") or os.path.splitext(os.path.basename(path))[0])
    try:
        return PackingProblem(
            name=name,
            capacity=_require(data, "capacity", path),
            inventory=Inventory(items=tuple(items)),
            expected_ids=None if solution is None else tuple(solution),
        )
    except SchemaError:
        raise
    except Exception as e:
        raise SchemaError(f"{path}: {e}") from e


def read_problems_dir(path: str) -> List[PackingProblem]:
    """Load every *.json problem in a directory, sorted by file name."""
    try:
        names = sorted(n for n in os.listdir(path) if n.endswith(".json"))
    except OSError as e:
        raise SchemaError(f"{path}: failed to list directory: {e}") from e
    return [read_problem_json(os.path.join(path, n)) for n in names]
