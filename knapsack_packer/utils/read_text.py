# -*- coding: utf-8 -*-
"""
Reader for the one-line-per-problem text format.

Line format:
    <capacity> : (<id>,<weight>,$<cost>) (<id>,<weight>,$<cost>) ...

Example:
    81 : (1,53.38,$45) (2,88.62,$98) (3,78.48,$3)

The `$` is optional and whitespace around separators is ignored.

LIMITATION: several items with the same cost but different weights may lead to
packer-specific selections, so by default such input is refused with
AmbiguousCostError (see Policy.reject_ambiguous_costs).
"""

from __future__ import annotations
import logging
import re
from decimal import Decimal, InvalidOperation
from typing import Dict, List, Optional

from knapsack_packer.business_objects.errors import AmbiguousCostError, SchemaError, StateValidationError
from knapsack_packer.business_objects.inventory import Inventory
from knapsack_packer.business_objects.items import Item
from knapsack_packer.planning.policy import Policy
from knapsack_packer.planning.state import PackingProblem

logger = logging.getLogger(__name__)

_CAPACITY_SEPARATOR = re.compile(r"\s*:\s*")
_ITEM_TOKEN = re.compile(r"\(\s*(\d+)\s*,\s*(\d+(?:\.\d+)?)\s*,\s*\$?\s*(\d+(?:\.\d+)?)\s*\)")
_ITEM_LIST = re.compile(r"\s*(?:\([^()]*\)\s*)+")


def _parse_items(text: str, where: str) -> List[Item]:
    if not _ITEM_LIST.fullmatch(text):
        raise SchemaError(f"{where}: item list has incorrect format: {text!r}")

    items: List[Item] = []
    for token in re.findall(r"\([^()]*\)", text):
        m = _ITEM_TOKEN.fullmatch(token)
        if m is None:
            raise SchemaError(f"{where}: item components have incorrect format: {token!r}")
        try:
            items.append(Item(id=int(m.group(1)), weight=Decimal(m.group(2)), cost=Decimal(m.group(3))))
        except StateValidationError as e:
            raise SchemaError(f"{where}: {token}: {e}") from e
    return items


def _check_ambiguous_costs(items: List[Item], where: str) -> None:
    weights_by_cost: Dict[Decimal, Decimal] = {}
    for it in items:
        seen = weights_by_cost.setdefault(it.cost, it.weight)
        if seen != it.weight:
            raise AmbiguousCostError(
                f"{where}: found multiple items which cost ${it.cost} but have different "
                f"weights, which is an unsupported ambiguity"
            )


def parse_problem(line: str, name: Optional[str] = None, policy: Optional[Policy] = None) -> PackingProblem:
    """
    Parse one problem line into a PackingProblem.

    Raises
    ------
    SchemaError
        Malformed capacity/item text, or an item/inventory that fails validation.
    AmbiguousCostError
        Same cost with different weights while policy.reject_ambiguous_costs is set.
    """
    policy = policy or Policy()
    where = name or "input"
    if line is None:
        raise SchemaError(f"{where}: input data is required")

    parts = _CAPACITY_SEPARATOR.split(line.strip())
    if len(parts) != 2:
        raise SchemaError(f"{where}: input data has incorrect format: {line!r}")

    try:
        capacity = Decimal(parts[0])
    except InvalidOperation as e:
        raise SchemaError(f"{where}: invalid capacity {parts[0]!r}") from e
    if not capacity.is_finite():
        raise SchemaError(f"{where}: invalid capacity {parts[0]!r}")

    items = _parse_items(parts[1], where)
    if policy.reject_ambiguous_costs:
        _check_ambiguous_costs(items, where)

    try:
        problem = PackingProblem(name=where, capacity=capacity, inventory=Inventory(items=tuple(items)))
    except StateValidationError as e:
        raise SchemaError(f"{where}: {e}") from e

    logger.debug("%s: capacity=%s, %d items", where, capacity, len(items))
    return problem


def read_problems_text(path: str, policy: Optional[Policy] = None) -> List[PackingProblem]:
    """
    Load one problem per non-blank line; lines starting with '#' are comments.
    Problems are named "<path>:<line number>".
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.readlines()
    except OSError as e:
        raise SchemaError(f"{path}: failed to read: {e}") from e

    problems: List[PackingProblem] = []
    for lineno, line in enumerate(lines, start=1):
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        problems.append(parse_problem(line, name=f"{path}:{lineno}", policy=policy))
    return problems
