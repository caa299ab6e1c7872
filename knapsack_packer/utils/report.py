# -*- coding: utf-8 -*-
"""
Plain-text rendering of packing results.

The canonical output for one problem is the packed ids joined by commas, or a
single hyphen when nothing was packed.
"""

from __future__ import annotations
from typing import Iterable, TYPE_CHECKING

if TYPE_CHECKING:
    from knapsack_packer.planning.solution import PackingResult

EMPTY_MARKER = "-"


def render_ids(ids: Iterable[int]) -> str:
    ids = [str(i) for i in ids]
    return ",".join(ids) if ids else EMPTY_MARKER


def format_result(result: "PackingResult") -> str:
    return (
        f"{result.problem}: {render_ids(result.item_ids)} "
        f"(packer={result.packer}, cost=${result.total_cost}, "
        f"weight={result.total_weight}/{result.capacity} lbs.)"
    )
