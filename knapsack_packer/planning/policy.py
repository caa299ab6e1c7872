# -*- coding: utf-8 -*-
"""
Policy (configuration knobs) for a packing run.

Packer selection:
  - packer: {"recursive", "branch_and_bound"}

Branch-and-bound numerics:
  - ratio_scale:    fractional digits kept in cost/weight ratios
  - bound_rounding: decimal rounding mode applied to the fractional item
                    value added to a node's bound

Parsing:
  - reject_ambiguous_costs: refuse inputs holding two items with the same cost
    but different weights
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import ROUND_HALF_UP

from knapsack_packer.business_objects.errors import StateValidationError
from knapsack_packer.business_objects.items import DEFAULT_RATIO_SCALE

PACKERS = ("recursive", "branch_and_bound")


@dataclass(frozen=True)
class Policy:
    """
    Packing knobs (pure data holder).

    Attributes
    ----------
    packer : str
        "recursive" | "branch_and_bound".
    ratio_scale : int
        Digits after the decimal point for cost/weight ratios.
    bound_rounding : str
        A `decimal` rounding constant, e.g. ROUND_HALF_UP or ROUND_CEILING.
    reject_ambiguous_costs : bool
        If True, parsers raise AmbiguousCostError on same-cost/different-weight items.
    """
    packer: str = "branch_and_bound"
    ratio_scale: int = DEFAULT_RATIO_SCALE
    bound_rounding: str = ROUND_HALF_UP
    reject_ambiguous_costs: bool = True

    def __post_init__(self) -> None:  # type: ignore[override]
        if self.packer not in PACKERS:
            raise StateValidationError(f"Unknown packer {self.packer!r}; expected one of {PACKERS}.")
        if self.ratio_scale < 0:
            raise StateValidationError("Policy.ratio_scale must be >= 0.")
