# -*- coding: utf-8 -*-
"""
Item model for the 0/1 knapsack.
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

from .errors import StateValidationError

Number = Union[int, float, str, Decimal]

MAX_COST = Decimal(100)
DEFAULT_RATIO_SCALE = 9


def to_decimal(value: Number) -> Decimal:
    """Coerce a number to Decimal; floats go through str() to keep their printed digits."""
    if isinstance(value, bool):
        raise StateValidationError(f"Expected a number, got {value!r}.")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        value = str(value)
    try:
        return Decimal(value)
    except (InvalidOperation, TypeError) as e:
        raise StateValidationError(f"Expected a number, got {value!r}.") from e


@dataclass(frozen=True)
class Item:
    """
    An item that is either packed whole or left out.

    Attributes
    ----------
    id : int
        Unique identifier within an inventory.
    weight : Decimal
        Strictly positive weight (pounds).
    cost : Decimal
        Nonnegative cost (USD), at most MAX_COST.
    """
    id: int
    weight: Decimal
    cost: Decimal

    def __post_init__(self) -> None:  # type: ignore[override]
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise StateValidationError(f"Item id must be an integer, got {self.id!r}.")
        object.__setattr__(self, "weight", to_decimal(self.weight))
        object.__setattr__(self, "cost", to_decimal(self.cost))
        if self.weight <= 0:
            raise StateValidationError(f"Item[{self.id}] weight must be > 0.")
        if self.cost < 0:
            raise StateValidationError(f"Item[{self.id}] cost must be >= 0.")
        if self.cost > MAX_COST:
            raise StateValidationError(f"Item[{self.id}] cost must be <= {MAX_COST}.")

    def cost_weight_ratio(self, scale: int = DEFAULT_RATIO_SCALE) -> Decimal:
        """Cost per unit of weight, `scale` fractional digits, rounded half up."""
        if self.weight == 0:
            return Decimal(0)
        return (self.cost / self.weight).quantize(Decimal(1).scaleb(-scale), rounding=ROUND_HALF_UP)
