# -*- coding: utf-8 -*-
"""
Inventory model: every item available for packing.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from .errors import StateValidationError
from .items import Item

MAX_ITEMS = 15


@dataclass(frozen=True)
class Inventory:
    """
    Immutable, ordered snapshot of the items to choose from.

    Attributes
    ----------
    items : tuple[Item, ...]
        Between 1 and MAX_ITEMS items with unique ids. Any iterable passed in
        is copied into a tuple.
    """
    items: Tuple[Item, ...]

    def __post_init__(self) -> None:  # type: ignore[override]
        items = tuple(self.items)
        object.__setattr__(self, "items", items)
        if not items:
            raise StateValidationError("Inventory needs at least one item.")
        if len(items) > MAX_ITEMS:
            raise StateValidationError(f"Inventory holds at most {MAX_ITEMS} items, got {len(items)}.")
        seen: set[int] = set()
        for it in items:
            if not isinstance(it, Item):
                raise StateValidationError(f"Inventory accepts Item objects only, got {it!r}.")
            if it.id in seen:
                raise StateValidationError(f"Duplicate Item.id: {it.id}")
            seen.add(it.id)

    @classmethod
    def of(cls, items: Iterable[Item]) -> "Inventory":
        return cls(items=tuple(items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)
