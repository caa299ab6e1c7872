# -*- coding: utf-8 -*-
"""
Package (capacity container) model.
"""

from __future__ import annotations
import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterator, List, Tuple

from .errors import PackageStateError, StateValidationError
from .items import Item, Number, to_decimal

logger = logging.getLogger(__name__)

MAX_CAPACITY = Decimal(100)


@dataclass
class Package:
    """
    Holds the items chosen by a packer, up to a fixed weight capacity.

    Attributes
    ----------
    capacity : Decimal
        Maximum weight the package can hold, between 0 and MAX_CAPACITY.

    Notes
    -----
    Reads and writes share a re-entrant lock, so readers always see a
    consistent snapshot while a packer is committing its selection.
    A package is packed at most once, even when the packer chose nothing;
    `empty()` makes it packable again.
    """
    capacity: Decimal
    _items: List[Item] = field(default_factory=list, init=False, repr=False)
    _packed: bool = field(default=False, init=False, repr=False, compare=False)
    _lock: threading.RLock = field(
        default_factory=threading.RLock, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:  # type: ignore[override]
        self.capacity = to_decimal(self.capacity)
        if self.capacity < 0:
            raise StateValidationError("Package capacity must be >= 0.")
        if self.capacity > MAX_CAPACITY:
            raise StateValidationError(f"Package capacity must be <= {MAX_CAPACITY}.")

    @classmethod
    def of(cls, capacity: Number) -> "Package":
        return cls(capacity=to_decimal(capacity))

    @property
    def remaining(self) -> Decimal:
        return self.capacity - self.total_weight()

    def can_fit(self, item: Item) -> bool:
        return item.weight <= self.remaining

    def add(self, item: Item) -> bool:
        """
        Try to add the item; returns True if committed, False otherwise.
        Refuses duplicate ids and any item that would overfill the package.
        """
        if item is None or not isinstance(item, Item):
            raise StateValidationError(f"Package accepts Item objects only, got {item!r}.")
        with self._lock:
            if any(held.id == item.id for held in self._items):
                logger.debug("Refused duplicate %s", item)
                return False
            if not self.can_fit(item):
                logger.debug("Refused %s: only %s remaining", item, self.remaining)
                return False
            self._items.append(item)
            logger.debug("Added %s", item)
            return True

    def items(self) -> Tuple[Item, ...]:
        with self._lock:
            return tuple(self._items)

    def ids(self) -> List[int]:
        return [it.id for it in self.items()]

    def total_cost(self) -> Decimal:
        return sum((it.cost for it in self.items()), Decimal(0))

    def total_weight(self) -> Decimal:
        return sum((it.weight for it in self.items()), Decimal(0))

    def is_empty(self) -> bool:
        with self._lock:
            return not self._items

    def is_packed(self) -> bool:
        with self._lock:
            return self._packed

    @contextmanager
    def packing(self) -> Iterator["Package"]:
        """
        Hold the package for a single pack: check, select and commit all run
        under the package lock. Raises PackageStateError if the package already
        holds items or was packed before. The package counts as packed only
        when the block exits without an exception.
        """
        with self._lock:
            if self._packed or self._items:
                raise PackageStateError("Target package has already been packed.")
            yield self
            self._packed = True

    def empty(self) -> None:
        """Drop every held item and allow the package to be packed again."""
        with self._lock:
            self._items.clear()
            self._packed = False
