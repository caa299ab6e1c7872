# -*- coding: utf-8 -*-
"""
Public exports for the business objects layer.
"""

from .errors import (
    AmbiguousCostError,
    PackageStateError,
    PackingConsistencyError,
    SchemaError,
    StateValidationError,
)
from .items import Item, MAX_COST
from .inventory import Inventory, MAX_ITEMS
from .packages import Package, MAX_CAPACITY

__all__ = [
    # errors
    "SchemaError",
    "AmbiguousCostError",
    "StateValidationError",
    "PackageStateError",
    "PackingConsistencyError",
    # core models
    "Item",
    "Inventory",
    "Package",
    # limits
    "MAX_COST",
    "MAX_ITEMS",
    "MAX_CAPACITY",
]
