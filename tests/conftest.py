import os
from decimal import Decimal

import pytest

from knapsack_packer.business_objects import Inventory, Item, Package
from knapsack_packer.planning.solvers import BranchAndBoundPacker, RecursivePacker

DATA_DIR = os.path.join(os.path.dirname(__file__), "data")


def make_items(*rows):
    """Items from (id, weight, cost) rows; weights given as strings stay exact."""
    return [Item(id=i, weight=Decimal(str(w)), cost=Decimal(str(c))) for i, w, c in rows]


def pack(packer_cls, capacity, rows):
    package = Package.of(capacity)
    packer_cls(Inventory.of(make_items(*rows))).pack(package)
    return package


# Worked examples: (capacity, rows, expected ids, expected cost)
SCENARIOS = {
    "four-items-cap-7": (
        "7",
        [(1, 2, 1), (2, 3, 2), (3, 3, 5), (4, 4, 9)],
        [3, 4],
        Decimal(14),
    ),
    "single-item-cap-81": (
        "81",
        [(1, "53.38", 45), (2, "88.62", 98), (3, "78.48", 3), (4, "72.30", 76), (5, "30.18", 9), (6, "46.34", 48)],
        [4],
        Decimal(76),
    ),
    "two-items-cap-75": (
        "75",
        [
            (1, "85.31", 29), (2, "14.55", 74), (3, "3.98", 16), (4, "26.24", 55), (5, "63.69", 52),
            (6, "76.25", 75), (7, "60.02", 74), (8, "93.18", 35), (9, "89.95", 78),
        ],
        [2, 7],
        Decimal(148),
    ),
    "three-items-cap-10": (
        "10",
        [(1, 2, 40), (2, "3.14", 50), (3, "1.98", 100), (4, 5, 95), (5, 3, 30)],
        [1, 3, 4],
        Decimal(235),
    ),
    "item-too-heavy-cap-8": (
        "8",
        [(1, "15.3", 34)],
        [],
        Decimal(0),
    ),
}


@pytest.fixture(params=[RecursivePacker, BranchAndBoundPacker], ids=["recursive", "branch_and_bound"])
def packer_cls(request):
    return request.param
