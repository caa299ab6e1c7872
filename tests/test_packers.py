import threading
import time
from decimal import Decimal

import pytest

from conftest import SCENARIOS, make_items, pack
from knapsack_packer.business_objects import (
    Inventory,
    Item,
    Package,
    PackageStateError,
    PackingConsistencyError,
    StateValidationError,
)
from knapsack_packer.planning import Policy
from knapsack_packer.planning.solvers import (
    BranchAndBoundPacker,
    Packer,
    RecursivePacker,
    build_packer,
    solve_recursive,
)


@pytest.mark.parametrize("name", sorted(SCENARIOS))
def test_worked_examples(packer_cls, name):
    capacity, rows, expected_ids, expected_cost = SCENARIOS[name]
    package = pack(packer_cls, capacity, rows)
    assert sorted(package.ids()) == expected_ids
    assert package.total_cost() == expected_cost
    assert package.total_weight() <= package.capacity


def test_two_items_cap_75_weight(packer_cls):
    capacity, rows, _, _ = SCENARIOS["two-items-cap-75"]
    assert pack(packer_cls, capacity, rows).total_weight() == Decimal("74.57")


def test_four_items_cap_7_fills_capacity(packer_cls):
    capacity, rows, _, _ = SCENARIOS["four-items-cap-7"]
    assert pack(packer_cls, capacity, rows).total_weight() == Decimal(7)


def test_every_item_too_heavy_gives_empty_selection(packer_cls):
    package = pack(packer_cls, 5, [(1, 6, 10), (2, "5.01", 20), (3, 90, 100)])
    assert package.is_empty()
    assert package.total_cost() == 0
    assert package.total_weight() == 0


def test_exact_fit_is_included(packer_cls):
    package = pack(packer_cls, "12.5", [(1, "12.5", 30)])
    assert package.ids() == [1]


def test_last_item_is_considered(packer_cls):
    # everything fits, including the lowest-ratio item
    package = pack(packer_cls, 10, [(1, 2, 20), (2, 3, 15), (3, 5, 10)])
    assert sorted(package.ids()) == [1, 2, 3]


def test_zero_capacity_packs_nothing(packer_cls):
    assert pack(packer_cls, 0, [(1, 1, 10)]).is_empty()


def test_zero_cost_items_are_not_packed(packer_cls):
    assert pack(packer_cls, 10, [(1, 1, 0), (2, 2, 0)]).is_empty()


@pytest.mark.parametrize(
    "rows",
    [
        [(1, 8, 50), (2, 6, 50)],
        [(1, 6, 50), (2, 8, 50)],
    ],
    ids=["lighter-last", "lighter-first"],
)
def test_same_price_prefers_less_weight(packer_cls, rows):
    package = pack(packer_cls, 10, rows)
    assert package.total_cost() == Decimal(50)
    assert package.total_weight() == Decimal(6)


def test_recursive_tie_break_on_combinations():
    # {1,2} and {3} both cost 10; {3} is lighter
    chosen = solve_recursive(make_items((1, 3, 5), (2, 3, 5), (3, 4, 10)), Decimal(6))
    assert [it.id for it in chosen] == [3]


def test_recursive_equal_cost_and_weight_keeps_include_branch():
    chosen = solve_recursive(make_items((1, 4, 10), (2, 4, 10)), Decimal(5))
    assert [it.id for it in chosen] == [2]


def test_recursive_keeps_input_order():
    chosen = solve_recursive(make_items((5, 1, 10), (2, 1, 20), (9, 1, 30)), Decimal(3))
    assert [it.id for it in chosen] == [5, 2, 9]


# ----------------------------
# Packer contract
# ----------------------------

def test_packing_twice_is_an_error(packer_cls):
    inventory = Inventory.of(make_items((1, 2, 3)))
    package = Package.of(10)
    packer = packer_cls(inventory)
    packer.pack(package)
    with pytest.raises(PackageStateError):
        packer.pack(package)
    assert package.ids() == [1]


def test_packing_a_prefilled_package_is_an_error(packer_cls):
    package = Package.of(10)
    package.add(Item(7, 1, 1))
    with pytest.raises(PackageStateError):
        packer_cls(Inventory.of(make_items((1, 2, 3)))).pack(package)


def test_packing_requires_a_package(packer_cls):
    with pytest.raises(StateValidationError):
        packer_cls(Inventory.of(make_items((1, 2, 3)))).pack(None)


def test_packer_requires_an_inventory(packer_cls):
    with pytest.raises(StateValidationError):
        packer_cls(make_items((1, 2, 3)))


class _OverfillingPacker(Packer):
    name = "overfilling"

    def solve(self, items, capacity):
        return list(items)


def test_rejected_selection_is_fatal():
    package = Package.of(3)
    with pytest.raises(PackingConsistencyError):
        _OverfillingPacker(Inventory.of(make_items((1, 2, 3), (2, 2, 3)))).pack(package)


def test_base_packer_has_no_solve():
    with pytest.raises(NotImplementedError):
        Packer(Inventory.of(make_items((1, 2, 3)))).pack(Package.of(10))


def test_empty_package_can_be_repacked_after_reset(packer_cls):
    inventory = Inventory.of(make_items((1, 2, 3)))
    package = Package.of(10)
    packer_cls(inventory).pack(package)
    package.empty()
    packer_cls(inventory).pack(package)
    assert package.ids() == [1]


def test_packing_after_an_empty_selection_is_an_error(packer_cls):
    inventory = Inventory.of(make_items((1, "15.3", 34)))
    package = Package.of(8)
    packer_cls(inventory).pack(package)
    assert package.is_empty()
    assert package.is_packed()
    with pytest.raises(PackageStateError):
        packer_cls(inventory).pack(package)


def test_failed_pack_leaves_package_packable():
    package = Package.of(10)
    with pytest.raises(NotImplementedError):
        Packer(Inventory.of(make_items((1, 2, 3)))).pack(package)
    assert not package.is_packed()
    RecursivePacker(Inventory.of(make_items((1, 2, 3)))).pack(package)
    assert package.ids() == [1]


class _SlowPacker(RecursivePacker):
    name = "slow"

    def __init__(self, inventory, entered, release):
        super().__init__(inventory)
        self.entered = entered
        self.release = release

    def solve(self, items, capacity):
        self.entered.set()
        self.release.wait(timeout=5)
        return super().solve(items, capacity)


def test_two_packers_on_one_package_pack_it_once():
    inventory = Inventory.of(make_items((1, 2, 3), (2, 3, 4)))
    package = Package.of(10)
    entered, release = threading.Event(), threading.Event()
    errors = []

    def run(packer):
        try:
            packer.pack(package)
        except Exception as exc:
            errors.append(exc)

    first = threading.Thread(target=run, args=(_SlowPacker(inventory, entered, release),))
    first.start()
    assert entered.wait(timeout=5)
    second = threading.Thread(target=run, args=(BranchAndBoundPacker(inventory),))
    second.start()
    time.sleep(0.05)
    release.set()
    first.join(timeout=5)
    second.join(timeout=5)

    assert len(errors) == 1
    assert isinstance(errors[0], PackageStateError)
    assert sorted(package.ids()) == [1, 2]


# ----------------------------
# Factory
# ----------------------------

def test_build_packer_follows_policy():
    inventory = Inventory.of(make_items((1, 2, 3)))
    assert isinstance(build_packer(inventory, Policy(packer="recursive")), RecursivePacker)
    assert isinstance(build_packer(inventory, Policy(packer="branch_and_bound")), BranchAndBoundPacker)
    assert isinstance(build_packer(inventory), BranchAndBoundPacker)


def test_build_packer_passes_policy_to_branch_and_bound():
    policy = Policy(ratio_scale=4)
    packer = build_packer(Inventory.of(make_items((1, 2, 3))), policy)
    assert packer.policy is policy
