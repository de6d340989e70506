# test/test_items.py
import math

import numpy as np
import pytest

from bnb_kp.errors import InvalidInput
from bnb_kp.solvers.classic.items import Item, ItemCatalog


def test_unit_value_is_value_per_weight():
    item = Item(index=0, value=15, weight=8)
    assert item.unit_value == pytest.approx(1.875)
    assert not item.is_free


def test_zero_weight_item_has_infinite_unit_value():
    assert Item(index=0, value=5, weight=0).unit_value == math.inf
    assert Item(index=1, value=0, weight=0).unit_value == math.inf


def test_bound_order_sorts_by_unit_value_then_weight(scenario_a):
    catalog = ItemCatalog(scenario_a["capacity"], scenario_a["weights"], scenario_a["values"])
    # items 0 and 1 both have unit value 2.0, the lighter one comes first
    assert [it.index for it in catalog.bound_order] == [0, 1, 2, 3]

    catalog = ItemCatalog(10, weights=[5, 4, 2], values=[10, 8, 1])
    assert [it.index for it in catalog.bound_order] == [1, 0, 2]


def test_bound_order_puts_free_items_first():
    catalog = ItemCatalog(10, weights=[3, 0, 1], values=[9, 0, 1])
    assert catalog.bound_order[0].index == 1
    assert [it.index for it in catalog.free_items] == [1]
    assert [it.index for it in catalog.branch_items] == [0, 2]
    assert catalog.position_of(catalog.items[1]) == -1
    assert catalog.position_of(catalog.items[2]) == 1


def test_input_order_is_preserved(scenario_b):
    catalog = ItemCatalog(scenario_b["capacity"], scenario_b["weights"])
    assert [it.weight for it in catalog] == scenario_b["weights"]
    assert [it.value for it in catalog] == scenario_b["weights"]
    assert len(catalog) == 6


def test_min_weight_ignores_free_items():
    assert ItemCatalog(10, weights=[7, 0, 3]).min_weight == 3
    assert ItemCatalog(10, weights=[0, 0]).min_weight == math.inf
    assert ItemCatalog(10, weights=[]).min_weight == math.inf


def test_empty_catalog_is_valid():
    catalog = ItemCatalog(0, [], [])
    assert len(catalog) == 0
    assert catalog.bound_order == ()
    assert catalog.free_value == 0.0


def test_numpy_inputs_are_accepted():
    catalog = ItemCatalog(np.float64(11), np.array([4, 5, 8, 3]), np.array([8.0, 10.0, 15.0, 4.0]))
    assert catalog.capacity == 11.0
    assert all(isinstance(it.weight, float) for it in catalog)


@pytest.mark.parametrize("capacity, weights, values", [
    (10, [1, 2, 3], [1, 2]),
    (-1, [1, 2], [1, 2]),
    (10, [1, -2], [1, 2]),
    (10, [1, 2], [1, -2]),
    (10, [1, float("nan")], [1, 2]),
    (float("inf"), [1, 2], [1, 2]),
    (10, ["a", 2], [1, 2]),
])
def test_invalid_input_is_rejected(capacity, weights, values):
    with pytest.raises(InvalidInput):
        ItemCatalog(capacity, weights, values)


def test_invalid_input_is_a_value_error():
    with pytest.raises(ValueError):
        ItemCatalog(-5, [1])
