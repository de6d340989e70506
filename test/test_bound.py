# test/test_bound.py
import itertools
import math

import pytest

from conftest import brute_force, random_instance
from bnb_kp.solvers.classic.bound import BoundEstimator
from bnb_kp.solvers.classic.items import ItemCatalog
from bnb_kp.solvers.classic.search import SearchState, SolverContext


def test_root_bound_takes_ceiling_of_fractional_item(scenario_a):
    catalog = ItemCatalog(scenario_a["capacity"], scenario_a["weights"], scenario_a["values"])
    root = SolverContext(catalog).root_state()
    # items 0 and 1 fit (18, capacity 2 left), then ceil(1.875 * 2) of item 2
    assert root.bound == 22


def test_bound_skips_decided_items(scenario_a):
    catalog = ItemCatalog(scenario_a["capacity"], scenario_a["weights"], scenario_a["values"])
    estimator = BoundEstimator(catalog)
    # item 0 excluded: items 1 and 2 are next by unit value
    state = SearchState(current_value=0, remaining_capacity=11)
    assert estimator.bound(state, 0) == 10 + math.ceil(1.875 * 6)


def test_bound_is_sum_of_remaining_values_when_everything_fits():
    catalog = ItemCatalog(100, weights=[1, 2, 3], values=[4, 5, 6])
    estimator = BoundEstimator(catalog)
    assert estimator.bound(SearchState(0, 100), -1) == 15
    assert estimator.bound(SearchState(4, 99), 0) == 15


def test_bound_stops_when_capacity_is_exhausted():
    catalog = ItemCatalog(5, weights=[5, 1], values=[10, 1])
    estimator = BoundEstimator(catalog)
    assert estimator.bound(SearchState(0, 5), -1) == 10
    assert estimator.bound(SearchState(7, 0), -1) == 7


def test_bound_ignores_free_items():
    catalog = ItemCatalog(4, weights=[0, 4], values=[3, 8])
    estimator = BoundEstimator(catalog)
    # the free item's value is already part of the state
    assert estimator.bound(SearchState(3, 4), -1) == 11


@pytest.mark.parametrize("integer", [True, False])
def test_bound_is_admissible_for_every_feasible_partial_decision(rng, integer):
    for _ in range(15):
        weights, values, capacity = random_instance(rng, rng.randint(1, 7), integer=integer)
        estimator = BoundEstimator(ItemCatalog(capacity, weights, values))
        n = len(weights)

        for depth in range(-1, n):
            for decided in itertools.product((0, 1), repeat=depth + 1):
                used = sum(w for w, x in zip(weights, decided) if x)
                if used > capacity:
                    continue
                value = sum(v for v, x in zip(values, decided) if x)
                state = SearchState(value, capacity - used)

                best_rest = brute_force(weights[depth + 1:], values[depth + 1:], capacity - used)
                assert estimator.bound(state, depth) >= value + best_rest - 1e-9
