# test/conftest.py
import itertools
import random

import pytest


def brute_force(weights, values, capacity):
    """Best objective over all 2^n selections (small n only)."""
    best = 0.0
    for selection in itertools.product((0, 1), repeat=len(weights)):
        weight = sum(w for w, x in zip(weights, selection) if x)
        if weight <= capacity:
            best = max(best, sum(v for v, x in zip(values, selection) if x))
    return best


def random_instance(rng: random.Random, n: int, integer: bool = True):
    if integer:
        weights = [rng.randint(1, 30) for _ in range(n)]
        values = [rng.randint(1, 30) for _ in range(n)]
    else:
        weights = [round(rng.uniform(0.5, 20.0), 3) for _ in range(n)]
        values = [round(rng.uniform(0.5, 20.0), 3) for _ in range(n)]
    ratio = rng.uniform(0.2, 0.8)
    if integer:
        capacity = int(sum(weights) * ratio)
    else:
        # half a step off the 0.001 grid, so no subset sits exactly on the capacity
        capacity = round(sum(weights) * ratio, 3) + 0.0005
    return weights, values, capacity


@pytest.fixture
def rng():
    return random.Random(20240611)


@pytest.fixture
def scenario_a():
    return {"weights": [4, 5, 8, 3], "values": [8, 10, 15, 4], "capacity": 11}


@pytest.fixture
def scenario_b():
    return {"weights": [28, 25, 35, 45, 20, 45], "capacity": 120}
