# bnb_kp/solvers/classic/dp_solver.py
from typing import Any, Dict, List, Sequence, Tuple

from bnb_kp.errors import InvalidInput
from bnb_kp.solvers.interface import SolverInterface


def _integral(name: str, number) -> int:
    try:
        as_float = float(number)
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"{name} is not a number: {number!r}") from e
    if not as_float.is_integer() or as_float < 0:
        raise InvalidInput(f"Dynamic programming needs nonnegative integer {name}, got {number!r}.")
    return int(as_float)


def _check_instance(weights: Sequence, values: Sequence, capacity) -> Tuple[List[int], List[float], int]:
    if len(weights) != len(values):
        raise InvalidInput(f"weights and values must have the same length ({len(weights)} != {len(values)}).")
    int_weights = [_integral(f"weights[{i}]", w) for i, w in enumerate(weights)]
    return int_weights, [float(v) for v in values], _integral("capacity", capacity)


class DPSolver2D(SolverInterface):
    """
    A solver for the 0-1 Knapsack Problem using a 2D Dynamic Programming table.
    The selection is recovered by walking the table backwards.
    """
    def __init__(self, config: Dict[str, Any] = None):
        super().__init__(config)
        self.name = "2D DP"

    def _solve(self, weights: Sequence, values: Sequence, capacity) -> Tuple[float, List[int]]:
        weights, values, capacity = _check_instance(weights, values, capacity)
        n = len(weights)

        # dp[i][w]: best value using the first i items with capacity w
        dp = [[0.0 for _ in range(capacity + 1)] for _ in range(n + 1)]

        for i in range(1, n + 1):
            for w in range(capacity + 1):
                if weights[i - 1] <= w:
                    dp[i][w] = max(values[i - 1] + dp[i - 1][w - weights[i - 1]], dp[i - 1][w])
                else:
                    dp[i][w] = dp[i - 1][w]

        solution = [0] * n
        w = capacity
        for i in range(n, 0, -1):
            if dp[i][w] != dp[i - 1][w]:
                solution[i - 1] = 1
                w -= weights[i - 1]

        return dp[n][capacity], solution


class DPSolver1D(SolverInterface):
    """
    A solver for the 0-1 Knapsack Problem using a space-optimized 1D DP table.
    One bit row per item records which capacities took the item, which is
    enough to rebuild the selection.
    """
    def __init__(self, config: Dict[str, Any] = None):
        super().__init__(config)
        self.name = "1D DP (Optimized)"

    def _solve(self, weights: Sequence, values: Sequence, capacity) -> Tuple[float, List[int]]:
        weights, values, capacity = _check_instance(weights, values, capacity)
        n = len(weights)

        dp = [0.0] * (capacity + 1)
        keep = [bytearray(capacity + 1) for _ in range(n)]

        for i in range(n):
            current_weight = weights[i]
            current_value = values[i]
            # Iterate in reverse so dp[j - current_weight] still refers to the previous item
            for j in range(capacity, current_weight - 1, -1):
                candidate = current_value + dp[j - current_weight]
                if candidate > dp[j]:
                    dp[j] = candidate
                    keep[i][j] = 1

        solution = [0] * n
        j = capacity
        for i in range(n - 1, -1, -1):
            if keep[i][j]:
                solution[i] = 1
                j -= weights[i]

        return dp[capacity], solution
