# bnb_kp/solvers/classic/heuristic_solvers.py
from typing import Any, Dict, List, Sequence, Tuple

from bnb_kp.errors import InvalidInput
from bnb_kp.solvers.interface import SolverInterface


class GreedySolver(SolverInterface):
    """
    An approximation solver for the 0-1 Knapsack Problem using a greedy
    approach based on value-to-weight density. Does not guarantee optimality.
    """
    def __init__(self, config: Dict[str, Any] = None):
        super().__init__(config)
        self.name = "Greedy"

    def _solve(self, weights: Sequence, values: Sequence, capacity) -> Tuple[float, List[int]]:
        if len(weights) != len(values):
            raise InvalidInput(f"weights and values must have the same length ({len(weights)} != {len(values)}).")
        n = len(weights)

        items = []
        for i in range(n):
            if weights[i] > 0:
                density = values[i] / weights[i]
            else:
                density = float('inf')
            items.append({'id': i, 'value': values[i], 'weight': weights[i], 'density': density})

        # Stable sort: equal densities keep the lighter item first, then input order
        items.sort(key=lambda x: (-x['density'], x['weight']))

        total_value = 0.0
        current_weight = 0
        solution = [0] * n
        for item in items:
            if current_weight + item['weight'] <= capacity:
                current_weight += item['weight']
                total_value += item['value']
                solution[item['id']] = 1

        return total_value, solution
