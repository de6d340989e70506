# bnb_kp/solvers/interface.py
import time
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence, Tuple

from bnb_kp.utils.generator import load_instance_from_file


class SolverInterface(ABC):
    """
    Common contract of every solver in the registry.

    Results are dictionaries with the keys 'value' (objective of the returned
    selection), 'time' (seconds spent solving, file loading excluded) and
    'solution' (0/1 list in item order).
    """
    def __init__(self, config: Dict[str, Any] = None):
        self.config = dict(config or {})
        self.name = self.__class__.__name__

    def solve(self, instance_path: str) -> Dict[str, Any]:
        weights, values, capacity = load_instance_from_file(instance_path)
        return self.solve_instance(weights, values, capacity)

    def solve_instance(self, weights: Sequence, values: Sequence, capacity) -> Dict[str, Any]:
        start_time = time.perf_counter()
        value, solution = self._solve(weights, values, capacity)
        end_time = time.perf_counter()
        return {"value": value, "time": end_time - start_time, "solution": solution}

    @abstractmethod
    def _solve(self, weights: Sequence, values: Sequence, capacity) -> Tuple[float, List[int]]:
        """Returns (objective value, 0/1 selection)."""
