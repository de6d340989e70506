# bnb_kp/solvers/classic/bnb_solver.py
# -*- coding: utf-8 -*-
"""
Branch and bound solver for the 0/1 knapsack problem.

The solver is meant for instances of roughly 100-500 items. The problem is
NP-hard and pruning only helps as much as the data allows: two instances of
the same size can take milliseconds or tens of seconds.

Usage:
    solver = BnBSolver(11, weights=[4, 5, 8, 3], values=[8, 10, 15, 4])
    solver.solve()                # [0, 0, 1, 1]
    solver.get_objective_value()  # 19.0

When no values are given, the weights double as values (subset sum).
"""

import time
import logging
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple

from bnb_kp.solvers.interface import SolverInterface
from .bound import BoundEstimator
from .items import ItemCatalog
from .search import SearchStats, SolverContext, search

logger = logging.getLogger(__name__)


class BnBSolver:
    """
    Exact 0/1 knapsack solver using depth-first branch and bound.

    Args:
        capacity (float): capacity of the knapsack.
        weights (iterable): nonnegative item weights.
        values (iterable, optional): nonnegative item values; defaults to the weights.
        trace (bool): log every search node at DEBUG level.

    Raises:
        InvalidInput: on mismatched lengths, a negative capacity or a
            negative (or non-finite) weight or value.

    Capacity arithmetic is plain floating point with no tolerance: a branch
    is feasible when capacity minus the chosen weights, subtracted one at a
    time, stays >= 0, and the sack counts as full only when that remainder
    is exactly 0. Weights off a binary grid (0.1, 0.2, ...) can therefore
    reject a selection whose decimal sum fits exactly; scale such weights to
    integers when that matters.

    Each call to solve() runs on its own SolverContext, so a solver can be
    solved repeatedly. The published result (objective_value, selection,
    stats) is that of the last completed solve; do not share one solver
    between threads.
    """

    def __init__(self, capacity: float, weights: Iterable, values: Optional[Iterable] = None,
                 trace: bool = False):
        self.catalog = ItemCatalog(capacity, weights, values)
        self.estimator = BoundEstimator(self.catalog)
        self.trace = trace

        self._objective_value = 0.0
        self._selection: Optional[List[int]] = None
        self.stats: Optional[SearchStats] = None

    @property
    def objective_value(self) -> float:
        """Value of the selection returned by the last solve, 0.0 before any solve."""
        return self._objective_value

    def get_objective_value(self) -> float:
        return self._objective_value

    @property
    def selection(self) -> Optional[List[int]]:
        return None if self._selection is None else list(self._selection)

    def solve(self, should_stop: Optional[Callable[[], bool]] = None) -> List[int]:
        """
        Finds an optimal selection.

        Args:
            should_stop (callable, optional): polled before every branching
                decision. A truthy answer aborts with SolveCancelled and leaves
                the previously published result untouched.

        Returns:
            List[int]: one entry per item in input order, 1 if the item is in
            the sack and 0 otherwise.
        """
        context = SolverContext(self.catalog, self.estimator, should_stop=should_stop, trace=self.trace)

        start_time = time.perf_counter()
        incumbent = search(context)
        elapsed = time.perf_counter() - start_time

        self._objective_value = incumbent.objective
        self._selection = list(incumbent.selection)
        self.stats = context.stats

        logger.debug(
            f"Solved n={len(self.catalog)} capacity={self.catalog.capacity:g}: "
            f"objective={incumbent.objective:g} nodes={context.stats.nodes} "
            f"pruned={context.stats.pruned} leaves={context.stats.leaves} "
            f"in {elapsed:.6f}s"
        )
        return list(self._selection)


def solve_knapsack(capacity: float, weights: Iterable, values: Optional[Iterable] = None) -> Tuple[List[int], float]:
    """One-shot helper returning (selection, objective value)."""
    solver = BnBSolver(capacity, weights, values)
    selection = solver.solve()
    return selection, solver.get_objective_value()


class BranchAndBoundSolver(SolverInterface):
    """
    Registry adapter for BnBSolver. Recognised config keys: 'trace'.
    """
    def __init__(self, config: dict = None):
        super().__init__(config)
        self.name = "Branch and Bound"

    def _solve(self, weights: Sequence, values: Sequence, capacity: Any) -> Tuple[float, List[int]]:
        solver = BnBSolver(capacity, weights, values, trace=bool(self.config.get("trace", False)))
        solution = solver.solve()
        return solver.get_objective_value(), solution
