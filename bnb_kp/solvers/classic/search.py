# bnb_kp/solvers/classic/search.py
# -*- coding: utf-8 -*-
"""
Depth-first branch and bound over the 0/1 decisions of a knapsack instance.

This module defines:
  - SearchState:   value of a partial decision (current value, remaining capacity, bound)
  - SearchStats:   counters collected during one solve
  - Incumbent:     best feasible selection found so far
  - SolverContext: all mutable search data of a single solve call
  - search():      the search driver

Notes
-----
- The search walks an explicit stack of frames instead of recursing, so the
  depth of the tree (one level per item) is not limited by the interpreter.
- The assignment trail is shared by all frames. The entry of the item decided
  at a frame is set before a child is entered and reset to 0 when the frame
  resumes, whether the child was explored or pruned.
"""

from __future__ import annotations
import logging
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, List, Optional, Tuple

from bnb_kp.errors import SolveCancelled
from .bound import BoundEstimator
from .items import Item, ItemCatalog

logger = logging.getLogger(__name__)

EXCLUDE = 0
INCLUDE = 1


@dataclass
class SearchState:
    """
    A partial assignment of the items decided so far.

    remaining_capacity may be negative, which marks the state as infeasible.
    """
    current_value: float
    remaining_capacity: float
    bound: float = 0.0

    def child(self, item: Item, decision: int) -> "SearchState":
        if decision == INCLUDE:
            return SearchState(self.current_value + item.value, self.remaining_capacity - item.weight)
        return SearchState(self.current_value, self.remaining_capacity)

    def __str__(self) -> str:
        return f"SIT[{self.current_value:g}, {self.remaining_capacity:g}, {self.bound:g}]"


@dataclass
class SearchStats:
    """Counters for one solve call."""
    nodes: int = 0
    leaves: int = 0
    pruned: int = 0
    infeasible: int = 0
    improvements: int = 0


class Incumbent:
    """
    Best feasible solution found so far.

    The objective only grows: a leaf replaces the incumbent when it is
    feasible and strictly better. The selection is a snapshot of the trail,
    never a reference to it.
    """

    def __init__(self, objective: float, selection: List[int]):
        self.objective = objective
        self.selection = list(selection)

    def offer(self, state: SearchState, trail: List[int]) -> bool:
        if state.remaining_capacity < 0:
            return False
        if state.current_value <= self.objective:
            return False
        self.selection = list(trail)
        self.objective = state.current_value
        return True


@dataclass
class _Frame:
    state: SearchState
    depth: int
    pending: Optional[Deque[Tuple[int, SearchState]]] = None


class SolverContext:
    """
    Mutable data owned by exactly one solve call.

    Args:
        catalog (ItemCatalog): the instance being solved.
        estimator (BoundEstimator): bound estimator over ``catalog``; built
            from the catalog when omitted.
        should_stop (callable): optional; polled before every branching
            decision, a truthy result aborts the search with SolveCancelled.
        trace (bool): log every node at DEBUG level.
    """

    def __init__(
        self,
        catalog: ItemCatalog,
        estimator: Optional[BoundEstimator] = None,
        should_stop: Optional[Callable[[], bool]] = None,
        trace: bool = False,
    ):
        self.catalog = catalog
        self.estimator = estimator if estimator is not None else BoundEstimator(catalog)
        self.min_weight = catalog.min_weight
        self.should_stop = should_stop
        self.trace = trace

        # Free items are in the sack from the start and are never branched on.
        self.taken: List[int] = [0] * len(catalog)
        for item in catalog.free_items:
            self.taken[item.index] = 1

        self.incumbent = Incumbent(catalog.free_value, self.taken)
        self.stats = SearchStats()

    def root_state(self) -> SearchState:
        root = SearchState(self.catalog.free_value, self.catalog.capacity)
        # Nothing has been decided yet, hence depth -1.
        root.bound = self.estimator.bound(root, -1)
        return root

    def evaluate_leaf(self, state: SearchState, depth: int) -> None:
        self.stats.leaves += 1
        if state.remaining_capacity < 0:
            self.stats.infeasible += 1
            if self.trace:
                logger.debug("%sInfeasible leaf, capacity overflow", _indent(depth))
        elif self.incumbent.offer(state, self.taken):
            self.stats.improvements += 1
            if self.trace:
                logger.debug("%sNew incumbent %g: %s", _indent(depth), state.current_value, self.taken)
        elif self.trace:
            logger.debug(
                "%sLeaf %g does not beat incumbent %g",
                _indent(depth), state.current_value, self.incumbent.objective,
            )

    def expand(self, state: SearchState, depth: int) -> Deque[Tuple[int, SearchState]]:
        """
        Build both children of ``state`` and order them by bound, the more
        promising one first. The include branch goes first on a tie.
        """
        item = self.catalog.branch_items[depth]
        exclude = state.child(item, EXCLUDE)
        include = state.child(item, INCLUDE)
        exclude.bound = self.estimator.bound(exclude, depth)
        include.bound = self.estimator.bound(include, depth)

        if exclude.bound > include.bound:
            return deque([(EXCLUDE, exclude), (INCLUDE, include)])
        return deque([(INCLUDE, include), (EXCLUDE, exclude)])

    def check_stop(self) -> None:
        if self.should_stop is not None and self.should_stop():
            raise SolveCancelled(
                f"Search stopped after {self.stats.nodes} nodes "
                f"(incumbent {self.incumbent.objective:g})."
            )


def _indent(depth: int) -> str:
    return "   " * max(depth, 0)


def search(context: SolverContext) -> Incumbent:
    """
    Run the branch and bound search to exhaustion.

    A node is a leaf when every branching item has been decided, when the
    sack is exactly full, or when the remaining capacity is below the lightest
    branching item. Any other node with negative capacity is dropped. Before a
    child is entered its bound is compared with the incumbent, and the child
    is skipped when it cannot do strictly better.

    Returns:
        Incumbent: the context's incumbent, holding the optimal selection.
    """
    branch_items = context.catalog.branch_items
    n_branch = len(branch_items)
    taken = context.taken
    incumbent = context.incumbent
    stats = context.stats
    trace = context.trace

    stack: List[_Frame] = [_Frame(context.root_state(), 0)]

    while stack:
        frame = stack[-1]
        state, depth = frame.state, frame.depth

        if frame.pending is None:
            stats.nodes += 1
            if trace:
                logger.debug("%sExploring %s at depth %d", _indent(depth), state, depth)

            if depth == n_branch:
                context.evaluate_leaf(state, depth)
                stack.pop()
                continue
            if state.remaining_capacity == 0:
                context.evaluate_leaf(state, depth)
                stack.pop()
                continue
            if state.remaining_capacity < context.min_weight:
                context.evaluate_leaf(state, depth)
                stack.pop()
                continue
            if state.remaining_capacity < 0:
                stats.infeasible += 1
                stack.pop()
                continue

            context.check_stop()
            frame.pending = context.expand(state, depth)

        item = branch_items[depth]
        taken[item.index] = EXCLUDE

        if not frame.pending:
            stack.pop()
            continue

        decision, child = frame.pending.popleft()
        if child.bound <= incumbent.objective:
            stats.pruned += 1
            if trace:
                logger.debug(
                    "%sPruned %s of item %d, bound %g <= %g",
                    _indent(depth), "include" if decision else "exclude",
                    item.index, child.bound, incumbent.objective,
                )
            continue

        taken[item.index] = decision
        stack.append(_Frame(child, depth + 1))

    return incumbent
