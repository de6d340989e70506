# -*- coding: utf-8 -*-
"""
Classic (non-learned) knapsack solvers.

The branch-and-bound core is split into:
  - items:  Item and ItemCatalog (input order and bound order)
  - bound:  BoundEstimator (fractional relaxation bound)
  - search: SearchState, Incumbent, SolverContext and the search driver
"""

from .items import Item, ItemCatalog
from .bound import BoundEstimator
from .search import SearchState, SearchStats, Incumbent, SolverContext, search
from .bnb_solver import BnBSolver, BranchAndBoundSolver, solve_knapsack

__all__ = [
    "Item",
    "ItemCatalog",
    "BoundEstimator",
    "SearchState",
    "SearchStats",
    "Incumbent",
    "SolverContext",
    "search",
    "BnBSolver",
    "BranchAndBoundSolver",
    "solve_knapsack",
]
