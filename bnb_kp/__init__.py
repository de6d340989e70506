# -*- coding: utf-8 -*-
"""
Exact 0/1 knapsack solving with depth-first branch and bound.
"""

from .errors import KnapsackError, InvalidInput, InstanceFormatError, SolveCancelled
from .solvers.classic.bnb_solver import BnBSolver, solve_knapsack

__all__ = [
    "BnBSolver",
    "solve_knapsack",
    # errors
    "KnapsackError",
    "InvalidInput",
    "InstanceFormatError",
    "SolveCancelled",
]

__version__ = "0.1.0"
