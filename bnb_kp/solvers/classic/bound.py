# bnb_kp/solvers/classic/bound.py
# -*- coding: utf-8 -*-
"""
Optimistic bound for partial knapsack decisions (fractional relaxation).
"""

from __future__ import annotations
import math
from typing import TYPE_CHECKING, List, Tuple

from .items import Item, ItemCatalog

if TYPE_CHECKING:
    from .search import SearchState


class BoundEstimator:
    """
    Computes the most optimistic value reachable from a search state.

    The estimate starts from the state's current value and adds the items not
    yet decided in descending unit value. Items that fit are added whole; the
    first one that does not fit contributes ceil(unit_value * remaining) and
    fills the sack. The ceiling only raises the estimate, so the bound never
    falls below the true optimum of the subtree.
    """

    def __init__(self, catalog: ItemCatalog):
        self._order: List[Tuple[int, Item]] = [
            (catalog.position_of(item), item) for item in catalog.bound_order
        ]

    def bound(self, state: "SearchState", depth: int) -> float:
        """
        Args:
            state (SearchState): the partial decision to extrapolate from.
            depth (int): branching position of the last decided item, -1 when
                nothing has been decided yet. Items at positions <= depth are
                already folded into the state and are skipped.

        Returns:
            float: an upper bound on the value reachable from ``state``.
        """
        opt_val = state.current_value
        remaining = state.remaining_capacity

        for position, item in self._order:
            if remaining == 0:
                break
            if position <= depth:
                continue

            if item.weight <= remaining:
                opt_val += item.value
                remaining -= item.weight
            else:
                opt_val += math.ceil(item.unit_value * remaining)
                remaining = 0
                break

        # Either the sack is full or the items ran out first. In both cases
        # opt_val is the best value a relaxed continuation could reach.
        return opt_val
