# bnb_kp/solvers/classic/items.py
# -*- coding: utf-8 -*-
"""
Item catalog used by the branch-and-bound solver.

The catalog is built once per solver and never changes afterwards. It holds
two views of the same items:
  - input order, which is also the order the search branches in
  - bound order (unit value descending, lighter item first on ties), which
    the bound estimator walks to fill the remaining capacity greedily

Zero-weight items have an infinite unit value. They are 'free': the solver
always puts them in the sack before searching and never branches on them.
"""

from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from bnb_kp.errors import InvalidInput


@dataclass(frozen=True)
class Item:
    """
    A single knapsack item.

    Attributes
    ----------
    index : int
        Position of the item in the caller's input.
    value : float
        Nonnegative objective contribution if selected.
    weight : float
        Nonnegative capacity consumption.
    unit_value : float
        value / weight, or +inf for a zero-weight item.
    """
    index: int
    value: float
    weight: float
    unit_value: float = field(init=False)

    def __post_init__(self) -> None:
        unit_value = self.value / self.weight if self.weight > 0 else math.inf
        object.__setattr__(self, "unit_value", unit_value)

    @property
    def is_free(self) -> bool:
        return self.weight == 0

    def bound_key(self) -> Tuple[float, float]:
        return (-self.unit_value, self.weight)

    def __str__(self) -> str:
        return f"ITEM[{self.index:2d}, {self.value:g}, {self.weight:g}, {self.unit_value:6.3f}]"


def _as_floats(name: str, numbers: Iterable) -> List[float]:
    result = []
    for i, number in enumerate(numbers):
        try:
            number = float(number)
        except (TypeError, ValueError) as e:
            raise InvalidInput(f"{name}[{i}] is not a number: {number!r}") from e
        if not math.isfinite(number):
            raise InvalidInput(f"{name}[{i}] must be finite, got {number}.")
        if number < 0:
            raise InvalidInput(f"{name}[{i}] must be >= 0, got {number}.")
        result.append(number)
    return result


class ItemCatalog:
    """
    Immutable item facts for one knapsack instance.

    Raises InvalidInput when the weight and value sequences differ in length,
    when the capacity is negative, or when any weight or value is negative or
    not finite. An empty catalog is valid.
    """

    def __init__(self, capacity: float, weights: Iterable, values: Optional[Iterable] = None):
        weights = list(weights)
        values = weights if values is None else list(values)
        if len(weights) != len(values):
            raise InvalidInput(
                f"weights and values must have the same length ({len(weights)} != {len(values)})."
            )

        try:
            capacity = float(capacity)
        except (TypeError, ValueError) as e:
            raise InvalidInput(f"capacity is not a number: {capacity!r}") from e
        if not math.isfinite(capacity) or capacity < 0:
            raise InvalidInput(f"capacity must be a finite number >= 0, got {capacity}.")

        weights = _as_floats("weights", weights)
        values = _as_floats("values", values)

        self.capacity: float = capacity
        self.items: Tuple[Item, ...] = tuple(
            Item(index=i, value=v, weight=w) for i, (w, v) in enumerate(zip(weights, values))
        )
        # sorted() is stable, so items with equal keys keep their input order
        self.bound_order: Tuple[Item, ...] = tuple(sorted(self.items, key=Item.bound_key))

        self.branch_items: Tuple[Item, ...] = tuple(it for it in self.items if not it.is_free)
        self.free_items: Tuple[Item, ...] = tuple(it for it in self.items if it.is_free)
        self.positions: Dict[int, int] = {it.index: pos for pos, it in enumerate(self.branch_items)}
        self.min_weight: float = min((it.weight for it in self.branch_items), default=math.inf)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    @property
    def free_value(self) -> float:
        """Total value of the zero-weight items."""
        return sum((it.value for it in self.free_items), 0.0)

    def position_of(self, item: Item) -> int:
        """
        Branching position of an item, i.e. the search depth at which it is
        decided. Free items are decided before the search and report -1.
        """
        return self.positions.get(item.index, -1)
