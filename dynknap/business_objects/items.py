# -*- coding: utf-8 -*-
"""
Item model for the grouped dynamic-weight knapsack.
"""

from __future__ import annotations
from dataclasses import dataclass
from .errors import StateValidationError


def _is_int(x: object) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


@dataclass(frozen=True)
class Item:
    """
    An item that can be accepted at most once, inside its own group.

    Attributes
    ----------
    value : int
        Nonnegative objective contribution if accepted.
    base_weight : int
        Positive cost at acceptance position 0.
    group : int
        Nonnegative index of the group the item belongs to.
    """
    value: int
    base_weight: int
    group: int

    def __post_init__(self) -> None:  # type: ignore[override]
        for name in ("value", "base_weight", "group"):
            if not _is_int(getattr(self, name)):
                raise StateValidationError(f"Item.{name} must be an integer.")
        if self.value < 0:
            raise StateValidationError(f"Item{self} value must be >= 0.")
        if self.base_weight < 1:
            raise StateValidationError(f"Item{self} base_weight must be >= 1.")
        if self.group < 0:
            raise StateValidationError(f"Item{self} group must be >= 0.")

    def dynamic_weight(self, k: int, rate: int) -> int:
        """Cost of the item when k items are already accepted in its group."""
        return self.base_weight + rate * k

    def __str__(self) -> str:
        return f"(v={self.value}, w={self.base_weight})"
