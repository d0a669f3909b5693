# -*- coding: utf-8 -*-
"""
Result models for grouped dynamic-weight knapsack runs.

These data classes define the shape of outputs produced by the solvers
and consumed by the reporting/tracker layers.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple

from dynknap.business_objects.items import Item


@dataclass(frozen=True)
class GroupResult:
    """
    Optimal selection for one non-empty group.

    Attributes
    ----------
    group_index : int
        The group solved.
    items_selected : int
        Number of accepted items (== len(selected_items)).
    dynamic_time_used : int
        Sum of dynamic weights of the selection, costed by acceptance position.
    max_value : int
        Total value of the selection.
    selected_items : tuple[Item, ...]
        Accepted items in acceptance order.
    """
    group_index: int
    items_selected: int
    dynamic_time_used: int
    max_value: int
    selected_items: Tuple[Item, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:  # type: ignore[override]
        if not isinstance(self.selected_items, tuple):
            object.__setattr__(self, "selected_items", tuple(self.selected_items))


@dataclass(frozen=True)
class SolverResult:
    """
    Aggregated results for a full run.

    Attributes
    ----------
    max_value : int
        Max over group_results[*].max_value, 0 when there are none.
    total_time : float
        Wall-clock milliseconds for the run (diagnostic only).
    group_results : tuple[GroupResult, ...]
        One entry per non-empty group, ascending group index.
    """
    max_value: int
    total_time: float
    group_results: Tuple[GroupResult, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:  # type: ignore[override]
        if not isinstance(self.group_results, tuple):
            object.__setattr__(self, "group_results", tuple(self.group_results))

    def best_group(self) -> Optional[GroupResult]:
        """First group (lowest index) attaining max_value, or None."""
        for gr in self.group_results:
            if gr.max_value == self.max_value:
                return gr
        return None

    def for_group(self, group_index: int) -> Optional[GroupResult]:
        for gr in self.group_results:
            if gr.group_index == group_index:
                return gr
        return None
