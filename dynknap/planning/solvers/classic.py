# -*- coding: utf-8 -*-
"""
Classic 0/1 knapsack by base weight (1-D capacity sweep).

Exact only when rate == 0: position cost is then constant and the
(k, t) table of solvers.dynamic collapses onto t alone. Used as the
reference solver for that special case.
"""

from __future__ import annotations
import logging
from typing import List, Sequence

from dynknap.business_objects.errors import ComputationOverflowError
from dynknap.business_objects.items import Item
from dynknap.planning.policy import MAX_TOTAL_VALUE
from dynknap.planning.solution import GroupResult

logger = logging.getLogger(__name__)


def solve_classic_group(
    group_index: int,
    group_items: Sequence[Item],
    capacity: int,
) -> GroupResult:
    """
    1-D 0/1 knapsack over base weights with capacity `capacity`.

    dp[t] is the best value with total base weight <= t; iterating t backwards
    keeps each item single-use. The reported state is the smallest t holding
    the best value.
    """
    dp: List[int] = [0] * (capacity + 1)
    sel: List[List[Item]] = [[] for _ in range(capacity + 1)]

    for it in group_items:
        w, v = it.base_weight, it.value
        for t in range(capacity, w - 1, -1):
            nv = dp[t - w] + v
            if nv > MAX_TOTAL_VALUE:
                raise ComputationOverflowError(f"Cumulative value {nv} exceeds {MAX_TOTAL_VALUE}.")
            if nv > dp[t]:
                dp[t] = nv
                sel[t] = sel[t - w] + [it]

    best_val, best_t = 0, 0
    for t in range(capacity + 1):
        if dp[t] > best_val:
            best_val, best_t = dp[t], t

    picked = sel[best_t]
    logger.debug("group %d (classic): value=%d, t=%d/%d", group_index, best_val, best_t, capacity)
    return GroupResult(
        group_index=group_index,
        items_selected=len(picked),
        dynamic_time_used=sum(it.base_weight for it in picked),
        max_value=best_val,
        selected_items=tuple(picked),
    )
