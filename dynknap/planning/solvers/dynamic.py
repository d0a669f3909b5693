# -*- coding: utf-8 -*-
"""
Group solver for position-dependent ("dynamic") weights.

An item accepted when k items of its group are already in the selection costs
    base_weight + rate * k
and a group's selection must keep its cumulative cost within `capacity`.

State table
-----------
dp[k][t] = best total value using exactly k accepted items whose cumulative
dynamic cost is exactly t; None marks an unreached state (a reachable state
may legitimately hold 0).

  - base:       dp[0][0] = 0
  - transition: item (w, v), reachable (k, t), cost = w + rate*k:
                (k+1, t+cost) <- dp[k][t] + v   if t + cost <= capacity
                                                and strictly better
  - each item is folded against a snapshot of the table taken before it,
    so an item is used at most once
  - answer:     max value, ties -> smallest t, then smallest k

Rows are bounded by min(m, capacity): every item costs at least 1, so k <= t.

Witness recovery
----------------
Instead of copying a selection list into every improved state, each fold
records the set of states it improved. Walking the folds backwards from the
terminal state and stepping to (k-1, t - cost(k-1)) whenever the current fold
improved (k, t) rebuilds the exact selection in acceptance order.

Complexity: O(m * T^2) time and space per group of m items.
"""

from __future__ import annotations
import logging
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from dynknap.business_objects.errors import ComputationOverflowError, SolverInvariantError
from dynknap.business_objects.items import Item
from dynknap.planning.policy import MAX_TOTAL_VALUE
from dynknap.planning.solution import GroupResult

logger = logging.getLogger(__name__)

State = Tuple[int, int]
Table = List[List[Optional[int]]]


def selection_cost(selection: Iterable[Item], rate: int) -> int:
    """Cumulative dynamic cost of `selection` accepted in the given order."""
    return sum(it.dynamic_weight(k, rate) for k, it in enumerate(selection))


def _new_table(rows: int, capacity: int) -> Table:
    table: Table = [[None] * (capacity + 1) for _ in range(rows + 1)]
    table[0][0] = 0
    return table


def _fold_item(table: Table, item: Item, capacity: int, rate: int) -> Tuple[Table, Set[State]]:
    """
    Apply the 0/1 transitions of `item` to a copy of `table`.

    Returns the next table and the set of states this item improved.
    Reads come only from the snapshot, writes only go to the copy.
    """
    nxt: Table = [row[:] for row in table]
    improved: Set[State] = set()

    for k in range(len(table) - 1):
        cost = item.dynamic_weight(k, rate)
        if cost > capacity:
            # cost is nondecreasing in k
            break
        src = table[k]
        dst = nxt[k + 1]
        for t in range(capacity - cost + 1):
            v = src[t]
            if v is None:
                continue
            cand = v + item.value
            if cand > MAX_TOTAL_VALUE:
                raise ComputationOverflowError(
                    f"Cumulative value {cand} exceeds {MAX_TOTAL_VALUE} "
                    f"at state ({k + 1}, {t + cost})."
                )
            cur = dst[t + cost]
            if cur is None or cand > cur:
                dst[t + cost] = cand
                improved.add((k + 1, t + cost))

    return nxt, improved


def _best_state(table: Table) -> State:
    """Reachable state with max value; ties -> smallest t, then smallest k."""
    best: Optional[Tuple[int, int, int]] = None  # (-value, t, k)
    for k, row in enumerate(table):
        for t, v in enumerate(row):
            if v is None:
                continue
            key = (-v, t, k)
            if best is None or key < best:
                best = key
    if best is None:
        raise SolverInvariantError("Base state (0, 0) is unreachable.")
    return best[2], best[1]


def _backtrack(
    items: Sequence[Item],
    improved_by: Sequence[Set[State]],
    terminal: State,
    rate: int,
) -> List[Item]:
    k, t = terminal
    picked: List[Item] = []
    for idx in range(len(items) - 1, -1, -1):
        if (k, t) in improved_by[idx]:
            it = items[idx]
            k -= 1
            t -= it.dynamic_weight(k, rate)
            picked.append(it)
    if (k, t) != (0, 0):
        raise SolverInvariantError(
            f"Witness for {terminal} ends at ({k}, {t}) instead of (0, 0)."
        )
    picked.reverse()
    return picked


def _check_witness(witness: Sequence[Item], terminal: State, value: int, capacity: int, rate: int) -> None:
    k, t = terminal
    if len(witness) != k:
        raise SolverInvariantError(f"Witness has {len(witness)} items, state says {k}.")
    cost = selection_cost(witness, rate)
    if cost != t or t > capacity:
        raise SolverInvariantError(f"Witness costs {cost}, state says {t} (capacity {capacity}).")
    total = sum(it.value for it in witness)
    if total != value:
        raise SolverInvariantError(f"Witness is worth {total}, state says {value}.")


def solve_group(
    group_index: int,
    group_items: Sequence[Item],
    capacity: int,
    rate: int,
) -> GroupResult:
    """
    Value-maximal, cost-minimal selection for one group.

    Parameters
    ----------
    group_index : int
        Index of the group; every item must belong to it.
    group_items : Sequence[Item]
        The group's items in input order (callers skip empty groups).
    capacity : int
        T, max cumulative dynamic cost.
    rate : int
        R, cost increment per already-accepted item.

    Returns
    -------
    GroupResult
        Selection in acceptance order with its exact dynamic cost.

    Raises
    ------
    ComputationOverflowError
        When a cumulative value exceeds MAX_TOTAL_VALUE.
    SolverInvariantError
        When a recovered witness disagrees with its DP state.
    """
    items = list(group_items)
    for it in items:
        if it.group != group_index:
            raise SolverInvariantError(f"Item {it} of group {it.group} passed to group {group_index}.")

    rows = min(len(items), capacity)
    table = _new_table(rows, capacity)
    improved_by: List[Set[State]] = []

    for it in items:
        table, improved = _fold_item(table, it, capacity, rate)
        improved_by.append(improved)

    terminal = _best_state(table)
    k_star, t_star = terminal
    value = table[k_star][t_star]
    if value is None:
        raise SolverInvariantError(f"Best state {terminal} of group {group_index} is unreached.")

    witness = _backtrack(items, improved_by, terminal, rate)
    _check_witness(witness, terminal, value, capacity, rate)

    logger.debug(
        "group %d: %d items -> value=%d, k=%d, t=%d/%d",
        group_index, len(items), value, k_star, t_star, capacity,
    )
    return GroupResult(
        group_index=group_index,
        items_selected=k_star,
        dynamic_time_used=t_star,
        max_value=value,
        selected_items=tuple(witness),
    )
