# -*- coding: utf-8 -*-
"""
dynknap: grouped 0/1 knapsack with position-dependent ("dynamic") weights.

An item accepted as the k-th (zero-based) of its group costs
base_weight + rate * k; each group is solved exactly and independently,
and the overall answer is the best group value.

Typical use:

    from dynknap import Item, ProblemState, solve
    state = ProblemState.build(2, 10, 2, [Item(10, 2, 0), Item(15, 3, 0)])
    result = solve(state)
"""

from dynknap.business_objects import Item
from dynknap.planning import ProblemState, SolverConfig, GroupResult, SolverResult
from dynknap.planning.aggregator import solve, solve_async
from dynknap.reporting.formatter import format_result

__all__ = [
    "Item",
    "ProblemState",
    "SolverConfig",
    "GroupResult",
    "SolverResult",
    "solve",
    "solve_async",
    "format_result",
]

__version__ = "0.1.0"
