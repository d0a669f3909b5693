# -*- coding: utf-8 -*-
"""
Per-group solvers.

  - dynamic.solve_group          exact (k, t) DP under position-dependent cost
  - classic.solve_classic_group  1-D base-weight knapsack (rate == 0 only)
"""

from .dynamic import solve_group, selection_cost
from .classic import solve_classic_group

__all__ = ["solve_group", "selection_cost", "solve_classic_group"]
