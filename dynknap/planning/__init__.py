# -*- coding: utf-8 -*-
"""
Planning layer public API.

This module exposes the core planning-time data contracts:
  - SolverConfig (G, T, R and run knobs)
  - ProblemState (immutable input snapshot)
  - GroupResult and SolverResult

Solvers, the aggregator, the tracker and the workbench session are not
exported here; import them explicitly when needed.
"""

from .policy import SolverConfig
from .state import ProblemState
from .solution import GroupResult, SolverResult

__all__ = [
    "SolverConfig",
    "ProblemState",
    "GroupResult",
    "SolverResult",
]
