# -*- coding: utf-8 -*-
"""
SolverConfig (configuration knobs) for the grouped dynamic-weight knapsack.

Problem parameters:
  - groups   : G, number of groups (indices 0..G-1)
  - capacity : T, maximum cumulative dynamic cost per group
  - rate     : R, cost growth per already-accepted item in the same group

Run control:
  - mode        : "dynamic" (position-dependent cost) or "classic"
                  (base weights only; valid only when rate == 0)
  - max_workers : solve groups on a thread pool of this size; None or 1 = sequential
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from dynknap.business_objects.errors import StateValidationError

# Largest cumulative value a group may reach (signed 32-bit range of the
# report/CSV consumers). Exceeding it aborts the solve.
MAX_TOTAL_VALUE: int = 2**31 - 1

SOLVER_MODES = ("dynamic", "classic")

# Defaults of a fresh interactive session
DEFAULT_GROUPS: int = 2
DEFAULT_CAPACITY: int = 100
DEFAULT_RATE: int = 0


@dataclass(frozen=True)
class SolverConfig:
    """
    Solver knobs (pure data holder).

    Attributes
    ----------
    groups : int
        Number of groups G (>= 1).
    capacity : int
        Capacity T (>= 1).
    rate : int
        Rate R (>= 0).
    mode : str
        "dynamic" | "classic".
    max_workers : int | None
        Thread-pool size for solving groups in parallel.
    """
    groups: int = DEFAULT_GROUPS
    capacity: int = DEFAULT_CAPACITY
    rate: int = DEFAULT_RATE

    mode: str = "dynamic"
    max_workers: Optional[int] = None

    def __post_init__(self) -> None:  # type: ignore[override]
        for name in ("groups", "capacity", "rate"):
            v = getattr(self, name)
            if not isinstance(v, int) or isinstance(v, bool):
                raise StateValidationError(f"SolverConfig.{name} must be an integer.")
        if self.groups < 1:
            raise StateValidationError("SolverConfig.groups must be >= 1.")
        if self.capacity < 1:
            raise StateValidationError("SolverConfig.capacity must be >= 1.")
        if self.rate < 0:
            raise StateValidationError("SolverConfig.rate must be >= 0.")
        if self.mode not in SOLVER_MODES:
            raise StateValidationError(
                f"Unknown solver mode: {self.mode}. Expected one of: {', '.join(SOLVER_MODES)}."
            )
        if self.mode == "classic" and self.rate != 0:
            raise StateValidationError("Classic mode ignores position cost; it requires rate == 0.")
        if self.max_workers is not None and self.max_workers < 1:
            raise StateValidationError("SolverConfig.max_workers must be >= 1 when set.")
