# -*- coding: utf-8 -*-
"""
Workbench: headless editing session behind an interactive front end.

Holds the parameter values, the item list being edited and the last
successful result. Every mutating call validates first and changes nothing
when validation fails.

solve() snapshots the session into an immutable ProblemState and runs it
through aggregator.submit_run; the session may be edited while the
run is in flight. Only the most recently started run may publish its
result: a run that finishes after a newer solve() (or a clear/reset) was
issued still resolves its own Future but leaves last_result alone.
"""

from __future__ import annotations
import functools
import logging
import threading
from concurrent.futures import Executor, Future
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from dynknap.business_objects.errors import EmptyItemSetError
from dynknap.business_objects.items import Item
from dynknap.business_objects import validation
from dynknap.reporting.formatter import format_result, initial_result_text
from .policy import DEFAULT_CAPACITY, DEFAULT_GROUPS, DEFAULT_RATE, SolverConfig
from .solution import SolverResult
from .state import ProblemState
from .aggregator import solve, submit_run

logger = logging.getLogger(__name__)

# Demonstration data set: (value, weight, group), 20 items in each of groups 0..2.
SAMPLE_ITEMS: Tuple[Tuple[int, int, int], ...] = (
    (60, 10, 0), (100, 20, 0), (120, 30, 0), (80, 15, 0), (90, 25, 0),
    (110, 35, 0), (70, 12, 0), (95, 22, 0), (105, 28, 0), (85, 18, 0),
    (75, 14, 0), (115, 32, 0), (65, 11, 0), (125, 38, 0), (88, 19, 0),
    (92, 21, 0), (78, 16, 0), (102, 26, 0), (108, 29, 0), (82, 17, 0),

    (130, 40, 1), (140, 45, 1), (150, 50, 1), (135, 42, 1), (145, 47, 1),
    (155, 52, 1), (132, 41, 1), (142, 46, 1), (152, 51, 1), (138, 44, 1),
    (148, 48, 1), (158, 53, 1), (133, 43, 1), (143, 49, 1), (160, 55, 1),
    (136, 39, 1), (146, 46, 1), (156, 54, 1), (139, 42, 1), (149, 47, 1),

    (170, 60, 2), (180, 65, 2), (190, 70, 2), (175, 62, 2), (185, 67, 2),
    (195, 72, 2), (172, 61, 2), (182, 66, 2), (192, 71, 2), (178, 64, 2),
    (188, 68, 2), (198, 73, 2), (173, 63, 2), (183, 69, 2), (200, 75, 2),
    (176, 59, 2), (186, 66, 2), (196, 74, 2), (179, 62, 2), (189, 67, 2),
)
SAMPLE_GROUPS = 3


@dataclass
class Workbench:
    """
    Mutable session state.

    Attributes
    ----------
    groups, capacity, rate : int
        Current G, T, R.
    items : list[Item]
        Items in insertion order.
    last_result : SolverResult | None
        Result of the newest successful solve.
    """
    groups: int = DEFAULT_GROUPS
    capacity: int = DEFAULT_CAPACITY
    rate: int = DEFAULT_RATE
    items: List[Item] = field(default_factory=list)
    last_result: Optional[SolverResult] = None
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)
    _run_seq: int = field(default=0, init=False, repr=False, compare=False)

    def set_parameters(self, groups_text: Any, capacity_text: Any, rate_text: Any) -> None:
        """Validate and apply G, T, R; raises InputValidationError."""
        g = validation.parse_groups(groups_text)
        t = validation.parse_capacity(capacity_text)
        r = validation.parse_rate(rate_text)
        self.groups, self.capacity, self.rate = g, t, r

    def add_item(self, value_text: Any, weight_text: Any, group_text: Any) -> Item:
        """Validate the item fields against the current G and append."""
        value, weight, group = validation.parse_item_fields(
            value_text, weight_text, group_text, self.groups
        )
        item = Item(value=value, base_weight=weight, group=group)
        self.items.append(item)
        return item

    def load_sample_data(self) -> List[Item]:
        """
        Append the 60-item demonstration set.

        G is raised to 3 when smaller so every sample group is valid; T and R
        are left as they are.
        """
        if self.groups < SAMPLE_GROUPS:
            self.groups = SAMPLE_GROUPS
        added = [self.add_item(v, w, g) for v, w, g in SAMPLE_ITEMS]
        logger.info("loaded %d sample items", len(added))
        return added

    def clear_items(self) -> None:
        self.items.clear()
        with self._lock:
            self._run_seq += 1
            self.last_result = None

    def reset(self) -> None:
        """Back to default parameters with no items and no result."""
        self.groups, self.capacity, self.rate = DEFAULT_GROUPS, DEFAULT_CAPACITY, DEFAULT_RATE
        self.clear_items()

    def snapshot(self) -> ProblemState:
        """
        Immutable input for a run. Items whose group no longer fits the
        current G make this raise StateValidationError.
        """
        cfg = SolverConfig(groups=self.groups, capacity=self.capacity, rate=self.rate)
        return ProblemState(config=cfg, items=tuple(self.items))

    def _run(self, state: ProblemState, ticket: int) -> SolverResult:
        result = solve(state)
        with self._lock:
            if ticket == self._run_seq:
                self.last_result = result
            else:
                logger.debug("run %d superseded by run %d; result not stored", ticket, self._run_seq)
        return result

    def solve(self, executor: Optional[Executor] = None) -> "Future[SolverResult]":
        """
        Validate, snapshot and start a run.

        Raises EmptyItemSetError when there are no items; in that case no run
        starts. last_result is replaced only when the run succeeds and no
        newer run was started in the meantime.
        """
        if not self.items:
            logger.warning("solve requested with no items")
            raise EmptyItemSetError("Please add some items first!")

        state = self.snapshot()
        with self._lock:
            self._run_seq += 1
            ticket = self._run_seq
        return submit_run(functools.partial(self._run, ticket=ticket), state, executor)

    def report(self) -> str:
        if self.last_result is None:
            return initial_result_text()
        return format_result(self.last_result)
