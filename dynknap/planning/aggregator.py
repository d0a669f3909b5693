# -*- coding: utf-8 -*-
"""
Aggregator: run the group solver once per non-empty group and merge.

Pipeline per run:
  1) Partition items by group (input order preserved inside each group)
  2) Skip empty groups
  3) Solve each group (sequentially, or on a thread pool when
     config.max_workers > 1; each worker owns its DP table)
  4) Collect GroupResults in ascending group index and take the max value

A failure in any group aborts the run; no partial SolverResult is returned.
"""

from __future__ import annotations
import logging
import time
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Callable, Dict, List, Optional

from dynknap.business_objects.items import Item
from .policy import SolverConfig
from .solution import GroupResult, SolverResult
from .state import ProblemState
from .partition import partition_by_group
from .solvers.dynamic import solve_group
from .solvers.classic import solve_classic_group

logger = logging.getLogger(__name__)

GroupSolverFn = Callable[[int, List[Item]], GroupResult]


def _group_solver_for(config: SolverConfig) -> GroupSolverFn:
    if config.mode == "classic":
        return lambda g, items: solve_classic_group(g, items, config.capacity)
    return lambda g, items: solve_group(g, items, config.capacity, config.rate)


def _solve_groups(config: SolverConfig, parts: Dict[int, List[Item]]) -> List[GroupResult]:
    solver = _group_solver_for(config)
    jobs = [(g, items) for g, items in parts.items() if items]

    workers = config.max_workers or 1
    if workers <= 1 or len(jobs) <= 1:
        results = [solver(g, items) for g, items in jobs]
    else:
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="dynknap-group") as pool:
            futures = [pool.submit(solver, g, items) for g, items in jobs]
            # .result() re-raises the first failure; the pool drains the rest
            results = [f.result() for f in futures]

    results.sort(key=lambda gr: gr.group_index)
    return results


def solve(state: ProblemState) -> SolverResult:
    """
    Solve every group of `state` and aggregate.

    Returns
    -------
    SolverResult
        max_value over groups (0 if no items), elapsed ms, and one
        GroupResult per non-empty group in ascending group order.
    """
    cfg = state.config
    start = time.perf_counter()

    parts = partition_by_group(state.items, cfg.groups)
    group_results = _solve_groups(cfg, parts)

    max_value = 0
    for gr in group_results:
        max_value = max(max_value, gr.max_value)

    total_time = (time.perf_counter() - start) * 1000.0
    logger.info(
        "solved %d items in %d/%d groups (T=%d, R=%d, mode=%s): max_value=%d in %.3f ms",
        len(state.items), len(group_results), cfg.groups,
        cfg.capacity, cfg.rate, cfg.mode, max_value, total_time,
    )
    return SolverResult(
        max_value=max_value,
        total_time=total_time,
        group_results=tuple(group_results),
    )


def submit_run(
    run: Callable[[ProblemState], SolverResult],
    state: ProblemState,
    executor: Optional[Executor] = None,
) -> "Future[SolverResult]":
    """
    Submit `run(state)` to `executor` and return its Future.

    With no executor, a single-use one-thread pool is created; it shuts down
    on its own once the run finishes. Exceptions surface from
    Future.result().
    """
    if executor is not None:
        return executor.submit(run, state)

    pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix="dynknap-solve")
    try:
        return pool.submit(run, state)
    finally:
        pool.shutdown(wait=False)


def solve_async(state: ProblemState, executor: Optional[Executor] = None) -> "Future[SolverResult]":
    """Asynchronous solve(state); the caller decides how to wait or cancel."""
    return submit_run(solve, state, executor)
