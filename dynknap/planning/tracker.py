# -*- coding: utf-8 -*-
"""
Solve tracker: CSV/text artifacts for a finished run.

Files produced (when Tracker is used):
  - group_results.csv    (one row per solved group)
  - selections.csv       (accepted items per group, in acceptance order)
  - problem_summary.csv  (global KPIs)
  - report.txt           (formatted report)

Notes
-----
- Callers decide when to invoke these writers; scripts/run_problem.py calls
  write_all() after solve().
"""

from __future__ import annotations
import csv
import os
from dataclasses import dataclass
from typing import Dict

from dynknap.planning import ProblemState, SolverResult
from dynknap.reporting.formatter import format_result


@dataclass
class Tracker:
    """
    Thin, opt-in artifact writer. Callers control when/where to dump.
    """
    out_dir: str

    def __post_init__(self) -> None:  # type: ignore[override]
        os.makedirs(self.out_dir, exist_ok=True)

    def write_group_results_csv(
        self,
        state: ProblemState,
        result: SolverResult,
        filename: str = "group_results.csv",
    ) -> str:
        """
        Columns:
          group_index, items_selected, dynamic_time_used, max_value,
          capacity, utilization_pct
        """
        path = os.path.join(self.out_dir, filename)
        cap = state.config.capacity

        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow([
                "group_index",
                "items_selected",
                "dynamic_time_used",
                "max_value",
                "capacity",
                "utilization_pct",
            ])
            for gr in result.group_results:
                w.writerow([
                    gr.group_index,
                    gr.items_selected,
                    gr.dynamic_time_used,
                    gr.max_value,
                    cap,
                    _fmt(gr.dynamic_time_used / cap * 100.0),
                ])
        return path

    def write_selections_csv(
        self,
        state: ProblemState,
        result: SolverResult,
        filename: str = "selections.csv",
    ) -> str:
        """
        Columns:
          group_index, position, value, base_weight, dynamic_weight, cumulative_time
        """
        path = os.path.join(self.out_dir, filename)
        rate = state.config.rate

        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow([
                "group_index",
                "position",
                "value",
                "base_weight",
                "dynamic_weight",
                "cumulative_time",
            ])
            for gr in result.group_results:
                running = 0
                for pos, it in enumerate(gr.selected_items):
                    dyn = it.dynamic_weight(pos, rate)
                    running += dyn
                    w.writerow([gr.group_index, pos, it.value, it.base_weight, dyn, running])
        return path

    def write_problem_summary_csv(
        self,
        state: ProblemState,
        result: SolverResult,
        filename: str = "problem_summary.csv",
    ) -> str:
        """
        Columns:
          Total Items, Groups, Non-empty Groups, Capacity, Rate,
          Max Value, Best Group, Items Selected, Total Time (ms)
        """
        path = os.path.join(self.out_dir, filename)
        best = result.best_group()
        sizes: Dict[int, int] = state.group_sizes()

        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow([
                "Total Items",
                "Groups",
                "Non-empty Groups",
                "Capacity",
                "Rate",
                "Max Value",
                "Best Group",
                "Items Selected",
                "Total Time (ms)",
            ])
            w.writerow([
                len(state.items),
                state.config.groups,
                sum(1 for n in sizes.values() if n > 0),
                state.config.capacity,
                state.config.rate,
                result.max_value,
                "" if best is None else best.group_index,
                sum(gr.items_selected for gr in result.group_results),
                _fmt(result.total_time),
            ])
        return path

    def write_report_txt(self, result: SolverResult, filename: str = "report.txt") -> str:
        path = os.path.join(self.out_dir, filename)
        with open(path, "w", encoding="utf-8") as f:
            f.write(format_result(result))
        return path

    def write_all(self, state: ProblemState, result: SolverResult) -> Dict[str, str]:
        """Write every artifact; returns {artifact_name: path}."""
        return {
            "group_results": self.write_group_results_csv(state, result),
            "selections": self.write_selections_csv(state, result),
            "problem_summary": self.write_problem_summary_csv(state, result),
            "report": self.write_report_txt(result),
        }


def _fmt(x: float) -> str:
    return f"{float(x):.3f}"
