# -*- coding: utf-8 -*-
"""
Plain-text report for a SolverResult.

Sections, in order:
  header, OUTPUT (max value), Group Results, Optimal Selection, Execution Time.
The two group sections are omitted when there are no group results.
"""

from __future__ import annotations
from typing import List

from dynknap.planning.solution import GroupResult, SolverResult

RULE = "═" * 62
TITLE = "                        OUTPUT RESULT                        "
SELECTION_SEP = " → "


def _header() -> List[str]:
    return [RULE, TITLE, RULE, ""]


def _output_value(max_value: int) -> List[str]:
    return ["OUTPUT:", str(max_value), ""]


def _group_summary(gr: GroupResult) -> str:
    return (
        f"• Group {gr.group_index}: {gr.items_selected} items, "
        f"Dynamic Time used: {gr.dynamic_time_used}, Max Value = {gr.max_value}"
    )


def _group_results(result: SolverResult) -> List[str]:
    if not result.group_results:
        return []
    lines = ["Group Results:"]
    lines.extend(_group_summary(gr) for gr in result.group_results)
    lines.append("")
    return lines


def _optimal_selection(result: SolverResult) -> List[str]:
    if not result.group_results:
        return []
    lines = ["Optimal Selection:"]
    for gr in result.group_results:
        if not gr.selected_items:
            lines.append(f"Group {gr.group_index}: No items selected")
        else:
            chain = SELECTION_SEP.join(str(it) for it in gr.selected_items)
            lines.append(f"Group {gr.group_index}: {chain}")
    lines.append("")
    return lines


def _execution_time(total_time: float) -> List[str]:
    return ["Execution Time Result:", f"{total_time:.3f} ms"]


def format_result(result: SolverResult) -> str:
    lines: List[str] = []
    lines += _header()
    lines += _output_value(result.max_value)
    lines += _group_results(result)
    lines += _optimal_selection(result)
    lines += _execution_time(result.total_time)
    return "\n".join(lines) + "\n"


def initial_result_text() -> str:
    """Report shown before anything has been solved."""
    return format_result(SolverResult(max_value=0, total_time=0.0))
