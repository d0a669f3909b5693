#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Solve problems/problem_1.json and export the report and CSV artifacts.

This version does NOT use argparse.
Just set the variables at the top of the file and run:

    python scripts/run_problem.py

Outputs under OUT_DIR:
  - group_results.csv    (per-group selection size, time used, value)
  - selections.csv       (accepted items in acceptance order)
  - problem_summary.csv  (global KPIs)
  - report.txt           (same text as printed below)
"""

from __future__ import annotations
import logging
import os

# ====== CONFIGURATION ======
PROBLEM_PATH = "problems/problem_1.json"
OUT_DIR = "reports/problem_1"

# "dynamic" (position-dependent cost) or "classic" (rate must be 0)
MODE = "dynamic"

# Solve groups on a thread pool of this size; None = sequential
MAX_WORKERS = None

LOG_LEVEL = logging.INFO
# ============================

from dynknap.planning.aggregator import solve
from dynknap.planning.tracker import Tracker
from dynknap.reporting.formatter import format_result
from dynknap.utils.read_jsons import read_problem_json


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    # Load problem (validated like the interactive form)
    state = read_problem_json(PROBLEM_PATH, mode=MODE, max_workers=MAX_WORKERS)

    result = solve(state)

    tracker = Tracker(out_dir=OUT_DIR)
    paths = tracker.write_all(state, result)

    print(format_result(result))
    print("Artifacts written to:")
    for name, path in paths.items():
        print(f"  - {name}: {os.path.abspath(path)}")


if __name__ == "__main__":
    main()
