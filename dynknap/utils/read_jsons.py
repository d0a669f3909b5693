# -*- coding: utf-8 -*-
"""
I/O helpers for loading problem definitions from JSON.

JSON format (one object per problem):
  {
    "groups": <int>, "capacity": <int>, "rate": <int>,
    "items": [{"value": <int>, "weight": <int>, "group": <int>}, ...]
  }

Scalars go through the same range checks as the interactive form
(business_objects.validation), so a file is accepted iff the form would be.
"""

from __future__ import annotations
import json
from typing import Any, List

from dynknap.business_objects.errors import InputValidationError, SchemaError
from dynknap.business_objects.items import Item
from dynknap.business_objects import validation
from dynknap.planning import ProblemState, SolverConfig


def _require(obj: dict, key: str, path: str) -> Any:
    if key not in obj:
        raise SchemaError(f"{path}: missing required key '{key}' in object {obj}")
    return obj[key]


def _load(path: str) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        raise SchemaError(f"{path}: failed to read/parse JSON: {e}") from e


def read_items_list(data: Any, groups: int, path: str = "<items>") -> List[Item]:
    """Validate a decoded JSON array of item objects."""
    if not isinstance(data, list):
        raise SchemaError(f"{path}: 'items' must be a JSON array.")

    items: List[Item] = []
    for idx, obj in enumerate(data, start=1):
        if not isinstance(obj, dict):
            raise SchemaError(f"{path}[{idx}]: expected an object.")
        try:
            value, weight, group = validation.parse_item_fields(
                _require(obj, "value", path),
                _require(obj, "weight", path),
                _require(obj, "group", path),
                groups,
            )
        except InputValidationError as e:
            raise SchemaError(f"{path}[{idx}]: {e}") from e
        items.append(Item(value=value, base_weight=weight, group=group))
    return items


def read_problem_json(path: str, **knobs) -> ProblemState:
    """
    Load a full problem. Extra keyword arguments (mode, max_workers) are
    passed through to SolverConfig.
    """
    data = _load(path)
    if not isinstance(data, dict):
        raise SchemaError(f"{path}: expected a JSON object.")

    try:
        groups = validation.parse_groups(_require(data, "groups", path))
        capacity = validation.parse_capacity(_require(data, "capacity", path))
        rate = validation.parse_rate(_require(data, "rate", path))
    except InputValidationError as e:
        raise SchemaError(f"{path}: {e}") from e

    items = read_items_list(_require(data, "items", path), groups, path=path)
    cfg = SolverConfig(groups=groups, capacity=capacity, rate=rate, **knobs)
    return ProblemState(config=cfg, items=tuple(items))
