# -*- coding: utf-8 -*-
"""
Field validation for raw user input (form fields, JSON scalars).

Range limits match the interactive front end:
  groups    1..1000
  capacity  1..10000
  rate      0..1000
  value     1..1000000
  weight    1..1000000
  group     0..G-1
"""

from __future__ import annotations
import re
from typing import Any

from .errors import InputValidationError

MIN_GROUPS, MAX_GROUPS = 1, 1000
MIN_CAPACITY, MAX_CAPACITY = 1, 10000
MIN_RATE, MAX_RATE = 0, 1000
MIN_VALUE, MAX_VALUE = 1, 1000000
MIN_WEIGHT, MAX_WEIGHT = 1, 1000000

_INT_RE = re.compile(r"-?[0-9]+")


def parse_int_field(text: Any, field_name: str, lo: int, hi: int) -> int:
    """
    Parse `text` as an integer in [lo, hi].

    Raises InputValidationError naming `field_name` when the text is empty,
    not an integer literal, or out of range.
    """
    if text is None or str(text).strip() == "":
        raise InputValidationError(f"{field_name} cannot be empty.")

    trimmed = str(text).strip()
    if not _INT_RE.fullmatch(trimmed):
        raise InputValidationError(
            f"{field_name} must be a valid integer. Got: '{trimmed}'"
        )

    try:
        value = int(trimmed)
    except ValueError:
        # interpreter limit on digit count
        raise InputValidationError(
            f"{field_name} is out of valid integer range."
        ) from None
    if value < lo or value > hi:
        raise InputValidationError(
            f"{field_name} must be between {lo} and {hi}. Got: {value}"
        )
    return value


def parse_groups(text: Any) -> int:
    return parse_int_field(text, "Groups (G)", MIN_GROUPS, MAX_GROUPS)


def parse_capacity(text: Any) -> int:
    return parse_int_field(text, "Time Limit (T)", MIN_CAPACITY, MAX_CAPACITY)


def parse_rate(text: Any) -> int:
    return parse_int_field(text, "Rate (R)", MIN_RATE, MAX_RATE)


def parse_item_fields(value_text: Any, weight_text: Any, group_text: Any, groups: int):
    """Validate the three item fields; returns (value, weight, group)."""
    value = parse_int_field(value_text, "Value", MIN_VALUE, MAX_VALUE)
    weight = parse_int_field(weight_text, "Weight", MIN_WEIGHT, MAX_WEIGHT)
    group = parse_int_field(group_text, "Group", 0, groups - 1)
    return value, weight, group
