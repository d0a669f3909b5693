# -*- coding: utf-8 -*-
"""
Reader for the line-oriented batch format.

  N G T R
  value weight group      (N lines)

Tokens are whitespace separated; line breaks carry no meaning. Only
structural checks apply here (counts, integer tokens, domain constraints of
Item/SolverConfig); the interactive range limits do not.
"""

from __future__ import annotations
from typing import Iterator, List, TextIO

from dynknap.business_objects.errors import SchemaError, StateValidationError
from dynknap.business_objects.items import Item
from dynknap.planning import ProblemState, SolverConfig


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_int(tokens: Iterator[str], what: str) -> int:
    try:
        tok = next(tokens)
    except StopIteration:
        raise SchemaError(f"unexpected end of input while reading {what}") from None
    try:
        return int(tok)
    except ValueError:
        raise SchemaError(f"{what}: expected an integer, got '{tok}'") from None


def read_batch(stream: TextIO, **knobs) -> ProblemState:
    """Parse a batch problem from `stream` into a ProblemState."""
    tokens = _tokens(stream)
    n = _next_int(tokens, "N")
    groups = _next_int(tokens, "G")
    capacity = _next_int(tokens, "T")
    rate = _next_int(tokens, "R")
    if n < 0:
        raise SchemaError(f"N must be >= 0, got {n}")

    try:
        cfg = SolverConfig(groups=groups, capacity=capacity, rate=rate, **knobs)
        items: List[Item] = []
        for i in range(n):
            v = _next_int(tokens, f"item {i + 1} value")
            w = _next_int(tokens, f"item {i + 1} weight")
            g = _next_int(tokens, f"item {i + 1} group")
            items.append(Item(value=v, base_weight=w, group=g))
        return ProblemState(config=cfg, items=tuple(items))
    except StateValidationError as e:
        raise SchemaError(str(e)) from e
