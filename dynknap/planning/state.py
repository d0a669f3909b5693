# -*- coding: utf-8 -*-
"""
Input snapshot for a solve run.

ProblemState is immutable and owned by the caller; the solver only reads it.
Mutable editing state (the item list being built up) lives in
planning.session.Workbench and is snapshotted into a ProblemState per run.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from dynknap.business_objects.errors import StateValidationError
from dynknap.business_objects.items import Item
from .policy import SolverConfig


@dataclass(frozen=True)
class ProblemState:
    """
    Immutable problem input for a solve run.

    Attributes
    ----------
    config : SolverConfig
        G, T, R and run knobs.
    items : tuple[Item, ...]
        All items in input order. Lists are converted to tuples.
    """
    config: SolverConfig
    items: Tuple[Item, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:  # type: ignore[override]
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))
        for idx, it in enumerate(self.items):
            if not isinstance(it, Item):
                raise StateValidationError(f"items[{idx}] is not an Item: {it!r}")
            if it.group >= self.config.groups:
                raise StateValidationError(
                    f"items[{idx}] group {it.group} is outside 0..{self.config.groups - 1}."
                )

    @classmethod
    def build(
        cls,
        groups: int,
        capacity: int,
        rate: int,
        items: Iterable[Item],
        **knobs,
    ) -> "ProblemState":
        """Convenience constructor: ProblemState.build(G, T, R, items)."""
        cfg = SolverConfig(groups=groups, capacity=capacity, rate=rate, **knobs)
        return cls(config=cfg, items=tuple(items))

    @property
    def is_empty(self) -> bool:
        return not self.items

    def group_sizes(self) -> Dict[int, int]:
        """Item count per group index (all G groups, zeros included)."""
        sizes: Dict[int, int] = {g: 0 for g in range(self.config.groups)}
        for it in self.items:
            sizes[it.group] += 1
        return sizes

    def non_empty_groups(self) -> List[int]:
        return [g for g, n in self.group_sizes().items() if n > 0]
