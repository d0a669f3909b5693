# -*- coding: utf-8 -*-
"""
Group partitioner: split the flat item collection into per-group subsequences.

Pure and deterministic; relative input order is preserved inside each group.
"""

from __future__ import annotations
from typing import Dict, Iterable, List

from dynknap.business_objects.items import Item


def items_for_group(items: Iterable[Item], group: int) -> List[Item]:
    """Ordered subsequence of `items` whose group equals `group`."""
    return [it for it in items if it.group == group]


def partition_by_group(items: Iterable[Item], groups: int) -> Dict[int, List[Item]]:
    """
    One-pass variant: {group_index: [items...]} for every index in 0..groups-1.
    Items with a group outside that range are ignored.
    """
    parts: Dict[int, List[Item]] = {g: [] for g in range(groups)}
    for it in items:
        bucket = parts.get(it.group)
        if bucket is not None:
            bucket.append(it)
    return parts
