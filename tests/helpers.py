# -*- coding: utf-8 -*-
"""Shared fixtures for the test suite."""

from __future__ import annotations
import itertools
import random
from typing import List, Sequence

from dynknap.business_objects.items import Item


def brute_force_best(items: Sequence[Item], capacity: int, rate: int) -> int:
    """Best value over all subsets; a subset of size k costs sum(w) + rate*k*(k-1)/2."""
    best = 0
    for k in range(len(items) + 1):
        for combo in itertools.combinations(items, k):
            cost = sum(it.base_weight for it in combo) + rate * k * (k - 1) // 2
            if cost <= capacity:
                best = max(best, sum(it.value for it in combo))
    return best


def random_items(seed: int, n: int, groups: int = 1, max_value: int = 30, max_weight: int = 8) -> List[Item]:
    rng = random.Random(seed)
    return [
        Item(value=rng.randint(1, max_value), base_weight=rng.randint(1, max_weight), group=rng.randrange(groups))
        for _ in range(n)
    ]
