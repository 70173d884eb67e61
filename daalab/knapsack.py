"""0/1 knapsack by dynamic programming and the greedy fractional knapsack."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class FractionalResult:
    """Total value and the zero-based indices of the items considered, in order."""

    value: float
    items: tuple[int, ...]


def knapsack_01(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the best total value of whole items fitting into ``capacity``."""
    items = list(zip(weights, values, strict=True))
    if capacity < 0 or any(w < 0 for w, _ in items):
        raise ValueError("capacity and weights must not be negative")
    best = [0] * (capacity + 1)
    for weight, value in items:
        for load in range(capacity, weight - 1, -1):
            best[load] = max(best[load], value + best[load - weight])
    return best[capacity]


def fractional_knapsack(
    capacity: float, weights: Sequence[float], values: Sequence[float]
) -> FractionalResult:
    """Fill ``capacity`` greedily by value per weight, splitting the last item."""
    items = [(float(w), float(v)) for w, v in zip(weights, values, strict=True)]
    if any(w < 0 for w, _ in items):
        raise ValueError("weights must not be negative")
    ratios = [v / w if w else (math.inf if v > 0 else 0.0) for w, v in items]
    load = total = 0.0
    considered: list[int] = []
    while load < capacity:
        item = max(range(len(ratios)), key=ratios.__getitem__, default=None)
        if item is None or ratios[item] <= 0:
            break
        considered.append(item)
        weight, value = items[item]
        if load + weight > capacity:
            total += ratios[item] * (capacity - load)
            break
        load += weight
        total += value
        ratios[item] = 0.0
    return FractionalResult(total, tuple(considered))