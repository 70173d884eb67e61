"""Single-source shortest paths (Dijkstra) and all-pairs shortest paths (Floyd)."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass


def _square(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("matrix must be square")
    return rows


@dataclass(frozen=True)
class ShortestPaths:
    """Distances and predecessors found from one source vertex."""

    source: int
    distances: tuple[float, ...]
    predecessors: tuple[int | None, ...]

    def path_to(self, target: int) -> list[int]:
        """Return the vertices on the shortest path from the source to ``target``."""
        if not 0 <= target < len(self.distances):
            raise ValueError("target vertex outside the graph")
        if self.distances[target] == math.inf:
            raise ValueError(f"vertex {target} is not reachable")
        path = [target]
        while path[-1] != self.source:
            path.append(self.predecessors[path[-1]])
        return path[::-1]


def dijkstra(graph: Sequence[Sequence[float]], source: int) -> ShortestPaths:
    """Find shortest paths from ``source``; a 0 or infinite weight means no edge.

    Among equally distant vertices the one with the highest index is settled first.
    """
    matrix = _square(graph)
    if not 0 <= source < len(matrix):
        raise ValueError("source vertex outside the graph")
    distances = [math.inf] * len(matrix)
    predecessors: list[int | None] = [None] * len(matrix)
    distances[source] = 0
    unvisited = set(range(len(matrix)))
    while unvisited:
        current = max(unvisited, key=lambda v: (-distances[v], v))
        if distances[current] == math.inf:
            break
        unvisited.remove(current)
        for target, weight in enumerate(matrix[current]):
            if target in unvisited and weight not in (0, math.inf):
                if distances[current] + weight < distances[target]:
                    distances[target] = distances[current] + weight
                    predecessors[target] = current
    return ShortestPaths(source, tuple(distances), tuple(predecessors))


def floyd(weights: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return the all-pairs shortest distance matrix; the input is left unchanged."""
    distances = _square(weights)
    for k, via in enumerate(distances):
        for row in distances:
            for j, onward in enumerate(via):
                row[j] = min(row[j], row[k] + onward)
    return distances