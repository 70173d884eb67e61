"""Minimum spanning trees by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """A tree edge between two zero-based vertices and its cost."""

    start: int
    end: int
    cost: float


def _square(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("matrix must be square")
    return rows


def _find(parent: list[int], vertex: int) -> int:
    while parent[vertex] != vertex:
        parent[vertex] = parent[parent[vertex]]
        vertex = parent[vertex]
    return vertex


def kruskal(cost: Sequence[Sequence[float]]) -> list[Edge]:
    """Return the edges of a minimum spanning tree in the order they are selected.

    A cost of 0 (or infinity) means there is no edge. Ties between equal costs
    go to the edge met first in row-major order. Raises ``ValueError`` when the
    graph is not connected.
    """
    matrix = _square(cost)
    size = len(matrix)
    candidates = sorted(
        (
            Edge(i, j, weight)
            for i, row in enumerate(matrix)
            for j, weight in enumerate(row)
            if weight != 0 and weight != math.inf
        ),
        key=lambda edge: edge.cost,
    )
    parent = list(range(size))
    tree: list[Edge] = []
    for edge in candidates:
        if len(tree) >= size - 1:
            break
        root_start = _find(parent, edge.start)
        root_end = _find(parent, edge.end)
        if root_start != root_end:
            parent[root_end] = root_start
            tree.append(edge)
    if size > 0 and len(tree) < size - 1:
        raise ValueError("graph is not connected")
    return tree


def prim(weights: Sequence[Sequence[float]], source: int) -> list[Edge]:
    """Return the edges of a minimum spanning tree grown from ``source``.

    Every entry is taken as a weight, so a missing edge must be given as
    infinity. Raises ``ValueError`` when some vertex cannot be reached.
    """
    matrix = _square(weights)
    size = len(matrix)
    if not 0 <= source < size:
        raise ValueError("source vertex outside the graph")
    visited = {source}
    tree: list[Edge] = []
    for _ in range(size - 1):
        best = min(
            (
                Edge(start, end, weight)
                for start in sorted(visited)
                for end, weight in enumerate(matrix[start])
                if end not in visited
            ),
            key=lambda edge: edge.cost,
        )
        if best.cost == math.inf:
            raise ValueError("graph is not connected")
        visited.add(best.end)
        tree.append(best)
    return tree