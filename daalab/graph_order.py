"""Topological sorting, Warshall's transitive closure and matrix display."""

from __future__ import annotations

from collections.abc import Sequence

_RULE = "-" * 44


def _square(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("matrix must be square")
    return rows


def topological_sort(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Order the vertices of a 0/1 adjacency matrix so every edge points forward.

    Vertices without incoming edges wait on a stack, so the most recently
    freed vertex comes next. Raises ``ValueError`` when the graph has a cycle.
    """
    matrix = _square(adjacency)
    if any(entry not in (0, 1) for row in matrix for entry in row):
        raise ValueError("adjacency matrix must hold only 0 and 1")
    indegree = [sum(column) for column in zip(*matrix)]
    stack = [vertex for vertex, count in enumerate(indegree) if count == 0]
    order: list[int] = []
    while stack:
        current = stack.pop()
        order.append(current)
        for target, edge in enumerate(matrix[current]):
            if edge:
                indegree[target] -= 1
                if indegree[target] == 0:
                    stack.append(target)
    if len(order) < len(matrix):
        raise ValueError("graph has a cycle")
    return order


def transitive_closure(adjacency: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the 0/1 reachability matrix of a graph by Warshall's algorithm."""
    reach = [[1 if entry else 0 for entry in row] for row in _square(adjacency)]
    for k, via in enumerate(reach):
        for row in reach:
            if row[k]:
                for j, onward in enumerate(via):
                    if onward:
                        row[j] = 1
    return reach


def format_matrix(matrix: Sequence[Sequence[object]]) -> str:
    """Lay out a matrix as a table with 1-based row and column labels."""
    rows = [list(row) for row in matrix]
    header = "".join(f"\t{label}" for label in range(1, len(rows) + 1))
    lines = [header, f"\t{_RULE}"]
    lines.extend(
        f"{label}|\t" + "".join(f"{entry}\t" for entry in row)
        for label, row in enumerate(rows, start=1)
    )
    return "\n".join(lines) + "\n"