"""Backtracking searches: N queens and sum of subsets."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def n_queens(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every placement of ``n`` queens, one column per row, in lexicographic order."""
    if n <= 0:
        return

    def place(columns: tuple[int, ...]) -> Iterator[tuple[int, ...]]:
        row = len(columns)
        if row == n:
            yield columns
            return
        for column in range(n):
            if all(
                placed != column and abs(placed - column) != row - r
                for r, placed in enumerate(columns)
            ):
                yield from place(columns + (column,))

    yield from place(())


def render_board(columns: Sequence[int]) -> str:
    """Draw a placement as rows of ``-`` with ``Q`` for each queen."""
    size = len(columns)
    if any(not 0 <= column < size for column in columns):
        raise ValueError("column outside the board")
    return "\n".join("-" * c + "Q" + "-" * (size - c - 1) for c in columns)


def subset_sums(elements: Sequence[int], target: int) -> list[list[int]]:
    """Return the subsets of ascending positive ``elements`` summing to ``target``."""
    values = list(elements)
    if not values or any(v <= 0 for v in values):
        raise ValueError("elements must be given and positive")
    total = sum(values)
    if total < target or values[0] > target:
        raise ValueError("the given problem instance does not have a solution")

    padded = values + [0]
    chosen = [False] * len(padded)
    found: list[list[int]] = []

    def visit(partial: int, k: int, remaining: int) -> None:
        chosen[k] = True
        if partial + padded[k] == target:
            found.append([v for v, taken in zip(padded[: k + 1], chosen) if taken])
        elif partial + padded[k] + padded[k + 1] <= target:
            visit(partial + padded[k], k + 1, remaining - padded[k])
        if partial + remaining - padded[k] >= target and partial + padded[k + 1] <= target:
            chosen[k] = False
            visit(partial, k + 1, remaining - padded[k])

    visit(0, 0, total)
    return found