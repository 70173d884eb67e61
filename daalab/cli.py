"""Command line front end: read a problem instance from text and print the answer."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

from daalab.backtracking import n_queens, render_board, subset_sums
from daalab.graph_order import format_matrix, transitive_closure
from daalab.knapsack import fractional_knapsack, knapsack_01
from daalab.mst import kruskal
from daalab.shortest_paths import dijkstra, floyd

_INF = 999


class _InputError(Exception):
    """The instance text is incomplete or malformed."""


class _Tokens:
    """Whitespace-separated numbers read one at a time."""

    def __init__(self, text: str) -> None:
        self._tokens: Iterator[str] = iter(text.split())

    def _next(self, what: str) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise _InputError(f"missing {what}") from None

    def integer(self, what: str) -> int:
        token = self._next(what)
        try:
            return int(token)
        except ValueError:
            raise _InputError(f"expected an integer for {what}, got {token!r}") from None

    def number(self, what: str) -> float:
        token = self._next(what)
        try:
            return float(token)
        except ValueError:
            raise _InputError(f"expected a number for {what}, got {token!r}") from None

    def count(self, what: str) -> int:
        value = self.integer(what)
        if value < 0:
            raise _InputError(f"{what} must not be negative")
        return value

    def integers(self, count: int, what: str) -> list[int]:
        return [self.integer(what) for _ in range(count)]

    def numbers(self, count: int, what: str) -> list[float]:
        return [self.number(what) for _ in range(count)]

    def matrix(self, size: int, what: str) -> list[list[int]]:
        return [self.integers(size, what) for _ in range(size)]


def _without_inf(matrix: list[list[int]]) -> list[list[float]]:
    return [[math.inf if entry == _INF else entry for entry in row] for row in matrix]


def _run_knapsack01(tokens: _Tokens) -> None:
    n = tokens.count("number of items")
    weights = tokens.integers(n, "weight")
    values = tokens.integers(n, "value")
    capacity = tokens.integer("capacity")
    best = knapsack_01(capacity, weights, values)
    print(f"The maximum value in a knapsack of capacity {capacity} is: {best}")


def _run_fractional(tokens: _Tokens) -> None:
    n = tokens.count("number of items")
    weights = tokens.numbers(n, "weight")
    values = tokens.numbers(n, "value")
    capacity = tokens.number("capacity")
    result = fractional_knapsack(capacity, weights, values)
    considered = "".join(f"{item + 1} " for item in result.items)
    print(f"Items considered are: {considered}")
    print(
        f"The maximum value in a knapsack of capacity {capacity:.2f} "
        f"is: {result.value:.2f}"
    )


def _run_kruskal(tokens: _Tokens) -> None:
    n = tokens.count("number of vertices")
    cost = _without_inf(tokens.matrix(n, "cost"))
    edges = kruskal(cost)
    print("The edges of Minimum spanning tree are:")
    for number, edge in enumerate(edges, start=1):
        print(
            f"{number} Edge Selected ({edge.start + 1} --- {edge.end + 1}) "
            f"Cost = {edge.cost}"
        )
    print(f"Minimum cost = {sum(edge.cost for edge in edges)}")


def _run_dijkstra(tokens: _Tokens) -> None:
    n = tokens.count("number of nodes")
    graph = _without_inf(tokens.matrix(n, "weight"))
    source = tokens.integer("source vertex")
    result = dijkstra(graph, source - 1)
    for target, distance in enumerate(result.distances):
        if target == result.source:
            continue
        shown = _INF if distance == math.inf else distance
        print(f"The Shortest distances from node {source} to {target + 1}={shown}")
        if distance == math.inf:
            print(f"The shortest path from node {source} to {target + 1} does not exist")
            continue
        route = "-->".join(str(vertex + 1) for vertex in result.path_to(target))
        print(f"The shortest path from node {source} to {target + 1} is{route}")


def _run_floyd(tokens: _Tokens) -> None:
    n = tokens.count("number of nodes")
    weights = tokens.matrix(n, "weight")
    print("All pair shortest path matrix is:")
    print(format_matrix(floyd(weights)), end="")


def _run_warshall(tokens: _Tokens) -> None:
    n = tokens.count("number of nodes")
    adjacency = tokens.matrix(n, "adjacency entry")
    print("Transitive closure matrix is:")
    print(format_matrix(transitive_closure(adjacency)), end="")


def _run_queens(tokens: _Tokens) -> None:
    n = tokens.integer("number of queens")
    for placement in n_queens(n):
        print(render_board(placement) + "\n\n")


def _run_subset(tokens: _Tokens) -> None:
    n = tokens.count("number of elements")
    elements = tokens.integers(n, "element")
    target = tokens.integer("target sum")
    if not elements or sum(elements) < target or elements[0] > target:
        print("The given problem instance does not have a solution")
        return
    subsets = subset_sums(elements, target)
    print("Subsets are:")
    for subset in subsets:
        print("{" + "".join(f"{value} " for value in subset) + "}")
    if not subsets:
        print("No subset possible")


_COMMANDS: dict[str, tuple[Callable[[_Tokens], None], str]] = {
    "knapsack01": (_run_knapsack01, "0/1 knapsack: n, n weights, n values, capacity"),
    "fractional": (_run_fractional, "fractional knapsack: n, n weights, n values, capacity"),
    "kruskal": (_run_kruskal, "minimum spanning tree: n, n*n cost matrix (0 or 999: no edge)"),
    "dijkstra": (_run_dijkstra, "shortest paths: n, n*n weight matrix (999: no edge), source"),
    "floyd": (_run_floyd, "all-pairs shortest paths: n, n*n weight matrix"),
    "warshall": (_run_warshall, "transitive closure: n, n*n 0/1 adjacency matrix"),
    "queens": (_run_queens, "N queens: n"),
    "subset": (_run_subset, "sum of subsets: n, n ascending elements, target"),
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="daalab", description="Solve a classic algorithm problem read from text."
    )
    parser.add_argument(
        "-i", "--input", type=Path, help="file holding the instance (default: stdin)"
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (_, summary) in _COMMANDS.items():
        commands.add_parser(name, help=summary)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one command on an instance from a file or stdin; return the exit status."""
    args = _parser().parse_args(argv)
    handler, _ = _COMMANDS[args.command]
    try:
        text = args.input.read_text() if args.input is not None else sys.stdin.read()
        handler(_Tokens(text))
    except (_InputError, ValueError, OSError) as error:
        print(f"daalab: error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())