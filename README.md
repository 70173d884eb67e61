# daalab

A small collection of textbook algorithms. Each one is a plain Python function
that takes ordinary lists and numbers and returns its result. Nothing is printed
or read from the terminal except by the `daalab` command.

The package needs nothing outside the standard library and runs on Python 3.10
and later.

## What is inside

| Module                   | Contents                                                                 |
|--------------------------|--------------------------------------------------------------------------|
| `daalab.sorting`         | `merge_sort`, `quick_sort`, `selection_sort`, `random_values`, `time_sort` |
| `daalab.knapsack`        | `knapsack_01`, `fractional_knapsack`, `FractionalResult`                 |
| `daalab.backtracking`    | `n_queens`, `render_board`, `subset_sums`                                |
| `daalab.mst`             | `kruskal`, `prim`, `Edge`                                                |
| `daalab.shortest_paths`  | `dijkstra`, `floyd`, `ShortestPaths`                                     |
| `daalab.graph_order`     | `topological_sort`, `transitive_closure`, `format_matrix`                |
| `daalab.cli`             | `main`, the entry point of the `daalab` command                          |

Vertices are numbered from 0 throughout the library. Functions that take a
matrix raise `ValueError` when it is not square.

## Installing

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Using the library

### Sorting

Each sort takes any iterable and returns a new ascending list; the input is
left alone.

```python
from daalab.sorting import merge_sort, quick_sort, selection_sort

data = [5, 3, 9, 1, 7]
merge_sort(data)      # [1, 3, 5, 7, 9]
quick_sort(data)      # first element of each range is the pivot
selection_sort(data)
```

`random_values(count, upper, rng)` returns `count` random integers in
`[0, upper)`, drawn from the given `random.Random` (or a fresh one when `rng` is
`None`). It raises `ValueError` for a negative count or a non-positive upper
bound. `time_sort(sort, values)` runs a sort and returns a pair: the sorted
list and the processor time it took, in seconds.

```python
import random
from daalab.sorting import quick_sort, random_values, time_sort

values = random_values(10_000, 5_000_000, random.Random(1))
ordered, seconds = time_sort(quick_sort, values)
```

### Knapsack

`knapsack_01(capacity, weights, values)` is the dynamic-programming 0/1
knapsack: items are taken whole or left out, and the best total value is
returned. Negative capacity or weights raise `ValueError`.

```python
from daalab.knapsack import knapsack_01

knapsack_01(5, [2, 1, 3, 2], [12, 10, 20, 15])  # 37
```

`fractional_knapsack(capacity, weights, values)` is the greedy fractional
knapsack. It takes items in order of value per unit of weight and may take part
of the last one. It returns a `FractionalResult` with `value`, the total value,
and `items`, the zero-based indices of the items considered, in the order they
were taken.

```python
from daalab.knapsack import fractional_knapsack

result = fractional_knapsack(50.0, [10.0, 20.0, 30.0], [60.0, 100.0, 120.0])
result.value, result.items
```

### Backtracking

`n_queens(n)` yields every placement of `n` queens on an `n` by `n` board, in
lexicographic order. Each placement is a tuple giving the column of the queen
in each row. `render_board` draws a placement as rows of `-` with `Q` for each
queen.

```python
from daalab.backtracking import n_queens, render_board

list(n_queens(4))  # [(1, 3, 0, 2), (2, 0, 3, 1)]
print(render_board((1, 3, 0, 2)))
```

`subset_sums(elements, target)` finds, by the sum-of-subsets backtracking
method, the subsets of ascending positive elements that add up to the target.
It raises `ValueError` when the elements are empty or not positive, or when the
instance can have no solution (the total is below the target, or the first
element is above it).

```python
from daalab.backtracking import subset_sums

subset_sums([1, 2, 5, 6, 8], 9)  # [[1, 2, 6], [1, 8]]
```

### Minimum spanning trees

Both functions take a square cost matrix and return the chosen edges as `Edge`
values with `start`, `end` and `cost`, and both raise `ValueError` when the
graph is not connected.

- `kruskal(cost)`: a cost of 0 or infinity means there is no edge. Edges come
  back in the order they are selected.
- `prim(weights, source)`: grows the tree outward from `source`. Every entry is
  taken as a weight, so a missing edge must be given as `math.inf`.

```python
import math
from daalab.mst import kruskal, prim

cost = [
    [0, 3, 1, 6],
    [3, 0, 5, 0],
    [1, 5, 0, 4],
    [6, 0, 4, 0],
]
tree = kruskal(cost)

inf = math.inf
weights = [
    [inf, 3, 1, 6],
    [3, inf, 5, inf],
    [1, 5, inf, 4],
    [6, inf, 4, inf],
]
tree = prim(weights, 0)
```

### Shortest paths

`dijkstra(graph, source)` treats a weight of 0 or infinity as no edge and
returns a `ShortestPaths` holding `source`, `distances` (infinity for
unreachable vertices) and `predecessors`. Its method `path_to(target)` returns
the vertices on the shortest route; it raises `ValueError` for a vertex outside
the graph or one that cannot be reached.

`floyd(weights)` returns a new matrix of shortest distances between every pair
of vertices; every entry of the input is taken as a weight.

```python
from daalab.shortest_paths import dijkstra, floyd

weights = [
    [0, 4, 1],
    [4, 0, 2],
    [1, 2, 0],
]
paths = dijkstra(weights, 0)
paths.path_to(1)   # [0, 2, 1]
floyd(weights)
```

### Ordering and reachability

- `topological_sort(adjacency)` orders the vertices of a 0/1 adjacency matrix so
  every edge points forward. It raises `ValueError` when the graph has a cycle
  or the matrix holds anything other than 0 and 1.
- `transitive_closure(adjacency)` applies Warshall's algorithm and returns the
  0/1 reachability matrix.
- `format_matrix(matrix)` lays out a matrix as a tab-separated table with
  1-based row and column labels.

```python
from daalab.graph_order import format_matrix, topological_sort, transitive_closure

adjacency = [
    [0, 1, 0],
    [0, 0, 1],
    [0, 0, 0],
]
topological_sort(adjacency)  # [0, 1, 2]
print(format_matrix(transitive_closure(adjacency)))
```

## Command line

The `daalab` command reads one problem instance as whitespace-separated numbers
from standard input, or from a file given with `-i`/`--input`, and prints the
answer. Vertices on the command line are numbered from 1.

```
daalab --help
echo "4  2 1 3 2  12 10 20 15  5" | daalab knapsack01
daalab -i graph.txt dijkstra
```

| Command      | Input                                                             |
|--------------|-------------------------------------------------------------------|
| `knapsack01` | n, n weights, n values, capacity                                  |
| `fractional` | n, n weights, n values, capacity                                  |
| `kruskal`    | n, n×n cost matrix (0 or 999 means no edge)                       |
| `dijkstra`   | n, n×n weight matrix (0 or 999 means no edge), source vertex      |
| `floyd`      | n, n×n weight matrix                                              |
| `warshall`   | n, n×n 0/1 adjacency matrix                                       |
| `queens`     | n                                                                 |
| `subset`     | n, n ascending elements, target sum                               |

Malformed or incomplete input is reported on standard error and the command
exits with status 1.

## What the package does not do

The command does not prompt for input; it reads the whole instance at once.
It has no commands for the sorts, for `prim` or for `topological_sort`; those
are available only from Python.