import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from daalab.mst import Edge, kruskal, prim


@st.composite
def connected_graphs(draw):
    size = draw(st.integers(min_value=1, max_value=7))
    weight = st.integers(min_value=1, max_value=50)
    matrix = [[0] * size for _ in range(size)]
    for i in range(1, size):
        j = draw(st.integers(min_value=0, max_value=i - 1))
        matrix[i][j] = matrix[j][i] = draw(weight)
    for i in range(size):
        for j in range(i + 1, size):
            if matrix[i][j] == 0 and draw(st.booleans()):
                matrix[i][j] = matrix[j][i] = draw(weight)
    return matrix


def _with_infinity(matrix):
    return [[w if w else math.inf for w in row] for row in matrix]


def _components(size, edges):
    groups = [{v} for v in range(size)]
    for edge in edges:
        a = next(g for g in groups if edge.start in g)
        b = next(g for g in groups if edge.end in g)
        if a is not b:
            groups.remove(b)
            a |= b
    return len(groups)


TRIANGLE = [[0, 1, 3], [1, 0, 2], [3, 2, 0]]


def test_kruskal_triangle():
    assert kruskal(TRIANGLE) == [Edge(0, 1, 1), Edge(1, 2, 2)]


def test_prim_triangle():
    assert prim(_with_infinity(TRIANGLE), 0) == [Edge(0, 1, 1), Edge(1, 2, 2)]


@given(connected_graphs())
def test_kruskal_and_prim_agree_on_total(matrix):
    by_kruskal = sum(edge.cost for edge in kruskal(matrix))
    by_prim = sum(edge.cost for edge in prim(_with_infinity(matrix), 0))
    assert by_kruskal == by_prim


@given(connected_graphs())
def test_kruskal_spans_graph(matrix):
    tree = kruskal(matrix)
    assert len(tree) == len(matrix) - 1
    assert _components(len(matrix), tree) == 1
    assert all(matrix[e.start][e.end] == e.cost for e in tree)


@given(connected_graphs(), st.data())
def test_prim_spans_graph_from_any_source(matrix, data):
    source = data.draw(st.integers(min_value=0, max_value=len(matrix) - 1))
    tree = prim(_with_infinity(matrix), source)
    assert len(tree) == len(matrix) - 1
    assert _components(len(matrix), tree) == 1
    assert tree == [] or tree[0].start == source


def test_kruskal_disconnected_raises():
    with pytest.raises(ValueError):
        kruskal([[0, 1, 0], [1, 0, 0], [0, 0, 0]])


def test_prim_disconnected_raises():
    inf = math.inf
    with pytest.raises(ValueError):
        prim([[inf, 1, inf], [1, inf, inf], [inf, inf, inf]], 0)


def test_non_square_raises():
    with pytest.raises(ValueError):
        kruskal([[0, 1], [1]])
    with pytest.raises(ValueError):
        prim([[0, 1, 2]], 0)


def test_prim_bad_source_raises():
    with pytest.raises(ValueError):
        prim([[0]], 1)


def test_single_vertex_has_empty_tree():
    assert kruskal([[0]]) == []
    assert prim([[0]], 0) == []