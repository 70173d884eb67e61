import pytest
from hypothesis import given
from hypothesis import strategies as st

from daalab.graph_order import format_matrix, topological_sort, transitive_closure


@st.composite
def dags(draw):
    size = draw(st.integers(min_value=0, max_value=7))
    ranking = draw(st.permutations(list(range(size))))
    matrix = [[0] * size for _ in range(size)]
    for a in range(size):
        for b in range(a + 1, size):
            if draw(st.booleans()):
                matrix[ranking[a]][ranking[b]] = 1
    return matrix


@st.composite
def graphs(draw):
    size = draw(st.integers(min_value=0, max_value=6))
    return [
        [draw(st.integers(min_value=0, max_value=1)) for _ in range(size)]
        for _ in range(size)
    ]


def test_topological_chain():
    assert topological_sort([[0, 1, 0], [0, 0, 1], [0, 0, 0]]) == [0, 1, 2]


def test_topological_uses_stack_order():
    assert topological_sort([[0, 0], [0, 0]]) == [1, 0]


@given(dags())
def test_topological_order_respects_edges(matrix):
    order = topological_sort(matrix)
    assert sorted(order) == list(range(len(matrix)))
    position = {vertex: index for index, vertex in enumerate(order)}
    for u, row in enumerate(matrix):
        for v, edge in enumerate(row):
            if edge:
                assert position[u] < position[v]


def test_topological_cycle_raises():
    with pytest.raises(ValueError):
        topological_sort([[0, 1], [1, 0]])


def test_topological_rejects_non_binary():
    with pytest.raises(ValueError):
        topological_sort([[0, 2], [0, 0]])


def test_closure_of_chain():
    assert transitive_closure([[0, 1, 0], [0, 0, 1], [0, 0, 0]]) == [
        [0, 1, 1],
        [0, 0, 1],
        [0, 0, 0],
    ]


@given(graphs())
def test_closure_is_idempotent_superset(matrix):
    closure = transitive_closure(matrix)
    assert transitive_closure(closure) == closure
    for row, closed in zip(matrix, closure):
        for entry, reach in zip(row, closed):
            assert reach >= entry


@given(dags())
def test_closure_of_dag_stays_acyclic(matrix):
    closure = transitive_closure(matrix)
    assert all(closure[i][i] == 0 for i in range(len(closure)))
    assert sorted(topological_sort(closure)) == list(range(len(matrix)))


def test_closure_non_square_raises():
    with pytest.raises(ValueError):
        transitive_closure([[0, 1]])


def test_format_matrix_layout():
    expected = "\t1\t2\n\t" + "-" * 44 + "\n1|\t0\t1\t\n2|\t1\t0\t\n"
    assert format_matrix([[0, 1], [1, 0]]) == expected


@given(graphs())
def test_format_matrix_line_count(matrix):
    assert format_matrix(matrix).count("\n") == len(matrix) + 2