import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from algolab.errors import NegativeCycleError
from algolab.floyd import floyd_warshall
from algolab.mst import Edge
from algolab.shortest import bellman_ford, dijkstra, format_distances, johnson

DIJKSTRA_EDGES = [
    (0, 1, 9), (0, 2, 6), (0, 3, 5), (0, 4, 3), (2, 1, 2),
    (2, 3, 4), (2, 4, 2), (3, 1, 1), (3, 4, 4), (4, 1, 7),
]

BELLMAN_EDGES = [
    (0, 1, 2), (0, 2, 4), (1, 2, 1), (1, 3, 5),
    (2, 4, 3), (3, 2, -3), (3, 1, 1), (4, 3, -2),
]

JOHNSON_EDGES = [
    (0, 1, 5), (0, 2, 3), (1, 2, 2), (1, 3, 6), (2, 1, 1),
    (2, 4, 5), (3, 2, 2), (3, 5, 2), (4, 3, 1), (4, 5, 4),
]


def _matrix(num_vertices, edges):
    m = [[math.inf] * num_vertices for _ in range(num_vertices)]
    for i in range(num_vertices):
        m[i][i] = 0
    for u, v, w in edges:
        m[u][v] = min(m[u][v], w)
    return m


@st.composite
def graphs(draw, min_weight=0):
    n = draw(st.integers(min_value=1, max_value=6))
    edges = draw(
        st.lists(
            st.tuples(
                st.integers(0, n - 1),
                st.integers(0, n - 1),
                st.integers(min_weight, 20),
            ),
            max_size=15,
        )
    )
    return n, edges


def test_dijkstra_driver_graph():
    assert dijkstra(5, DIJKSTRA_EDGES, 0) == [0, 6, 6, 5, 3]


def test_dijkstra_matches_bellman_ford_on_driver_graph():
    assert dijkstra(5, DIJKSTRA_EDGES, 0) == bellman_ford(5, DIJKSTRA_EDGES, 0)


def test_dijkstra_accepts_edge_objects():
    edges = [Edge(u, v, w) for u, v, w in DIJKSTRA_EDGES]
    assert dijkstra(5, edges, 0) == dijkstra(5, DIJKSTRA_EDGES, 0)


def test_dijkstra_unreachable_is_inf():
    result = dijkstra(3, [(0, 1, 4)], 0)
    assert result[2] == math.inf
    assert result[0] == 0


def test_dijkstra_rejects_negative_weight():
    with pytest.raises(ValueError):
        dijkstra(2, [(0, 1, -1)], 0)


def test_dijkstra_rejects_bad_source():
    with pytest.raises(ValueError):
        dijkstra(3, [(0, 1, 1)], 3)


def test_dijkstra_rejects_bad_edge_vertex():
    with pytest.raises(ValueError):
        dijkstra(2, [(0, 5, 1)], 0)


def test_bellman_ford_driver_graph_has_negative_cycle():
    with pytest.raises(NegativeCycleError):
        bellman_ford(5, BELLMAN_EDGES, 0)


def test_bellman_ford_driver_graph_with_stronger_cycle():
    edges = list(BELLMAN_EDGES)
    edges[7] = (4, 3, -4)
    with pytest.raises(NegativeCycleError):
        bellman_ford(5, edges, 0)


def test_bellman_ford_negative_edge_without_cycle():
    edges = [(0, 1, 4), (0, 2, 5), (2, 1, -3)]
    result = bellman_ford(3, edges, 0)
    assert result[1] == result[2] + (-3)
    assert result == floyd_warshall(_matrix(3, edges))[0]


def test_bellman_ford_unreachable_cycle_ignored():
    edges = [(0, 1, 1), (2, 3, -1), (3, 2, -1)]
    result = bellman_ford(4, edges, 0)
    assert result[2] == math.inf and result[3] == math.inf


def test_johnson_driver_graph_matches_floyd():
    assert johnson(6, JOHNSON_EDGES) == floyd_warshall(_matrix(6, JOHNSON_EDGES))


def test_johnson_negative_cycle():
    with pytest.raises(NegativeCycleError):
        johnson(5, BELLMAN_EDGES)


def test_johnson_empty_graph():
    assert johnson(0, []) == []


@settings(max_examples=60, deadline=None)
@given(graphs())
def test_dijkstra_rows_match_floyd(graph):
    n, edges = graph
    expected = floyd_warshall(_matrix(n, edges))
    assert [dijkstra(n, edges, s) for s in range(n)] == expected


@settings(max_examples=60, deadline=None)
@given(graphs(min_weight=-5))
def test_johnson_matches_floyd_with_negative_weights(graph):
    n, edges = graph
    try:
        expected = floyd_warshall(_matrix(n, edges))
    except NegativeCycleError:
        with pytest.raises(NegativeCycleError):
            johnson(n, edges)
    else:
        assert johnson(n, edges) == expected


@settings(max_examples=60, deadline=None)
@given(graphs())
def test_bellman_ford_matches_dijkstra_on_non_negative(graph):
    n, edges = graph
    assert bellman_ford(n, edges, 0) == dijkstra(n, edges, 0)


def test_format_single_source():
    text = format_distances([0, 6, math.inf])
    assert text == "Vertex\tDistance from Source\n0 \t\t 0\n1 \t\t 6\n2 \t\t INF\n"


def test_format_all_pairs_layout():
    dist = johnson(3, [(0, 1, 2)])
    lines = format_distances(dist).splitlines()
    assert lines[0] == "All-pairs shortest paths:"
    assert lines[1] == "     " + "".join(f"{i:6d}" for i in range(3))
    assert len(lines) == 5
    assert lines[2].startswith("  0 ")
    assert lines[4].count("INF") == 2
    assert all(len(line) == len(lines[2]) for line in lines[2:])