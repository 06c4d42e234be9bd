import pytest
from hypothesis import given
from hypothesis import strategies as st

from algolab.maxflow import edmonds_karp, ford_fulkerson_dfs


def sample_graph(size=20):
    graph = [[0] * size for _ in range(size)]
    graph[0][1] = 16
    graph[0][2] = 13
    graph[1][2] = 10
    graph[1][3] = 12
    graph[2][1] = 4
    graph[2][4] = 14
    graph[3][2] = 9
    graph[3][5] = 20
    graph[4][3] = 7
    graph[4][5] = 4
    return graph


@st.composite
def networks(draw):
    size = draw(st.integers(min_value=2, max_value=6))
    cells = st.integers(min_value=0, max_value=20)
    graph = [[draw(cells) for _ in range(size)] for _ in range(size)]
    return graph


def test_sample_graph():
    assert edmonds_karp(sample_graph(), 0, 5) == 23
    assert ford_fulkerson_dfs(sample_graph(), 0, 5) == 23


def test_input_not_modified():
    graph = sample_graph(6)
    snapshot = [list(row) for row in graph]
    assert edmonds_karp(graph, 0, 5) == 23
    assert graph == snapshot
    assert ford_fulkerson_dfs(graph, 0, 5) == 23
    assert graph == snapshot


def test_single_edge():
    graph = [[0, 9], [0, 0]]
    assert edmonds_karp(graph, 0, 1) == 9
    assert ford_fulkerson_dfs(graph, 0, 1) == 9


def test_unreachable_sink():
    graph = [[0, 5, 0], [0, 0, 0], [0, 0, 0]]
    assert edmonds_karp(graph, 0, 2) == 0
    assert ford_fulkerson_dfs(graph, 0, 2) == 0


def test_parallel_paths_add_up():
    graph = [
        [0, 3, 4, 0],
        [0, 0, 0, 3],
        [0, 0, 0, 4],
        [0, 0, 0, 0],
    ]
    assert edmonds_karp(graph, 0, 3) == 7
    assert ford_fulkerson_dfs(graph, 0, 3) == 7


@given(networks())
def test_algorithms_agree(graph):
    size = len(graph)
    assert edmonds_karp(graph, 0, size - 1) == ford_fulkerson_dfs(graph, 0, size - 1)


@given(networks())
def test_flow_bounded_by_source_and_sink_cuts(graph):
    size = len(graph)
    flow = edmonds_karp(graph, 0, size - 1)
    assert 0 <= flow <= sum(graph[0][v] for v in range(size) if v != 0)
    assert flow <= sum(graph[u][size - 1] for u in range(size) if u != size - 1)


def test_source_equals_sink():
    with pytest.raises(ValueError):
        edmonds_karp(sample_graph(6), 2, 2)
    with pytest.raises(ValueError):
        ford_fulkerson_dfs(sample_graph(6), 2, 2)


@pytest.mark.parametrize("source, sink", [(-1, 3), (0, 6), (7, 0)])
def test_vertex_out_of_range(source, sink):
    with pytest.raises(ValueError):
        edmonds_karp(sample_graph(6), source, sink)
    with pytest.raises(ValueError):
        ford_fulkerson_dfs(sample_graph(6), source, sink)


def test_non_square_matrix():
    with pytest.raises(ValueError):
        edmonds_karp([[0, 1, 2], [0, 0]], 0, 1)
    with pytest.raises(ValueError):
        ford_fulkerson_dfs([[0, 1, 2], [0, 0]], 0, 1)