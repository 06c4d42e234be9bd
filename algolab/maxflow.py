"""Maximum flow by the Ford-Fulkerson method, with BFS and with DFS path search."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Sequence

_PathFinder = Callable[[list[list[int]], int, int], "dict[int, int] | None"]


def _residual(capacity: Sequence[Sequence[int]], source: int, sink: int) -> list[list[int]]:
    graph = [list(row) for row in capacity]
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("capacity must be a square matrix")
    for name, vertex in (("source", source), ("sink", sink)):
        if not 0 <= vertex < size:
            raise ValueError(f"{name} {vertex} is not a vertex")
    if source == sink:
        raise ValueError("source and sink must differ")
    return graph


def _bfs_path(graph: list[list[int]], source: int, sink: int) -> dict[int, int] | None:
    parent: dict[int, int] = {}
    visited = {source}
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v, residual in enumerate(graph[u]):
            if v not in visited and residual > 0:
                parent[v] = u
                if v == sink:
                    return parent
                visited.add(v)
                queue.append(v)
    return None


def _dfs_path(graph: list[list[int]], source: int, sink: int) -> dict[int, int] | None:
    parent: dict[int, int] = {}
    visited = {source}
    stack = [(source, iter(enumerate(graph[source])))]
    while stack:
        _, neighbours = stack[-1]
        for v, residual in neighbours:
            if v not in visited and residual > 0:
                parent[v] = stack[-1][0]
                if v == sink:
                    return parent
                visited.add(v)
                stack.append((v, iter(enumerate(graph[v]))))
                break
        else:
            stack.pop()
    return None


def _max_flow(
    capacity: Sequence[Sequence[int]], source: int, sink: int, find_path: _PathFinder
) -> int:
    graph = _residual(capacity, source, sink)
    total = 0
    while (parent := find_path(graph, source, sink)) is not None:
        edges = []
        v = sink
        while v != source:
            u = parent[v]
            edges.append((u, v))
            v = u
        flow = min(graph[u][v] for u, v in edges)
        for u, v in edges:
            graph[u][v] -= flow
            graph[v][u] += flow
        total += flow
    return total


def edmonds_karp(capacity: Sequence[Sequence[int]], source: int, sink: int) -> int:
    """Return the maximum flow, augmenting along shortest paths found by BFS."""
    return _max_flow(capacity, source, sink, _bfs_path)


def ford_fulkerson_dfs(capacity: Sequence[Sequence[int]], source: int, sink: int) -> int:
    """Return the maximum flow, augmenting along paths found by depth-first search."""
    return _max_flow(capacity, source, sink, _dfs_path)