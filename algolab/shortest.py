"""Shortest paths: Dijkstra, Bellman-Ford and Johnson's all-pairs algorithm."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence

from algolab.errors import NegativeCycleError
from algolab.mst import Edge

INF = math.inf

WeightedEdge = tuple[int, int, float]


def _checked_edges(
    num_vertices: int, edges: Iterable[Edge | Sequence[float]]
) -> list[WeightedEdge]:
    if num_vertices < 0:
        raise ValueError("num_vertices must not be negative")
    result: list[WeightedEdge] = []
    for edge in edges:
        if isinstance(edge, Edge):
            src, dest, weight = edge.src, edge.dest, edge.weight
        else:
            values = tuple(edge)
            if len(values) != 3:
                raise ValueError("an edge needs a source, a destination and a weight")
            src, dest, weight = values
        for vertex in (src, dest):
            if not 0 <= vertex < num_vertices:
                raise ValueError(f"vertex {vertex} is not in the graph")
        result.append((int(src), int(dest), weight))
    return result


def _check_source(num_vertices: int, source: int) -> None:
    if not 0 <= source < num_vertices:
        raise ValueError(f"source {source} is not a vertex")


def _dijkstra(
    adjacency: Sequence[Sequence[tuple[int, float]]], source: int
) -> list[float]:
    dist = [INF] * len(adjacency)
    dist[source] = 0
    heap: list[tuple[float, int]] = [(0, source)]
    done = [False] * len(adjacency)
    while heap:
        d, u = heapq.heappop(heap)
        if done[u]:
            continue
        done[u] = True
        for v, weight in adjacency[u]:
            candidate = d + weight
            if candidate < dist[v]:
                dist[v] = candidate
                heapq.heappush(heap, (candidate, v))
    return dist


def _adjacency(num_vertices: int, edges: Iterable[WeightedEdge]) -> list[list[tuple[int, float]]]:
    adjacency: list[list[tuple[int, float]]] = [[] for _ in range(num_vertices)]
    for src, dest, weight in edges:
        adjacency[src].append((dest, weight))
    return adjacency


def dijkstra(
    num_vertices: int, edges: Iterable[Edge | Sequence[float]], source: int
) -> list[float]:
    """Return the distance from ``source`` to every vertex of a directed graph.

    Edges are ``(src, dest, weight)`` with non-negative weights; unreachable
    vertices get ``INF``.
    """
    graph = _checked_edges(num_vertices, edges)
    _check_source(num_vertices, source)
    if any(weight < 0 for _, _, weight in graph):
        raise ValueError("Dijkstra's algorithm needs non-negative edge weights")
    return _dijkstra(_adjacency(num_vertices, graph), source)


def bellman_ford(
    num_vertices: int, edges: Iterable[Edge | Sequence[float]], source: int
) -> list[float]:
    """Return the distance from ``source`` to every vertex, allowing negative weights.

    Raises ``NegativeCycleError`` if a negative cycle is reachable from ``source``.
    """
    graph = _checked_edges(num_vertices, edges)
    _check_source(num_vertices, source)
    dist = [INF] * num_vertices
    dist[source] = 0
    for _ in range(num_vertices - 1):
        changed = False
        for u, v, weight in graph:
            if dist[u] != INF and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                changed = True
        if not changed:
            break
    if any(dist[u] != INF and dist[u] + weight < dist[v] for u, v, weight in graph):
        raise NegativeCycleError("Graph contains negative weight cycle.")
    return dist


def johnson(num_vertices: int, edges: Iterable[Edge | Sequence[float]]) -> list[list[float]]:
    """Return the all-pairs distance matrix of a directed graph with any edge weights.

    Potentials from Bellman-Ford make every weight non-negative, so Dijkstra
    can run from each vertex. Raises ``NegativeCycleError`` if the graph holds
    a negative cycle.
    """
    graph = _checked_edges(num_vertices, edges)
    if num_vertices == 0:
        return []
    virtual = num_vertices
    augmented = graph + [(virtual, u, 0) for u in range(num_vertices)]
    potential = bellman_ford(num_vertices + 1, augmented, virtual)[:num_vertices]

    reweighted = [(u, v, w + potential[u] - potential[v]) for u, v, w in graph]
    adjacency = _adjacency(num_vertices, reweighted)

    result: list[list[float]] = []
    for u in range(num_vertices):
        row = _dijkstra(adjacency, u)
        result.append(
            [d if d == INF else d - potential[u] + potential[v] for v, d in enumerate(row)]
        )
    return result


def _text(value: float) -> str:
    return "INF" if value == INF else str(value)


def format_distances(dist: Sequence[float] | Sequence[Sequence[float]]) -> str:
    """Render single-source distances as a vertex table, or a distance matrix as a grid."""
    rows = list(dist)
    if rows and all(isinstance(row, Sequence) for row in rows):
        header = "All-pairs shortest paths:\n     " + "".join(
            f"{i:6d}" for i in range(len(rows))
        )
        lines = [header]
        for u, row in enumerate(rows):
            lines.append(f"{u:3d} " + "".join(f"{_text(value):>6}" for value in row))
        return "\n".join(lines) + "\n"

    lines = ["Vertex\tDistance from Source"]
    lines.extend(f"{i} \t\t {_text(value)}" for i, value in enumerate(rows))
    return "\n".join(lines) + "\n"