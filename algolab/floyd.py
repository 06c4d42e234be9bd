"""All-pairs shortest paths by the Floyd-Warshall algorithm."""

from __future__ import annotations

import math
from collections.abc import Sequence

from algolab.errors import NegativeCycleError

INF = math.inf


def floyd_warshall(graph: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return the shortest-distance matrix of a weight matrix.

    ``graph[i][j]`` is the weight of the edge from ``i`` to ``j``, or ``INF``
    where there is no edge. Raises ``NegativeCycleError`` if a negative cycle
    is reachable.
    """
    dist = [list(row) for row in graph]
    size = len(dist)
    if any(len(row) != size for row in dist):
        raise ValueError("graph must be a square matrix")

    for k in range(size):
        through_k = dist[k]
        for row in dist:
            via = row[k]
            if via == INF:
                continue
            for j, k_to_j in enumerate(through_k):
                if k_to_j != INF and via + k_to_j < row[j]:
                    row[j] = via + k_to_j

    if any(dist[i][i] < 0 for i in range(size)):
        raise NegativeCycleError()
    return dist


def format_distances(dist: Sequence[Sequence[float]]) -> str:
    """Render a distance matrix as a tab-separated table with INF for no path."""
    lines = ["Shortest Distance Matrix:"]
    for row in dist:
        lines.append("".join(("INF" if value == INF else str(value)) + "\t" for value in row))
    return "\n".join(lines) + "\n"