"""Minimum spanning trees: Kruskal's algorithm and three forms of Prim's algorithm."""

from __future__ import annotations

import argparse
import csv
import heapq
import math
import random
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

DEFAULT_SIZES = (8, 15, 20, 30, 40, 50, 100, 200, 300, 400, 500)
DEFAULT_OUTPUT = "mst_time_results.csv"
CSV_HEADER = ("Graph Size", "Kruskal Time (microseconds)", "Prim Time (microseconds)")


@dataclass(frozen=True)
class Edge:
    """A weighted edge between two numbered vertices."""

    src: int
    dest: int
    weight: int

    def __str__(self) -> str:
        return f"{self.src} - {self.dest} : {self.weight}"


class DisjointSet:
    """Union-find over vertices ``0..size-1`` with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._rank = [0] * size

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, v: int) -> int:
        """Return the representative of the set holding ``v``."""
        root = v
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[v] != root:
            self._parent[v], v = root, self._parent[v]
        return root

    def union(self, u: int, v: int) -> bool:
        """Merge the sets of ``u`` and ``v``; return False if they were already one."""
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return False
        if self._rank[root_u] > self._rank[root_v]:
            self._parent[root_v] = root_u
        elif self._rank[root_u] < self._rank[root_v]:
            self._parent[root_u] = root_v
        else:
            self._parent[root_v] = root_u
            self._rank[root_u] += 1
        return True


def _as_edge(value: Edge | Sequence[int]) -> Edge:
    return value if isinstance(value, Edge) else Edge(*value)


def _checked_edges(num_vertices: int, edges: Iterable[Edge | Sequence[int]]) -> list[Edge]:
    if num_vertices < 0:
        raise ValueError("num_vertices must not be negative")
    result = [_as_edge(edge) for edge in edges]
    for edge in result:
        for vertex in (edge.src, edge.dest):
            if not 0 <= vertex < num_vertices:
                raise ValueError(f"edge {edge} names vertex {vertex}, which is not in the graph")
    return result


def kruskal_mst(num_vertices: int, edges: Iterable[Edge | Sequence[int]]) -> list[Edge]:
    """Return the edges of a minimum spanning forest, lightest first."""
    ordered = sorted(_checked_edges(num_vertices, edges), key=lambda e: e.weight)
    sets = DisjointSet(num_vertices)
    tree: list[Edge] = []
    for edge in ordered:
        if len(tree) >= num_vertices - 1:
            break
        if sets.union(edge.src, edge.dest):
            tree.append(edge)
    return tree


def prim_mst_lazy(num_vertices: int, edges: Iterable[Edge | Sequence[int]]) -> list[Edge]:
    """Grow a tree from vertex 0 with a priority queue of candidate edges.

    Each edge is followed from ``src`` to ``dest`` only, so vertices that
    cannot be reached that way from vertex 0 are left out. Ties in weight are
    broken by the smaller ``src``, then the smaller ``dest``.
    """
    graph = _checked_edges(num_vertices, edges)
    if num_vertices == 0:
        return []
    in_tree = [False] * num_vertices
    in_tree[0] = True
    queue = [(e.weight, e.src, e.dest) for e in graph if e.src == 0 or e.dest == 0]
    heapq.heapify(queue)
    tree: list[Edge] = []
    while queue:
        weight, u, v = heapq.heappop(queue)
        if in_tree[v]:
            continue
        in_tree[v] = True
        tree.append(Edge(u, v, weight))
        for e in graph:
            if (e.src == v or e.dest == v) and not in_tree[e.dest]:
                heapq.heappush(queue, (e.weight, e.src, e.dest))
    return tree


def prim_mst_matrix(graph: Sequence[Sequence[int]]) -> list[Edge]:
    """Prim's algorithm on an adjacency matrix in which 0 means no edge.

    Returns, for each vertex ``i`` after the first, the edge
    ``(parent, i, graph[i][parent])`` that joins it to the tree.
    """
    rows = [list(row) for row in graph]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("graph must be a square matrix")
    if size == 0:
        return []

    key = [math.inf] * size
    parent: list[int | None] = [None] * size
    in_tree = [False] * size
    key[0] = 0

    for _ in range(size - 1):
        candidates = [v for v in range(size) if not in_tree[v] and key[v] < math.inf]
        if not candidates:
            raise ValueError("graph is not connected")
        u = min(candidates, key=key.__getitem__)
        in_tree[u] = True
        for v, weight in enumerate(rows[u]):
            if weight and not in_tree[v] and weight < key[v]:
                parent[v] = u
                key[v] = weight

    tree: list[Edge] = []
    for i in range(1, size):
        p = parent[i]
        if p is None:
            raise ValueError("graph is not connected")
        tree.append(Edge(p, i, rows[i][p]))
    return tree


def prim_mst_heap(num_vertices: int, edges: Iterable[Edge | Sequence[int]]) -> list[Edge]:
    """Prim's algorithm on an undirected adjacency list with a binary heap.

    Returns, for each vertex ``i`` after the first, the edge ``(parent, i, key)``
    that joins it to the tree.
    """
    graph = _checked_edges(num_vertices, edges)
    if num_vertices == 0:
        return []
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(num_vertices)]
    for e in graph:
        adjacency[e.src].append((e.dest, e.weight))
        adjacency[e.dest].append((e.src, e.weight))

    key = [math.inf] * num_vertices
    parent: list[int | None] = [None] * num_vertices
    in_tree = [False] * num_vertices
    key[0] = 0
    heap: list[tuple[float, int]] = [(0, 0)]

    while heap:
        _, u = heapq.heappop(heap)
        if in_tree[u]:
            continue
        in_tree[u] = True
        # Neighbours are visited most recently added first.
        for v, weight in reversed(adjacency[u]):
            if not in_tree[v] and weight < key[v]:
                key[v] = weight
                parent[v] = u
                heapq.heappush(heap, (weight, v))

    tree: list[Edge] = []
    for i in range(1, num_vertices):
        p = parent[i]
        if p is None:
            raise ValueError("graph is not connected")
        tree.append(Edge(p, i, int(key[i])))
    return tree


def total_weight(edges: Iterable[Edge | Sequence[int]]) -> int:
    """Return the summed weight of the edges."""
    return sum(_as_edge(edge).weight for edge in edges)


def random_graph(
    num_vertices: int, num_edges: int, rng: random.Random | None = None
) -> list[Edge]:
    """Return ``num_edges`` random edges without self-loops, weighted 1 to 100."""
    if num_edges < 0:
        raise ValueError("num_edges must not be negative")
    if num_edges and num_vertices < 2:
        raise ValueError("at least two vertices are needed for an edge")
    generator = rng if rng is not None else random.Random()
    edges: list[Edge] = []
    for _ in range(num_edges):
        u = generator.randrange(num_vertices)
        v = generator.randrange(num_vertices)
        while u == v:
            v = generator.randrange(num_vertices)
        edges.append(Edge(u, v, generator.randint(1, 100)))
    return edges


def _format_tree(tree: Sequence[Edge]) -> str:
    lines = [str(edge) for edge in tree]
    lines.append(f"Total Weight: {total_weight(tree)}")
    return "\n".join(lines)


def _timed(function, *args) -> tuple[list[Edge], int]:
    start = time.perf_counter_ns()
    result = function(*args)
    return result, (time.perf_counter_ns() - start) // 1000


def main(argv: Sequence[str] | None = None) -> int:
    """Time Kruskal's and Prim's algorithms on random graphs and save a CSV report."""
    parser = argparse.ArgumentParser(
        prog="algolab-mst",
        description="Compare Kruskal's and Prim's algorithms on random graphs.",
    )
    parser.add_argument(
        "--sizes", nargs="+", type=int, default=list(DEFAULT_SIZES),
        help="numbers of vertices to try",
    )
    parser.add_argument("--output", default=DEFAULT_OUTPUT, help="CSV file to write")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random graphs")
    args = parser.parse_args(argv)

    if any(size < 1 for size in args.sizes):
        parser.error("sizes must be positive")

    rng = random.Random(args.seed)
    output = Path(args.output)
    with output.open("w", newline="") as handle:
        writer = csv.writer(handle)
        writer.writerow(CSV_HEADER)
        for size in args.sizes:
            edges = random_graph(size, size * (size - 1) // 4, rng)
            kruskal_tree, kruskal_time = _timed(kruskal_mst, size, edges)
            prim_tree, prim_time = _timed(prim_mst_lazy, size, edges)
            writer.writerow((size, kruskal_time, prim_time))

            print(f"Kruskal's MST for Graph Size {size}")
            print(_format_tree(kruskal_tree))
            print(f"\nPrim's MST for Graph Size {size}")
            print(_format_tree(prim_tree))
            print("--------------------------------------")

    print(f"MST computation complete. Results saved to {output}")
    return 0