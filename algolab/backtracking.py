"""Backtracking searches: subset sum, graph colouring, N-Queens and 0/1 knapsack."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

MAX_QUEENS = 20


def subset_sums(values: Iterable[int], target: int) -> list[list[int]]:
    """Return every subset of ``values`` whose elements add up to ``target``.

    The values are sorted first, so each subset is listed in ascending order.
    Each element is either included or excluded; a branch whose remaining
    target drops below zero is abandoned.
    """
    items = sorted(values)
    found: list[list[int]] = []
    chosen: list[int] = []

    def explore(index: int, remaining: int) -> None:
        if remaining == 0:
            found.append(list(chosen))
            return
        if index == len(items) or remaining < 0:
            return
        chosen.append(items[index])
        explore(index + 1, remaining - items[index])
        chosen.pop()
        explore(index + 1, remaining)

    explore(0, target)
    return found


def color_graph(adjacency: Sequence[Sequence[int]], colors: int) -> list[int] | None:
    """Colour the vertices with ``1..colors`` so that no edge joins equal colours.

    ``adjacency`` is a square matrix whose truthy entries mark edges. Vertices
    are coloured in order, each taking the lowest colour that fits. Returns
    the colour of each vertex, or ``None`` when no colouring exists.
    """
    rows = [list(row) for row in adjacency]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("adjacency must be a square matrix")

    assignment = [0] * size

    def fits(vertex: int, color: int) -> bool:
        return not any(
            edge and assignment[other] == color for other, edge in enumerate(rows[vertex])
        )

    def place(vertex: int) -> bool:
        if vertex == size:
            return True
        for color in range(1, colors + 1):
            if fits(vertex, color):
                assignment[vertex] = color
                if place(vertex + 1):
                    return True
                assignment[vertex] = 0
        return False

    return assignment if place(0) else None


def n_queens(n: int) -> list[tuple[int, ...]]:
    """Return every placement of ``n`` non-attacking queens on an n-by-n board.

    Each solution gives, for each column from left to right, the row of its
    queen. Solutions come in the order a column-by-column search finds them.
    """
    if not 1 <= n <= MAX_QUEENS:
        raise ValueError(f"N must be between 1 and {MAX_QUEENS}")

    solutions: list[tuple[int, ...]] = []
    placed: list[int] = []
    used_rows: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(col: int) -> None:
        if col == n:
            solutions.append(tuple(placed))
            return
        for row in range(n):
            if row in used_rows or row - col in diagonals or row + col in anti_diagonals:
                continue
            placed.append(row)
            used_rows.add(row)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            place(col + 1)
            placed.pop()
            used_rows.discard(row)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)

    place(0)
    return solutions


def format_board(queens: Sequence[int]) -> str:
    """Draw a solution as rows of ``Q`` and ``.`` cells, one line per board row."""
    size = len(queens)
    lines = [
        "".join("Q " if queens[col] == row else ". " for col in range(size))
        for row in range(size)
    ]
    return "\n".join(lines)


def knapsack_max_value(
    weights: Sequence[int], values: Sequence[int], capacity: int
) -> int:
    """Return the largest total value of items whose total weight fits ``capacity``.

    Every include/exclude choice is tried, with items taken in order of
    falling value-to-weight ratio and branches over capacity cut off.
    """
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")

    def ratio(item: tuple[int, int]) -> float:
        weight, value = item
        return math.inf if weight == 0 else value / weight

    items = sorted(zip(weights, values), key=ratio, reverse=True)
    best = 0

    def explore(index: int, weight: int, value: int) -> None:
        nonlocal best
        if weight > capacity:
            return
        if index == len(items):
            best = max(best, value)
            return
        item_weight, item_value = items[index]
        explore(index + 1, weight + item_weight, value + item_value)
        explore(index + 1, weight, value)

    explore(0, 0, 0)
    return best