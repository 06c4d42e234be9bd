"""The 15-puzzle solved by A* search with the Manhattan-distance heuristic."""

from __future__ import annotations

import argparse
import heapq
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import count

SIZE = 4
GOAL = (
    (1, 2, 3, 4),
    (5, 6, 7, 8),
    (9, 10, 11, 12),
    (13, 14, 15, 0),
)
DEFAULT_START = (
    (1, 2, 3, 4),
    (5, 6, 0, 8),
    (9, 10, 7, 12),
    (13, 14, 11, 15),
)
_MOVES = ((1, 0), (-1, 0), (0, 1), (0, -1))

Board = tuple[tuple[int, ...], ...]


@dataclass(frozen=True)
class _Node:
    state: tuple[int, ...]
    blank: int
    moves: int
    heuristic: int
    parent: _Node | None


def _flatten(board: Sequence[Sequence[int]]) -> tuple[int, ...]:
    rows = [tuple(row) for row in board]
    if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
        raise ValueError(f"board must be {SIZE}x{SIZE}")
    flat = tuple(value for row in rows for value in row)
    if sorted(flat) != list(range(SIZE * SIZE)):
        raise ValueError(f"board must hold each of 0..{SIZE * SIZE - 1} exactly once")
    return flat


def _as_board(flat: tuple[int, ...]) -> Board:
    return tuple(flat[start : start + SIZE] for start in range(0, SIZE * SIZE, SIZE))


def _heuristic(flat: tuple[int, ...]) -> int:
    total = 0
    for index, tile in enumerate(flat):
        if tile:
            row, col = divmod(index, SIZE)
            goal_row, goal_col = divmod(tile - 1, SIZE)
            total += abs(row - goal_row) + abs(col - goal_col)
    return total


def _is_solvable(flat: tuple[int, ...]) -> bool:
    tiles = [tile for tile in flat if tile]
    inversions = sum(1 for i, a in enumerate(tiles) for b in tiles[i + 1 :] if a > b)
    blank_row_from_bottom = SIZE - flat.index(0) // SIZE
    return (inversions + blank_row_from_bottom) % 2 == 1


def manhattan_distance(board: Sequence[Sequence[int]]) -> int:
    """Return the summed Manhattan distance of every tile from its goal cell."""
    return _heuristic(_flatten(board))


def _path(node: _Node) -> list[Board]:
    steps: list[Board] = []
    current: _Node | None = node
    while current is not None:
        steps.append(_as_board(current.state))
        current = current.parent
    steps.reverse()
    return steps


def solve(board: Sequence[Sequence[int]]) -> list[Board]:
    """Return the boards of a shortest solution, from ``board`` to the goal.

    The list starts with the given board; entry ``i`` is the board after ``i``
    moves. Raises ``ValueError`` for a malformed or unsolvable board.
    """
    start = _flatten(board)
    if not _is_solvable(start):
        raise ValueError("puzzle is not solvable")

    order = count()
    root = _Node(start, start.index(0), 0, _heuristic(start), None)
    open_heap = [(root.heuristic, next(order), root)]
    closed: set[tuple[int, ...]] = set()

    while open_heap:
        _, _, node = heapq.heappop(open_heap)
        if node.heuristic == 0:
            return _path(node)
        if node.state in closed:
            continue
        closed.add(node.state)

        row, col = divmod(node.blank, SIZE)
        for d_row, d_col in _MOVES:
            new_row, new_col = row + d_row, col + d_col
            if not (0 <= new_row < SIZE and 0 <= new_col < SIZE):
                continue
            target = new_row * SIZE + new_col
            cells = list(node.state)
            cells[node.blank], cells[target] = cells[target], 0
            child_state = tuple(cells)
            if child_state in closed:
                continue
            child = _Node(child_state, target, node.moves + 1, _heuristic(child_state), node)
            heapq.heappush(open_heap, (child.moves + child.heuristic, next(order), child))

    raise ValueError("puzzle is not solvable")


def format_board(board: Sequence[Sequence[int]]) -> str:
    """Render a board as right-aligned two-digit cells, followed by a blank line."""
    lines = ("".join(f"{value:2d} " for value in row) + "\n" for row in board)
    return "".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Solve a 15-puzzle given as 16 tiles row by row, or a built-in example."""
    parser = argparse.ArgumentParser(
        prog="algolab-puzzle",
        description="Solve the 15-puzzle with A* search.",
    )
    parser.add_argument(
        "tiles", nargs="*", type=int, help="16 tiles row by row, 0 for the blank"
    )
    args = parser.parse_args(argv)

    if args.tiles:
        if len(args.tiles) != SIZE * SIZE:
            print(f"expected {SIZE * SIZE} tiles, got {len(args.tiles)}", file=sys.stderr)
            return 1
        board = _as_board(tuple(args.tiles))
    else:
        board = DEFAULT_START

    try:
        _flatten(board)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    print("Initial State:")
    print(format_board(board), end="")
    print("Goal State:")
    print(format_board(GOAL), end="")
    print("Solving...\n")

    try:
        path = solve(board)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    print("Solution Found:")
    for moves, step in enumerate(path):
        print(format_board(step), end="")
        print(f"Move Count: {moves}")
    return 0