"""Matrix chain multiplication: the cheapest order in which to multiply a chain."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass
from functools import lru_cache

from algolab.matrix import Matrix, multiply


def _validate(dims: Sequence[int]) -> tuple[int, ...]:
    values = tuple(dims)
    if len(values) < 2:
        raise ValueError("at least two dimensions (one matrix) are needed")
    if any(d <= 0 for d in values):
        raise ValueError("dimensions must be positive")
    return values


@dataclass(frozen=True)
class ChainSolution:
    """The least scalar-multiplication cost of a chain and the split that achieves it.

    Matrix ``i`` (0-based) has shape ``dims[i]`` by ``dims[i + 1]``.
    ``splits[(i, j)]`` is the index ``k`` such that the product of matrices
    ``i..j`` is best formed as ``(i..k)(k+1..j)``.
    """

    dims: tuple[int, ...]
    cost: int
    splits: dict[tuple[int, int], int]

    @property
    def count(self) -> int:
        """The number of matrices in the chain."""
        return len(self.dims) - 1

    def parenthesization(self, prefix: str = "A", first_index: int = 1) -> str:
        """Write the optimal order with matrices named ``prefix`` plus their number."""

        def render(i: int, j: int) -> str:
            if i == j:
                return f"{prefix}{i + first_index}"
            k = self.splits[(i, j)]
            return f"({render(i, k)}{render(k + 1, j)})"

        return render(0, self.count - 1)


def chain_cost_bottom_up(dims: Sequence[int]) -> int:
    """Return the least number of scalar multiplications, filling a table bottom-up."""
    d = _validate(dims)
    n = len(d)
    table = [[0] * n for _ in range(n)]
    for length in range(2, n):
        for i in range(n - length):
            j = i + length
            table[i][j] = min(
                table[i][k] + table[k][j] + d[i] * d[k] * d[j] for k in range(i + 1, j)
            )
    return table[0][n - 1]


def chain_cost_top_down(dims: Sequence[int]) -> int:
    """Return the least number of scalar multiplications by memoized recursion."""
    d = _validate(dims)

    @lru_cache(maxsize=None)
    def best(i: int, j: int) -> int:
        if j - i < 2:
            return 0
        return min(best(i, k) + best(k, j) + d[i] * d[k] * d[j] for k in range(i + 1, j))

    return best(0, len(d) - 1)


def chain_order(dims: Sequence[int]) -> ChainSolution:
    """Find the optimal order bottom-up, keeping the chosen split of every sub-chain."""
    d = _validate(dims)
    n = len(d) - 1
    cost = [[0] * n for _ in range(n)]
    splits: dict[tuple[int, int], int] = {}
    for length in range(2, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            best_cost, best_k = None, i
            for k in range(i, j):
                candidate = cost[i][k] + cost[k + 1][j] + d[i] * d[k + 1] * d[j + 1]
                if best_cost is None or candidate < best_cost:
                    best_cost, best_k = candidate, k
            cost[i][j] = best_cost if best_cost is not None else 0
            splits[(i, j)] = best_k
    return ChainSolution(dims=d, cost=cost[0][n - 1], splits=splits)


def chain_order_memoized(dims: Sequence[int]) -> ChainSolution:
    """Find the optimal order top-down with memoization, keeping every split."""
    d = _validate(dims)
    n = len(d) - 1
    memo: dict[tuple[int, int], int] = {}
    splits: dict[tuple[int, int], int] = {}

    def best(i: int, j: int) -> int:
        if i == j:
            return 0
        if (i, j) in memo:
            return memo[(i, j)]
        best_cost, best_k = None, i
        for k in range(i, j):
            candidate = best(i, k) + best(k + 1, j) + d[i] * d[k + 1] * d[j + 1]
            if best_cost is None or candidate < best_cost:
                best_cost, best_k = candidate, k
        assert best_cost is not None
        memo[(i, j)] = best_cost
        splits[(i, j)] = best_k
        return best_cost

    total = best(0, n - 1)
    return ChainSolution(dims=d, cost=total, splits=splits)


def multiply_chain(
    matrices: Sequence[Sequence[Sequence[float]]], solution: ChainSolution
) -> Matrix:
    """Multiply the chain of matrices in the order that ``solution`` prescribes."""
    mats = list(matrices)
    if len(mats) != solution.count:
        raise ValueError("number of matrices does not match the solution")
    for index, mat in enumerate(mats):
        rows, cols = solution.dims[index], solution.dims[index + 1]
        if len(mat) != rows or any(len(row) != cols for row in mat):
            raise ValueError(f"matrix {index} does not have shape {rows}x{cols}")

    def product(i: int, j: int) -> Matrix:
        if i == j:
            return [list(row) for row in mats[i]]
        k = solution.splits[(i, j)]
        return multiply(product(i, k), product(k + 1, j))

    return product(0, solution.count - 1)


def random_dimensions(count: int, rng: random.Random | None = None) -> list[int]:
    """Return ``count + 1`` random dimensions, each a power of two from 8 to 256."""
    if count < 1:
        raise ValueError("count must be at least 1")
    generator = rng if rng is not None else random.Random()
    return [2 ** generator.randint(3, 8) for _ in range(count + 1)]