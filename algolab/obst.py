"""Optimal binary search tree by dynamic programming."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from string import ascii_uppercase


@dataclass(frozen=True, eq=False)
class OptimalBST:
    """The minimum expected search cost and the root chosen for every key range.

    ``roots[(i, j)]`` is the key number (1-based) at the root of the optimal
    subtree over keys ``i..j``.
    """

    cost: float
    roots: dict[tuple[int, int], int]
    key_count: int

    def describe(self, labels: Sequence[str] = ascii_uppercase) -> list[str]:
        """Describe the tree, one line per key, naming keys by ``labels``."""
        if len(labels) < self.key_count:
            raise ValueError("not enough labels for the keys")
        lines: list[str] = []

        def walk(first: int, last: int, parent: int) -> None:
            if first > last:
                return
            root = self.roots[(first, last)]
            name = labels[root - 1]
            if parent == 0:
                lines.append(f"{name} is the root")
            elif root < parent:
                lines.append(f"{name} is the left child of {labels[parent - 1]}")
            else:
                lines.append(f"{name} is the right child of {labels[parent - 1]}")
            walk(first, root - 1, root)
            walk(root + 1, last, root)

        walk(1, self.key_count, 0)
        return lines


def optimal_bst(p: Sequence[float], q: Sequence[float]) -> OptimalBST:
    """Build the optimal search tree for keys with access probabilities ``p``.

    ``p[k]`` is the probability of searching for key ``k + 1``; ``q`` holds the
    ``len(p) + 1`` probabilities of searches that fall between keys.
    """
    n = len(p)
    if len(q) != n + 1:
        raise ValueError("q must have exactly one more entry than p")

    keys = [0.0, *p]
    expected = [[0.0] * (n + 2) for _ in range(n + 2)]
    weight = [[0.0] * (n + 2) for _ in range(n + 2)]
    for i in range(1, n + 2):
        expected[i][i - 1] = weight[i][i - 1] = q[i - 1]

    roots: dict[tuple[int, int], int] = {}
    for length in range(1, n + 1):
        for i in range(1, n - length + 2):
            j = i + length - 1
            weight[i][j] = weight[i][j - 1] + keys[j] + q[j]
            best, best_root = math.inf, i
            for r in range(i, j + 1):
                cost = expected[i][r - 1] + expected[r + 1][j] + weight[i][j]
                if cost < best:
                    best, best_root = cost, r
            expected[i][j] = best
            roots[(i, j)] = best_root

    return OptimalBST(cost=expected[1][n], roots=roots, key_count=n)