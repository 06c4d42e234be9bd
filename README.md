# algolab

A collection of classic algorithms, written plainly so they can be read,
run and compared. It needs nothing outside the standard library.

## What is inside

| Module | Contents |
| --- | --- |
| `algolab.sorting` | `insertion_sort`, `selection_sort`, `merge_sort`, `quick_sort`; each takes any iterable and returns a new sorted list |
| `algolab.subarray` | maximum contiguous subarray sum: `max_subarray_kadane`, `max_subarray_divide` |
| `algolab.textsearch` | `rabin_karp_search` (every start index of a pattern), `lcs_length` |
| `algolab.floyd` | all-pairs shortest paths on a weight matrix: `floyd_warshall`, `format_distances`, `INF` |
| `algolab.backtracking` | `subset_sums`, `color_graph`, `n_queens` (1 to 20 queens), `format_board`, `knapsack_max_value` |
| `algolab.closest` | `Point`, `distance`, `closest_pair_distance` |
| `algolab.obst` | optimal binary search trees: `optimal_bst` returns an `OptimalBST` with `cost`, `roots` and `describe()` |
| `algolab.matrix` | `add_matrices`, `subtract_matrices`, `multiply`, `strassen_multiply` (square, power-of-two sizes), `random_matrix` |
| `algolab.chain` | matrix chain ordering: `chain_cost_bottom_up`, `chain_cost_top_down`, `chain_order`, `chain_order_memoized`, `ChainSolution`, `multiply_chain`, `random_dimensions` |
| `algolab.puzzle` | A* solver for the 15-puzzle: `manhattan_distance`, `solve`, `format_board`, `main` |
| `algolab.maxflow` | `edmonds_karp` (BFS paths), `ford_fulkerson_dfs` (DFS paths) |
| `algolab.mst` | `Edge`, `DisjointSet`, `kruskal_mst`, `prim_mst_lazy`, `prim_mst_matrix`, `prim_mst_heap`, `total_weight`, `random_graph`, `main` |
| `algolab.shortest` | `dijkstra`, `bellman_ford`, `johnson`, `format_distances` |

Graphs that contain a negative-weight cycle are reported with
`algolab.errors.NegativeCycleError`, a subclass of `ValueError`. Other bad
input (a non-square matrix, an unknown vertex, an unsolvable puzzle, a
negative weight given to `dijkstra`) raises `ValueError`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

```python
from algolab.subarray import max_subarray_kadane
from algolab.textsearch import lcs_length, rabin_karp_search
from algolab.chain import chain_cost_bottom_up, chain_order
from algolab.maxflow import edmonds_karp
from algolab.mst import kruskal_mst, total_weight

max_subarray_kadane([2, 3, -8, 7, -1, 2, 3])   # 11
lcs_length("AGGTAB", "GXTXAYB")                # 4
rabin_karp_search("CC", "ABCCDDAEFGCC")        # [2, 10]
chain_cost_bottom_up([2, 1, 3, 4])             # 20
chain_order([2, 1, 3, 4]).parenthesization()   # '(A1(A2A3))'

capacity = [[0] * 6 for _ in range(6)]
for u, v, c in [(0, 1, 16), (0, 2, 13), (1, 2, 10), (1, 3, 12), (2, 1, 4),
                (2, 4, 14), (3, 2, 9), (3, 5, 20), (4, 3, 7), (4, 5, 4)]:
    capacity[u][v] = c
edmonds_karp(capacity, 0, 5)                   # 23

edges = [(0, 1, 2), (0, 3, 6), (1, 2, 3), (1, 3, 8), (1, 4, 5), (2, 4, 7), (3, 4, 9)]
total_weight(kruskal_mst(5, edges))            # 16
```

## Command-line tools

Two commands are installed with the package.

```
algolab-puzzle [TILE ...]
```

solves a 15-puzzle with A* search and prints each board on the way to the
goal with its move count. Give the 16 tiles row by row, with 0 for the
blank; with no tiles it solves a built-in example. It exits with status 1
if the board is malformed or unsolvable.

```
algolab-mst [--sizes N ...] [--output FILE] [--seed SEED]
```

builds random graphs with `N * (N - 1) // 4` edges for each size (by default
8, 15, 20, 30, 40, 50, 100, 200, 300, 400 and 500 vertices), finds their
minimum spanning trees with `kruskal_mst` and `prim_mst_lazy`, prints both
trees and writes the time each took, in microseconds, to a CSV file
(`mst_time_results.csv` unless `--output` says otherwise). `--seed` makes the
graphs repeatable.

## What it does not do

The only timing tool is `algolab-mst`. There is no command that benchmarks
the sorting routines or `rabin_karp_search` against input sizes, and no
command that reads a text file to search; those functions are meant to be
called from Python. The other algorithms have no interactive menus or
prompts either: call them directly with your own data.