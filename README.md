# algobasics

Classic algorithms and data structures in plain Python, using only the
standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algobasics.linked_list` | `reverse`, `merge` (ascending), `merge_reverse` (descending), `ring_judge`, and the `main` command |
| `algobasics.containers` | `Queue`, `Stack`, `IndexedLinkedList`, `TrackedHeap`, `previous_smaller`, `sliding_window_min`, `sliding_window_max` |
| `algobasics.hashing` | `OpenAddressingSet` (linear probing), `PrefixHash` (base 131 modulo 2**64, 1-based positions) |
| `algobasics.tries` | `StringTrie` (word counts), `max_xor_pair` (over the low 31 bits) |
| `algobasics.text` | `kmp_find_all`, `evaluate` (integer `+ - * /` and parentheses, division truncating toward zero) |
| `algobasics.union_find` | `DisjointSet` with set sizes, `count_false_statements` for the three-kind food chain |
| `algobasics.sorting` | `quick_sort`, `merge_sort`, `count_inversions`, `kth_smallest`, `heap_smallest` |
| `algobasics.searching` | `cube_root` (bisection on [-100, 100]), `element_range` |
| `algobasics.two_pointers` | `target_sum_pair`, `is_subsequence`, `longest_unique_run` |
| `algobasics.arrays` | `prefix_sums`, `range_sums`, `apply_range_additions`, `submatrix_sums`, `count_three_way_splits`, `covered_flags`, `discretized_range_sums`, `count_merged_intervals` |
| `algobasics.arithmetic` | `count_one_bits` (32-bit two's complement for negatives), `add_decimal` |
| `algobasics.number_theory` | `gcd`, `ext_gcd`, `solve_linear_congruence`, `chinese_remainder`, `power_mod`, `mod_inverse`, `euler_phi`, `euler_phi_sum`, `prime_factors`, `is_prime`, `count_primes_linear`, `count_primes_eratosthenes` |
| `algobasics.divisors` | `divisors`, `divisor_count_of_product`, `divisor_sum_of_product` (both modulo 1e9+7), `count_divisible` |
| `algobasics.combinatorics` | `binomial_table`, `binomial_mod_factorial`, `binomial_lucas`, `binomial_exact`, `catalan_mod` |
| `algobasics.games` | `nim_first_wins`, `staircase_nim_first_wins` |
| `algobasics.traversal` | `bfs_distance`, `maze_shortest_path`, `permutations`, `n_queens`, `centroid_component_size`, `topological_order`, `left_child_right_sibling_height` |
| `algobasics.shortest_paths` | `dijkstra_dense`, `dijkstra_heap`, `bellman_ford`, `spfa`, `has_negative_cycle`, `floyd_warshall` |
| `algobasics.spanning` | `prim`, `kruskal`, `is_bipartite`, `max_bipartite_matching` |

Functions that find nothing return `None` or `-1` as their docstrings say
(for example `target_sum_pair`, `topological_order`, `bfs_distance`);
invalid arguments raise `ValueError` or `IndexError`.

## Examples

```python
from algobasics.sorting import count_inversions, kth_smallest
from algobasics.number_theory import power_mod, is_prime
from algobasics.text import evaluate, kmp_find_all
from algobasics.containers import sliding_window_min

count_inversions([2, 3, 4, 5, 6, 1])       # 5
kth_smallest([2, 4, 1, 5, 3], 3)           # 3
power_mod(3, 2, 5)                         # 4
is_prime(97)                               # True
evaluate("(2+2)*(1+1)")                    # 8
kmp_find_all("aba", "ababa")               # [0, 2]
sliding_window_min([1, 3, -1, -3, 5], 3)   # [-1, -3, -3]
```

Graph functions take the number of vertices and a list of edges, with
vertices numbered from 1. Shortest-path and spanning-tree functions return
`None` when there is no path or the graph is not connected:

```python
from algobasics.shortest_paths import dijkstra_heap
from algobasics.spanning import kruskal

dijkstra_heap(3, [(1, 2, 2), (2, 3, 1), (1, 3, 4)])   # 3
kruskal(3, [(1, 2, 1), (2, 3, 2), (1, 3, 3)])         # 3
```

## Command line

The linked-list exercises run interactively on standard input:

```
algobasics-list
```

It prints a menu (in Chinese) and reads a choice: 1 reverses a list,
2 merges two ascending lists, 3 merges them into descending order, and 4
checks the differences between neighbours of a circular list. Each list is
typed as integers separated by spaces or newlines and ended by a single
`0`. Command-line arguments are ignored.

## What it does not do

Only the linked-list exercises have a command. Everything else is a library
of functions and classes to call from Python; there are no commands that
read problem input from standard input for them.