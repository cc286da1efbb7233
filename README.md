# contestlib

Data structures and algorithms for competitive programming, plus ready-made
solvers for a set of classic contest problems built on top of them. Pure
Python, no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building blocks

| Module | Contents |
| --- | --- |
| `contestlib.modint` | `ModNum` (residues modulo 998244353), `modnum_type(mod)` for other moduli, `Factorials` with `ncr`, `extended_gcd` / `ExtendedGcdResult`, `mod_inv`, `mod_inv_in_range`, `modpow`, `modinv`, `binom` |
| `contestlib.fenwick` | `FenwickTree` with `add`, `prefix_sum` and `range_sum` |
| `contestlib.unionfind` | `UnionFind` with `root`, `same`, `unite` and a `count` of sets |
| `contestlib.segtree` | `SegTree` and `LazySegTree` over any monoid, including `max_right` / `min_left` searches |
| `contestlib.sequences` | `lis` (length of the longest strictly increasing subsequence ending at each index), `cartesian_tree` |
| `contestlib.primes` | `Sieve` (linear sieve with `min_factor`, `primes` and `is_prime`) |
| `contestlib.rolling_hash` | `RollingHash` giving double hashes of slices with `get(l, r)` |
| `contestlib.trie` | `Trie` and `TrieNode`, with Aho–Corasick suffix links from `calc_suffix_link` |
| `contestlib.trees` | `LowestCommonAncestor` (`lca`, `distance`), `AuxiliaryTree` (`query`, `clear`) |
| `contestlib.graphs` | `strongly_connected_components`, `dijkstra` |
| `contestlib.flow` | `Dinic` maximum flow, `BipartiteMatching` |

Errors are raised as exceptions: out-of-range positions raise `IndexError`,
invalid arguments raise `ValueError`, and querying a tree before `build()`
raises `RuntimeError`. Where an answer may not exist (an unreachable vertex in
`dijkstra`, an impossible plan in a solver) the function returns `None`.

### Examples

```python
from contestlib.modint import modnum_type, Factorials

Mod = modnum_type(1_000_000_007)
x = Mod(3) / Mod(2)
print(int(x * Mod(2)))          # 3

fact = Factorials(100, 1_000_000_007)
print(int(fact.ncr(10, 3)))     # 120
```

```python
from contestlib.segtree import SegTree

tree = SegTree(max, lambda: 0, [3, 1, 4, 1, 5])
print(tree.prod(1, 4))          # 4
tree.set(1, 9)
print(tree.all_prod())          # 9
```

```python
from contestlib.fenwick import FenwickTree

fw = FenwickTree(5)
fw.add(2, 3)
print(fw.prefix_sum(3))         # 3
print(fw.range_sum(3, 5))       # 0
```

```python
from contestlib.graphs import dijkstra

graph = [[(1, 2), (2, 5)], [(2, 1)], []]
print(dijkstra(graph, 0))       # [0, 2, 3]
```

## Problem solutions

The `contestlib.problems` sub-package holds solvers grouped by theme:

- `trees` – tree diameter cycles, independent halves, Steiner tree sizes, sums of distances
- `graphs` – shortest paths through a vertex, mutually reachable pairs, co-author distances, flow-based profit, soldier matching
- `counting` – subsequence counts, spaced selections, stair climbs, colourings, switch patterns, inclusion–exclusion counts
- `ranges` – brick stacking, crossing chords, bumpiness updates, value inference, prefix sums, rectangle overlaps, grid painting
- `tree_dp` – counting edge cuts that leave mixed parts
- `search` – binary searches, sliding windows, smallest subsequences, topological order enumeration
- `dynamic` – job scheduling, pairing costs, relay orders, grouping, purchase plans, mountains, a stone game
- `numbers` – powers, gcds, prime factor counts, digit iterations, base conversions, coins
- `grids` – cross sums, light placement, turn-minimal paths, cycles, block flips
- `assorted` – parentheses, angles, deques, reachability and other small tasks

Each function takes the problem's input as plain Python values (0-based
indices) and returns its answer.

```python
from contestlib.problems.assorted import balanced_parentheses
from contestlib.problems.numbers import cube_cut_count

print(balanced_parentheses(4))  # ['(())', '()()']
print(cube_cut_count(2, 2, 3))  # 4
```

## What this package does not do

There is no command-line program: nothing reads contest-format input from
standard input or prints answers. The solvers are library functions to be
called from Python.