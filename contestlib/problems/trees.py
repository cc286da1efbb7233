"""Problems on trees: diameters, bipartite halves, Steiner trees, distance sums."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Sequence

from contestlib.trees import AuxiliaryTree

Edge = tuple[int, int]


def _adjacency(n: int, edges: Iterable[Edge]) -> list[list[int]]:
    adj: list[list[int]] = [[] for _ in range(n)]
    for a, b in edges:
        adj[a].append(b)
        adj[b].append(a)
    return adj


def _bfs(adj: list[list[int]], root: int) -> list[int]:
    dist = [-1] * len(adj)
    dist[root] = 0
    queue = deque([root])
    while queue:
        u = queue.popleft()
        for v in adj[u]:
            if dist[v] == -1:
                dist[v] = dist[u] + 1
                queue.append(v)
    return dist


def longest_cycle_after_adding_edge(n: int, edges: Iterable[Edge]) -> int:
    """Longest cycle made by adding one edge to a tree: its diameter plus one."""
    if n <= 0:
        raise ValueError("tree must have a vertex")
    adj = _adjacency(n, edges)
    d0 = _bfs(adj, 0)
    far = max(range(n), key=d0.__getitem__)
    return max(_bfs(adj, far)) + 1


def independent_half(n: int, edges: Iterable[Edge]) -> list[int]:
    """``n // 2`` pairwise non-adjacent vertices of a tree, in increasing order."""
    adj = _adjacency(n, edges)
    if n == 0:
        return []
    depth = _bfs(adj, 0)
    for parity in (0, 1):
        chosen = [i for i, d in enumerate(depth) if d >= 0 and d % 2 == parity]
        if len(chosen) >= n // 2:
            return chosen[: n // 2]
    raise ValueError("graph is not a connected tree")


def steiner_tree_sizes(
    n: int, edges: Iterable[Edge], queries: Iterable[Sequence[int]]
) -> list[int]:
    """Edge count of the smallest subtree holding each query's vertices."""
    tree = AuxiliaryTree(n)
    for a, b in edges:
        tree.add_edge(a, b)
    tree.build()
    depth = tree.depth
    answers = []
    for query in queries:
        vertices = list(query)
        if not vertices:
            raise ValueError("a query needs at least one vertex")
        tree.query(vertices)
        total = 0
        stack = [(0, -1)]
        while stack:
            u, p = stack.pop()
            for v in tree.aux[u]:
                if v != p:
                    total += depth[v] - depth[u]
                    stack.append((v, u))
        if 0 not in vertices and len(tree.aux[0]) == 1:
            total -= depth[tree.aux[0][0]] - depth[0]
        answers.append(total)
        tree.clear()
    return answers


def sum_of_all_distances(n: int, edges: Iterable[Edge]) -> int:
    """Sum of the distances over all unordered vertex pairs of a tree."""
    if n == 0:
        return 0
    adj = _adjacency(n, edges)
    parent = [-1] * n
    order = []
    stack = [0]
    seen = [False] * n
    seen[0] = True
    while stack:
        u = stack.pop()
        order.append(u)
        for v in adj[u]:
            if not seen[v]:
                seen[v] = True
                parent[v] = u
                stack.append(v)
    size = [1] * n
    total = 0
    for u in reversed(order):
        total += size[u] * (n - size[u])
        if parent[u] >= 0:
            size[parent[u]] += size[u]
    return total