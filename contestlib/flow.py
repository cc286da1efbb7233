"""Maximum flow (Dinic) and bipartite matching by augmenting paths."""

from __future__ import annotations

import random
from collections import deque


class Dinic:
    """Maximum flow on a directed graph with ``n`` vertices."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self._n = n
        self._to: list[int] = []
        self._cap: list = []
        self._adj: list[list[int]] = [[] for _ in range(n)]

    def _check_vertex(self, u: int) -> None:
        if not 0 <= u < self._n:
            raise IndexError(f"vertex {u} out of range")

    def add_edge(self, u: int, v: int, capacity) -> int:
        """Add an edge ``u -> v``; returns its index."""
        self._check_vertex(u)
        self._check_vertex(v)
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        i = len(self._to)
        self._to += [v, u]
        self._cap += [capacity, 0]
        self._adj[u].append(i)
        self._adj[v].append(i ^ 1)
        return i

    def _levels(self, s: int) -> list[int]:
        level = [-1] * self._n
        level[s] = 0
        queue = deque([s])
        to, cap = self._to, self._cap
        while queue:
            u = queue.popleft()
            for e in self._adj[u]:
                v = to[e]
                if cap[e] > 0 and level[v] == -1:
                    level[v] = level[u] + 1
                    queue.append(v)
        return level

    def _augment(self, s: int, t: int, level: list[int], it: list[int]):
        to, cap, adj = self._to, self._cap, self._adj
        path: list[int] = []
        u = s
        while True:
            if u == t:
                f = min(cap[e] for e in path)
                for e in path:
                    cap[e] -= f
                    cap[e ^ 1] += f
                return f
            edges = adj[u]
            while it[u] < len(edges):
                e = edges[it[u]]
                if cap[e] > 0 and level[to[e]] == level[u] + 1:
                    break
                it[u] += 1
            else:
                if not path:
                    return 0
                level[u] = -1
                e = path.pop()
                u = to[e ^ 1]
                it[u] += 1
                continue
            path.append(e)
            u = to[e]

    def max_flow(self, s: int, t: int):
        """Push as much flow as possible from ``s`` to ``t`` and return it."""
        self._check_vertex(s)
        self._check_vertex(t)
        if s == t:
            raise ValueError("source and sink must differ")
        flow = 0
        while True:
            level = self._levels(s)
            if level[t] == -1:
                return flow
            it = [0] * self._n
            while True:
                f = self._augment(s, t, level, it)
                if not f:
                    break
                flow += f


class BipartiteMatching:
    """Maximum matching between ``n`` left and ``m`` right vertices.

    After :meth:`solve`, ``match_left[u]`` and ``match_right[v]`` hold the
    partner or None.
    """

    def __init__(self, n: int, m: int) -> None:
        if n < 0 or m < 0:
            raise ValueError("sizes must be non-negative")
        self._n, self._m = n, m
        self._edges: list[list[int]] = [[] for _ in range(n)]
        self.match_left: list = [None] * n
        self.match_right: list = [None] * m
        self._seen = [0] * n
        self._round = 0
        self._size = 0

    def add_edge(self, u: int, v: int) -> None:
        if not (0 <= u < self._n and 0 <= v < self._m):
            raise IndexError(f"edge ({u}, {v}) out of range")
        self._edges[u].append(v)

    def _take_free(self, u: int) -> bool:
        for v in self._edges[u]:
            if self.match_right[v] is None:
                self.match_left[u] = v
                self.match_right[v] = u
                return True
        return False

    def _augment(self, root: int) -> bool:
        seen, rnd = self._seen, self._round
        seen[root] = rnd
        if self._take_free(root):
            return True
        stack = [[root, 0, None]]
        while stack:
            frame = stack[-1]
            u = frame[0]
            edges = self._edges[u]
            i = frame[1]
            while i < len(edges):
                v = edges[i]
                w = self.match_right[v]
                if seen[w] != rnd:
                    seen[w] = rnd
                    frame[1], frame[2] = i + 1, v
                    if self._take_free(w):
                        for x, _, y in reversed(stack):
                            self.match_left[x] = y
                            self.match_right[y] = x
                        return True
                    stack.append([w, 0, None])
                    break
                i += 1
            else:
                stack.pop()
        return False

    def solve(self) -> int:
        """Grow the matching to maximum size and return that size."""
        for edges in self._edges:
            random.shuffle(edges)
        while True:
            self._round += 1
            added = sum(
                1
                for u in range(self._n)
                if self.match_left[u] is None and self._augment(u)
            )
            if added == 0:
                return self._size
            self._size += added