"""Disjoint-set union with union by size and path compression."""

from __future__ import annotations


class UnionFind:
    """Disjoint sets over ``0 .. n-1``; ``count`` is the number of sets."""

    def __init__(self, n: int) -> None:
        self._parent = [-1] * n
        self.count = n

    def root(self, x: int) -> int:
        """Representative of the set holding ``x``."""
        parent = self._parent
        r = x
        while parent[r] >= 0:
            r = parent[r]
        while parent[x] >= 0 and parent[x] != r:
            parent[x], x = r, parent[x]
        return r

    def same(self, x: int, y: int) -> bool:
        return self.root(x) == self.root(y)

    def unite(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; False if already together."""
        x = self.root(x)
        y = self.root(y)
        if x == y:
            return False
        parent = self._parent
        if parent[x] < parent[y]:
            x, y = y, x
        parent[y] += parent[x]
        parent[x] = y
        self.count -= 1
        return True