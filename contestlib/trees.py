"""Lowest common ancestors by binary lifting, and auxiliary (virtual) trees."""

from __future__ import annotations

from typing import Iterable, Iterator


class LowestCommonAncestor:
    """Ancestor queries on a tree over ``0 .. n-1``, answered after :meth:`build`."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self.graph: list[list[int]] = [[] for _ in range(n)]
        self.depth = [0] * n
        self._levels = max(1, n.bit_length())
        self._up = [[-1] * n for _ in range(self._levels)]
        self._root = 0
        self._built = False

    def __len__(self) -> int:
        return len(self.graph)

    def _check_vertex(self, u: int) -> None:
        if not 0 <= u < len(self.graph):
            raise IndexError(f"vertex {u} out of range")

    def add_edge(self, u: int, v: int) -> None:
        """Add the undirected tree edge ``u - v``."""
        self._check_vertex(u)
        self._check_vertex(v)
        self.graph[u].append(v)
        self.graph[v].append(u)

    def _traverse(self, root: int) -> Iterator[tuple[int, int, int]]:
        """Preorder ``(vertex, parent, depth)`` following adjacency order."""
        stack = [(root, -1, 0)]
        while stack:
            u, p, d = stack.pop()
            yield u, p, d
            for v in reversed(self.graph[u]):
                if v != p:
                    stack.append((v, u, d + 1))

    def build(self, root: int = 0) -> None:
        """Root the tree at ``root`` and fill the ancestor tables."""
        self._check_vertex(root)
        n = len(self.graph)
        self._root = root
        self.depth = [0] * n
        self._up = [[-1] * n for _ in range(self._levels)]
        first = self._up[0]
        for u, p, d in self._traverse(root):
            first[u] = p
            self.depth[u] = d
        for prev, nxt in zip(self._up, self._up[1:]):
            for j, pj in enumerate(prev):
                if pj != -1:
                    nxt[j] = prev[pj]
        self._built = True

    def _require_built(self) -> None:
        if not self._built:
            raise RuntimeError("build() must be called first")

    def lca(self, u: int, v: int) -> int:
        """Lowest common ancestor of ``u`` and ``v``."""
        self._require_built()
        depth, up = self.depth, self._up
        if depth[u] < depth[v]:
            u, v = v, u
        diff = depth[u] - depth[v]
        level = 0
        while diff:
            if diff & 1:
                u = up[level][u]
            diff >>= 1
            level += 1
        if u == v:
            return u
        for table in reversed(up):
            if table[u] != table[v]:
                u = table[u]
                v = table[v]
        return up[0][u]

    def distance(self, u: int, v: int) -> int:
        """Number of edges on the path between ``u`` and ``v``."""
        self._require_built()
        return self.depth[u] + self.depth[v] - 2 * self.depth[self.lca(u, v)]


class AuxiliaryTree(LowestCommonAncestor):
    """Builds, in ``aux``, the tree spanned by chosen vertices and their LCAs."""

    def __init__(self, n: int) -> None:
        super().__init__(n)
        self.tin = [0] * n
        self.aux: list[list[int]] = [[] for _ in range(n)]

    def build(self, root: int = 0) -> None:
        super().build(root)
        for pos, (u, _, _) in enumerate(self._traverse(root)):
            self.tin[u] = pos

    def add_aux_edge(self, u: int, v: int) -> None:
        self.aux[u].append(v)
        self.aux[v].append(u)

    def query(self, vertices: Iterable[int]) -> list[int]:
        """Add the auxiliary tree of ``vertices`` plus the root to ``aux``.

        Returns its vertices in preorder.
        """
        self._require_built()
        key = self.tin.__getitem__
        order = sorted(vertices, key=key)
        order += [self.lca(x, y) for x, y in zip(order, order[1:])]
        order.append(self._root)
        order = sorted(set(order), key=key)
        for x, y in zip(order, order[1:]):
            self.add_aux_edge(self.lca(x, y), y)
        return order

    def clear(self) -> None:
        """Remove the auxiliary edges reachable from the root."""
        stack = [(self._root, -1)]
        while stack:
            u, p = stack.pop()
            for v in self.aux[u]:
                if v != p:
                    stack.append((v, u))
            self.aux[u].clear()